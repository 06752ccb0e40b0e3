import pytest

from bstmap.constants import MapConf
from bstmap.tree import BSTMap, EmptyMapError
from tests.util import make_map, shuffled


def test_scenario_basic_order():
    st = BSTMap()
    st.put('b', 2)
    st.put('a', 1)
    st.put('c', 3)
    assert st.min() == 'a'
    assert st.max() == 'c'
    assert st.select(1) == 'b'
    assert st.rank('c') == 2
    assert st.validate()


def test_scenario_level_order():
    st = make_map([4, 2, 6, 1, 3, 5, 7])
    assert st.level_order() == [4, 2, 6, 1, 3, 5, 7]
    assert st.height() == 2


def test_scenario_empty():
    st = BSTMap()
    assert st.is_empty()
    assert st.size() == 0
    assert len(st) == 0
    assert st.keys() == []
    assert st.level_order() == []
    assert st.height() == -1
    assert st.validate()
    with pytest.raises(EmptyMapError):
        st.delete_min()
    with pytest.raises(EmptyMapError):
        st.delete_max()
    with pytest.raises(EmptyMapError):
        st.min()
    with pytest.raises(EmptyMapError):
        st.max()


def test_put_get():
    st = BSTMap()
    st.put('a', 1)
    st.put('list', [2, 3, 4])
    st['dict'] = {1: 1}
    assert st.get('a') == 1
    assert st['list'] == [2, 3, 4]
    assert st.get('dict') == {1: 1}
    assert st.get('missing') is None
    assert st.get('missing', 'default') == 'default'
    assert 'a' in st and 'missing' not in st
    assert st.contains('list')


def test_put_override_keeps_shape():
    st = make_map([4, 2, 6, 1, 3, 5, 7])
    before = st.level_order()
    st.put(3, 'three')
    assert st.get(3) == 'three'
    assert st.size() == 7
    assert st.level_order() == before


def test_put_none_value_deletes():
    st = make_map(['b', 'a', 'c'])
    st.put('a', None)
    assert 'a' not in st
    assert st.keys() == ['b', 'c']
    # absent key, nothing happens
    st.put('z', None)
    assert st.keys() == ['b', 'c']


def test_put_none_key():
    st = BSTMap()
    with pytest.raises(ValueError):
        st.put(None, 1)


def test_falsy_values_are_stored():
    st = BSTMap()
    st.put('zero', 0)
    st.put('empty', '')
    assert st.contains('zero') and st.contains('empty')
    assert st.get('zero') == 0


def test_invariants_after_every_put():
    st = BSTMap()
    for i, key in enumerate(shuffled(200, seed=7)):
        st.put(key, str(key))
        assert st.size() == i + 1
        assert st.validate()


def test_check_invariants_conf():
    st = BSTMap(MapConf(check_invariants=True))
    for key in shuffled(50, seed=3):
        st.put(key, key)
    for key in shuffled(50, seed=4)[:25]:
        st.delete(key)
    st.delete_min()
    st.delete_max()
    assert st.size() == 23
    assert st.conf.check_invariants


def test_sorted_insertion_degenerates():
    n = 100
    st = make_map(range(n))
    assert st.height() == n - 1
    assert st.level_order() == list(range(n))
    assert st.validate()


def test_height():
    st = BSTMap()
    assert st.height() == -1
    st.put(1, 'one')
    assert st.height() == 0
    st.put(0, 'zero')
    st.put(2, 'two')
    assert st.height() == 1


def test_keys_ascending():
    st = make_map(shuffled(300, seed=11))
    keys = st.keys()
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys) == st.size()
    assert list(st) == keys


def test_items_values():
    st = make_map(['c', 'a', 'b'])
    assert st.items() == [('a', 1), ('b', 2), ('c', 0)]
    assert st.values() == [1, 2, 0]


def test_repr():
    st = make_map(['b', 'a'])
    assert repr(st) == "BSTMap({'a': 1, 'b': 0})"


def test_validate_detects_broken_counts(caplog):
    st = make_map([4, 2, 6])
    st._root.count = 99
    assert not st.validate()
    assert 'Subtree counts not consistent' in caplog.text


def test_validate_detects_broken_order(caplog):
    st = make_map([4, 2, 6])
    st._root.left.key = 5
    assert not st.validate()
    assert 'Not in symmetric order' in caplog.text


def test_deep_degenerate_tree_within_recursion_limit():
    n = 500
    st = make_map(range(n))
    assert st.height() == n - 1
    assert st.select(n - 1) == n - 1
    assert st.rank(n) == n
    st.delete(0)
    assert st.min() == 1
