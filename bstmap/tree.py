"""
This file include the ordered map, an unbalanced binary search tree whose nodes
carry the size of their subtree, so order statistics (select/rank) are answered
in time proportional to the height of the tree.

Every recursive mutator takes a subtree and returns its (possibly new) root,
the caller re-links it.
"""
import logging
from collections import deque

from bstmap.constants import DEFAULT_LOGGER_NAME, DEFAULT_MAP_CONF, MapConf
from bstmap.node import Node, size_of, recount

logger = logging.getLogger(DEFAULT_LOGGER_NAME)


class EmptyMapError(LookupError):
    """Raise when asking for min/max or deleting min/max on an empty map"""
    pass


class BSTMap(object):
    """
    Ordered symbol table from comparable keys to values. It's NOT self-balancing,
    inserting keys in sorted order degenerates it into a linked list of height n - 1.
    """
    def __init__(self, conf: MapConf = DEFAULT_MAP_CONF):
        self._root = None
        self._conf = conf

    @property
    def conf(self):
        return self._conf

    def size(self, lo=None, hi=None) -> int:
        """
        :return: total number of pairs if no bound given, else number of keys
                 within [lo, hi].
        """
        if lo is None and hi is None:
            return size_of(self._root)
        _check_bounds(lo, hi)
        if lo > hi:
            return 0
        if self.contains(hi):
            return self.rank(hi) - self.rank(lo) + 1
        return self.rank(hi) - self.rank(lo)

    def is_empty(self) -> bool:
        return self.size() == 0

    def contains(self, key) -> bool:
        return self.get(key) is not None

    def get(self, key, default=None):
        """
        :param key: key expected to be searched in the tree.
        :param default: if key doesn't exist, return default.
        :return: value corresponding to the key if key exists.
        """
        node = self._get(self._root, key)
        return default if node is None else node.value

    def _get(self, node, key):
        if node is None:
            return None
        if key < node.key:
            return self._get(node.left, key)
        elif key > node.key:
            return self._get(node.right, key)
        return node

    def put(self, key, value):
        """
        Insert a pair of key-value, override the value if key has existed.
        A value of None removes the key instead.
        """
        if key is None:
            raise ValueError('key can not be None')
        if value is None:
            self.delete(key)
            return
        self._root = self._put(self._root, key, value)
        self._after_mutation()

    def _put(self, node, key, value):
        if node is None:
            return Node(key, value)
        if key < node.key:
            node.left = self._put(node.left, key, value)
        elif key > node.key:
            node.right = self._put(node.right, key, value)
        else:
            node.value = value
        return recount(node)

    def delete_min(self):
        if self.is_empty():
            raise EmptyMapError('called delete_min() with empty map')
        self._root = self._delete_min(self._root)
        self._after_mutation()

    def _delete_min(self, node):
        if node.left is None:
            return node.right
        node.left = self._delete_min(node.left)
        return recount(node)

    def delete_max(self):
        if self.is_empty():
            raise EmptyMapError('called delete_max() with empty map')
        self._root = self._delete_max(self._root)
        self._after_mutation()

    def _delete_max(self, node):
        if node.right is None:
            return node.left
        node.right = self._delete_max(node.right)
        return recount(node)

    def delete(self, key):
        """Remove key and its value, do nothing if key doesn't exist."""
        self._root = self._delete(self._root, key)
        self._after_mutation()

    def _delete(self, node, key):
        if node is None:
            return None
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        else:
            if node.right is None:
                return node.left
            if node.left is None:
                return node.right
            # Hibbard deletion: successor takes the place of the removed node
            removed = node
            node = self._min(removed.right)
            node.right = self._delete_min(removed.right)
            node.left = removed.left
        return recount(node)

    def min(self):
        """Smallest key in the map."""
        if self.is_empty():
            raise EmptyMapError('called min() with empty map')
        return self._min(self._root).key

    def _min(self, node):
        while node.left is not None:
            node = node.left
        return node

    def max(self):
        """Largest key in the map."""
        if self.is_empty():
            raise EmptyMapError('called max() with empty map')
        return self._max(self._root).key

    def _max(self, node):
        while node.right is not None:
            node = node.right
        return node

    def floor(self, key):
        """
        :return: the largest key <= `key`, None if there isn't.
        """
        node = self._floor(self._root, key)
        return None if node is None else node.key

    def _floor(self, node, key):
        if node is None:
            return None
        if key == node.key:
            return node
        if key < node.key:
            return self._floor(node.left, key)
        found = self._floor(node.right, key)
        return node if found is None else found

    def ceiling(self, key):
        """
        :return: the smallest key >= `key`, None if there isn't.
        """
        node = self._ceiling(self._root, key)
        return None if node is None else node.key

    def _ceiling(self, node, key):
        if node is None:
            return None
        if key == node.key:
            return node
        if key > node.key:
            return self._ceiling(node.right, key)
        found = self._ceiling(node.left, key)
        return node if found is None else found

    def select(self, k: int):
        """
        :return: the key having exactly k smaller keys in the map (0-indexed).
        """
        if k < 0 or k >= self.size():
            raise ValueError('argument to select() is invalid: {k}'.format(k=k))
        return self._select(self._root, k).key

    def _select(self, node, k):
        left = size_of(node.left)
        if left > k:
            return self._select(node.left, k)
        elif left < k:
            return self._select(node.right, k - left - 1)
        return node

    def rank(self, key) -> int:
        """Number of keys strictly less than `key`, key need not be in the map."""
        return self._rank(self._root, key)

    def _rank(self, node, key):
        if node is None:
            return 0
        if key < node.key:
            return self._rank(node.left, key)
        elif key > node.key:
            return 1 + size_of(node.left) + self._rank(node.right, key)
        return size_of(node.left)

    def keys(self, lo=None, hi=None) -> list:
        """
        :return: all keys in ascending order if no bound given, else the keys
                 within [lo, hi].
        """
        if lo is None and hi is None:
            if self.is_empty():
                return []
            lo, hi = self.min(), self.max()
        _check_bounds(lo, hi)
        queue = []
        self._keys(self._root, queue, lo, hi)
        return queue

    def _keys(self, node, queue, lo, hi):
        if node is None:
            return
        if lo < node.key:
            self._keys(node.left, queue, lo, hi)
        if lo <= node.key <= hi:
            queue.append(node.key)
        if hi > node.key:
            self._keys(node.right, queue, lo, hi)

    def values(self) -> list:
        return [value for _, value in self.items()]

    def items(self) -> list:
        pairs = []
        self._items(self._root, pairs)
        return pairs

    def _items(self, node, pairs):
        if node is None:
            return
        self._items(node.left, pairs)
        pairs.append((node.key, node.value))
        self._items(node.right, pairs)

    def height(self) -> int:
        """Edges on the longest root-to-leaf path, -1 for an empty map."""
        return self._height(self._root)

    def _height(self, node):
        if node is None:
            return -1
        return 1 + max(self._height(node.left), self._height(node.right))

    def level_order(self) -> list:
        """Keys from top to bottom, left to right."""
        keys = []
        queue = deque()
        if self._root is not None:
            queue.append(self._root)
        while queue:
            node = queue.popleft()
            keys.append(node.key)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return keys

    """
    Integrity checks, expensive (O(n log n) at least), used by tests or when
    `check_invariants` was configured.
    """

    def validate(self) -> bool:
        ordered = self._is_bst()
        if not ordered:
            logger.warning('Not in symmetric order')
        size_consistent = self._is_size_consistent(self._root)
        if not size_consistent:
            logger.warning('Subtree counts not consistent')
        # rank/select walk the counts, so they are only meaningful on a sane tree
        rank_consistent = ordered and size_consistent and self._is_rank_consistent()
        if ordered and size_consistent and not rank_consistent:
            logger.warning('Ranks not consistent')
        return ordered and size_consistent and rank_consistent

    def _is_bst(self):
        return self._is_bounded(self._root, None, None)

    def _is_bounded(self, node, lo, hi):
        """Every key of the subtree lies strictly within (lo, hi), None means unbounded."""
        if node is None:
            return True
        if lo is not None and node.key <= lo:
            return False
        if hi is not None and node.key >= hi:
            return False
        return self._is_bounded(node.left, lo, node.key) and self._is_bounded(node.right, node.key, hi)

    def _is_size_consistent(self, node):
        if node is None:
            return True
        if node.count != size_of(node.left) + size_of(node.right) + 1:
            return False
        return self._is_size_consistent(node.left) and self._is_size_consistent(node.right)

    def _is_rank_consistent(self):
        for k in range(self.size()):
            if k != self.rank(self.select(k)):
                return False
        for key in self.keys():
            if key != self.select(self.rank(key)):
                return False
        return True

    def _after_mutation(self):
        if self._conf.check_invariants:
            assert self.validate(), 'tree invariants broken'

    """
    Magic methods defined to expand flexibility and ease of use.
    """

    def __len__(self):
        return self.size()

    def __contains__(self, key):
        return self.contains(key)

    def __iter__(self):
        return iter(self.keys())

    def __repr__(self):
        return '{name}({{{contents}}})'.format(
            name=self.__class__.__name__,
            contents=', '.join('{0!r}: {1!r}'.format(k, v) for k, v in self.items()))

    __getitem__ = get
    __setitem__ = put
    __delitem__ = delete


def _check_bounds(lo, hi):
    if lo is None or hi is None:
        raise TypeError('both lo and hi should be specified')
