import random

from bstmap.tree import BSTMap


def make_map(keys, conf=None) -> BSTMap:
    """Build a map by inserting `keys` in the given order, each key maps to its insertion index."""
    st = BSTMap() if conf is None else BSTMap(conf)
    for i, key in enumerate(keys):
        st.put(key, i)
    return st


def shuffled(n: int, seed: int = 0) -> list:
    keys = list(range(n))
    random.Random(seed).shuffle(keys)
    return keys
