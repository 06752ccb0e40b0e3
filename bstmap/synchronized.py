"""
Thread-safe front of BSTMap. The tree itself does no locking, so here every
mutation holds the writer lock exclusively while reads share the reader lock.
"""
import rwlock

from bstmap.constants import DEFAULT_MAP_CONF, MapConf
from bstmap.tree import BSTMap


class SynchronizedBSTMap(object):
    """
    Wrap a BSTMap with a reader-writer lock: readers run concurrently, but
    never while a writer is in flight.
    """

    def __init__(self, conf: MapConf = DEFAULT_MAP_CONF, tree: BSTMap = None):
        self._tree = tree if tree is not None else BSTMap(conf)
        self._lock = rwlock.RWLock()

    @property
    def write_transaction(self):
        class WriteTransaction:
            def __enter__(_self):
                self._lock.writer_lock.acquire()

            def __exit__(_self, exc_type, exc_val, exc_tb):
                self._lock.writer_lock.release()

        return WriteTransaction()

    @property
    def read_transaction(self):
        class ReadTransaction:
            def __enter__(_self):
                self._lock.reader_lock.acquire()

            def __exit__(_self, exc_type, exc_val, exc_tb):
                self._lock.reader_lock.release()

        return ReadTransaction()

    @property
    def conf(self):
        return self._tree.conf

    def put(self, key, value):
        with self.write_transaction:
            self._tree.put(key, value)

    def delete(self, key):
        with self.write_transaction:
            self._tree.delete(key)

    def delete_min(self):
        with self.write_transaction:
            self._tree.delete_min()

    def delete_max(self):
        with self.write_transaction:
            self._tree.delete_max()

    def get(self, key, default=None):
        with self.read_transaction:
            return self._tree.get(key, default)

    def contains(self, key) -> bool:
        with self.read_transaction:
            return self._tree.contains(key)

    def size(self, lo=None, hi=None) -> int:
        with self.read_transaction:
            return self._tree.size(lo, hi)

    def is_empty(self) -> bool:
        with self.read_transaction:
            return self._tree.is_empty()

    def min(self):
        with self.read_transaction:
            return self._tree.min()

    def max(self):
        with self.read_transaction:
            return self._tree.max()

    def floor(self, key):
        with self.read_transaction:
            return self._tree.floor(key)

    def ceiling(self, key):
        with self.read_transaction:
            return self._tree.ceiling(key)

    def select(self, k: int):
        with self.read_transaction:
            return self._tree.select(k)

    def rank(self, key) -> int:
        with self.read_transaction:
            return self._tree.rank(key)

    def keys(self, lo=None, hi=None) -> list:
        with self.read_transaction:
            return self._tree.keys(lo, hi)

    def values(self) -> list:
        with self.read_transaction:
            return self._tree.values()

    def items(self) -> list:
        with self.read_transaction:
            return self._tree.items()

    def height(self) -> int:
        with self.read_transaction:
            return self._tree.height()

    def level_order(self) -> list:
        with self.read_transaction:
            return self._tree.level_order()

    def validate(self) -> bool:
        with self.read_transaction:
            return self._tree.validate()

    def __len__(self):
        return self.size()

    def __contains__(self, key):
        return self.contains(key)

    def __iter__(self):
        # snapshot taken under the reader lock
        return iter(self.keys())

    def __repr__(self):
        with self.read_transaction:
            return '{name}({tree!r})'.format(name=self.__class__.__name__, tree=self._tree)

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        self.delete(key)
