"""An ordered map backed by a persistent AVL tree."""
import logging
from typing import Generic, Iterable, Optional, Tuple, TypeVar
from avl_map import invariants
from avl_map import tree as avl
from avl_map.node import Tree

K = TypeVar('K')
V = TypeVar('V')
KV = Tuple[K, V]

logger = logging.getLogger(__name__)


class AVLMap(Generic[K, V]):
    """An ordered map with O(log n) find, insert and remove.

    The map owns a single reference to the root of an immutable tree and
    swaps it on every update. `snapshot()` hands out the current root;
    snapshots are never modified, so they can be kept (and read from other
    threads) while the map moves on. Concurrent writers must be serialized
    by the caller.
    """
    def __init__(self, check: bool = False, natural_keys: bool = False):
        """Creates an empty map.

        Args:
            check: Verify all tree invariants after every update (slow;
              for debugging).
            natural_keys: Only accept non-negative integer keys.

        Raises:
            ValueError: `check` or `natural_keys` is not a `bool`.
        """
        if not isinstance(check, bool):
            raise ValueError(f'`check` must be a bool (got {check!r}).')
        if not isinstance(natural_keys, bool):
            raise ValueError(
                f'`natural_keys` must be a bool (got {natural_keys!r}).')
        self.check = check
        self.natural_keys = natural_keys
        self.root: Tree = avl.empty()
        self._size = 0

    @classmethod
    def from_pairs(cls, pairs: Iterable[KV], **kwargs) -> 'AVLMap[K, V]':
        """Creates a map from key-value pairs (later pairs win)."""
        tree: AVLMap[K, V] = cls(**kwargs)
        for key, val in pairs:
            tree.insert(key, val)
        return tree

    def find(self, key: K) -> Optional[V]:
        """Searches for a key in the map.

        If the key is found, its associated value is returned. Otherwise,
        `None` is returned."""
        return avl.lookup(self.root, key)

    def insert(self, key: K, val: V) -> None:
        """Inserts a key-value pair into the map.

        If `key` is already in the map, its value is replaced. With
        `natural_keys` set, a `ValueError` is raised for keys that are not
        non-negative integers."""
        if self.natural_keys and not _is_natural(key):
            raise ValueError(f'Key {key!r} is not a natural number.')
        if not avl.contains(self.root, key):
            self._size += 1
        self.root = avl.insert(self.root, key, val)
        logger.debug('Inserted key %r (size %d).', key, self._size)
        if self.check:
            self.check_invariants()

    def remove(self, key: K, strict: bool = False) -> None:
        """Removes a key-value pair from the map.

        If the `key` is not in the map, nothing happens, unless `strict` is
        set, in which case a ``ValueError`` is raised."""
        root = avl.remove(self.root, key)
        if root is self.root:
            if strict:
                raise ValueError(f'Cannot delete "{key}" (not in tree)')
            logger.debug('Key %r not in map; nothing removed.', key)
            return
        self.root = root
        self._size -= 1
        logger.debug('Removed key %r (size %d).', key, self._size)
        if self.check:
            self.check_invariants()

    def snapshot(self) -> Tree:
        """Returns the current (immutable) root."""
        return self.root

    def all(self) -> avl.KVIterator:
        """Returns all key-value pairs in order."""
        return avl.items(self.root)

    def min(self) -> Optional[KV]:
        """Finds the minimum key-value pair in the map."""
        return avl.min_item(self.root)

    def max(self) -> Optional[KV]:
        """Finds the maximum key-value pair in the map."""
        return avl.max_item(self.root)

    @property
    def size(self) -> int:
        """The number of key-value pairs in the map."""
        return self._size

    @property
    def height(self) -> int:
        """The height of the underlying tree (walks the whole tree)."""
        return avl.height(self.root)

    def _size_invariant(self) -> bool:
        """Invariant: the cached size matches the number of nodes."""
        return self._size == avl.size(self.root)

    def check_invariants(self) -> None:
        """Verifies that the map is well-formed."""
        invariants.check_invariants(self.root)
        assert self._size_invariant(), 'The cached size is wrong.'

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return avl.contains(self.root, key)

    def __iter__(self):
        return avl.keys(self.root)

    def __repr__(self):
        if self.root is None:
            return 'empty AVL map'
        return (f'AVL map (size {self._size}) with root key ' +
                f'{self.root.key!r}')


def _is_natural(key) -> bool:
    return isinstance(key, int) and not isinstance(key, bool) and key >= 0
