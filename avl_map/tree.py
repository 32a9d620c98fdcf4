"""Persistent AVL tree operations.

Every function takes a tree (a `Node` or `None`) and, where it updates,
returns a new tree. Input trees are never modified, so any tree returned
earlier remains a valid snapshot.

Updates recurse down one path and rebuild each node on the way back up
with `renode`, which turns the child's height change into the node's own.
The top-level functions drop the final height change.
"""
from typing import Generator, Optional, Tuple, TypeVar, Union
from avl_map.balance import Change, Delta, Side
from avl_map.node import Node, Rebuilt, Tree, K, V, empty, leaf
from avl_map.rebuild import renode

D = TypeVar('D')
KV = Tuple[K, V]
KVIterator = Generator[KV, None, None]


def insert(tree: Tree, key: K, value: V) -> Tree:
    """Inserts a key-value pair, overwriting the value of an existing key."""
    new_tree, _ = _insert(tree, key, value)
    return new_tree


def _insert(node: Tree, key: K, value: V) -> Rebuilt:
    if node is None:
        return leaf(key, value), Change.GREW
    if key < node.key:
        left, change = _insert(node.left, key, value)
        return renode(node.balance, Delta(Side.LEFT, change), left, node.key,
                      node.value, node.right)
    if node.key < key:
        right, change = _insert(node.right, key, value)
        return renode(node.balance, Delta(Side.RIGHT, change), node.left,
                      node.key, node.value, right)
    return node._replace(key=key, value=value), Change.SAME


def remove(tree: Tree, key: K) -> Tree:
    """Removes a key, if present.

    Removing an absent key returns `tree` itself."""
    new_tree, _ = _remove(tree, key)
    return new_tree


def _remove(node: Tree, key: K) -> Rebuilt:
    if node is None:
        return None, Change.SAME
    if key < node.key:
        left, change = _remove(node.left, key)
        if left is node.left:
            return node, Change.SAME
        return renode(node.balance, Delta(Side.LEFT, change), left, node.key,
                      node.value, node.right)
    if node.key < key:
        right, change = _remove(node.right, key)
        if right is node.right:
            return node, Change.SAME
        return renode(node.balance, Delta(Side.RIGHT, change), node.left,
                      node.key, node.value, right)
    if node.right is None:
        return node.left, Change.SHRANK
    # Replace the key with its successor, the minimum of the right subtree.
    right, change, (min_key, min_value) = _remove_min(node.right)
    return renode(node.balance, Delta(Side.RIGHT, change), node.left, min_key,
                  min_value, right)


def remove_min(tree: Tree) -> Tuple[Tree, Optional[KV]]:
    """Removes the minimum key.

    Returns:
        The remaining tree and the removed key-value pair. For an empty
        tree, the pair is `None`.
    """
    if tree is None:
        return None, None
    rest, _, item = _remove_min(tree)
    return rest, item


def _remove_min(node: Node) -> Tuple[Tree, Change, KV]:
    """Removes the minimum of a non-empty subtree."""
    if node.left is None:
        return node.right, Change.SHRANK, (node.key, node.value)
    left, change, item = _remove_min(node.left)
    rebuilt, change = renode(node.balance, Delta(Side.LEFT, change), left,
                             node.key, node.value, node.right)
    return rebuilt, change, item


def lookup(tree: Tree, key: K) -> Optional[V]:
    """Finds the value associated with `key`.

    Returns `None` if the key is absent."""
    node = _find_node(tree, key)
    if node is not None:
        return node.value
    return None


def contains(tree: Tree, key: K) -> bool:
    """Is `key` in the tree? (Unlike `lookup`, exact for `None` values.)"""
    return _find_node(tree, key) is not None


def _find_node(node: Tree, key: K) -> Tree:
    while node is not None:
        if key < node.key:
            node = node.left
        elif node.key < key:
            node = node.right
        else:
            return node
    return None


def min_item(tree: Tree, default: D = None) -> Union[KV, D]:
    """Returns the minimum key-value pair, or `default` if `tree` is empty."""
    if tree is None:
        return default
    while tree.left is not None:
        tree = tree.left
    return (tree.key, tree.value)


def max_item(tree: Tree, default: D = None) -> Union[KV, D]:
    """Returns the maximum key-value pair, or `default` if `tree` is empty."""
    if tree is None:
        return default
    while tree.right is not None:
        tree = tree.right
    return (tree.key, tree.value)


def items(tree: Tree) -> KVIterator:
    """Generates all key-value pairs in ascending key order."""
    if tree is not None:
        yield from items(tree.left)
        yield (tree.key, tree.value)
        yield from items(tree.right)


def keys(tree: Tree) -> Generator[K, None, None]:
    """Generates all keys in ascending order."""
    return (key for key, _ in items(tree))


def nodes(tree: Tree) -> Generator[Node, None, None]:
    """Generates every node of the tree (pre-order)."""
    if tree is not None:
        yield tree
        yield from nodes(tree.left)
        yield from nodes(tree.right)


def height(tree: Tree) -> int:
    """The number of nodes on the longest root-to-leaf path.

    Walks the whole tree; used for checks, never during updates."""
    if tree is None:
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def size(tree: Tree) -> int:
    """The number of key-value pairs in the tree. Walks the whole tree."""
    return sum(1 for _ in nodes(tree))
