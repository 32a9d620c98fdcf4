"""Structural invariants of AVL trees, for tests and debugging."""
from math import log2
from typing import Optional
from avl_map.balance import Balance
from avl_map.node import Tree
from avl_map.tree import height, keys, size

# Knuth's bound on the height of an AVL tree with n nodes:
# h < log_phi(sqrt(5) * (n + 2)) - 2 ≈ 1.4405 log2(n + 2) - 0.3277.
AVL_HEIGHT_FACTOR = 1.4405
AVL_HEIGHT_OFFSET = 0.3277


def _order_invariant(tree: Tree) -> bool:
    """Invariant: an in-order traversal yields strictly increasing keys.

    (This also rules out duplicate keys.)"""
    ordered = list(keys(tree))
    return all(a < b for a, b in zip(ordered, ordered[1:]))


def _balance_tag_invariant(tree: Tree) -> bool:
    """Invariant: each node's balance tag is height(right) - height(left),
    which is never more than one level either way."""
    return _checked_height(tree) is not None


def _checked_height(node: Tree) -> Optional[int]:
    """The height of `node`, or `None` if any tag below it is wrong."""
    if node is None:
        return 0
    left = _checked_height(node.left)
    right = _checked_height(node.right)
    if left is None or right is None:
        return None
    diff = right - left
    if diff not in (-1, 0, 1) or node.balance is not Balance(diff):
        return None
    return 1 + max(left, right)


def _height_invariant(tree: Tree) -> bool:
    """Invariant: height ≤ 1.4405 log2(n + 2) - 0.3277."""
    bound = AVL_HEIGHT_FACTOR * log2(size(tree) + 2) - AVL_HEIGHT_OFFSET
    return height(tree) <= bound


def check_invariants(tree: Tree) -> None:
    """Verifies that the tree is a well-formed AVL tree."""
    assert _order_invariant(tree), \
        'Keys are out of order (or duplicated) in an in-order traversal.'
    assert _balance_tag_invariant(tree), \
        ('A node is unbalanced, or its balance tag does not match its ' +
         "children's heights.")
    assert _height_invariant(tree), 'The tree is taller than the AVL bound.'
