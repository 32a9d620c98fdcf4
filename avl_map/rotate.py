"""Single and double rotations for AVL rebalancing.

Both rotations take a node whose children differ in height by two, after a
single insert or removal below it, and return the restructured subtree
together with its height change relative to the node's height *before*
that insert or removal:

    rotate_right: the right subtree is two levels taller.
    rotate_left:  the left subtree is two levels taller.

Insertions are always fully absorbed by a rotation (change 0). Removals
propagate a decrease of one, except after a single rotation around an
evenly balanced child, which keeps the original height.
"""
import logging
from avl_map.balance import Balance, Change
from avl_map.node import Node, Rebuilt, Tree, K, V

logger = logging.getLogger(__name__)


def _degenerate(tilt: Balance, left: Tree, key: K, value: V,
                right: Tree) -> Rebuilt:
    """Fallback for a rotation around an empty subtree.

    A node whose taller child is empty cannot be two levels out of balance,
    so this is never reached from `renode`. The children are kept as is and
    the node is tagged as tilting toward `tilt`; that tag is not accurate,
    since the real height difference would be two."""
    logger.warning('Rotation around an empty subtree at key %r; '
                   'leaving node unrotated.', key)
    return Node(tilt, left, key, value, right), Change.SAME


def rotate_right(shrunk: bool, left: Tree, key: K, value: V,
                 right: Tree) -> Rebuilt:
    """Rebalances a node whose right subtree is two levels taller.

    Args:
        shrunk: Whether the imbalance came from a removal in `left`
          (as opposed to an insertion in `right`).
        left: The shorter subtree.
        key: The node's key.
        value: The node's value.
        right: The taller subtree.

    Returns:
        The new subtree and its height change (0 or -1).
    """
    if right is None:
        return _degenerate(Balance.RIGHT, left, key, value, right)
    if right.balance is Balance.EVEN:
        # Single rotation; only removals leave the taller child even.
        node = Node(Balance.RIGHT, left, key, value, right.left)
        return Node(Balance.LEFT, node, right.key, right.value,
                    right.right), Change.SAME
    if right.balance is Balance.RIGHT:
        node = Node(Balance.EVEN, left, key, value, right.left)
        return (Node(Balance.EVEN, node, right.key, right.value, right.right),
                Change.SHRANK if shrunk else Change.SAME)

    # Double rotation: the right child's left child becomes the root.
    pivot = right.left
    if pivot is None:
        return _degenerate(Balance.RIGHT, left, key, value, right)
    outer = Node(
        -pivot.balance if pivot.balance is Balance.RIGHT else Balance.EVEN,
        left, key, value, pivot.left)
    inner = Node(
        -pivot.balance if pivot.balance is Balance.LEFT else Balance.EVEN,
        pivot.right, right.key, right.value, right.right)
    return (Node(Balance.EVEN, outer, pivot.key, pivot.value, inner),
            Change.SHRANK if shrunk else Change.SAME)


def rotate_left(shrunk: bool, left: Tree, key: K, value: V,
                right: Tree) -> Rebuilt:
    """Rebalances a node whose left subtree is two levels taller.

    Mirror image of `rotate_right`; `shrunk` refers to a removal in
    `right`."""
    if left is None:
        return _degenerate(Balance.LEFT, left, key, value, right)
    if left.balance is Balance.EVEN:
        node = Node(Balance.LEFT, left.right, key, value, right)
        return (Node(Balance.RIGHT, left.left, left.key, left.value, node),
                Change.SAME)
    if left.balance is Balance.LEFT:
        node = Node(Balance.EVEN, left.right, key, value, right)
        return (Node(Balance.EVEN, left.left, left.key, left.value, node),
                Change.SHRANK if shrunk else Change.SAME)

    pivot = left.right
    if pivot is None:
        return _degenerate(Balance.LEFT, left, key, value, right)
    inner = Node(
        -pivot.balance if pivot.balance is Balance.RIGHT else Balance.EVEN,
        left.left, left.key, left.value, pivot.left)
    outer = Node(
        -pivot.balance if pivot.balance is Balance.LEFT else Balance.EVEN,
        pivot.right, key, value, right)
    return (Node(Balance.EVEN, inner, pivot.key, pivot.value, outer),
            Change.SHRANK if shrunk else Change.SAME)
