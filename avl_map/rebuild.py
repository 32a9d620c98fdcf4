"""Rebuilding a node after one of its children changed height."""
from avl_map.balance import Balance, Change, Delta
from avl_map.node import Node, Rebuilt, Tree, K, V
from avl_map.rotate import rotate_left, rotate_right


def renode(balance: Balance, delta: Delta, left: Tree, key: K, value: V,
           right: Tree) -> Rebuilt:
    """Builds a node from (possibly new) children and its old balance.

    `delta` reports how the child on `delta.side` changed height while it
    was rebuilt. The new balance follows from the old one and the delta
    alone, so no subtree heights are measured.

    Returns:
        The rebuilt subtree and its own height change, to be passed up to
        the parent as the next delta.

    Raises:
        ValueError: `delta.change` is not a height change of -1, 0 or 1.
    """
    change = Change(delta.change)
    if change is Change.SAME:
        return Node(balance, left, key, value, right), Change.SAME
    tilt = balance.value + delta.tilt
    if tilt == -2:
        return rotate_left(change is Change.SHRANK, left, key, value, right)
    if tilt == 2:
        return rotate_right(change is Change.SHRANK, left, key, value, right)

    new_balance = Balance(tilt)
    if change is Change.GREW and new_balance is Balance.EVEN:
        change = Change.SAME  # The shorter side caught up.
    elif change is Change.SHRANK and new_balance is not Balance.EVEN:
        change = Change.SAME  # The taller side still sets the height.
    return Node(new_balance, left, key, value, right), change
