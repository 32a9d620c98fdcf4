"""Immutable AVL tree nodes.

A tree is either empty (`None`) or a `Node` owning two subtrees. Nodes are
never modified after construction; updates build new nodes along one
root-to-leaf path and share every other subtree with the old tree.
"""
from typing import Any, NamedTuple, Optional, Tuple, TypeVar
from avl_map.balance import Balance, Change

K = TypeVar('K')
V = TypeVar('V')


class Node(NamedTuple):
    """A branch of an AVL tree."""
    balance: Balance
    left: Optional['Node']
    key: Any
    value: Any
    right: Optional['Node']

    def __repr__(self):
        return (f'node with key {self.key!r} '
                f'(balance {self.balance.name.lower()})')


Tree = Optional[Node]
EMPTY: Tree = None

# A rebuilt subtree and its height change, for the parent to consume.
Rebuilt = Tuple[Tree, Change]


def empty() -> Tree:
    """Returns the canonical empty tree."""
    return EMPTY


def leaf(key: K, value: V) -> Node:
    """Makes a single-node tree."""
    return Node(Balance.EVEN, None, key, value, None)
