"""Balance tags and height-delta signals for AVL nodes."""
from enum import Enum, IntEnum
from typing import NamedTuple


class Balance(Enum):
    """Which child subtree (if either) is one level taller.

    The value is height(right) - height(left)."""
    LEFT = -1
    EVEN = 0
    RIGHT = 1

    def __neg__(self) -> 'Balance':
        return Balance(-self.value)


class Change(IntEnum):
    """How a rebuilt subtree's height changed."""
    SHRANK = -1
    SAME = 0
    GREW = 1


class Side(Enum):
    """The child of a node that reported a height change."""
    LEFT = 'left'
    RIGHT = 'right'


class Delta(NamedTuple):
    """A rebuilt subtree's height change, tagged with the side it is on.

    A delta is always consumed by the parent of the subtree that produced
    it; the parent emits a new one for its own parent."""
    side: Side
    change: Change

    @property
    def tilt(self) -> int:
        """The change's contribution to the parent's balance value."""
        if self.side is Side.RIGHT:
            return int(self.change)
        return -int(self.change)
