"""Cell state for the Game of Life grid."""

from enum import IntEnum


class Cell(IntEnum):
    """Binary cell state.

    The integer value is the cell's contribution to a neighbor count.
    """

    DEAD = 0
    ALIVE = 1

    @property
    def alive(self) -> bool:
        return self is Cell.ALIVE
