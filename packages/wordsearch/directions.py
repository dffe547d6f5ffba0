"""
The eight compass step vectors used to walk a grid.

Order is fixed and part of the contract (scan output and logs depend on it):
  right, down, left, up, down_right, down_left, up_left, up_right

Diagonals are built as the sum of their two cardinal components.
"""

from __future__ import annotations
from typing import NamedTuple, Tuple


class Direction(NamedTuple):
    name: str
    d_row: int
    d_col: int

    def opposite(self) -> "Direction":
        return _BY_VECTOR[(-self.d_row, -self.d_col)]


def _combine(a: Direction, b: Direction) -> Direction:
    return Direction(f"{a.name}_{b.name}", a.d_row + b.d_row, a.d_col + b.d_col)


RIGHT = Direction("right", 0, 1)
DOWN = Direction("down", 1, 0)
LEFT = Direction("left", 0, -1)
UP = Direction("up", -1, 0)

DOWN_RIGHT = _combine(DOWN, RIGHT)
DOWN_LEFT = _combine(DOWN, LEFT)
UP_LEFT = _combine(UP, LEFT)
UP_RIGHT = _combine(UP, RIGHT)

DIRECTIONS: Tuple[Direction, ...] = (
    RIGHT, DOWN, LEFT, UP, DOWN_RIGHT, DOWN_LEFT, UP_LEFT, UP_RIGHT,
)

_BY_VECTOR = {(d.d_row, d.d_col): d for d in DIRECTIONS}
