"""
Immutable character grid for word-search puzzles.

Conventions:
  - Rows are built from the raw puzzle text, one non-empty trimmed line each.
  - Rows may differ in length (ragged grids are allowed, nothing is padded).
  - Positions are zero-based (row, col) pairs.

Reads go through `Grid.at`, which raises GridBoundsError for any position
outside the grid. Search code checks `Grid.contains` first, so a miss at the
edge is a plain negative result and never an exception.
"""

from __future__ import annotations
from typing import Iterator, NamedTuple, Tuple

from .directions import Direction


class GridBoundsError(IndexError):
    """Raised when a character is read at a position outside the grid."""


class Position(NamedTuple):
    row: int
    col: int

    def step(self, direction: Direction, times: int = 1) -> "Position":
        return Position(self.row + direction.d_row * times, self.col + direction.d_col * times)


class Grid:
    def __init__(self, rows: Tuple[str, ...]):
        self._rows = tuple(rows)

    @classmethod
    def from_text(cls, raw_text: str) -> "Grid":
        """
        Build a grid from puzzle text.

        CR and LF both separate lines; each line is trimmed and blank lines
        are dropped. Empty text gives a grid with zero rows.
        """
        lines = raw_text.replace("\r", "\n").split("\n")
        return cls(tuple(ln.strip() for ln in lines if ln.strip()))

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def row_length(self, row: int) -> int:
        if not 0 <= row < len(self._rows):
            raise GridBoundsError(f"row {row} outside grid with {len(self._rows)} rows")
        return len(self._rows[row])

    def contains(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < len(self._rows) and 0 <= col < len(self._rows[row])

    def at(self, pos: Position) -> str:
        if not self.contains(pos):
            raise GridBoundsError(f"position {tuple(pos)} is outside the grid")
        return self._rows[pos[0]][pos[1]]

    def cells(self) -> Iterator[Tuple[Position, str]]:
        """Yield (position, char) for every cell in row-major order."""
        for r, line in enumerate(self._rows):
            for c, ch in enumerate(line):
                yield Position(r, c), ch

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        widths = {len(r) for r in self._rows}
        return f"Grid(rows={len(self._rows)}, widths={sorted(widths)})"
