"""
Straight-line word search.

Given:
  - a Grid (immutable)
  - a word (non-empty string)

Find every (start, direction) pair where the word reads exactly, one cell
per character, along one of the eight directions.

Algorithm (brute force, O(rows * cols * 8 * len(word))):
  1) Scan cells in row-major order; skip cells that don't hold word[0].
  2) From each remaining cell, walk every direction in DIRECTIONS order and
     compare one character at a time, bounds-checking before each read.
"""

from __future__ import annotations
import logging
from typing import List, NamedTuple

from .directions import DIRECTIONS, Direction
from .grid import Grid, Position

log = logging.getLogger(__name__)


class Occurrence(NamedTuple):
    start: Position
    direction: Direction

    def end(self, length: int) -> Position:
        """Cell holding the last character of a word of `length` chars."""
        return self.start.step(self.direction, length - 1)


def matches(grid: Grid, start: Position, direction: Direction, word: str) -> bool:
    """
    Return True if `word` reads from `start` stepping by `direction`.

    A walk that leaves the grid before the last character is a miss, so a
    partial match at the edge never counts.
    """
    pos = Position(*start)
    for ch in word:
        if not grid.contains(pos):
            return False
        if grid.at(pos) != ch:
            return False
        pos = pos.step(direction)
    return True


def find_occurrences(grid: Grid, word: str) -> List[Occurrence]:
    """All occurrences of `word`, in scan order (row, col, direction)."""
    if not word:
        return []

    out: List[Occurrence] = []
    first = word[0]
    for pos, ch in grid.cells():
        if ch != first:
            continue

        log.debug("start character %r found at %d:%d", first, pos.row, pos.col)

        for direction in DIRECTIONS:
            if matches(grid, pos, direction, word):
                occ = Occurrence(pos, direction)
                end = occ.end(len(word))
                log.debug("found %s at %d:%d towards %d:%d (%s)",
                          word, pos.row, pos.col, end.row, end.col, direction.name)
                out.append(occ)
    return out


def count_occurrences(grid: Grid, word: str) -> int:
    """Number of (start, direction) pairs where `word` matches. 0 for an empty word."""
    return len(find_occurrences(grid, word))
