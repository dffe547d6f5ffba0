"""
X-shaped ("cross") word search.

A cross is two placements of the same word (each read forward or backward)
on the two diagonals of a square, sharing the square's center cell:

    M.S
    .A.
    M.S

Every such X has one down-right and one down-left diagonal through its center,
so it is enough to anchor on the top-left corner:
  1) The corner holds the word's first or last character; read the word (or
     its reverse) down-right from there.
  2) The top-right corner of the same square is len(word) - 1 columns to the
     right; read either the word or its reverse down-left from there.

Only odd-length words have a single center cell; even lengths count 0.
"""

from __future__ import annotations
import logging
from typing import List

from .directions import DOWN_LEFT, DOWN_RIGHT
from .finder import matches
from .grid import Grid, Position

log = logging.getLogger(__name__)


def find_crosses(grid: Grid, word: str) -> List[Position]:
    """Top-left anchors of every cross of `word`, in row-major order."""
    if not word or len(word) % 2 == 0:
        if word:
            log.debug("no cross possible for even-length word %r", word)
        return []

    first, last = word[0], word[-1]
    reversed_word = word[::-1]
    span = len(word) - 1

    out: List[Position] = []
    for pos, ch in grid.cells():
        if ch != first and ch != last:
            continue

        candidate = word if ch == first else reversed_word
        if not matches(grid, pos, DOWN_RIGHT, candidate):
            continue

        corner = Position(pos.row, pos.col + span)
        if matches(grid, corner, DOWN_LEFT, word) or matches(grid, corner, DOWN_LEFT, reversed_word):
            log.debug("cross of %s anchored at %d:%d", word, pos.row, pos.col)
            out.append(pos)
    return out


def count_cross_occurrences(grid: Grid, word: str) -> int:
    """Number of crosses of `word`. 0 for empty or even-length words."""
    return len(find_crosses(grid, word))
