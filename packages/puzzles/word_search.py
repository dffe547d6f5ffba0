"""
Word Search puzzle.

Input is a block of letters, one grid row per line. Two answers:
  - occurrences:       how many times WORD reads in a straight line, in any
                       of the eight directions (overlaps count separately)
  - cross_occurrences: how many X shapes CROSS_WORD forms on the diagonals
"""

from __future__ import annotations
import logging
from .base import BasePuzzle, register
from packages.wordsearch import Grid, count_occurrences, count_cross_occurrences

log = logging.getLogger(__name__)

DEFAULT_WORD = "XMAS"
DEFAULT_CROSS_WORD = "MAS"


@register
class WordSearchPuzzle(BasePuzzle):
    id = "word_search"
    name = "Word Search (straight + cross)"
    version = "1.0.0"

    def __init__(self, word: str = DEFAULT_WORD, cross_word: str = DEFAULT_CROSS_WORD):
        super().__init__()
        self.word = word
        self.cross_word = cross_word
        self.grid = Grid(())

    def _parse(self, text: str) -> None:
        self.grid = Grid.from_text(text)
        log.info("parsed %r", self.grid)

    def _solve(self) -> dict:
        occurrences = count_occurrences(self.grid, self.word)
        crosses = count_cross_occurrences(self.grid, self.cross_word)
        log.info("%s: %d occurrence(s); %s: %d cross(es)",
                 self.word, occurrences, self.cross_word, crosses)
        return {"occurrences": occurrences, "cross_occurrences": crosses}
