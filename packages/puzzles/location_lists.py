"""
Location Lists puzzle (two columns of integers).

Input:
  - one pair per line: "<left> <right>" separated by whitespace

Answers:
  - total_difference: pair the columns smallest-to-smallest after sorting and
    sum the absolute differences.
  - similarity_score: for each left value, add value * (times it appears in
    the right column).
"""

from __future__ import annotations
import logging
from collections import Counter
from typing import List
from .base import BasePuzzle, PuzzleInputError, register, split_lines

log = logging.getLogger(__name__)


@register
class LocationListsPuzzle(BasePuzzle):
    id = "location_lists"
    name = "Location Lists (difference + similarity)"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.left: List[int] = []
        self.right: List[int] = []

    def _parse(self, text: str) -> None:
        left: List[int] = []
        right: List[int] = []
        for lineno, line in enumerate(split_lines(text), start=1):
            parts = line.split()
            if len(parts) != 2:
                raise PuzzleInputError(f"line {lineno} does not contain 2 values: {line!r}")
            try:
                a, b = int(parts[0]), int(parts[1])
            except ValueError as e:
                raise PuzzleInputError(f"line {lineno}: {line!r} is not a pair of integers") from e
            left.append(a)
            right.append(b)

        self.left, self.right = left, right
        log.info("list 1 count: %d, list 2 count: %d", len(left), len(right))

    def _solve(self) -> dict:
        total_difference = sum(abs(a - b) for a, b in zip(sorted(self.left), sorted(self.right)))

        # similarity only depends on multiplicities in the right column
        right_counts = Counter(self.right)
        similarity_score = sum(a * right_counts[a] for a in self.left)

        return {"total_difference": total_difference, "similarity_score": similarity_score}
