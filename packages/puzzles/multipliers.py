"""
Corrupted Multipliers puzzle.

Scan noisy text for well-formed statements `mul(X,Y)` where X and Y have
1-3 digits and there is no whitespace anywhere inside the statement.
The answer is the sum of X * Y over all statements.
"""

from __future__ import annotations
import re
from typing import List, Tuple
from .base import BasePuzzle, PuzzleInputError, register

MUL_RE = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")


@register
class MultipliersPuzzle(BasePuzzle):
    id = "multipliers"
    name = "Corrupted Multipliers"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.statements: List[Tuple[int, int]] = []

    def _parse(self, text: str) -> None:
        statements = [(int(a), int(b)) for a, b in MUL_RE.findall(text)]
        if not statements:
            raise PuzzleInputError("input does not contain any 'mul(x,y)' statements")
        self.statements = statements

    def _solve(self) -> dict:
        return {"total": sum(a * b for a, b in self.statements)}
