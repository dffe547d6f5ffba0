"""
Reactor Reports puzzle.

A report is one line of integer levels. It is safe when:
  - the levels are all increasing or all decreasing, and
  - every adjacent pair differs by at least 1 and at most 3.

The dampened variant also accepts a report that becomes safe after removing
exactly one level. Reports with 0 or 1 levels are trivially safe.
"""

from __future__ import annotations
import logging
from typing import List, Sequence
from .base import BasePuzzle, PuzzleInputError, register, split_lines

log = logging.getLogger(__name__)

MIN_STEP = 1
MAX_STEP = 3


def is_safe(levels: Sequence[int]) -> bool:
    deltas = [b - a for a, b in zip(levels, levels[1:])]
    if not deltas:
        return True
    if all(MIN_STEP <= d <= MAX_STEP for d in deltas):
        return True
    return all(MIN_STEP <= -d <= MAX_STEP for d in deltas)


def is_safe_dampened(levels: Sequence[int]) -> bool:
    if is_safe(levels):
        return True
    return any(is_safe(list(levels[:i]) + list(levels[i + 1:])) for i in range(len(levels)))


@register
class ReportsPuzzle(BasePuzzle):
    id = "reports"
    name = "Reactor Reports (safety + dampener)"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self.reports: List[List[int]] = []

    def _parse(self, text: str) -> None:
        reports: List[List[int]] = []
        for lineno, line in enumerate(split_lines(text), start=1):
            levels: List[int] = []
            for token in line.split():
                try:
                    levels.append(int(token))
                except ValueError as e:
                    raise PuzzleInputError(
                        f"value {token!r} on line {lineno} is not an integer") from e
            reports.append(levels)
        self.reports = reports
        log.info("reports count: %d", len(reports))

    def _solve(self) -> dict:
        safe = 0
        dampened = 0
        for idx, levels in enumerate(self.reports, start=1):
            s = is_safe(levels)
            d = s or is_safe_dampened(levels)
            safe += s
            dampened += d
            log.debug("#%d: %s is %s", idx, levels,
                      "safe" if s else ("safe with dampener" if d else "unsafe"))
        return {"safe_reports": safe, "dampened_safe_reports": dampened}
