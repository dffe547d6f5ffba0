"""
Experiment harness core primitives.

- run_puzzle: parse + solve one puzzle on one input text.
- run_batch:  run several puzzles (by id) over the same input text.

Errors raised while parsing or solving are captured in the result dict
instead of propagating, so a batch keeps going past one bad input. These
functions never print; presentation belongs to the CLI apps.
"""

from __future__ import annotations
import logging
import time
from typing import Dict, Iterable, List

from packages.puzzles import BasePuzzle, PuzzleInputError, PuzzleNotParsedError, create_puzzle
from packages.wordsearch import GridBoundsError

log = logging.getLogger(__name__)


def run_puzzle(puzzle: BasePuzzle, text: str) -> Dict:
    """
    Parse `text` into `puzzle` and solve it.

    Returns:
        dict with keys:
            puzzle_id (str), parsed (bool), solved (bool),
            result (dict | None), error (str | None), time_ms (float)
    """
    out: Dict = {
        "puzzle_id": puzzle.id, "parsed": False, "solved": False,
        "result": None, "error": None, "time_ms": 0.0,
    }

    t0 = time.perf_counter()
    try:
        puzzle.parse_input(text)
    except PuzzleInputError as e:
        log.warning("%s: could not parse input: %s", puzzle.id, e)
        out["error"] = str(e)
        out["time_ms"] = (time.perf_counter() - t0) * 1000.0
        return out
    out["parsed"] = True

    try:
        out["result"] = puzzle.solve()
        out["solved"] = True
    except (PuzzleNotParsedError, GridBoundsError) as e:
        log.error("%s: could not solve: %s", puzzle.id, e)
        out["error"] = str(e)

    out["time_ms"] = (time.perf_counter() - t0) * 1000.0
    return out


def run_batch(puzzle_ids: Iterable[str], text: str) -> List[Dict]:
    """Run each puzzle id (fresh instance per id) over the same input."""
    return [run_puzzle(create_puzzle(pid), text) for pid in puzzle_ids]
