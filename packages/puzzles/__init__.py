from __future__ import annotations
from typing import List
from .base import BasePuzzle, REGISTRY, register, PuzzleInputError, PuzzleNotParsedError

from . import location_lists  # noqa: F401
from . import reports  # noqa: F401
from . import multipliers  # noqa: F401
from . import word_search  # noqa: F401


def create_puzzle(puzzle_id: str, **kwargs) -> BasePuzzle:
    """
    Factory: instantiate a registered puzzle by id (kwargs go to its constructor).
    """
    try:
        cls = REGISTRY[puzzle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown puzzle id: {puzzle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_puzzle_ids() -> List[str]:
    """
    Return all registered puzzle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
