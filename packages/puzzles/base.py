from __future__ import annotations
from typing import Dict, Type

# ---- Global puzzle registry ----
REGISTRY: Dict[str, Type["BasePuzzle"]] = {}


class PuzzleInputError(ValueError):
    """Raised when puzzle text cannot be parsed into the puzzle's input model."""


class PuzzleNotParsedError(RuntimeError):
    """Raised when solve() is called before a successful parse_input()."""


def register(cls: Type["BasePuzzle"]) -> Type["BasePuzzle"]:
    """
    Decorator: @register on a puzzle class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate puzzle id: {pid}")
    REGISTRY[pid] = cls
    return cls


def split_lines(text: str) -> list[str]:
    """Split on CR/LF, trim each line and drop blank ones."""
    return [ln.strip() for ln in text.replace("\r", "\n").split("\n") if ln.strip()]


# ---- Base class that puzzles inherit ----
class BasePuzzle:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.is_input_parsed = False

    def parse_input(self, text: str) -> None:
        """
        Parse raw puzzle text. Subclasses override `_parse` and raise
        PuzzleInputError on malformed input; the parsed flag is only set on
        success so a failed parse leaves the puzzle unsolvable.
        """
        self.is_input_parsed = False
        self._parse(text)
        self.is_input_parsed = True

    def solve(self) -> dict:
        if not self.is_input_parsed:
            raise PuzzleNotParsedError(f"{self.id}: the input should be parsed first")
        return self._solve()

    def _parse(self, text: str) -> None:
        raise NotImplementedError("Override in subclass")

    def _solve(self) -> dict:
        raise NotImplementedError("Override in subclass")
