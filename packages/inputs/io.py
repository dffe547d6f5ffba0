from __future__ import annotations
from pathlib import Path
from typing import List


def read_input(p: Path | str) -> str:
    """
    Read a UTF-8 puzzle input file as one string.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8")


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    return [ln.rstrip("\r\n") for ln in read_input(p).splitlines()]
