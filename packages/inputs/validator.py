"""
Grid input validator for word-search puzzles.

What this module does:
- Check that a grid input file exists and compute SHA-256 of its raw bytes.
- Measure the grid the same way Grid.from_text builds it (trimmed, non-blank lines).
- Flag ragged rows (informational) and cells outside A-Z.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.inputs import validate_grid_input, pretty_summary
    rep = validate_grid_input("inputs/day4.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib
import string

from packages.wordsearch import Grid

GRID_ALPHABET = frozenset(string.ascii_uppercase)


@dataclass
class GridReport:
    """Shape and content diagnostics for one grid input file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    rows: int            # number of non-blank rows
    min_width: int       # shortest row length (0 when there are no rows)
    max_width: int       # longest row length
    ragged: bool         # rows differ in length (allowed, but worth knowing)
    invalid_cells: int   # cells outside A-Z
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_grid_input(path: str) -> Dict:
    """
    Validate a word-search grid file.

    `passed` requires at least one row and no cells outside A-Z. Ragged rows
    are reported as an issue but don't fail validation.
    """
    p = Path(path)
    if not p.exists():
        rep = GridReport(path, False, "", 0, 0, 0, False, 0, False,
                         [f"input file not found: {path}"])
        return asdict(rep)

    grid = Grid.from_text(p.read_text(encoding="utf-8"))
    widths = [grid.row_length(r) for r in range(grid.row_count)]
    invalid = sum(1 for _, ch in grid.cells() if ch not in GRID_ALPHABET)

    issues: List[str] = []
    if not widths:
        issues.append("input contains 0 grid rows")
    ragged = len(set(widths)) > 1
    if ragged:
        issues.append(f"rows have differing widths ({min(widths)}..{max(widths)})")
    if invalid:
        issues.append(f"{invalid} cell(s) outside A-Z")

    rep = GridReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        rows=len(widths),
        min_width=min(widths, default=0),
        max_width=max(widths, default=0),
        ragged=ragged,
        invalid_cells=invalid,
        passed=bool(widths) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        grid=inputs/day4.txt | rows=140 | width=140 | sha=abc123... | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    lo, hi = report["min_width"], report["max_width"]
    width = str(hi) if lo == hi else f"{lo}..{hi}"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"grid={report['path']} | rows={report['rows']} | width={width} "
        f"| invalid={report['invalid_cells']} | sha={sha} | {status}"
    )
