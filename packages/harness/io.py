"""
I/O utilities for puzzle runs.

Responsibilities:
- write_csv:     flatten per-run results into a tidy CSV (one row per run).
- write_manifest:dump a JSON manifest with config, input validation and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

BASE_FIELDS = ["puzzle_id", "input", "parsed", "solved", "time_ms", "error"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of run results to CSV.

    Schema (columns):
      puzzle_id, input, parsed, solved, time_ms, error, result.<key>...

    Result keys differ per puzzle, so the `result.*` columns are the sorted
    union over all rows; missing values are left blank.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    result_keys = sorted({k for r in results for k in (r.get("result") or {})})
    fields = BASE_FIELDS + [f"result.{k}" for k in result_keys]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "puzzle_id": r["puzzle_id"],
                "input": r.get("input", ""),
                "parsed": r["parsed"],
                "solved": r["solved"],
                "time_ms": round(float(r["time_ms"]), 3),
                "error": r.get("error") or "",
            }
            res = r.get("result") or {}
            for k in result_keys:
                row[f"result.{k}"] = res.get(k, "")
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and input validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (puzzle, input, words, outdir)
      - input: output of inputs.validate_grid_input(...) when applicable
      - results: the run result dicts
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20241204T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
