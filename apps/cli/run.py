# apps/cli/run.py
"""
CLI entry point for solving one puzzle input.

This script:
  1) Validates the input when the puzzle reads a letter grid (prints rows, width, SHA).
  2) Instantiates the requested puzzle and runs it through the harness.
  3) Prints the structured result and writes:
       - CSV:  one row with the flattened result
       - JSON: manifest with config, input validation, git commit, etc.

Exit codes: 0 solved, 1 input could not be parsed, 2 puzzle could not be solved.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from packages.inputs import read_input, validate_grid_input, pretty_summary
from packages.harness import run_puzzle
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.puzzles import create_puzzle, get_puzzle_ids
from packages.puzzles.word_search import DEFAULT_WORD, DEFAULT_CROSS_WORD

GRID_PUZZLES = {"word_search"}


def build_argparser() -> argparse.ArgumentParser:
    puzzle_choices = ", ".join(get_puzzle_ids())
    ap = argparse.ArgumentParser(description="Solve a text puzzle input")
    ap.add_argument("--puzzle", default="word_search",
                    help=f"puzzle id (one of: {puzzle_choices})")
    ap.add_argument("--input", required=True, help="path to the puzzle input text file")
    ap.add_argument("--word", default=DEFAULT_WORD,
                    help="word_search: word to count in straight lines")
    ap.add_argument("--cross-word", default=DEFAULT_CROSS_WORD,
                    help="word_search: word to count as X-shaped crosses")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--loglevel", default="WARNING",
                    help="logging level (DEBUG shows every match)")
    return ap


def main() -> int:
    """
    Parse CLI args, validate the input, run the puzzle, and write outputs.
    """
    args = build_argparser().parse_args()

    logging.basicConfig(
        level=getattr(logging, args.loglevel.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # 1) Validate grid inputs and print a one-liner summary
    rep = None
    if args.puzzle in GRID_PUZZLES:
        rep = validate_grid_input(args.input)
        print(pretty_summary(rep))

    # 2) Instantiate puzzle by id (unknown ids exit with the available list)
    kwargs = {"word": args.word, "cross_word": args.cross_word} if args.puzzle == "word_search" else {}
    try:
        puzzle = create_puzzle(args.puzzle, **kwargs)
    except ValueError as e:
        raise SystemExit(str(e))

    # 3) Run
    text = read_input(args.input)
    r = run_puzzle(puzzle, text)
    r["input"] = args.input

    if not r["parsed"]:
        print(f"The puzzle input could not be parsed: {r['error']}", file=sys.stderr)
        return 1
    if not r["solved"]:
        print(f"The puzzle could not be solved: {r['error']}", file=sys.stderr)
        return 2

    print(f"{puzzle.name} solved in {r['time_ms']:.1f} ms:")
    for k, v in r["result"].items():
        print(f"  {k}: {v}")

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv([r], str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "input": rep,
        "results": [r],
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
