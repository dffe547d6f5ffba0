# apps/cli/run_multi.py
"""
Run several puzzles over several input files in one shot.

Writes per-puzzle outputs to: <outdir>/<puzzle_id>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse, logging, sys, time
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from packages.inputs import read_input
from packages.harness import run_puzzle
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.puzzles import create_puzzle, get_puzzle_ids


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_puzzle(puzzle_id: str, inputs: Dict[str, str], *, outdir: Path,
                    progress: str) -> Tuple[str, str]:
    results = []
    total = len(inputs)
    mode = _progress_mode(progress)
    items = list(inputs.items())
    iterator = tqdm(items, ncols=80, desc=puzzle_id, unit="input") if mode == "bar" else items
    start = time.time()

    for idx, (path, text) in enumerate(iterator, 1):
        r = run_puzzle(create_puzzle(puzzle_id), text)
        r["input"] = path
        results.append(r)

        if mode == "plain":
            elapsed = time.time() - start
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(f"\r[{puzzle_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s")
            sys.stderr.flush()
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # write outputs under <outdir>/<puzzle_id>/
    run_id = timestamp_id()
    pdir = outdir / puzzle_id
    csv_path = pdir / f"run_{run_id}.csv"
    manifest_path = pdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {"puzzle": puzzle_id, "inputs": list(inputs)},
        "results": results,
    }, str(manifest_path))
    return str(csv_path), str(manifest_path)


def main():
    registered = get_puzzle_ids()
    ap = argparse.ArgumentParser(description="Run many puzzles over many inputs")
    ap.add_argument("--puzzles", nargs="+", required=True,
                    help=f"list of puzzle ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="puzzle ids to skip (only if --puzzles ALL)")
    ap.add_argument("--inputs", nargs="+", required=True, help="puzzle input files")
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    ap.add_argument("--loglevel", default="WARNING")
    args = ap.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.loglevel.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # 1) load inputs once
    inputs = {p: read_input(p) for p in args.inputs}

    # 2) expand puzzles
    if len(args.puzzles) == 1 and args.puzzles[0].lower() == "all":
        todo = [p for p in registered if p not in set(args.exclude)]
    else:
        todo = args.puzzles
        missing = [p for p in todo if p not in registered]
        if missing:
            raise SystemExit(f"Unknown puzzle ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)

    # 3) run each puzzle sequentially over all inputs
    for pid in todo:
        if args.progress != "off":
            print(f"\n=== Running {pid} on {len(inputs)} input(s) ===")
        csv_path, manifest_path = _run_one_puzzle(pid, inputs, outdir=outdir,
                                                  progress=args.progress)
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
