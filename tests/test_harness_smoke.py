import csv
import json
from pathlib import Path

from packages.harness import run_puzzle, run_batch, write_csv, write_manifest
from packages.puzzles import create_puzzle

GRID = "..X...\n.SAMX.\n.A..A.\nXMAS.S\n.X....\n"


def test_run_puzzle_smoke():
    r = run_puzzle(create_puzzle("word_search"), GRID)
    assert r["parsed"] is True and r["solved"] is True
    assert r["error"] is None
    assert r["result"] == {"occurrences": 4, "cross_occurrences": 0}
    assert r["time_ms"] >= 0.0


def test_run_puzzle_reports_parse_errors():
    r = run_puzzle(create_puzzle("multipliers"), "nothing to see")
    assert r["parsed"] is False and r["solved"] is False
    assert "mul" in r["error"]
    assert r["result"] is None


def test_run_batch_keeps_going_past_bad_input():
    rs = run_batch(["location_lists", "word_search"], GRID)
    assert [r["puzzle_id"] for r in rs] == ["location_lists", "word_search"]
    assert rs[0]["parsed"] is False
    assert rs[1]["solved"] is True


def test_write_csv_and_manifest(tmp_path: Path):
    rs = run_batch(["word_search", "multipliers"], GRID + "mul(2,3)")
    for r in rs:
        r["input"] = "grid.txt"

    csv_path = write_csv(rs, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert "result.occurrences" in rows[0] and "result.total" in rows[0]
    assert rows[1]["result.total"] == "6"
    assert rows[1]["result.occurrences"] == ""

    m_path = write_manifest({"run_id": "x", "results": rs}, str(tmp_path / "m.json"))
    data = json.loads(Path(m_path).read_text(encoding="utf-8"))
    assert data["results"][0]["puzzle_id"] == "word_search"
