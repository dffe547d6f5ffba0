import pytest
from packages.wordsearch import (
    DIRECTIONS, Grid, Position, count_occurrences, find_occurrences, matches,
)
from packages.wordsearch.directions import RIGHT, LEFT, UP, DOWN_RIGHT

REFERENCE = """
..X...
.SAMX.
.A..A.
XMAS.S
.X....
"""

# Well-known 10x10 sample: 18 straight XMAS, 9 X-MAS crosses
SAMPLE = """
MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def test_single_row():
    assert count_occurrences(Grid.from_text("XMAS"), "XMAS") == 1


def test_reference_grid():
    g = Grid.from_text(REFERENCE)
    occ = find_occurrences(g, "XMAS")
    assert len(occ) == 4
    assert [(tuple(o.start), o.direction.name) for o in occ] == [
        ((0, 2), "down_right"),
        ((1, 4), "left"),
        ((3, 0), "right"),
        ((4, 1), "up"),
    ]


def test_sample_grid():
    assert count_occurrences(Grid.from_text(SAMPLE), "XMAS") == 18


@pytest.mark.parametrize("text", ["", "XMAS", REFERENCE])
def test_empty_word_counts_zero(text):
    assert count_occurrences(Grid.from_text(text), "") == 0


def test_empty_grid_counts_zero():
    assert count_occurrences(Grid.from_text("\n\n"), "XMAS") == 0


def test_matches_checks_bounds_before_each_character():
    g = Grid.from_text("XMA")
    # the first three characters match, the fourth would be off the edge
    assert matches(g, Position(0, 0), RIGHT, "XMA") is True
    assert matches(g, Position(0, 0), RIGHT, "XMAS") is False
    assert matches(g, Position(0, 5), RIGHT, "X") is False


def test_matches_on_ragged_grid():
    g = Grid.from_text("XM\nXMAS\nX")
    assert matches(g, Position(1, 0), RIGHT, "XMAS")
    assert not matches(g, Position(0, 0), RIGHT, "XMAS")
    assert not matches(g, Position(2, 0), UP, "XMA")


def test_single_character_word_matches_in_every_direction():
    g = Grid.from_text("AB")
    assert all(matches(g, Position(0, 0), d, "A") for d in DIRECTIONS)
    assert count_occurrences(g, "A") == len(DIRECTIONS)
    assert count_occurrences(g, "Z") == 0


def test_bounds_law_uniform_grid():
    g = Grid.from_text("AAA\nAAA\nAAA")
    # too long for any direction anywhere
    assert count_occurrences(g, "AAAA") == 0
    for pos, _ in g.cells():
        for d in DIRECTIONS:
            assert not matches(g, pos, d, "AAAA")
    # 3 per straight direction and 1 per diagonal
    assert count_occurrences(g, "AAA") == 4 * 3 + 4 * 1


def test_overlapping_occurrences_count_separately():
    g = Grid.from_text("AAAA")
    # starts 0,1 going right and 2,3 going left
    assert count_occurrences(g, "AAA") == 4


def test_reversal_symmetry():
    g = Grid.from_text(SAMPLE)
    word = "XMAS"
    forward = {(o.end(len(word)), o.direction.opposite()) for o in find_occurrences(g, word)}
    backward = {(o.start, o.direction) for o in find_occurrences(g, word[::-1])}
    assert forward == backward


def test_repeated_scans_are_identical():
    g = Grid.from_text(SAMPLE)
    assert find_occurrences(g, "XMAS") == find_occurrences(g, "XMAS")
    assert count_occurrences(g, "XMAS") == count_occurrences(g, "XMAS")


def test_occurrence_end():
    occ = find_occurrences(Grid.from_text(REFERENCE), "XMAS")[0]
    assert occ.direction == DOWN_RIGHT
    assert occ.end(4) == Position(3, 5)
