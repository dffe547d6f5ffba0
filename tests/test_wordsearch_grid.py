import pytest
from packages.wordsearch import DIRECTIONS, Grid, GridBoundsError, Position
from packages.wordsearch.directions import RIGHT, DOWN, LEFT, UP, DOWN_RIGHT, UP_LEFT


def test_from_text_trims_and_drops_blank_lines():
    g = Grid.from_text("\r\n  ABC \r\n\r\nDE\n\n")
    assert g.row_count == 2
    assert g.row_length(0) == 3 and g.row_length(1) == 2
    assert g.at(Position(0, 0)) == "A"
    assert g.at(Position(1, 1)) == "E"


def test_empty_text_gives_empty_grid():
    g = Grid.from_text("")
    assert g.row_count == 0
    assert list(g.cells()) == []


def test_ragged_grid_bounds():
    g = Grid.from_text("AB\nABCD")
    assert g.contains(Position(1, 3))
    assert not g.contains(Position(0, 3))
    assert not g.contains(Position(-1, 0))
    assert not g.contains(Position(2, 0))
    with pytest.raises(GridBoundsError):
        g.at(Position(0, 2))
    with pytest.raises(GridBoundsError):
        g.row_length(5)


def test_bounds_error_is_an_index_error():
    with pytest.raises(IndexError):
        Grid.from_text("A").at(Position(0, 1))


def test_cells_are_row_major():
    g = Grid.from_text("AB\nC")
    assert [(tuple(p), ch) for p, ch in g.cells()] == [((0, 0), "A"), ((0, 1), "B"), ((1, 0), "C")]


def test_direction_order_and_vectors():
    assert [d.name for d in DIRECTIONS] == [
        "right", "down", "left", "up", "down_right", "down_left", "up_left", "up_right",
    ]
    vectors = {(d.d_row, d.d_col) for d in DIRECTIONS}
    assert len(vectors) == 8
    assert (0, 0) not in vectors
    assert all(dr in (-1, 0, 1) and dc in (-1, 0, 1) for dr, dc in vectors)


def test_diagonals_are_sums_of_cardinals():
    assert (DOWN_RIGHT.d_row, DOWN_RIGHT.d_col) == (DOWN.d_row + RIGHT.d_row, DOWN.d_col + RIGHT.d_col)
    assert (UP_LEFT.d_row, UP_LEFT.d_col) == (UP.d_row + LEFT.d_row, UP.d_col + LEFT.d_col)


def test_opposite_directions():
    assert RIGHT.opposite() is LEFT
    assert DOWN_RIGHT.opposite() is UP_LEFT
    assert all(d.opposite().opposite() == d for d in DIRECTIONS)


def test_position_step():
    assert Position(2, 2).step(UP_LEFT) == Position(1, 1)
    assert Position(0, 0).step(DOWN_RIGHT, 3) == (3, 3)
