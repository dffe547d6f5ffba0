from .directions import DIRECTIONS, Direction
from .grid import Grid, GridBoundsError, Position
from .finder import Occurrence, matches, find_occurrences, count_occurrences
from .cross import find_crosses, count_cross_occurrences

__all__ = [
    "DIRECTIONS", "Direction", "Grid", "GridBoundsError", "Position", "Occurrence",
    "matches", "find_occurrences", "count_occurrences", "find_crosses",
    "count_cross_occurrences",
]
