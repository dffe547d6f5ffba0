from .validator import validate_grid_input, pretty_summary
from .io import read_input, read_lines

__all__ = ["validate_grid_input", "pretty_summary", "read_input", "read_lines"]
