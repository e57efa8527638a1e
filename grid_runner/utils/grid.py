"""Grid math helpers.

Pure predicates used by movement and placement. Kept separate from the
systems so level generation can use them without importing the reducer.
"""

from grid_runner.components import Position
from grid_runner.state import State


def in_bounds(pos: Position, rows: int, cols: int) -> bool:
    """Return True if ``pos`` lies within a ``rows`` x ``cols`` rectangle."""
    return 0 <= pos.row < rows and 0 <= pos.col < cols


def is_in_bounds(state: State, pos: Position) -> bool:
    """Return True if ``pos`` lies within the board of ``state``."""
    return in_bounds(pos, state.height, state.width)
