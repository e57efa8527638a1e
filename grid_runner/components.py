"""Position component.

Immutable integer grid coordinates shared by the player, goal, stars and
enemies. Row 0 is the top of the board, column 0 the left edge.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        """Return the position shifted by ``(d_row, d_col)`` (unchecked)."""
        return Position(self.row + d_row, self.col + d_col)
