"""Movement candidate helpers.

Both functions return the *candidate* destination only. Bounds (and, for
enemies, the goal cell) are checked by the systems that consume them, so a
rejected candidate is simply discarded.
"""

from typing import Dict, List, Tuple

from grid_runner.actions import Action
from grid_runner.components import Position
from grid_runner.types import RandomSource

ACTION_DELTAS: Dict[Action, Tuple[int, int]] = {
    Action.UP: (-1, 0),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
    Action.RIGHT: (0, 1),
}

# Indexed by a uniform draw in [0, 4]; the last entry means "stay".
ENEMY_DELTAS: List[Tuple[int, int]] = [(-1, 0), (1, 0), (0, -1), (0, 1), (0, 0)]


def default_move_fn(pos: Position, action: Action) -> Position:
    """Single-tile cardinal step, no wrapping."""
    d_row, d_col = ACTION_DELTAS[action]
    return pos.offset(d_row, d_col)


def random_enemy_move(pos: Position, rng: RandomSource) -> Position:
    """Uniformly pick up, down, left, right or stay."""
    d_row, d_col = ENEMY_DELTAS[rng.randint(0, len(ENEMY_DELTAS) - 1)]
    return pos.offset(d_row, d_col)
