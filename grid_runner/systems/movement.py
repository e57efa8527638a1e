"""Player movement system.

Applies one directional action to the player. Out-of-bounds candidates are
discarded silently: the player stays put but the turn still counts.
"""

from dataclasses import replace

from grid_runner.actions import Action
from grid_runner.moves import default_move_fn
from grid_runner.state import State
from grid_runner.utils.grid import is_in_bounds


def movement_system(state: State, action: Action) -> State:
    """Move the player one tile in the direction of ``action`` if in bounds."""
    next_pos = default_move_fn(state.player, action)
    if not is_in_bounds(state, next_pos):
        return state
    return replace(state, player=next_pos)
