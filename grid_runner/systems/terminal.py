"""Terminal condition systems.

Set ``state.win`` or ``state.lose`` exactly once when the player reaches the
goal or shares a cell with an enemy. Each system also records the message to
announce. Both are no-ops on a state that is already terminal.
"""

from dataclasses import replace

from grid_runner.state import State
from grid_runner.utils.terminal import is_terminal_state, player_on_enemy

WIN_MESSAGE = "You reached the goal. You win!"
BUMPED_MESSAGE = "You bumped into an enemy. Game over."
CAUGHT_MESSAGE = "An enemy caught you. Game over."


def win_system(state: State) -> State:
    """Set ``win`` if the player stands on the goal."""
    if is_terminal_state(state):
        return state
    if state.player == state.goal:
        return replace(state, win=True, message=WIN_MESSAGE)
    return state


def lose_system(state: State, message: str = CAUGHT_MESSAGE) -> State:
    """Set ``lose`` if an enemy shares the player's cell."""
    if is_terminal_state(state):
        return state
    if player_on_enemy(state):
        return replace(state, lose=True, message=message)
    return state
