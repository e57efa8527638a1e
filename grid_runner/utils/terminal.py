"""Terminal condition helper predicates."""

from grid_runner.state import State


def is_terminal_state(state: State) -> bool:
    """Return True if the state already satisfies win or lose."""
    return state.win or state.lose


def player_on_enemy(state: State) -> bool:
    """Return True if any enemy shares the player's cell."""
    return any(enemy == state.player for enemy in state.enemies)
