"""Star collection system.

When the player stands on a star the star is removed and the score goes up
by one. Stars are a set, so at most one can occupy a cell.
"""

from dataclasses import replace

from grid_runner.state import State


def collectible_system(state: State) -> State:
    """Collect the star under the player, if any."""
    if state.player not in state.stars:
        return state
    return replace(
        state,
        stars=state.stars.remove(state.player),
        score=state.score + 1,
    )


ALL_COLLECTED_MESSAGE = "All stars collected. Now go to G for a bonus!"


def all_collected_system(state: State) -> State:
    """Post the all-stars notice when the board is cleared.

    Purely informational; no bonus score is awarded.
    """
    if state.stars:
        return state
    return replace(state, message=ALL_COLLECTED_MESSAGE)
