"""State reducer and turn orchestration.

This module wires the systems together in the order a single *turn* is
resolved. :func:`step` is the only entry point for gameplay progression and is
pure: it returns a *new* :class:`grid_runner.state.State` and performs no I/O.
Rendering, prompting and pauses belong to :mod:`grid_runner.game_loop`.

Ordering:

1. Player movement (out-of-bounds moves are discarded, the turn still counts).
2. Star collection at the new position.
3. Goal check. Reaching the goal ends the game before enemies move.
4. Enemy movement, then enemy collision check.
5. Periodic star respawn, then the all-stars notice.
6. Turn counter increment.

A win or loss returns immediately, so the turn counter only counts turns that
completed.
"""

import logging
from dataclasses import replace

from grid_runner.actions import Action, MOVE_ACTIONS
from grid_runner.state import State
from grid_runner.systems.collectible import all_collected_system, collectible_system
from grid_runner.systems.enemy import enemy_movement_system
from grid_runner.systems.movement import movement_system
from grid_runner.systems.spawn import respawn_system
from grid_runner.systems.terminal import (
    BUMPED_MESSAGE,
    CAUGHT_MESSAGE,
    lose_system,
    win_system,
)
from grid_runner.types import RandomSource
from grid_runner.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)


def check_overlap(state: State) -> State:
    """Resolve overlaps present *before* any input is read.

    Guards against the player already standing on the goal or an enemy (for
    example straight after generation). The goal is checked first.
    """
    state = win_system(state)
    return lose_system(state, BUMPED_MESSAGE)


def step(state: State, action: Action, rng: RandomSource) -> State:
    """Advance the game by one player action.

    Args:
        state (State): Previous immutable game state.
        action (Action): Directional action to apply.
        rng (RandomSource): Source for enemy moves and star respawns.

    Returns:
        State: Next state snapshot. A terminal input state is returned
            unchanged.

    Raises:
        ValueError: If the action is not a movement action.
    """
    if is_terminal_state(state):
        return state
    if action not in MOVE_ACTIONS:
        raise ValueError(f"Action is not valid: {action!r}")

    state = replace(state, message=None)

    state = movement_system(state, action)
    state = collectible_system(state)
    state = win_system(state)
    if state.win:
        logger.debug("Player reached the goal on turn %d", state.turn)
        return state

    state = enemy_movement_system(state, rng)
    state = lose_system(state, CAUGHT_MESSAGE)
    if state.lose:
        logger.debug("Player caught on turn %d", state.turn)
        return state

    state = respawn_system(state, rng)
    state = all_collected_system(state)
    return replace(state, turn=state.turn + 1)
