"""Star respawn system.

Every ``respawn_interval`` turns, if fewer stars remain than the configured
target, one new star is attempted. The attempt samples at most
``respawn_max_tries`` cells and quietly gives up if all of them collide.
"""

import logging
from dataclasses import replace

from grid_runner.levels.placement import place_respawn
from grid_runner.state import State
from grid_runner.types import RandomSource

logger = logging.getLogger(__name__)


def respawn_system(state: State, rng: RandomSource) -> State:
    """Attempt to add one star on respawn turns.

    The new star avoids the player, the goal and existing stars. Enemy cells
    are allowed.
    """
    config = state.config
    if state.turn % config.respawn_interval != 0:
        return state
    if len(state.stars) >= config.num_stars:
        return state

    excluded = {state.player, state.goal} | set(state.stars)
    pos = place_respawn(
        rng, config.rows, config.cols, excluded, config.respawn_max_tries
    )
    if pos is None:
        logger.debug(
            "Star respawn skipped on turn %d after %d tries",
            state.turn,
            config.respawn_max_tries,
        )
        return state

    logger.debug("Star respawned at %s on turn %d", pos, state.turn)
    return replace(state, stars=state.stars.add(pos))
