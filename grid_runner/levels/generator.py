"""Initial level generation.

Builds the starting :class:`State` for a ``GameConfig``: the player in the
centre of the board, then the goal, the stars and the enemies, in that order
(the draw order matters for seeded reproducibility).
"""

import logging
import random
from typing import Optional

from pyrsistent import pset, pvector

from grid_runner.components import Position
from grid_runner.config import GameConfig
from grid_runner.levels.placement import place_goal, place_unique
from grid_runner.state import State
from grid_runner.types import RandomSource

logger = logging.getLogger(__name__)


def start_position(config: GameConfig) -> Position:
    """Player spawn: the centre cell (rounded down)."""
    return Position(config.rows // 2, config.cols // 2)


def generate(config: GameConfig, rng: Optional[RandomSource] = None) -> State:
    """Generate a fresh level.

    Stars and enemies are each placed uniquely while avoiding the player and
    the goal. Enemies are *not* kept off star cells.

    Args:
        config: Board dimensions and counts.
        rng: Random source; defaults to ``random.Random(config.seed)``.

    Returns:
        State: Turn-0 state with status ``RUNNING``.
    """
    if rng is None:
        rng = random.Random(config.seed)

    player = start_position(config)
    goal = place_goal(rng, config.rows, config.cols, player)
    excluded = {player, goal}
    stars = place_unique(rng, config.rows, config.cols, config.num_stars, excluded)
    enemies = place_unique(rng, config.rows, config.cols, config.num_enemies, excluded)

    logger.debug(
        "Generated level: player=%s goal=%s stars=%s enemies=%s",
        player,
        goal,
        stars,
        enemies,
    )
    return State(
        config=config,
        player=player,
        goal=goal,
        stars=pset(stars),
        enemies=pvector(enemies),
    )
