"""Randomized entity placement.

Rejection-sampling helpers used both when a level is generated and when a
star respawns mid-game. All functions draw exclusively from the supplied
``RandomSource`` so a seeded ``random.Random`` (or a scripted stub) makes
placement fully deterministic.
"""

from typing import AbstractSet, List, Optional

from grid_runner.components import Position
from grid_runner.types import RandomSource
from grid_runner.utils.grid import in_bounds


def random_position(rng: RandomSource, rows: int, cols: int) -> Position:
    """Sample a uniformly random in-bounds position (row first, then column)."""
    return Position(rng.randint(0, rows - 1), rng.randint(0, cols - 1))


def place_goal(rng: RandomSource, rows: int, cols: int, player: Position) -> Position:
    """Sample a goal position distinct from ``player``.

    Resamples without an upper bound; the config guarantees at least two cells.
    """
    goal = random_position(rng, rows, cols)
    while goal == player:
        goal = random_position(rng, rows, cols)
    return goal


def place_unique(
    rng: RandomSource,
    rows: int,
    cols: int,
    count: int,
    excluded: AbstractSet[Position],
) -> List[Position]:
    """Sample ``count`` distinct positions, none of them in ``excluded``.

    Arguments:
        rng: Random source.
        rows: Board height.
        cols: Board width.
        count: Number of positions to collect.
        excluded: Positions that may not be chosen (typically player + goal).

    Returns:
        List[Position]: Positions in the order they were accepted.

    Raises:
        ValueError: If fewer than ``count`` free cells exist, since sampling
            would never terminate.
    """
    blocked = sum(1 for pos in excluded if in_bounds(pos, rows, cols))
    free = rows * cols - blocked
    if count > free:
        raise ValueError(f"Cannot place {count} entities on {free} free cells")

    placed: List[Position] = []
    while len(placed) < count:
        pos = random_position(rng, rows, cols)
        if pos in excluded or pos in placed:
            continue
        placed.append(pos)
    return placed


def place_respawn(
    rng: RandomSource,
    rows: int,
    cols: int,
    excluded: AbstractSet[Position],
    max_tries: int,
) -> Optional[Position]:
    """Try up to ``max_tries`` samples for a position outside ``excluded``.

    Returns ``None`` when every attempt collides; callers skip the spawn.
    """
    for _ in range(max_tries):
        pos = random_position(rng, rows, cols)
        if pos not in excluded:
            return pos
    return None
