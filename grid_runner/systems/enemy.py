"""Random enemy movement system.

Each enemy, in order, draws one of five moves (up, down, left, right, stay).
A move is applied only if it stays on the board and avoids the goal cell.
Enemies ignore the player and each other, so two enemies may end a turn on
the same cell.
"""

from dataclasses import replace

from grid_runner.moves import random_enemy_move
from grid_runner.state import State
from grid_runner.types import RandomSource
from grid_runner.utils.grid import is_in_bounds


def enemy_movement_system(state: State, rng: RandomSource) -> State:
    """Advance every enemy by one random step."""
    enemies = state.enemies
    for index, pos in enumerate(state.enemies):
        next_pos = random_enemy_move(pos, rng)
        if is_in_bounds(state, next_pos) and next_pos != state.goal:
            enemies = enemies.set(index, next_pos)
    return replace(state, enemies=enemies)
