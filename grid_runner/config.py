"""Startup configuration.

``GameConfig`` is the immutable bundle of board dimensions, spawn counts and
timing constants. It is built once (defaults or CLI flags) and carried on
every :class:`grid_runner.state.State`, so systems never consult process-wide
globals.
"""

from dataclasses import dataclass
from typing import Optional

DEFAULT_ROWS = 12
DEFAULT_COLS = 30
DEFAULT_NUM_STARS = 6
DEFAULT_NUM_ENEMIES = 3
DEFAULT_RESPAWN_INTERVAL = 12
DEFAULT_RESPAWN_MAX_TRIES = 50
DEFAULT_INVALID_INPUT_PAUSE = 0.25
DEFAULT_ALL_COLLECTED_PAUSE = 0.5


@dataclass(frozen=True)
class GameConfig:
    """Immutable game configuration.

    Attributes:
        rows: Board height in cells.
        cols: Board width in cells.
        num_stars: Target number of stars on the board.
        num_enemies: Number of enemies placed at startup.
        respawn_interval: A star respawn is attempted on turns divisible by this.
        respawn_max_tries: Sampling attempts per respawn before giving up.
        invalid_input_pause: Seconds to pause after an unrecognized key.
        all_collected_pause: Seconds to pause after the all-stars notice.
        seed: RNG seed; ``None`` seeds from the clock.

    Raises:
        ValueError: If dimensions, counts or timings are out of range.
    """

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    num_stars: int = DEFAULT_NUM_STARS
    num_enemies: int = DEFAULT_NUM_ENEMIES
    respawn_interval: int = DEFAULT_RESPAWN_INTERVAL
    respawn_max_tries: int = DEFAULT_RESPAWN_MAX_TRIES
    invalid_input_pause: float = DEFAULT_INVALID_INPUT_PAUSE
    all_collected_pause: float = DEFAULT_ALL_COLLECTED_PAUSE
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(
                f"Board must be at least 1x1, got {self.rows}x{self.cols}"
            )
        if self.cells < 2:
            raise ValueError("Board needs room for both the player and the goal")
        # Player and goal always occupy two distinct cells.
        free = self.cells - 2
        if not 0 <= self.num_stars <= free:
            raise ValueError(f"num_stars must be between 0 and {free}")
        if not 0 <= self.num_enemies <= free:
            raise ValueError(f"num_enemies must be between 0 and {free}")
        if self.respawn_interval < 1:
            raise ValueError("respawn_interval must be at least 1")
        if self.respawn_max_tries < 0:
            raise ValueError("respawn_max_tries must not be negative")
        if self.invalid_input_pause < 0 or self.all_collected_pause < 0:
            raise ValueError("Pause durations must not be negative")

    @property
    def cells(self) -> int:
        """Total number of board cells."""
        return self.rows * self.cols
