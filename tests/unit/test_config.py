from typing import Any, Dict

import pytest

from grid_runner.config import GameConfig


def test_defaults() -> None:
    config = GameConfig()
    assert (config.rows, config.cols) == (12, 30)
    assert config.num_stars == 6
    assert config.num_enemies == 3
    assert config.respawn_interval == 12
    assert config.respawn_max_tries == 50
    assert config.invalid_input_pause == 0.25
    assert config.all_collected_pause == 0.5
    assert config.seed is None
    assert config.cells == 360


def test_config_is_frozen() -> None:
    config = GameConfig()
    with pytest.raises(AttributeError):
        config.rows = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    "overrides",
    [
        {"rows": 0},
        {"cols": -1},
        {"rows": 1, "cols": 1},
        {"rows": 2, "cols": 2, "num_stars": 3},
        {"num_stars": -1},
        {"rows": 2, "cols": 2, "num_enemies": 3},
        {"respawn_interval": 0},
        {"respawn_max_tries": -1},
        {"invalid_input_pause": -0.1},
        {"all_collected_pause": -1.0},
    ],
)
def test_invalid_config_raises(overrides: Dict[str, Any]) -> None:
    with pytest.raises(ValueError):
        GameConfig(**overrides)


def test_counts_may_fill_every_free_cell() -> None:
    config = GameConfig(rows=2, cols=2, num_stars=2, num_enemies=2)
    assert config.num_stars == 2
