from grid_runner.components import Position
from grid_runner.systems.collectible import (
    ALL_COLLECTED_MESSAGE,
    all_collected_system,
    collectible_system,
)
from tests.test_utils import make_state


def test_player_collects_star_under_them() -> None:
    state = make_state(player=(6, 16), stars=[(6, 16), (1, 1)], score=3)
    new_state = collectible_system(state)
    assert new_state.score == 4
    assert set(new_state.stars) == {Position(1, 1)}


def test_no_star_no_change() -> None:
    state = make_state(player=(6, 15), stars=[(6, 16)])
    assert collectible_system(state) is state


def test_all_collected_notice_grants_no_bonus() -> None:
    state = make_state(stars=[], score=5)
    new_state = all_collected_system(state)
    assert new_state.message == ALL_COLLECTED_MESSAGE
    assert new_state.score == 5


def test_no_notice_while_stars_remain() -> None:
    state = make_state(stars=[(1, 1)])
    assert all_collected_system(state).message is None
