import io
import random
from typing import List, Tuple

from grid_runner.components import Position
from grid_runner.config import GameConfig
from grid_runner.game_loop import INVALID_KEY_MESSAGE, PROMPT, GameLoop
from grid_runner.state import State
from grid_runner.systems.collectible import ALL_COLLECTED_MESSAGE
from grid_runner.systems.terminal import BUMPED_MESSAGE, CAUGHT_MESSAGE, WIN_MESSAGE
from grid_runner.types import GameStatus, RandomSource
from tests.test_utils import ScriptedRandom, make_state


class Recorder:
    def __init__(self) -> None:
        self.pauses: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.pauses.append(seconds)


def play(
    state: State, commands: str, rng: RandomSource
) -> Tuple[State, str, io.StringIO, Recorder]:
    stdin = io.StringIO(commands)
    stdout = io.StringIO()
    sleep = Recorder()
    loop = GameLoop(
        state.config, rng=rng, stdin=stdin, stdout=stdout, sleep=sleep, clear=False
    )
    final = loop.run(state)
    return final, stdout.getvalue(), stdin, sleep


def test_win_stops_reading_input() -> None:
    state = make_state(player=(5, 5), goal=(5, 6), turn=1)
    final, out, stdin, _ = play(state, "d\nd\n", ScriptedRandom([]))
    assert final.status == GameStatus.WON
    assert WIN_MESSAGE in out
    assert out.count(PROMPT) == 1
    assert stdin.read() == "d\n"
    assert out.endswith("\nFinal score: 0   Turns: 1\nThanks for playing.\n")


def test_end_of_input_is_a_quiet_exit() -> None:
    state = make_state(turn=1)
    final, out, _, _ = play(state, "", ScriptedRandom([]))
    assert final.status == GameStatus.RUNNING
    assert WIN_MESSAGE not in out
    assert "Game over" not in out
    assert "Final score: 0   Turns: 1" in out


def test_empty_line_does_not_consume_turn() -> None:
    state = make_state(turn=1)
    final, out, _, _ = play(state, "\n\n", ScriptedRandom([]))
    assert final.turn == 1
    assert out.count(PROMPT) == 3


def test_invalid_key_is_reported_and_retried() -> None:
    state = make_state(player=(6, 15), turn=1)
    final, out, _, sleep = play(state, "x\nq\n", ScriptedRandom([]))
    assert out.count(INVALID_KEY_MESSAGE) == 2
    assert sleep.pauses == [0.25, 0.25]
    assert final.turn == 1
    assert final.player == Position(6, 15)


def test_uppercase_keys_move() -> None:
    state = make_state(player=(6, 15), stars=[(1, 1)], turn=1)
    final, _, _, _ = play(state, "W\nA\n", ScriptedRandom([]))
    assert final.player == Position(5, 14)
    assert final.turn == 3


def test_spawn_overlap_loses_without_prompt() -> None:
    state = make_state(player=(2, 2), enemies=[(2, 2)])
    final, out, _, _ = play(state, "d\n", ScriptedRandom([]))
    assert final.status == GameStatus.LOST
    assert BUMPED_MESSAGE in out
    assert PROMPT not in out


def test_caught_by_enemy() -> None:
    state = make_state(player=(4, 4), enemies=[(4, 6)], stars=[(1, 1)], turn=1)
    final, out, stdin, _ = play(state, "d\nd\n", ScriptedRandom([2]))
    assert final.status == GameStatus.LOST
    assert CAUGHT_MESSAGE in out
    assert stdin.read() == "d\n"
    # one frame before the move, one for the defeat
    assert out.count("Score: 0    Turns: 1") == 2


def test_all_collected_notice_pauses() -> None:
    state = make_state(player=(6, 15), stars=[(6, 16)], turn=1)
    final, out, _, sleep = play(state, "d\n", ScriptedRandom([]))
    assert final.score == 1
    assert ALL_COLLECTED_MESSAGE in out
    assert sleep.pauses == [0.5]


def test_generated_game_runs_to_completion() -> None:
    config = GameConfig(rows=5, cols=8, seed=11)
    commands = "wasd\n" * 10 + "d\ns\na\nw\n" * 50
    stdin = io.StringIO(commands)
    stdout = io.StringIO()
    loop = GameLoop(
        config,
        rng=random.Random(11),
        stdin=stdin,
        stdout=stdout,
        sleep=lambda _: None,
    )
    final = loop.run()
    assert stdout.getvalue().count("\x1b[2J") >= 1
    assert "Thanks for playing." in stdout.getvalue()
    assert final.score >= 0
