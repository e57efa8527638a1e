"""Interactive terminal driver.

``GameLoop`` owns the I/O side of the game: it draws each snapshot, reads one
line per turn, reports invalid keys and messages, and pauses where a message
needs to stay readable. All state transitions are delegated to
:func:`grid_runner.step.step` and :func:`grid_runner.step.check_overlap`.

Turn cycle::

    draw -> overlap check -> prompt -> read line -> step -> announce

An empty line re-prompts and an unknown key is rejected; neither consumes a
turn. End of input stops the loop without a win/lose announcement.
"""

import logging
import random
import sys
import time
from typing import Callable, Optional, TextIO

from grid_runner.actions import parse_command
from grid_runner.config import GameConfig
from grid_runner.levels.generator import generate
from grid_runner.renderer.text import TextRenderer
from grid_runner.state import State
from grid_runner.step import check_overlap, step
from grid_runner.types import RandomSource
from grid_runner.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)

PROMPT = "Move (W/A/S/D): "
INVALID_KEY_MESSAGE = "Invalid key. Use W/A/S/D."


class GameLoop:
    """Runs one game against text streams.

    Args:
        config: Immutable game configuration.
        rng: Random source; defaults to ``random.Random(config.seed)``.
        stdin: Line source for commands.
        stdout: Destination for frames and messages.
        sleep: Pause function (seconds); injectable for tests.
        clear: Clear the screen before every frame.
    """

    def __init__(
        self,
        config: GameConfig,
        rng: Optional[RandomSource] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
        clear: bool = True,
    ) -> None:
        self.config = config
        self.rng: RandomSource = (
            rng if rng is not None else random.Random(config.seed)
        )
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.sleep = sleep
        self.renderer = TextRenderer(self.stdout, clear=clear)

    def run(self, state: Optional[State] = None) -> State:
        """Play until a terminal state or end of input.

        Args:
            state: Starting snapshot; a fresh level is generated when omitted.

        Returns:
            State: The last state reached. Its status is ``RUNNING`` if input
                ran out before the game ended.
        """
        if state is None:
            state = generate(self.config, self.rng)

        while True:
            self.renderer.draw(state)

            state = check_overlap(state)
            if is_terminal_state(state):
                self._announce(state.message)
                break

            self._write(PROMPT)
            line = self.stdin.readline()
            if not line:
                logger.debug("Input exhausted on turn %d", state.turn)
                break
            line = line.rstrip("\r\n")
            if not line:
                continue

            action = parse_command(line)
            if action is None:
                self._write(INVALID_KEY_MESSAGE + "\n")
                self.sleep(self.config.invalid_input_pause)
                continue

            state = step(state, action, self.rng)
            if is_terminal_state(state):
                self.renderer.draw(state)
                self._announce(state.message)
                break

            if state.message:
                self._announce(state.message)
                self.sleep(self.config.all_collected_pause)

        logger.debug("Game over: %s", state.description)
        self._write(f"\nFinal score: {state.score}   Turns: {state.turn}\n")
        self._write("Thanks for playing.\n")
        return state

    def _announce(self, message: Optional[str]) -> None:
        if message:
            self._write(f"\n{message}\n")

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()
