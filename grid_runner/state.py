"""Core immutable ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the
whole game at a single turn. All systems are pure functions that take a
previous ``State`` plus inputs (an ``Action`` and a random source) and return
a *new* ``State``; nothing is mutated in place. This keeps the turn logic
headless and easy to test: the terminal driver only reads snapshots.

Design notes:

* Stars are a persistent set (``pyrsistent.PSet``) so duplicates cannot
    exist. Enemies are a persistent vector (``pyrsistent.PVector``) because
    their order drives the random draws and they may legitimately stack.
* ``win`` / ``lose`` flags are mutually exclusive terminal markers. The
    reducer short-circuits on terminal states.
* ``message`` carries the text produced by the latest transition (victory,
    defeat, all-stars notice) and is cleared at the start of every step.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pyrsistent import PSet, PVector, pmap, pset, pvector
from pyrsistent.typing import PMap

from grid_runner.components import Position
from grid_runner.config import GameConfig
from grid_runner.types import GameStatus


@dataclass(frozen=True)
class State:
    """Immutable game snapshot.

    Attributes:
        config (GameConfig): Board dimensions, spawn counts and timings.
        player (Position): Current player position.
        goal (Position): Fixed goal position.
        stars (PSet[Position]): Remaining collectible stars.
        enemies (PVector[Position]): Enemy positions in placement order.
        turn (int): Completed turn counter (0-based).
        score (int): Stars collected so far.
        win (bool): True once the player reached the goal.
        lose (bool): True once the player met an enemy.
        message (str | None): Text produced by the latest transition.
    """

    config: GameConfig
    player: Position
    goal: Position
    stars: PSet[Position] = pset()
    enemies: PVector[Position] = pvector()

    # Status
    turn: int = 0
    score: int = 0
    win: bool = False
    lose: bool = False
    message: Optional[str] = None

    @property
    def width(self) -> int:
        return self.config.cols

    @property
    def height(self) -> int:
        return self.config.rows

    @property
    def status(self) -> GameStatus:
        """``GameStatus`` derived from the terminal flags."""
        if self.win:
            return GameStatus.WON
        if self.lose:
            return GameStatus.LOST
        return GameStatus.RUNNING

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-empty fields.

        Returns a persistent map of the populated fields (empty collections
        and ``None`` are skipped). Used for debug logging.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            if isinstance(value, (PSet, PVector)) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
