"""Common type aliases, enumerations and capability protocols.

``RandomSource`` is the single extension point through which placement and
enemy movement draw randomness. ``random.Random`` satisfies it; tests inject
scripted sequences instead.
"""

from enum import StrEnum, auto
from typing import Protocol


class GameStatus(StrEnum):
    """Coarse game state exposed to the loop and renderer."""

    RUNNING = auto()
    WON = auto()
    LOST = auto()


class RandomSource(Protocol):
    """Minimal random capability (matches ``random.Random.randint``)."""

    def randint(self, a: int, b: int) -> int:
        """Return an integer N such that ``a <= N <= b``."""
        ...
