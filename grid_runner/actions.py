"""Action enumeration and keyboard mapping.

``Action`` is the only player input the reducer understands. ``KEY_BINDINGS``
maps the first character of an input line (case-insensitive) to an action;
anything unmapped is rejected by the caller before a turn is consumed.
"""

from enum import StrEnum, auto
from typing import Dict, Optional


class Action(StrEnum):
    """String enum of player actions (one cardinal step each)."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_ACTIONS = [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]

KEY_BINDINGS: Dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
}


def parse_command(line: str) -> Optional[Action]:
    """Map an input line to an ``Action`` using only its first character.

    Returns ``None`` for an empty line or an unbound key.
    """
    if not line:
        return None
    return KEY_BINDINGS.get(line[0].lower())
