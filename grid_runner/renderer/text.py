"""Plain-text board renderer.

The board is a derived view: it is rebuilt from entity positions on every
render and never stored. Layers are stamped goal, stars, enemies, player, so
the player glyph wins any overlap.
"""

from enum import StrEnum, auto
from typing import Dict, List, Optional, TextIO

from grid_runner.components import Position
from grid_runner.state import State

CLEAR_SCREEN = "\x1b[2J\x1b[H"
CONTROLS_HINT = (
    "Controls: W A S D + Enter. Reach 'G' to win. Collect '*' for +1. Avoid 'E'."
)


class Tile(StrEnum):
    """Drawable board layers."""

    EMPTY = auto()
    GOAL = auto()
    STAR = auto()
    ENEMY = auto()
    PLAYER = auto()
    BORDER = auto()


GlyphMap = Dict[Tile, str]

DEFAULT_GLYPH_MAP: GlyphMap = {
    Tile.EMPTY: " ",
    Tile.GOAL: "G",
    Tile.STAR: "*",
    Tile.ENEMY: "E",
    Tile.PLAYER: "@",
    Tile.BORDER: "|",
}


def build_board(state: State, glyphs: Optional[GlyphMap] = None) -> List[str]:
    """Compose the board rows for ``state``.

    Returns:
        List[str]: ``state.height`` strings of ``state.width`` characters.
    """
    glyphs = glyphs or DEFAULT_GLYPH_MAP
    grid = [[glyphs[Tile.EMPTY]] * state.width for _ in range(state.height)]

    def stamp(pos: Position, tile: Tile) -> None:
        grid[pos.row][pos.col] = glyphs[tile]

    stamp(state.goal, Tile.GOAL)
    for star in state.stars:
        stamp(star, Tile.STAR)
    for enemy in state.enemies:
        stamp(enemy, Tile.ENEMY)
    stamp(state.player, Tile.PLAYER)
    return ["".join(row) for row in grid]


def render(state: State, glyphs: Optional[GlyphMap] = None) -> str:
    """Framed board followed by the score/turn line and the controls hint."""
    glyphs = glyphs or DEFAULT_GLYPH_MAP
    border = glyphs[Tile.BORDER]
    lines = [f"{border}{row}{border}" for row in build_board(state, glyphs)]
    lines.append("")
    lines.append(f"Score: {state.score}    Turns: {state.turn}")
    lines.append(CONTROLS_HINT)
    return "\n".join(lines)


class TextRenderer:
    """Writes rendered frames to a text stream.

    Args:
        out: Destination stream (usually ``sys.stdout``).
        clear: Emit an ANSI clear-screen sequence before every frame.
        glyphs: Optional glyph overrides.
    """

    def __init__(
        self, out: TextIO, clear: bool = True, glyphs: Optional[GlyphMap] = None
    ) -> None:
        self.out = out
        self.clear = clear
        self.glyphs = glyphs or DEFAULT_GLYPH_MAP

    def draw(self, state: State) -> None:
        if self.clear:
            self.out.write(CLEAR_SCREEN)
        self.out.write(render(state, self.glyphs) + "\n")
        self.out.flush()
