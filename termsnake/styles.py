"""
styles.py — Visual styles for the snake and the apple.

Both enumerations are cyclic: ``next()`` walks their declaration order and
wraps around.
"""

from __future__ import annotations

from enum import Enum

from .geometry import SegmentShape

_NS, _EW = SegmentShape.NORTH_SOUTH, SegmentShape.EAST_WEST
_NE, _NW = SegmentShape.NORTH_EAST, SegmentShape.NORTH_WEST
_SE, _SW = SegmentShape.SOUTH_EAST, SegmentShape.SOUTH_WEST


class _Cyclic(Enum):
    def next(self):
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]

    @classmethod
    def from_name(cls, name: str):
        """Look a member up by its case-insensitive name (e.g. 'sharp')."""
        return cls[name.upper()]

    @classmethod
    def names(cls) -> list[str]:
        return [m.name.lower() for m in cls]


# ─────────────────────────── Snake ───────────────────────────────
class SnakeStyle(_Cyclic):
    CURVED = "curved"
    SHARP  = "sharp"
    DOUBLE = "double"
    HEAVY  = "heavy"
    BLOCK  = "block"

    def glyph(self, shape: SegmentShape) -> str:
        return _SNAKE_GLYPHS[self][shape]


_SNAKE_GLYPHS = {
    SnakeStyle.CURVED: {_NS: "│", _EW: "─", _NE: "╰", _NW: "╯", _SE: "╭", _SW: "╮"},
    SnakeStyle.SHARP:  {_NS: "│", _EW: "─", _NE: "└", _NW: "┘", _SE: "┌", _SW: "┐"},
    SnakeStyle.DOUBLE: {_NS: "║", _EW: "═", _NE: "╚", _NW: "╝", _SE: "╔", _SW: "╗"},
    SnakeStyle.HEAVY:  {_NS: "┃", _EW: "━", _NE: "┗", _NW: "┛", _SE: "┏", _SW: "┓"},
    SnakeStyle.BLOCK:  dict.fromkeys(SegmentShape, "█"),
}


# ─────────────────────────── Apple ───────────────────────────────
class AppleStyle(_Cyclic):
    RING    = "O"
    DOT     = "●"
    DIAMOND = "◆"
    AT      = "@"
    STAR    = "*"

    @property
    def glyph(self) -> str:
        return self.value
