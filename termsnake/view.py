"""
view.py — View layer.

Projects a GameState onto a character screen (TerminalScreen or
WindowScreen).  The view knows nothing about threads or input; callers hold
the state lock while it draws so a frame never mixes two states.

Public API:
    GameView(screen)        — bind to a character screen
    view.render(state)      — draw the current frame and flush it
    view.game_over(state)   — print the game-over line under the board
"""

from __future__ import annotations

from .config import APPLE_COLOR, SNAKE_COLOR, TEXT_COLOR, GAME_OVER_TEXT
from .geometry import SegmentShape
from .model import GameState


class GameView:
    """Renders the complete game frame from a GameState."""

    def __init__(self, screen):
        self.screen = screen

    # ── Main entry ───────────────────────────────────────────────
    def render(self, state: GameState) -> None:
        self.screen.clear()
        self._draw_apple(state)
        self._draw_snake(state)
        self._draw_border(state)
        self.screen.flush()

    def game_over(self, state: GameState) -> None:
        color = TEXT_COLOR if state.color else None
        self.screen.write(0, state.height + 1, GAME_OVER_TEXT, color)
        self.screen.flush()

    # ── Pieces ───────────────────────────────────────────────────
    def _draw_apple(self, state: GameState) -> None:
        x, y = state.apple
        color = APPLE_COLOR if state.color else None
        self.screen.put(x, y, state.apple_style.glyph, color)

    def _draw_snake(self, state: GameState) -> None:
        color = SNAKE_COLOR if state.color else None
        for seg in state.body:
            self.screen.put(seg.x, seg.y, state.snake_style.glyph(seg.shape), color)

    def _draw_border(self, state: GameState) -> None:
        style, w, h = state.snake_style, state.width, state.height
        horizontal = style.glyph(SegmentShape.EAST_WEST)
        vertical = style.glyph(SegmentShape.NORTH_SOUTH)
        self.screen.write(0, h, horizontal * w)
        for y in range(h):
            self.screen.put(w, y, vertical)
        self.screen.put(w, h, style.glyph(SegmentShape.NORTH_WEST))
