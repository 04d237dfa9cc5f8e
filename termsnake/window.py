"""
window.py — Character screen drawn in a pygame window.

Same protocol as TerminalScreen.  Any thread may draw: glyphs go onto an
off-screen frame, and flush() hands a copy of it to the key-reading thread
through a custom event.  That thread is the only one touching the display,
and it resizes the window to fit each frame, so live board resizes stay
visible.  Closing the window reads as the quit key.
"""

from __future__ import annotations

import logging
import threading

import pygame

from .config import WINDOW_CELL, WINDOW_FONT, WINDOW_BG, WINDOW_FG, WINDOW_RGB, WINDOW_PAD
from .errors import ScreenError

logger = logging.getLogger(__name__)


def _key_token(event) -> str:
    """Typed character when there is one (so Shift-Q is "Q"), else the key name."""
    text = event.dict.get("unicode", "")
    if len(text) == 1 and text.isprintable():
        return text
    return pygame.key.name(event.key)


class WindowScreen:
    """A cols x rows grid of character cells."""

    def __init__(self, cols: int, rows: int, cell: int = WINDOW_CELL):
        self.cols = cols
        self.rows = rows
        self.cell = cell
        self._guard = threading.Lock()
        self._glyphs: dict[tuple[str, tuple], pygame.Surface] = {}
        self._open = False

    # ── Lifetime ─────────────────────────────────────────────────
    def open(self) -> None:
        size = (self.cols * self.cell, self.rows * self.cell)
        try:
            pygame.init()
            self.display = pygame.display.set_mode(size)
        except pygame.error as exc:
            raise ScreenError(f"cannot open window: {exc}") from exc
        pygame.display.set_caption("termsnake")
        self.font = self._load_font()
        self._frame = pygame.Surface(size)
        self._ready = self._frame.copy()
        self._extent = (0, 0)
        self._redraw = pygame.event.custom_type()
        self._open = True
        logger.debug("window is %dx%d cells", self.cols, self.rows)

    def close(self) -> None:
        with self._guard:
            if not self._open:
                return
            self._open = False
            pygame.quit()

    def _load_font(self) -> pygame.font.Font:
        try:
            return pygame.font.SysFont(WINDOW_FONT, self.cell)
        except Exception:
            return pygame.font.SysFont(None, self.cell)

    # ── Drawing ──────────────────────────────────────────────────
    def clear(self) -> None:
        self._frame.fill(WINDOW_BG)
        self._extent = (0, 0)

    def put(self, x: int, y: int, char: str, color: str | None = None) -> None:
        rgb = WINDOW_RGB.get(color, WINDOW_FG)
        glyph = self._glyphs.get((char, rgb))
        if glyph is None:
            glyph = self._glyphs[(char, rgb)] = self.font.render(char, True, rgb)
        self._cover(x + 1, y + 1)
        self._frame.blit(glyph, (x * self.cell, y * self.cell))

    def _cover(self, cols: int, rows: int) -> None:
        """Track the drawn extent and grow the frame to hold *cols* x *rows* cells."""
        self._extent = (max(self._extent[0], cols), max(self._extent[1], rows))
        width, height = self._frame.get_size()
        need = (
            max(width, (cols + WINDOW_PAD) * self.cell),
            max(height, (rows + WINDOW_PAD) * self.cell),
        )
        if need != (width, height):
            frame = pygame.Surface(need)
            frame.fill(WINDOW_BG)
            frame.blit(self._frame, (0, 0))
            self._frame = frame

    def write(self, x: int, y: int, text: str, color: str | None = None) -> None:
        for i, char in enumerate(text):
            self.put(x + i, y, char, color)

    def flush(self) -> None:
        with self._guard:
            if not self._open:
                return
            cols, rows = (n + WINDOW_PAD for n in self._extent)
            self._ready = self._frame.subsurface((0, 0, cols * self.cell, rows * self.cell)).copy()
            pygame.event.post(pygame.event.Event(self._redraw))

    # ── Input ────────────────────────────────────────────────────
    def read_key(self) -> str:
        """Block until a key is pressed, presenting frames meanwhile."""
        while True:
            try:
                event = pygame.event.wait()
            except pygame.error as exc:
                raise ScreenError(f"window closed: {exc}") from exc
            if event.type == pygame.QUIT:
                return "q"
            if event.type == pygame.KEYDOWN:
                return _key_token(event)
            if event.type == self._redraw:
                self._present()

    def _present(self) -> None:
        with self._guard:
            if not self._open:
                return
            try:
                if self.display.get_size() != self._ready.get_size():
                    self.display = pygame.display.set_mode(self._ready.get_size())
                    logger.debug("window resized to %dx%d px", *self._ready.get_size())
                self.display.blit(self._ready, (0, 0))
                pygame.display.flip()
            except pygame.error as exc:
                raise ScreenError(f"cannot draw window: {exc}") from exc
