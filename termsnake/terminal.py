"""
terminal.py — Character screen on a real terminal.

Uses blessed for cbreak input, cursor control, colours and key decoding.
Output is buffered per frame and written with one flush, so the reader
thread never sees half a frame.
"""

from __future__ import annotations

import contextlib
import logging
import sys
import threading

from blessed import Terminal

from .errors import ScreenError

logger = logging.getLogger(__name__)


def key_token(keystroke) -> str:
    """Normalise a blessed Keystroke: 'KEY_UP' -> 'up'; characters stay as typed."""
    if keystroke.is_sequence:
        name = keystroke.name or ""
        return name[4:].lower() if name.startswith("KEY_") else name.lower()
    return str(keystroke)


class TerminalScreen:
    """Raw-mode terminal with absolute positioning."""

    def __init__(self, term: Terminal | None = None, stream=None):
        self.term = term or Terminal()
        self.stream = stream or sys.stdout
        self._buffer: list[str] = []
        self._modes = contextlib.ExitStack()
        self._guard = threading.Lock()
        self._open = False

    # ── Lifetime ─────────────────────────────────────────────────
    def open(self) -> None:
        try:
            self._modes.enter_context(self.term.cbreak())
            self._modes.enter_context(self.term.hidden_cursor())
        except OSError as exc:
            self._modes.close()
            raise ScreenError(f"cannot enter raw mode: {exc}") from exc
        self._open = True
        logger.debug("terminal is %dx%d", self.term.width, self.term.height)

    def close(self) -> None:
        """Restore the terminal.  Safe to call twice and from either thread."""
        with self._guard:
            if not self._open:
                return
            self._open = False
            try:
                self._modes.close()
                self.stream.write("\n")
                self.stream.flush()
            except OSError as exc:
                raise ScreenError(f"cannot restore terminal: {exc}") from exc

    # ── Drawing ──────────────────────────────────────────────────
    def clear(self) -> None:
        self._buffer = [self.term.home + self.term.clear]

    def put(self, x: int, y: int, char: str, color: str | None = None) -> None:
        self.write(x, y, char, color)

    def write(self, x: int, y: int, text: str, color: str | None = None) -> None:
        if color:
            text = getattr(self.term, f"bright_{color}")(text)
        self._buffer.append(self.term.move_xy(x, y) + text)

    def flush(self) -> None:
        frame, self._buffer = "".join(self._buffer), []
        with self._guard:
            if not self._open:
                return
            try:
                self.stream.write(frame)
                self.stream.flush()
            except OSError as exc:
                raise ScreenError(f"cannot write to terminal: {exc}") from exc

    # ── Input ────────────────────────────────────────────────────
    def read_key(self) -> str:
        """Block until a key is pressed."""
        return key_token(self.term.inkey())
