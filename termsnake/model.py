"""
model.py — Model layer.

Owns ALL game state and rules. Zero rendering, zero input handling.

Classes:
    Segment     — one occupied body cell with its shape and facing
    GameState   — the single shared aggregate: body, board, apple, tunables

GameState is shared by the input thread and the simulation thread.  Its
methods never lock by themselves: every caller holds ``state.lock`` for the
whole read-compute-mutate(-render) span and releases it before blocking.
"""

from __future__ import annotations

import logging
import random
import threading
from collections import deque
from dataclasses import dataclass

from .config import (
    BOARD_W, BOARD_H, BOARD_MIN, BOARD_MAX,
    DELAY_MS, DELAY_MIN_MS, DELAY_MAX_MS,
    START_BODY, START_APPLE,
    STEP_MOVED, STEP_ATE,
)
from .geometry import Direction, SegmentShape, shape_from_single, shape_from_transition
from .styles import AppleStyle, SnakeStyle

logger = logging.getLogger(__name__)


# ──────────────────────────── Segment ────────────────────────────
@dataclass
class Segment:
    """
    One body cell.

    ``facing`` is the direction the snake was moving when this cell became
    the head; ``shape`` is rewritten once, when the next head is added.
    """
    x: int
    y: int
    shape: SegmentShape
    facing: Direction

    @property
    def cell(self) -> tuple[int, int]:
        return self.x, self.y


# ─────────────────────────── GameState ───────────────────────────
class GameState:
    """Top-level model.  Mutated in place for the life of the process."""

    def __init__(
        self,
        width: int = BOARD_W,
        height: int = BOARD_H,
        delay_ms: int = DELAY_MS,
        wrap: bool = False,
        color: bool = True,
        snake_style: SnakeStyle = SnakeStyle.CURVED,
        apple_style: AppleStyle = AppleStyle.RING,
        rng: random.Random | None = None,
    ):
        self.lock = threading.Lock()
        self.rng = rng or random.Random()

        self.direction: Direction = Direction.EAST
        # Direction of the move in flight, committed when a tick reads its inputs.
        self.heading: Direction = self.direction
        self.body: deque[Segment] = deque(
            Segment(x, y, shape_from_single(self.direction), self.direction)
            for x, y in START_BODY
        )
        self.head: tuple[int, int] = self.body[-1].cell
        self.apple: tuple[int, int] = START_APPLE
        self.alive: bool = True

        self.width = width
        self.height = height
        self.delay_ms = delay_ms
        self.wrap = wrap
        self.color = color
        self.snake_style = snake_style
        self.apple_style = apple_style

    # ── Accessors ────────────────────────────────────────────────
    @property
    def board(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def delay(self) -> float:
        """Tick delay in seconds."""
        return self.delay_ms / 1000.0

    @property
    def newest(self) -> Segment:
        return self.body[-1]

    def occupies(self, cell: tuple[int, int]) -> bool:
        return any(seg.cell == cell for seg in self.body)

    # ── Simulation ───────────────────────────────────────────────
    def advance(self, cell: tuple[int, int], direction: Direction) -> str:
        """
        Move the head onto *cell*, which the caller has already checked is
        free and on the board.  Returns STEP_ATE or STEP_MOVED.
        """
        self.head = cell
        self._close_head(direction)
        self.body.append(Segment(cell[0], cell[1], shape_from_single(direction), direction))

        if cell == self.apple:
            self.relocate_apple()
            return STEP_ATE
        self.body.popleft()
        return STEP_MOVED

    def die(self, direction: Direction) -> None:
        """Final transition: close the head's shape and stop."""
        self._close_head(direction)
        self.alive = False

    def relocate_apple(self) -> None:
        # The body is not excluded; the apple may land under the snake.
        self.apple = (self.rng.randrange(self.width), self.rng.randrange(self.height))
        logger.debug("apple moved to %s", self.apple)

    def _close_head(self, direction: Direction) -> None:
        seg = self.newest
        seg.shape = shape_from_transition(seg.facing, direction)

    # ── Commands (input thread) ──────────────────────────────────
    def steer(self, direction: Direction) -> bool:
        """
        Change direction unless it would turn straight back on the neck.

        Checked against the newest segment's facing and against the move a
        tick has already committed to but not yet applied.
        """
        if direction.is_opposite(self.newest.facing) or direction.is_opposite(self.heading):
            logger.debug("ignored reversal to %s", direction.name)
            return False
        self.direction = direction
        return True

    def resize(self, dw: int = 0, dh: int = 0) -> bool:
        width, height = self.width + dw, self.height + dh
        if not (BOARD_MIN <= width <= BOARD_MAX and BOARD_MIN <= height <= BOARD_MAX):
            logger.debug("ignored resize to %dx%d", width, height)
            return False
        self.width, self.height = width, height
        logger.debug("board is now %dx%d", width, height)
        return True

    def change_delay(self, delta_ms: int) -> bool:
        delay = self.delay_ms + delta_ms
        if not DELAY_MIN_MS <= delay <= DELAY_MAX_MS:
            logger.debug("ignored delay change to %d ms", delay)
            return False
        self.delay_ms = delay
        logger.debug("tick delay is now %d ms", delay)
        return True

    def cycle_snake_style(self) -> None:
        self.snake_style = self.snake_style.next()
        logger.debug("snake style is now %s", self.snake_style.name)

    def cycle_apple_style(self) -> None:
        self.apple_style = self.apple_style.next()
        logger.debug("apple style is now %s", self.apple_style.name)

    def toggle_wrap(self) -> None:
        self.wrap = not self.wrap
        logger.debug("wrap %s", "on" if self.wrap else "off")

    def toggle_color(self) -> None:
        self.color = not self.color
        logger.debug("color %s", "on" if self.color else "off")
