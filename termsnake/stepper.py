"""
stepper.py — The fixed-tick simulation loop.

States are Running and Dead.  Each tick re-reads every tunable from the
shared GameState, so changes made by the input thread apply on the very next
tick.  The lock is taken three times per tick (read inputs, mutate + render,
read delay) and is never held across the sleep.
"""

from __future__ import annotations

import logging
import time

from .config import STEP_DIED
from .geometry import next_cell
from .model import GameState

logger = logging.getLogger(__name__)


class Simulation:
    """Drives one GameState until the snake dies."""

    def __init__(self, state: GameState, view, sleep=time.sleep):
        self.state = state
        self.view = view
        self._sleep = sleep
        self.ticks: int = 0

    def run(self) -> None:
        """Tick, render and sleep until the snake dies."""
        while self.tick() != STEP_DIED:
            with self.state.lock:
                delay = self.state.delay
            self._sleep(delay)

    def tick(self) -> str:
        """Advance one cell.  Returns STEP_MOVED, STEP_ATE or STEP_DIED."""
        state = self.state
        with state.lock:
            head, board = state.head, state.board
            direction, wrap = state.direction, state.wrap
            state.heading = direction

        candidate = next_cell(head, direction, board, wrap)

        with state.lock:
            self.ticks += 1
            if candidate is None or state.occupies(candidate):
                state.die(direction)
                self.view.render(state)
                logger.info(
                    "snake died on tick %d hitting %s at length %d",
                    self.ticks, "the wall" if candidate is None else "itself",
                    len(state.body),
                )
                return STEP_DIED

            outcome = state.advance(candidate, direction)
            self.view.render(state)
        return outcome
