"""
controller.py — Controller layer.

Responsibilities:
  - Translate key tokens into GameState commands (InputHandler).
  - Run the two actors: the simulation on the calling thread, the key reader
    on a daemon thread (GameController).
  - Own the screen's lifetime: open before the first frame, close exactly
    once whichever actor ends the game.

Know nothing about rendering details (that's the View's job) and nothing
about game rules (that's the Model's job).
"""

from __future__ import annotations

import logging
import os
import threading

from .config import (
    KEY_BINDINGS, DELAY_STEP,
    ACTION_QUIT, ACTION_NORTH, ACTION_SOUTH, ACTION_WEST, ACTION_EAST,
    ACTION_WIDTH_DEC, ACTION_WIDTH_INC, ACTION_HEIGHT_DEC, ACTION_HEIGHT_INC,
    ACTION_SLOWER, ACTION_FASTER, ACTION_SNAKE_STYLE, ACTION_APPLE_STYLE,
    ACTION_WRAP, ACTION_COLOR,
)
from .errors import ScreenError
from .geometry import Direction
from .model import GameState
from .stepper import Simulation
from .view import GameView

logger = logging.getLogger(__name__)

_STEER = {
    ACTION_NORTH: Direction.NORTH,
    ACTION_SOUTH: Direction.SOUTH,
    ACTION_WEST:  Direction.WEST,
    ACTION_EAST:  Direction.EAST,
}

# action -> (command, redraw immediately)
_COMMANDS = {
    ACTION_WIDTH_DEC:   (lambda s: s.resize(dw=-1), True),
    ACTION_WIDTH_INC:   (lambda s: s.resize(dw=1), True),
    ACTION_HEIGHT_DEC:  (lambda s: s.resize(dh=-1), True),
    ACTION_HEIGHT_INC:  (lambda s: s.resize(dh=1), True),
    ACTION_SLOWER:      (lambda s: s.change_delay(DELAY_STEP), False),
    ACTION_FASTER:      (lambda s: s.change_delay(-DELAY_STEP), False),
    ACTION_SNAKE_STYLE: (GameState.cycle_snake_style, True),
    ACTION_APPLE_STYLE: (GameState.cycle_apple_style, True),
    ACTION_WRAP:        (GameState.toggle_wrap, False),
    ACTION_COLOR:       (GameState.toggle_color, True),
}


# ───────────────────────── InputHandler ──────────────────────────
class InputHandler:
    """
    Applies one key at a time to the shared state.

    Every branch holds ``state.lock`` for its whole span, render included, so
    the simulation never draws a half-applied change.
    """

    def __init__(self, state: GameState, view: GameView, on_quit):
        self.state = state
        self.view = view
        self.on_quit = on_quit

    def handle(self, key: str) -> bool:
        """Apply *key*.  Returns False once the player has quit."""
        action = KEY_BINDINGS.get(key)
        if action is None:
            return True

        if action == ACTION_QUIT:
            logger.info("quit requested")
            self.on_quit()
            return False

        if action in _STEER:
            with self.state.lock:
                self.state.steer(_STEER[action])
            return True

        command, redraw = _COMMANDS[action]
        with self.state.lock:
            command(self.state)
            if redraw:
                self.view.render(self.state)
        return True


# ──────────────────────── GameController ─────────────────────────
class GameController:
    """
    Owns the game loop.
    Glues Model <-> View <-> Screen without them knowing about each other.
    """

    def __init__(self, state: GameState, screen, exit_process=os._exit):
        self.state = state
        self.screen = screen
        self.view = GameView(screen)
        self.simulation = Simulation(state, self.view)
        self.input = InputHandler(state, self.view, on_quit=self._quit)
        self._exit = exit_process
        self._finished = threading.Event()

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> int:
        """Play one game on the calling thread.  Returns the exit code."""
        self.screen.open()
        try:
            with self.state.lock:
                self.view.render(self.state)

            reader = threading.Thread(target=self._read_keys, name="input", daemon=True)
            reader.start()

            self.simulation.run()

            with self.state.lock:
                self.view.game_over(self.state)
                logger.info("game over after %d ticks", self.simulation.ticks)
        finally:
            self._finished.set()
            self.screen.close()
        return 0

    # ── Input actor ───────────────────────────────────────────────
    def _read_keys(self) -> None:
        try:
            while self.input.handle(self.screen.read_key()):
                pass
        except ScreenError:
            if self._finished.is_set():
                return
            logger.exception("input thread lost the screen")
            self.screen.close()
            self._terminate(1)

    def _quit(self) -> None:
        # Wait out any frame in progress, then leave without the simulation.
        with self.state.lock:
            self.screen.close()
            self._terminate(0)

    def _terminate(self, code: int) -> None:
        logging.shutdown()
        self._exit(code)
