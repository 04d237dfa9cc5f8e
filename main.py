"""
main.py — Entry point.

Run with:
    python main.py [--width N] [--height N] [--delay MS] [--wrap] ...
    python main.py --window        # pygame window instead of the terminal

Requires:
    pip install blessed pygame
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from termsnake.config import (
    BOARD_W, BOARD_H, BOARD_MAX, DELAY_MS, DELAY_MIN_MS, DELAY_MAX_MS, WINDOW_MARGIN,
)
from termsnake.controller import GameController
from termsnake.errors import ScreenError
from termsnake.model import GameState
from termsnake.styles import AppleStyle, SnakeStyle

logger = logging.getLogger("termsnake")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Snake in the terminal. Keys: hjkl/arrows steer, 1-4 resize, "
                    "5/6 slower/faster, 7/8 styles, 9 wrap, 0 color, q quit.",
    )
    parser.add_argument("--width", type=int, default=BOARD_W, help="Board width in cells")
    parser.add_argument("--height", type=int, default=BOARD_H, help="Board height in cells")
    parser.add_argument("--delay", type=int, default=DELAY_MS, help="Tick delay in milliseconds")
    parser.add_argument("--wrap", action="store_true", help="Wrap around the walls")
    parser.add_argument("--no-color", dest="color", action="store_false", help="Draw without colors")
    parser.add_argument("--snake-style", choices=SnakeStyle.names(), default="curved")
    parser.add_argument("--apple-style", choices=AppleStyle.names(), default="ring")
    parser.add_argument("--seed", type=int, default=None, help="Seed for apple placement")
    parser.add_argument("--window", action="store_true", help="Play in a pygame window")
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log threshold when --log-file is given",
    )
    return parser.parse_args(argv)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def build_state(args: argparse.Namespace) -> GameState:
    """Initial state from the command line; sizes are clamped, never rejected."""
    return GameState(
        # The starting body spans two columns.
        width=_clamp(args.width, 2, BOARD_MAX),
        height=_clamp(args.height, 1, BOARD_MAX),
        delay_ms=_clamp(args.delay, DELAY_MIN_MS, DELAY_MAX_MS),
        wrap=args.wrap,
        color=args.color,
        snake_style=SnakeStyle.from_name(args.snake_style),
        apple_style=AppleStyle.from_name(args.apple_style),
        rng=random.Random(args.seed),
    )


def build_screen(args: argparse.Namespace, state: GameState):
    if args.window:
        from termsnake.window import WindowScreen
        return WindowScreen(state.width + WINDOW_MARGIN, state.height + WINDOW_MARGIN)
    from termsnake.terminal import TerminalScreen
    return TerminalScreen()


def setup_logging(args: argparse.Namespace) -> None:
    # The terminal is the game board, so only problems reach stderr.
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s [%(levelname)s] %(threadName)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args)

    state = build_state(args)
    logger.info(
        "starting %dx%d board, %d ms ticks, wrap=%s, color=%s, seed=%s",
        state.width, state.height, state.delay_ms, state.wrap, state.color, args.seed,
    )
    screen = build_screen(args, state)
    try:
        return GameController(state, screen).run()
    except ScreenError as exc:
        logger.debug("screen failure", exc_info=True)
        try:
            screen.close()
        except ScreenError:
            logger.warning("could not restore the screen")
        print(f"termsnake: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
