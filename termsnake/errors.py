"""
errors.py — Exception hierarchy.
"""


class SnakeError(Exception):
    """Base class for every error raised by termsnake."""


class InvariantError(SnakeError):
    """An internal-consistency fault: state the game rules make unreachable."""


class ScreenError(SnakeError):
    """The display could not be set up, written to, or restored."""
