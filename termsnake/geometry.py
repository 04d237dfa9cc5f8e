"""
geometry.py — Directions, segment shapes and grid stepping.

Pure functions only: no state, no locking, no rendering.

    Direction       — the four compass moves, each a (dx, dy) unit step
    SegmentShape    — the six ways a body cell connects to its neighbours
    shape_from_transition(prev, new)
    shape_from_single(direction)
    next_cell(cell, direction, board, wrap)
"""

from __future__ import annotations

from enum import Enum

from .errors import InvariantError


# ─────────────────────────── Direction ───────────────────────────
class Direction(Enum):
    """Unit move on the screen grid (y grows downward)."""

    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST  = (1, 0)
    WEST  = (-1, 0)

    @property
    def x(self) -> int:
        return self.value[0]

    @property
    def y(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.x, -self.y))

    def is_opposite(self, other: "Direction") -> bool:
        return self.x == -other.x and self.y == -other.y


# ────────────────────────── SegmentShape ─────────────────────────
class SegmentShape(Enum):
    NORTH_SOUTH = "north-south"
    EAST_WEST   = "east-west"
    NORTH_EAST  = "north-east"
    NORTH_WEST  = "north-west"
    SOUTH_EAST  = "south-east"
    SOUTH_WEST  = "south-west"


# A corner names the two sides of the cell it opens onto: a snake that was
# heading north and turns east entered from the south and leaves to the east.
_TRANSITIONS = {
    (Direction.NORTH, Direction.NORTH): SegmentShape.NORTH_SOUTH,
    (Direction.NORTH, Direction.EAST):  SegmentShape.SOUTH_EAST,
    (Direction.NORTH, Direction.WEST):  SegmentShape.SOUTH_WEST,
    (Direction.SOUTH, Direction.SOUTH): SegmentShape.NORTH_SOUTH,
    (Direction.SOUTH, Direction.EAST):  SegmentShape.NORTH_EAST,
    (Direction.SOUTH, Direction.WEST):  SegmentShape.NORTH_WEST,
    (Direction.EAST,  Direction.EAST):  SegmentShape.EAST_WEST,
    (Direction.EAST,  Direction.NORTH): SegmentShape.NORTH_WEST,
    (Direction.EAST,  Direction.SOUTH): SegmentShape.SOUTH_WEST,
    (Direction.WEST,  Direction.WEST):  SegmentShape.EAST_WEST,
    (Direction.WEST,  Direction.NORTH): SegmentShape.NORTH_EAST,
    (Direction.WEST,  Direction.SOUTH): SegmentShape.SOUTH_EAST,
}


def shape_from_transition(prev_facing: Direction, new_facing: Direction) -> SegmentShape:
    """
    Shape of a cell that was entered moving *prev_facing* and left moving
    *new_facing*.

    Raises InvariantError for a 180° turn; the input guard keeps that pair
    from ever being produced.
    """
    try:
        return _TRANSITIONS[(prev_facing, new_facing)]
    except KeyError:
        raise InvariantError(
            f"snake reversed from {prev_facing.name} to {new_facing.name}"
        ) from None


def shape_from_single(direction: Direction) -> SegmentShape:
    """Straight shape for a fresh head whose exit is not known yet."""
    if direction in (Direction.NORTH, Direction.SOUTH):
        return SegmentShape.NORTH_SOUTH
    return SegmentShape.EAST_WEST


def next_cell(
    cell: tuple[int, int],
    direction: Direction,
    board: tuple[int, int],
    wrap: bool,
) -> tuple[int, int] | None:
    """
    The cell one step from *cell* along *direction*.

    Returns None when the step leaves the board and *wrap* is off.  With wrap
    on, the step re-enters from the opposite edge.
    """
    width, height = board
    nx, ny = cell[0] + direction.x, cell[1] + direction.y
    if 0 <= nx < width and 0 <= ny < height:
        return nx, ny
    if wrap:
        return nx % width, ny % height
    return None
