"""Grid primitives: integer cell coordinates and the four cardinal directions."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class GridPoint(NamedTuple):
    """An integer grid cell.  ``y`` grows "up" (away from the viewer)."""

    x: int
    y: int

    def step(self, direction: Direction) -> GridPoint:
        """Return the neighbouring cell one step in *direction*."""
        dx, dy = direction.delta
        return GridPoint(self.x + dx, self.y + dy)


class Direction(str, Enum):
    """Cardinal directions, in the order walls are checked for a cell."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit offset ``(dx, dy)`` for this direction."""
        return _DELTAS[self]

    @property
    def rotation_y(self) -> float:
        """Yaw in degrees a host should apply to geometry guarding this side."""
        return _ROTATIONS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_ROTATIONS: dict[Direction, float] = {
    Direction.UP: 0.0,
    Direction.DOWN: 180.0,
    Direction.LEFT: 270.0,
    Direction.RIGHT: 90.0,
}

CARDINAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)
