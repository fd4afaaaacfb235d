"""Room rectangles and the roles assigned to them."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, field_validator

from .geometry import GridPoint


class RoomRole(str, Enum):
    """Gameplay category of a room; drives collectible density."""

    START = "START"
    EXIT = "EXIT"
    TREASURE = "TREASURE"
    COMBAT = "COMBAT"
    EMPTY = "EMPTY"


class Room(BaseModel):
    """An axis-aligned rectangle of floor cells.

    ``x``/``y`` is the minimum corner; the rectangle covers
    ``x .. x + width - 1`` by ``y .. y + height - 1``.
    """

    x: int
    y: int
    width: int
    height: int
    role: RoomRole = RoomRole.EMPTY

    @field_validator("width", "height")
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Room sides must be at least 1 cell")
        return v

    # -- bounds --------------------------------------------------------------

    @property
    def x_max(self) -> int:
        """Exclusive upper x bound."""
        return self.x + self.width

    @property
    def y_max(self) -> int:
        """Exclusive upper y bound."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> tuple[float, float]:
        """Geometric centre in continuous coordinates."""
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def grid_center(self) -> GridPoint:
        """Centre cell, rounding towards the minimum corner."""
        return GridPoint(self.x + self.width // 2, self.y + self.height // 2)

    # -- queries -------------------------------------------------------------

    def cells(self) -> Iterator[GridPoint]:
        for ix in range(self.x, self.x_max):
            for iy in range(self.y, self.y_max):
                yield GridPoint(ix, iy)

    def contains(self, point: tuple[int, int]) -> bool:
        px, py = point
        return self.x <= px < self.x_max and self.y <= py < self.y_max

    def overlaps(self, other: Room, padding: int = 0) -> bool:
        """True if the two rectangles, each grown by *padding* cells on every
        side, share any area.  Touching edges do not count as overlap.
        """
        return (
            self.x - padding < other.x_max + padding
            and self.x_max + padding > other.x - padding
            and self.y - padding < other.y_max + padding
            and self.y_max + padding > other.y - padding
        )
