"""Generation parameters.

Every knob the generator exposes is a Pydantic model with defaults matching
the reference 40x40 dungeon.  Per-field constraints are enforced when a model
is built (surfacing as ``pydantic.ValidationError``); constraints that span
several models are checked by :func:`dungeon_gen.generation.generate` and
raise :class:`LayoutConfigError`.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator, model_validator

from .geometry import GridPoint

MIN_ROOM_SIDE = 3
"""Smallest room side that still leaves an inset cell for entity placement."""

MAX_CORRIDOR_WIDTH = 5


class LayoutConfigError(ValueError):
    """Raised when a parameter combination cannot produce a valid layout."""


class GridExtent(BaseModel):
    """Bounding size of the tile grid."""

    width: int = 40
    height: int = 40

    @field_validator("width", "height")
    @classmethod
    def _validate_side(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Grid extent must be positive, got {v}")
        return v

    def contains(self, point: tuple[int, int]) -> bool:
        """True if *point* lies anywhere on the grid."""
        px, py = point
        return 0 <= px < self.width and 0 <= py < self.height

    def in_margin(self, point: tuple[int, int]) -> bool:
        """True if *point* lies inside the one-cell wall margin."""
        px, py = point
        return 1 <= px <= self.width - 2 and 1 <= py <= self.height - 2

    def clamp(self, point: tuple[int, int]) -> GridPoint:
        px, py = point
        return GridPoint(
            min(max(px, 0), self.width - 1),
            min(max(py, 0), self.height - 1),
        )


class RoleWeights(BaseModel):
    """Probability bands for non-start, non-exit rooms.

    A uniform draw below ``treasure`` yields Treasure, below
    ``treasure + combat`` yields Combat, anything else stays Empty.
    """

    treasure: float = 0.25
    combat: float = 0.30

    @field_validator("treasure", "combat")
    @classmethod
    def _validate_probability(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"Role weight must be within [0, 1], got {v}")
        return v

    @model_validator(mode="after")
    def _validate_total(self) -> RoleWeights:
        if self.treasure + self.combat > 1.0:
            raise ValueError("treasure + combat weights must not exceed 1")
        return self


class RoomParams(BaseModel):
    """Room sampling parameters.

    Side lengths are drawn from the half-open range ``[min_size, max_size)``;
    when the two are equal every room is ``min_size`` square.  Both bounds
    must be at least ``MIN_ROOM_SIDE`` (3): spawn points and collectibles are
    sampled from a room's inset, the cells left after dropping its outer
    ring, and a room narrower than 3 cells has no inset at all.
    """

    min_size: int = 6
    max_size: int = 12
    max_rooms: int = 8
    role_weights: RoleWeights = RoleWeights()

    @field_validator("min_size", "max_size")
    @classmethod
    def _validate_size(cls, v: int) -> int:
        if v < MIN_ROOM_SIDE:
            raise ValueError(f"Room sizes must be at least {MIN_ROOM_SIDE}, got {v}")
        return v

    @field_validator("max_rooms")
    @classmethod
    def _validate_max_rooms(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"max_rooms must not be negative, got {v}")
        return v

    @model_validator(mode="after")
    def _validate_range(self) -> RoomParams:
        if self.min_size > self.max_size:
            raise ValueError(
                f"min_size ({self.min_size}) must not exceed max_size ({self.max_size})"
            )
        return self

    @property
    def max_attempts(self) -> int:
        """Total candidate rectangles sampled before placement gives up."""
        return self.max_rooms * 5

    @property
    def largest_side(self) -> int:
        """Largest side length the sampler can actually produce."""
        if self.max_size > self.min_size:
            return self.max_size - 1
        return self.min_size


class CorridorParams(BaseModel):
    """Corridor carving parameters."""

    width: int = 3

    @field_validator("width")
    @classmethod
    def _validate_width(cls, v: int) -> int:
        if not 1 <= v <= MAX_CORRIDOR_WIDTH:
            raise ValueError(
                f"Corridor width must be within [1, {MAX_CORRIDOR_WIDTH}], got {v}"
            )
        return v


class CountRange(BaseModel):
    """Inclusive ``[low, high]`` range for a per-room entity count."""

    low: int
    high: int

    @model_validator(mode="after")
    def _validate_bounds(self) -> CountRange:
        if self.low < 0:
            raise ValueError(f"Count range must not be negative, got low={self.low}")
        if self.low > self.high:
            raise ValueError(f"Count range low ({self.low}) exceeds high ({self.high})")
        return self


class EntityParams(BaseModel):
    """Spawn and collectible placement parameters."""

    default_range: CountRange = CountRange(low=1, high=2)
    """Collectible count for Combat and Exit rooms."""

    treasure_range: CountRange = CountRange(low=3, high=5)
    """Collectible count for Treasure rooms."""

    place_collectibles: bool = True
    """False when the host has no collectible asset; no collectibles are placed."""

    place_spawn: bool = True
    """False when the host has no player asset; no spawn point is chosen."""
