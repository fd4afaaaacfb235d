"""Generated layout: the value handed from the generator to host collaborators.

A :class:`Layout` is a plain data snapshot.  It owns no engine objects and
performs no I/O; hosts iterate ``floor`` and ``walls`` to build geometry and
read ``entities`` to instantiate the player and pickups.
"""

from __future__ import annotations

from pydantic import BaseModel

from .geometry import Direction, GridPoint
from .params import GridExtent
from .rooms import Room, RoomRole

WALL_HEIGHT = 1.25
"""Height of a wall piece's centre above the floor plane."""

DEFAULT_SPAWN_ELEVATION = 1.0
"""Spawn height used when no ground probe is available or it misses."""


class Wall(BaseModel):
    """One wall face guarding ``direction`` of floor cell ``cell``."""

    cell: GridPoint
    direction: Direction

    @property
    def neighbor(self) -> GridPoint:
        """The empty cell this wall separates ``cell`` from."""
        return self.cell.step(self.direction)

    @property
    def position(self) -> tuple[float, float, float]:
        """World-space centre ``(x, height, z)``, half a cell off the floor cell."""
        dx, dy = self.direction.delta
        return (self.cell.x + dx * 0.5, WALL_HEIGHT, self.cell.y + dy * 0.5)

    @property
    def rotation_y(self) -> float:
        return self.direction.rotation_y


class Corridor(BaseModel):
    """Record of one L-shaped connector carved between consecutive rooms."""

    start_room: int
    end_room: int
    horizontal_first: bool
    """True if the horizontal leg runs along the start room's row."""
    width: int
    start: GridPoint
    end: GridPoint

    @property
    def elbow(self) -> GridPoint:
        """Cell where the two legs meet."""
        if self.horizontal_first:
            return GridPoint(self.end.x, self.start.y)
        return GridPoint(self.start.x, self.end.y)


class Spawn(BaseModel):
    """Player spawn point."""

    cell: GridPoint
    room_index: int
    elevation: float = DEFAULT_SPAWN_ELEVATION

    @property
    def position(self) -> tuple[float, float, float]:
        return (float(self.cell.x), self.elevation, float(self.cell.y))


class EntityPlacement(BaseModel):
    """Spawn point plus collectible cells keyed by room index."""

    spawn: Spawn | None = None
    collectibles: dict[int, list[GridPoint]] = {}

    @property
    def total_collectibles(self) -> int:
        return sum(len(cells) for cells in self.collectibles.values())

    def all_collectibles(self) -> list[GridPoint]:
        """Every collectible cell, in room order."""
        cells: list[GridPoint] = []
        for room_index in sorted(self.collectibles):
            cells.extend(self.collectibles[room_index])
        return cells


class Layout(BaseModel):
    """Complete output of one generation run."""

    seed: int
    """Seed actually used; replaying it with the same parameters reproduces
    this layout exactly."""

    extent: GridExtent
    rooms: list[Room]
    corridors: list[Corridor] = []
    floor: frozenset[GridPoint] = frozenset()
    walls: list[Wall] = []
    entities: EntityPlacement = EntityPlacement()

    def room_at(self, point: tuple[int, int]) -> int | None:
        """Index of the first room containing *point*, or None for corridors."""
        for index, room in enumerate(self.rooms):
            if room.contains(point):
                return index
        return None

    def rooms_with_role(self, role: RoomRole) -> list[int]:
        return [i for i, room in enumerate(self.rooms) if room.role == role]

    @property
    def start_room(self) -> int | None:
        starts = self.rooms_with_role(RoomRole.START)
        return starts[0] if starts else None

    @property
    def exit_room(self) -> int | None:
        exits = self.rooms_with_role(RoomRole.EXIT)
        return exits[0] if exits else None
