"""Layout data model.

Parameters, rooms, walls and entity placements are Pydantic models that
serialise cleanly to/from JSON.  The :class:`Layout` is the single value the
generator returns to host collaborators.
"""

from .geometry import CARDINAL_DIRECTIONS, Direction, GridPoint
from .layout import (
    DEFAULT_SPAWN_ELEVATION,
    WALL_HEIGHT,
    Corridor,
    EntityPlacement,
    Layout,
    Spawn,
    Wall,
)
from .params import (
    MAX_CORRIDOR_WIDTH,
    MIN_ROOM_SIDE,
    CorridorParams,
    CountRange,
    EntityParams,
    GridExtent,
    LayoutConfigError,
    RoleWeights,
    RoomParams,
)
from .rooms import Room, RoomRole
from .snapshot import load_layout, save_layout

__all__ = [
    # geometry
    "CARDINAL_DIRECTIONS",
    "Direction",
    "GridPoint",
    # layout
    "Corridor",
    "DEFAULT_SPAWN_ELEVATION",
    "EntityPlacement",
    "Layout",
    "Spawn",
    "WALL_HEIGHT",
    "Wall",
    # params
    "CorridorParams",
    "CountRange",
    "EntityParams",
    "GridExtent",
    "LayoutConfigError",
    "MAX_CORRIDOR_WIDTH",
    "MIN_ROOM_SIDE",
    "RoleWeights",
    "RoomParams",
    # rooms
    "Room",
    "RoomRole",
    # snapshot
    "load_layout",
    "save_layout",
]
