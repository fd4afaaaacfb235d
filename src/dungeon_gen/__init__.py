"""Deterministic tile-based dungeon layout generation.

:func:`generate` turns a seed and a handful of parameter models into a
:class:`~dungeon_gen.layout.Layout`: rooms with roles, a floor cell set,
wall faces and entity placements.  Everything else in the package (stats,
renderers) consumes that value.
"""

from dungeon_gen.generation import LayoutGenerator, generate
from dungeon_gen.layout import (
    CorridorParams,
    CountRange,
    Direction,
    EntityParams,
    GridExtent,
    GridPoint,
    Layout,
    LayoutConfigError,
    RoleWeights,
    Room,
    RoomParams,
    RoomRole,
    Wall,
)

__all__ = [
    "CorridorParams",
    "CountRange",
    "Direction",
    "EntityParams",
    "GridExtent",
    "GridPoint",
    "Layout",
    "LayoutConfigError",
    "LayoutGenerator",
    "RoleWeights",
    "Room",
    "RoomParams",
    "RoomRole",
    "Wall",
    "generate",
]
