"""Wall synthesis from floor occupancy.

A wall is emitted for every (floor cell, direction) pair whose neighbour in
that direction is not floor.  Two floor cells never produce a wall between
them; the outer boundary gets one wall per exposed floor face.
"""

from __future__ import annotations

from typing import AbstractSet

from dungeon_gen.layout.geometry import CARDINAL_DIRECTIONS, Direction, GridPoint
from dungeon_gen.layout.layout import Wall


def synthesize_walls(floor: AbstractSet[GridPoint]) -> list[Wall]:
    """Return walls ordered by cell ``(x, y)`` then up, down, left, right."""
    walls: list[Wall] = []
    for cell in sorted(floor):
        for direction in CARDINAL_DIRECTIONS:
            if cell.step(direction) not in floor:
                walls.append(Wall(cell=cell, direction=direction))
    return walls


def count_adjacencies(floor: AbstractSet[GridPoint]) -> int:
    """Number of unordered orthogonally adjacent floor-floor pairs."""
    return sum(
        (cell.step(Direction.RIGHT) in floor) + (cell.step(Direction.UP) in floor)
        for cell in floor
    )
