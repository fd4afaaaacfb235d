"""Floor rasterisation: room interiors plus L-shaped corridors.

Rooms are linked in generation order only (room ``i`` to room ``i + 1``),
so the corridor graph is a simple path of ``N - 1`` links.  Each link is two
straight legs meeting at an elbow; a fair coin decides whether the
horizontal leg runs along the first room's row or the second room's row.

A leg is ``width`` cells thick.  Its cells sit at ``offset - width // 2`` for
``offset`` in ``range(width)``, which centres odd widths exactly and shifts
even widths one cell towards the negative side.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from dungeon_gen.core.rng import LayoutRNG
from dungeon_gen.layout.geometry import GridPoint
from dungeon_gen.layout.layout import Corridor
from dungeon_gen.layout.params import CorridorParams, GridExtent
from dungeon_gen.layout.rooms import Room


class FloorPlan(NamedTuple):
    floor: frozenset[GridPoint]
    corridors: list[Corridor]


def build_floor(
    rooms: list[Room],
    extent: GridExtent,
    params: CorridorParams,
    rng: LayoutRNG,
) -> FloorPlan:
    """Rasterise rooms and connect consecutive pairs.

    One draw is consumed per corridor.  Corridor cells outside the wall
    margin are dropped; room cells always lie inside it already.
    """
    floor: set[GridPoint] = set()
    for room in rooms:
        floor.update(room.cells())

    corridors: list[Corridor] = []
    for index in range(len(rooms) - 1):
        start = rooms[index].grid_center
        end = rooms[index + 1].grid_center
        horizontal_first = rng.random_float() < 0.5

        if horizontal_first:
            legs = [
                horizontal_leg(start.x, end.x, start.y, params.width),
                vertical_leg(start.y, end.y, end.x, params.width),
            ]
        else:
            legs = [
                vertical_leg(start.y, end.y, start.x, params.width),
                horizontal_leg(start.x, end.x, end.y, params.width),
            ]
        for leg in legs:
            floor.update(cell for cell in leg if extent.in_margin(cell))

        corridors.append(Corridor(
            start_room=index,
            end_room=index + 1,
            horizontal_first=horizontal_first,
            width=params.width,
            start=start,
            end=end,
        ))

    return FloorPlan(floor=frozenset(floor), corridors=corridors)


def horizontal_leg(x_start: int, x_end: int, y: int, width: int) -> Iterator[GridPoint]:
    """Cells of a horizontal strip from ``x_start`` to ``x_end`` inclusive."""
    for x in range(min(x_start, x_end), max(x_start, x_end) + 1):
        for offset in range(width):
            yield GridPoint(x, y + offset - width // 2)


def vertical_leg(y_start: int, y_end: int, x: int, width: int) -> Iterator[GridPoint]:
    """Cells of a vertical strip from ``y_start`` to ``y_end`` inclusive."""
    for y in range(min(y_start, y_end), max(y_start, y_end) + 1):
        for offset in range(width):
            yield GridPoint(x + offset - width // 2, y)
