"""Entity placement: collectibles per room, then the player spawn.

Collectibles are placed before the spawn point so the spawn draw comes last
in the RNG sequence.  Both use bounded sampling over a room's inset area
(the room minus its outermost ring of cells).
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Callable, Optional

from dungeon_gen.core.rng import LayoutRNG
from dungeon_gen.layout.geometry import GridPoint
from dungeon_gen.layout.layout import DEFAULT_SPAWN_ELEVATION, EntityPlacement, Spawn
from dungeon_gen.layout.params import CountRange, EntityParams, GridExtent
from dungeon_gen.layout.rooms import Room, RoomRole

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 10
"""Draws allowed per collectible before it is silently skipped."""

GroundProbe = Callable[[GridPoint], Optional[float]]
"""Host-supplied query returning the ground height under a cell, or None
on a miss.  It may only influence spawn elevation, never the chosen cell."""

_NO_COLLECTIBLES = {RoomRole.START, RoomRole.EMPTY}


def place_entities(
    floor: AbstractSet[GridPoint],
    rooms: list[Room],
    extent: GridExtent,
    params: EntityParams,
    rng: LayoutRNG,
    ground_probe: GroundProbe | None = None,
) -> EntityPlacement:
    """Place collectibles and the spawn point.

    Either sub-stage can be disabled through *params*; a disabled sub-stage
    yields empty output and consumes no draws.
    """
    collectibles: dict[int, list[GridPoint]] = {}
    if params.place_collectibles:
        collectibles = place_collectibles(floor, rooms, params, rng)

    spawn = None
    if params.place_spawn:
        spawn = choose_spawn(rooms, extent, rng, ground_probe)

    return EntityPlacement(spawn=spawn, collectibles=collectibles)


def collectible_range(role: RoomRole, params: EntityParams) -> CountRange | None:
    """Count range for a room role, or None if the role gets no collectibles."""
    if role in _NO_COLLECTIBLES:
        return None
    if role == RoomRole.TREASURE:
        return params.treasure_range
    return params.default_range


def place_collectibles(
    floor: AbstractSet[GridPoint],
    rooms: list[Room],
    params: EntityParams,
    rng: LayoutRNG,
) -> dict[int, list[GridPoint]]:
    """Return unique collectible cells keyed by the index of each eligible room."""
    placed: dict[int, list[GridPoint]] = {}

    for index, room in enumerate(rooms):
        count_range = collectible_range(room.role, params)
        if count_range is None:
            continue

        count = rng.random_int(count_range.low, count_range.high)
        cells: list[GridPoint] = []
        used: set[GridPoint] = set()

        for _ in range(count):
            cell = _sample_free_cell(room, floor, used, rng)
            if cell is None:
                logger.debug(
                    "Skipping collectible in room %d after %d attempts",
                    index, MAX_PLACEMENT_ATTEMPTS,
                )
                continue
            used.add(cell)
            cells.append(cell)

        placed[index] = cells

    return placed


def choose_spawn(
    rooms: list[Room],
    extent: GridExtent,
    rng: LayoutRNG,
    ground_probe: GroundProbe | None = None,
) -> Spawn | None:
    """Pick the spawn cell inside the Start room (room 0 if none is marked)."""
    if not rooms:
        return None

    room_index = next(
        (i for i, room in enumerate(rooms) if room.role == RoomRole.START), None,
    )
    if room_index is None:
        logger.warning("No start room found, spawning in room 0")
        room_index = 0

    cell = extent.clamp(_sample_inset_cell(rooms[room_index], rng))

    elevation = DEFAULT_SPAWN_ELEVATION
    if ground_probe is not None:
        hit = ground_probe(cell)
        if hit is not None:
            elevation = hit + DEFAULT_SPAWN_ELEVATION

    return Spawn(cell=cell, room_index=room_index, elevation=elevation)


def _sample_inset_cell(room: Room, rng: LayoutRNG) -> GridPoint:
    x = rng.random_range(room.x + 1, room.x_max - 1)
    y = rng.random_range(room.y + 1, room.y_max - 1)
    return GridPoint(x, y)


def _sample_free_cell(
    room: Room,
    floor: AbstractSet[GridPoint],
    used: set[GridPoint],
    rng: LayoutRNG,
) -> GridPoint | None:
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        cell = _sample_inset_cell(room, rng)
        if cell in floor and cell not in used:
            return cell
    return None
