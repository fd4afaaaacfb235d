"""Room placement by bounded rejection sampling.

Candidates are drawn with uniformly random size and position inside the wall
margin and kept only if they clear every accepted room by a one-cell gap on
each side.  Sampling stops once ``max_rooms`` are accepted or after
``5 * max_rooms`` candidates, whichever comes first, so callers must accept
fewer rooms than requested (possibly zero).
"""

from __future__ import annotations

import logging

from dungeon_gen.core.rng import LayoutRNG
from dungeon_gen.layout.params import GridExtent, RoomParams
from dungeon_gen.layout.rooms import Room

logger = logging.getLogger(__name__)

ROOM_PADDING = 1
"""Cells each room is grown by on every side before overlap testing."""


def place_rooms(
    extent: GridExtent,
    params: RoomParams,
    rng: LayoutRNG,
) -> list[Room]:
    """Return accepted rooms in acceptance order, all with role Empty.

    Each attempt consumes exactly four draws: width, height, x, y.
    """
    rooms: list[Room] = []
    attempts = 0

    while len(rooms) < params.max_rooms and attempts < params.max_attempts:
        width = rng.random_range(params.min_size, params.max_size)
        height = rng.random_range(params.min_size, params.max_size)
        x = rng.random_range(1, extent.width - width - 1)
        y = rng.random_range(1, extent.height - height - 1)

        candidate = Room(x=x, y=y, width=width, height=height)
        if not _collides(candidate, rooms):
            rooms.append(candidate)

        attempts += 1

    logger.debug(
        "Placed %d/%d rooms in %d attempts", len(rooms), params.max_rooms, attempts,
    )
    return rooms


def _collides(candidate: Room, rooms: list[Room]) -> bool:
    return any(candidate.overlaps(room, padding=ROOM_PADDING) for room in rooms)
