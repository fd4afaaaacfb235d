"""Room role assignment.

- Room 0 is always Start.
- The room whose centre is farthest from Start's centre is Exit
  (first one wins on ties).
- Every other room independently rolls Treasure / Combat / Empty.

Layouts with fewer than two rooms are left entirely Empty.
"""

from __future__ import annotations

import math

from dungeon_gen.core.rng import LayoutRNG
from dungeon_gen.layout.params import RoleWeights
from dungeon_gen.layout.rooms import Room, RoomRole


def classify_rooms(
    rooms: list[Room],
    weights: RoleWeights,
    rng: LayoutRNG,
) -> list[Room]:
    """Return copies of *rooms* with roles assigned.

    The input list is not modified.  One draw is consumed per room that is
    neither Start nor Exit, in room order.
    """
    if len(rooms) < 2:
        return list(rooms)

    exit_index = find_exit(rooms)

    classified: list[Room] = []
    for index, room in enumerate(rooms):
        if index == 0:
            role = RoomRole.START
        elif index == exit_index:
            role = RoomRole.EXIT
        else:
            role = _roll_role(rng, weights)
        classified.append(room.model_copy(update={"role": role}))

    return classified


def find_exit(rooms: list[Room]) -> int:
    """Index of the room farthest from room 0 by centre distance."""
    origin = rooms[0].center
    exit_index = 0
    max_distance = 0.0
    for index, room in enumerate(rooms):
        distance = math.dist(origin, room.center)
        if distance > max_distance:
            max_distance = distance
            exit_index = index
    return exit_index


def _roll_role(rng: LayoutRNG, weights: RoleWeights) -> RoomRole:
    roll = rng.random_float()
    if roll < weights.treasure:
        return RoomRole.TREASURE
    elif roll < weights.treasure + weights.combat:
        return RoomRole.COMBAT
    else:
        return RoomRole.EMPTY
