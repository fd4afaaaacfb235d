"""Colour schemes shared by the text and image renderers."""

from __future__ import annotations

from dungeon_gen.layout.rooms import RoomRole

# Floor colour per room role
ROLE_COLORS: dict[RoomRole, tuple[int, int, int]] = {
    RoomRole.START: (0, 255, 0),        # Green
    RoomRole.EXIT: (255, 0, 0),         # Red
    RoomRole.TREASURE: (255, 235, 4),   # Yellow
    RoomRole.COMBAT: (255, 0, 255),     # Magenta
    RoomRole.EMPTY: (128, 128, 128),    # Gray
}

CORRIDOR_COLOR = (170, 170, 170)
BACKGROUND_COLOR = (20, 20, 24)
WALL_COLOR = (235, 235, 235)
SPAWN_COLOR = (40, 120, 255)
COLLECTIBLE_COLOR = (255, 180, 0)


def role_color(role: RoomRole) -> tuple[int, int, int]:
    return ROLE_COLORS.get(role, ROLE_COLORS[RoomRole.EMPTY])
