"""Plain-text rendering of a layout, one character per cell.

Legend::

    s x t c .   room floor (Start, Exit, Treasure, Combat, Empty)
    ,           corridor floor
    #           empty cell behind at least one wall face
    @           spawn point
    *           collectible

Rows are printed top to bottom, so the highest ``y`` comes first.
"""

from __future__ import annotations

from dungeon_gen.layout.layout import Layout
from dungeon_gen.layout.rooms import RoomRole

ROLE_GLYPHS: dict[RoomRole, str] = {
    RoomRole.START: "s",
    RoomRole.EXIT: "x",
    RoomRole.TREASURE: "t",
    RoomRole.COMBAT: "c",
    RoomRole.EMPTY: ".",
}

CORRIDOR_GLYPH = ","
WALL_GLYPH = "#"
SPAWN_GLYPH = "@"
COLLECTIBLE_GLYPH = "*"


def render_ascii(layout: Layout) -> str:
    width, height = layout.extent.width, layout.extent.height
    grid = [[" "] * width for _ in range(height)]

    for wall in layout.walls:
        nx, ny = wall.neighbor
        if layout.extent.contains((nx, ny)):
            grid[ny][nx] = WALL_GLYPH

    for cell in layout.floor:
        room_index = layout.room_at(cell)
        if room_index is None:
            glyph = CORRIDOR_GLYPH
        else:
            glyph = ROLE_GLYPHS[layout.rooms[room_index].role]
        grid[cell.y][cell.x] = glyph

    for cell in layout.entities.all_collectibles():
        grid[cell.y][cell.x] = COLLECTIBLE_GLYPH

    spawn = layout.entities.spawn
    if spawn is not None:
        grid[spawn.cell.y][spawn.cell.x] = SPAWN_GLYPH

    return "\n".join("".join(row).rstrip() for row in reversed(grid))
