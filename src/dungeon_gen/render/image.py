"""Top-down preview images using Pillow.

Floors are filled with their room's role colour (corridors in neutral gray),
each wall face is drawn as a line along the guarded cell edge, and entities
are drawn as markers.  The image is flipped so that +y points up.
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw

from dungeon_gen.layout.geometry import Direction, GridPoint
from dungeon_gen.layout.layout import Layout

from .colors import (
    BACKGROUND_COLOR,
    COLLECTIBLE_COLOR,
    CORRIDOR_COLOR,
    SPAWN_COLOR,
    WALL_COLOR,
    role_color,
)


def render_image(layout: Layout, cell_size: int = 16) -> Image.Image:
    """Render *layout* to an RGB image of ``cell_size`` pixels per cell."""
    if cell_size < 4:
        raise ValueError(f"cell_size must be at least 4 pixels, got {cell_size}")
    width = layout.extent.width * cell_size
    height = layout.extent.height * cell_size
    img = Image.new("RGB", (width, height), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)

    def cell_box(cell: GridPoint) -> tuple[int, int, int, int]:
        left = cell.x * cell_size
        top = (layout.extent.height - 1 - cell.y) * cell_size
        return (left, top, left + cell_size - 1, top + cell_size - 1)

    # Floors
    for cell in layout.floor:
        room_index = layout.room_at(cell)
        if room_index is None:
            color = CORRIDOR_COLOR
        else:
            color = role_color(layout.rooms[room_index].role)
        draw.rectangle(cell_box(cell), fill=color)

    # Walls
    line_width = max(1, cell_size // 8)
    for wall in layout.walls:
        left, top, right, bottom = cell_box(wall.cell)
        if wall.direction == Direction.UP:
            edge = (left, top, right, top)
        elif wall.direction == Direction.DOWN:
            edge = (left, bottom, right, bottom)
        elif wall.direction == Direction.LEFT:
            edge = (left, top, left, bottom)
        else:
            edge = (right, top, right, bottom)
        draw.line(edge, fill=WALL_COLOR, width=line_width)

    # Entities
    inset = max(1, cell_size // 4)
    for cell in layout.entities.all_collectibles():
        left, top, right, bottom = cell_box(cell)
        draw.ellipse(
            (left + inset, top + inset, right - inset, bottom - inset),
            fill=COLLECTIBLE_COLOR,
        )

    spawn = layout.entities.spawn
    if spawn is not None:
        left, top, right, bottom = cell_box(spawn.cell)
        draw.rectangle(
            (left + inset, top + inset, right - inset, bottom - inset),
            fill=SPAWN_COLOR,
        )

    return img


def save_image(layout: Layout, path: Path, cell_size: int = 16) -> Path:
    """Render *layout* and save it as a PNG at *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    render_image(layout, cell_size).save(path)
    return path
