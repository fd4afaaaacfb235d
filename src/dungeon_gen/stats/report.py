"""Human-readable text reports for layouts and seed sweeps."""

from __future__ import annotations

from dungeon_gen.layout.layout import Layout
from dungeon_gen.stats.models import LayoutStats, SweepStats


def generate_text_report(layout: Layout, stats: LayoutStats) -> str:
    """Summarise one layout: counts, then a per-room table."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(f"Dungeon Layout — seed {stats.seed}")
    lines.append(
        f"Extent: {layout.extent.width}x{layout.extent.height}"
        f" | Coverage: {stats.floor_coverage:.1%}"
    )
    lines.append("=" * 60)

    lines.append("")
    lines.append("## Structure")
    lines.append(f"  Rooms:        {stats.room_count}")
    lines.append(f"  Corridors:    {stats.corridor_count}")
    lines.append(
        f"  Floor cells:  {stats.floor_cells}"
        f" (rooms {stats.room_cells}, corridors {stats.corridor_cells})"
    )
    lines.append(f"  Walls:        {stats.wall_count}")
    lines.append(f"  Adjacencies:  {stats.adjacencies}")

    lines.append("")
    lines.append("## Rooms")
    for index, room in enumerate(layout.rooms):
        placed = layout.entities.collectibles.get(index)
        loot = f"  collectibles={len(placed)}" if placed is not None else ""
        lines.append(
            f"  [{index}] {room.role.value:9s}"
            f" at ({room.x:2d},{room.y:2d}) size {room.width}x{room.height}{loot}"
        )

    lines.append("")
    lines.append("## Entities")
    spawn = layout.entities.spawn
    if spawn is not None:
        lines.append(
            f"  Spawn: ({spawn.cell.x},{spawn.cell.y}) in room {spawn.room_index}"
            f" at elevation {spawn.elevation:.2f}"
        )
    else:
        lines.append("  Spawn: none")
    lines.append(
        f"  Collectibles: {stats.collectibles_placed}"
        f" across {stats.collectible_rooms} rooms"
    )

    return "\n".join(lines)


def generate_sweep_report(sweep: SweepStats) -> str:
    """Summarise a batch of layouts generated with one parameter set."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(f"Seed Sweep — {sweep.total_layouts:,} layouts")
    lines.append("=" * 60)

    lines.append("")
    lines.append("## Global Stats")
    lines.append(
        f"  Rooms:           avg {sweep.avg_rooms:.2f}"
        f" (min {sweep.min_rooms}, max {sweep.max_rooms})"
    )
    lines.append(f"  Floor cells:     avg {sweep.avg_floor_cells:.1f}")
    lines.append(f"  Walls:           avg {sweep.avg_wall_count:.1f}")
    lines.append(f"  Collectibles:    avg {sweep.avg_collectibles:.2f}")
    lines.append(f"  Floor coverage:  avg {sweep.avg_floor_coverage:.1%}")
    lines.append(f"  Without exit:    {sweep.layouts_without_exit}")

    if sweep.role_totals:
        total_rooms = sum(sweep.role_totals.values())
        lines.append("")
        lines.append("## Role Distribution")
        for role, count in sweep.role_totals.items():
            share = count / total_rooms if total_rooms else 0.0
            lines.append(f"  {role:9s} {count:6d}  ({share:.1%})")

    return "\n".join(lines)
