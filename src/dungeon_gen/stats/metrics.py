"""Pure statistics over generated layouts.

No side effects, no I/O.
"""

from __future__ import annotations

from collections import Counter

from dungeon_gen.generation.walls import count_adjacencies
from dungeon_gen.layout.layout import Layout
from dungeon_gen.layout.rooms import RoomRole
from dungeon_gen.stats.models import LayoutStats, SweepStats


def compute_layout_stats(layout: Layout) -> LayoutStats:
    """Compute structural counts for one layout."""
    roles = Counter(room.role.value for room in layout.rooms)
    room_cells = sum(1 for cell in layout.floor if layout.room_at(cell) is not None)
    grid_cells = layout.extent.width * layout.extent.height

    return LayoutStats(
        seed=layout.seed,
        room_count=len(layout.rooms),
        corridor_count=len(layout.corridors),
        role_counts={role.value: roles.get(role.value, 0) for role in RoomRole},
        floor_cells=len(layout.floor),
        room_cells=room_cells,
        corridor_cells=len(layout.floor) - room_cells,
        wall_count=len(layout.walls),
        adjacencies=count_adjacencies(layout.floor),
        collectible_rooms=len(layout.entities.collectibles),
        collectibles_placed=layout.entities.total_collectibles,
        has_spawn=layout.entities.spawn is not None,
        floor_coverage=len(layout.floor) / grid_cells,
    )


def compute_sweep_stats(stats: list[LayoutStats]) -> SweepStats:
    """Aggregate per-layout statistics."""
    total = len(stats)
    if total == 0:
        return SweepStats(
            total_layouts=0, avg_rooms=0.0, min_rooms=0, max_rooms=0,
            avg_floor_cells=0.0, avg_wall_count=0.0, avg_collectibles=0.0,
            avg_floor_coverage=0.0, role_totals={}, layouts_without_exit=0,
        )

    role_totals: Counter[str] = Counter()
    for s in stats:
        role_totals.update(s.role_counts)

    room_counts = [s.room_count for s in stats]

    return SweepStats(
        total_layouts=total,
        avg_rooms=sum(room_counts) / total,
        min_rooms=min(room_counts),
        max_rooms=max(room_counts),
        avg_floor_cells=sum(s.floor_cells for s in stats) / total,
        avg_wall_count=sum(s.wall_count for s in stats) / total,
        avg_collectibles=sum(s.collectibles_placed for s in stats) / total,
        avg_floor_coverage=sum(s.floor_coverage for s in stats) / total,
        role_totals={role.value: role_totals.get(role.value, 0) for role in RoomRole},
        layouts_without_exit=sum(1 for s in stats if s.room_count < 2),
    )
