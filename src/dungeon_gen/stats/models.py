"""Pydantic v2 models for layout statistics.

- **LayoutStats**: structural counts for one generated layout.
- **SweepStats**: aggregates over many seeds with the same parameters.
"""

from __future__ import annotations

from pydantic import BaseModel


class LayoutStats(BaseModel):
    """Structural counts for a single layout."""

    seed: int
    room_count: int
    corridor_count: int
    role_counts: dict[str, int]
    """Role name -> number of rooms with that role."""
    floor_cells: int
    room_cells: int
    """Floor cells inside some room."""
    corridor_cells: int
    """Floor cells outside every room."""
    wall_count: int
    adjacencies: int
    """Unordered orthogonal floor-floor neighbour pairs."""
    collectible_rooms: int
    """Rooms that were eligible for collectibles (neither Start nor Empty)."""
    collectibles_placed: int
    has_spawn: bool
    floor_coverage: float
    """floor_cells / (width * height)."""


class SweepStats(BaseModel):
    """Aggregate statistics over many layouts."""

    total_layouts: int
    avg_rooms: float
    min_rooms: int
    max_rooms: int
    avg_floor_cells: float
    avg_wall_count: float
    avg_collectibles: float
    avg_floor_coverage: float
    role_totals: dict[str, int]
    layouts_without_exit: int
    """Layouts with fewer than two rooms (no Start/Exit assignment)."""
