"""Generate layouts over a range of seeds and chart their distribution.

Usage:
    uv run python scripts/seed_sweep.py [--layouts N] [--base-seed S] [--output sweep.png]
"""

from __future__ import annotations

import argparse
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from dungeon_gen.generation import LayoutGenerator
from dungeon_gen.layout import RoomParams, RoomRole
from dungeon_gen.stats import (
    LayoutStats,
    compute_layout_stats,
    compute_sweep_stats,
    generate_sweep_report,
)

_ROLE_CHART_COLORS = {
    RoomRole.START.value: "#2ecc71",
    RoomRole.EXIT.value: "#e74c3c",
    RoomRole.TREASURE.value: "#f1c40f",
    RoomRole.COMBAT.value: "#c030c0",
    RoomRole.EMPTY.value: "#95a5a6",
}


def run_sweep(n_layouts: int, base_seed: int, max_rooms: int) -> list[LayoutStats]:
    generator = LayoutGenerator(room_params=RoomParams(max_rooms=max_rooms))

    print(f"Generating {n_layouts:,} layouts from seed {base_seed}...")
    t0 = time.perf_counter()
    layouts = generator.generate_batch(n_layouts, base_seed=base_seed)
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s ({elapsed / max(n_layouts, 1) * 1000:.1f}ms/layout)")

    return [compute_layout_stats(layout) for layout in layouts]


def generate_charts(stats: list[LayoutStats], out_path: str) -> None:
    rooms = np.array([s.room_count for s in stats])
    coverage = np.array([s.floor_coverage * 100 for s in stats])
    collectibles = np.array([s.collectibles_placed for s in stats])

    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"Layout Seed Sweep — {len(stats)} layouts", fontsize=16, fontweight="bold")

    # --- Chart 1: Room count ---
    ax = axes[0, 0]
    bins = np.arange(-0.5, rooms.max() + 1.5, 1)
    ax.hist(rooms, bins=bins, color="#3498db", edgecolor="black", linewidth=0.3)
    ax.set_xlabel("Rooms Placed")
    ax.set_ylabel("Count")
    ax.set_title(f"Room Count (avg={np.mean(rooms):.2f})")

    # --- Chart 2: Floor coverage ---
    ax = axes[0, 1]
    ax.hist(coverage, bins=30, color="#1abc9c", edgecolor="black", linewidth=0.3)
    ax.set_xlabel("Floor Coverage (%)")
    ax.set_ylabel("Count")
    ax.set_title(f"Floor Coverage (median={np.median(coverage):.1f}%)")

    # --- Chart 3: Collectibles ---
    ax = axes[1, 0]
    bins = np.arange(-0.5, collectibles.max() + 1.5, 1)
    ax.hist(collectibles, bins=bins, color="#e67e22", edgecolor="black", linewidth=0.3)
    ax.set_xlabel("Collectibles Placed")
    ax.set_ylabel("Count")
    ax.set_title(f"Collectibles (avg={np.mean(collectibles):.2f})")

    # --- Chart 4: Role totals ---
    ax = axes[1, 1]
    roles = [role.value for role in RoomRole]
    totals = [sum(s.role_counts.get(role, 0) for s in stats) for role in roles]
    ax.bar(roles, totals, color=[_ROLE_CHART_COLORS[r] for r in roles],
           edgecolor="black", linewidth=0.5)
    ax.set_ylabel("Rooms")
    ax.set_title("Role Distribution")

    plt.tight_layout()
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--layouts", type=int, default=1000, help="Number of seeds to sweep")
    parser.add_argument("--base-seed", type=int, default=1, help="First seed")
    parser.add_argument("--max-rooms", type=int, default=8, help="Rooms requested per layout")
    parser.add_argument("--output", type=str, default="seed_sweep.png", help="Chart path")
    args = parser.parse_args()

    stats = run_sweep(args.layouts, args.base_seed, args.max_rooms)
    print()
    print(generate_sweep_report(compute_sweep_stats(stats)))
    if stats:
        generate_charts(stats, args.output)
