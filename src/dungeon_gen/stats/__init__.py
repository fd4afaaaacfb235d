"""Layout statistics -- per-layout metrics, seed sweeps, and text reports."""

from dungeon_gen.stats.metrics import compute_layout_stats, compute_sweep_stats
from dungeon_gen.stats.models import LayoutStats, SweepStats
from dungeon_gen.stats.report import generate_sweep_report, generate_text_report

__all__ = [
    "LayoutStats",
    "SweepStats",
    "compute_layout_stats",
    "compute_sweep_stats",
    "generate_sweep_report",
    "generate_text_report",
]
