"""Tests for text reports."""

from dungeon_gen.stats.metrics import compute_layout_stats, compute_sweep_stats
from dungeon_gen.stats.report import generate_sweep_report, generate_text_report


def test_layout_report_sections(reference_layout):
    report = generate_text_report(reference_layout, compute_layout_stats(reference_layout))
    assert f"seed {reference_layout.seed}" in report
    assert "## Structure" in report
    assert "## Rooms" in report
    assert "## Entities" in report
    assert "START" in report


def test_layout_report_lists_every_room(reference_layout):
    report = generate_text_report(reference_layout, compute_layout_stats(reference_layout))
    for index in range(len(reference_layout.rooms)):
        assert f"[{index}]" in report


def test_sweep_report(sample_layouts):
    sweep = compute_sweep_stats([compute_layout_stats(layout) for layout in sample_layouts])
    report = generate_sweep_report(sweep)
    assert f"{len(sample_layouts)} layouts" in report
    assert "## Global Stats" in report
    assert "## Role Distribution" in report
    assert "TREASURE" in report


def test_empty_sweep_report_has_no_roles():
    report = generate_sweep_report(compute_sweep_stats([]))
    assert "0 layouts" in report
    assert "Role Distribution" not in report
