"""Save and load layout snapshots as JSON.

The seed plus parameters is the canonical way to reproduce a layout; these
snapshots exist for debugging and for hosts that would rather not link the
generator.
"""

from __future__ import annotations

from pathlib import Path

from .layout import Layout


def save_layout(layout: Layout, path: Path) -> None:
    """Save layout to JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(layout.model_dump_json(indent=2))


def load_layout(path: Path) -> Layout:
    """Load layout from JSON file."""
    return Layout.model_validate_json(path.read_text())
