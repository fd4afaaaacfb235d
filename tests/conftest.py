"""Shared fixtures for layout generation tests."""

from __future__ import annotations

import pytest

from dungeon_gen.generation import generate
from dungeon_gen.layout import Layout

REFERENCE_SEED = 12345


@pytest.fixture(scope="module")
def reference_layout() -> Layout:
    """The 40x40 reference dungeon (default parameters, seed 12345)."""
    return generate(seed=REFERENCE_SEED)


@pytest.fixture(scope="module")
def sample_layouts() -> list[Layout]:
    """Default-parameter layouts for seeds 1..40."""
    return [generate(seed=seed) for seed in range(1, 41)]
