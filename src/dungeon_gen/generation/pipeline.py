"""Layout generation pipeline.

Runs the five stages in a fixed order, threading a single seeded RNG through
all of them:

1. place_rooms        -- rejection-sampled rectangles
2. classify_rooms     -- Start / Exit / Treasure / Combat / Empty
3. build_floor        -- room interiors + L-shaped corridors
4. synthesize_walls   -- boundary faces of the floor set
5. place_entities     -- collectibles, then the spawn point

The order of stages (and of draws within each stage) is part of the seed
contract; the same seed and parameters always produce an identical layout.
"""

from __future__ import annotations

import logging

from dungeon_gen.core.rng import LayoutRNG, random_seed
from dungeon_gen.generation.classifier import classify_rooms
from dungeon_gen.generation.entities import GroundProbe, place_entities
from dungeon_gen.generation.floor_builder import build_floor
from dungeon_gen.generation.room_placer import place_rooms
from dungeon_gen.generation.walls import synthesize_walls
from dungeon_gen.layout.layout import Layout
from dungeon_gen.layout.params import (
    CorridorParams,
    EntityParams,
    GridExtent,
    LayoutConfigError,
    RoomParams,
)

logger = logging.getLogger(__name__)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class LayoutGenerator:
    """Generates layouts for a fixed parameter set.

    Parameters are validated once at construction; each call to
    :meth:`generate` is then an independent, deterministic run.
    """

    def __init__(
        self,
        extent: GridExtent | None = None,
        room_params: RoomParams | None = None,
        corridor_params: CorridorParams | None = None,
        entity_params: EntityParams | None = None,
    ) -> None:
        self.extent = extent or GridExtent()
        self.room_params = room_params or RoomParams()
        self.corridor_params = corridor_params or CorridorParams()
        self.entity_params = entity_params or EntityParams()
        validate_parameters(self.extent, self.room_params)

    def generate(
        self,
        seed: int | None = None,
        ground_probe: GroundProbe | None = None,
    ) -> Layout:
        """Generate one layout.

        A seed of ``None`` draws a fresh random seed; the seed used is logged
        and stored on the returned layout.  Every other value, ``0``
        included, is used as given.
        """
        if seed is None:
            seed = random_seed()
        elif not _INT32_MIN <= seed <= _INT32_MAX:
            raise LayoutConfigError(f"Seed must be a signed 32-bit integer, got {seed}")

        logger.info(
            "Generating layout seed=%d extent=%dx%d",
            seed, self.extent.width, self.extent.height,
        )
        rng = LayoutRNG(seed)

        rooms = place_rooms(self.extent, self.room_params, rng)
        rooms = classify_rooms(rooms, self.room_params.role_weights, rng)
        plan = build_floor(rooms, self.extent, self.corridor_params, rng)
        walls = synthesize_walls(plan.floor)
        entities = place_entities(
            plan.floor, rooms, self.extent, self.entity_params, rng, ground_probe,
        )

        logger.debug(
            "Layout seed=%d: %d rooms, %d corridors, %d floor cells, %d walls, "
            "%d collectibles",
            seed, len(rooms), len(plan.corridors), len(plan.floor), len(walls),
            entities.total_collectibles,
        )

        return Layout(
            seed=seed,
            extent=self.extent,
            rooms=rooms,
            corridors=plan.corridors,
            floor=plan.floor,
            walls=walls,
            entities=entities,
        )

    def generate_batch(self, n_layouts: int, base_seed: int = 1) -> list[Layout]:
        """Generate layouts for seeds ``base_seed .. base_seed + n_layouts - 1``."""
        return [self.generate(base_seed + i) for i in range(n_layouts)]


def generate(
    seed: int | None = None,
    extent: GridExtent | None = None,
    room_params: RoomParams | None = None,
    corridor_params: CorridorParams | None = None,
    entity_params: EntityParams | None = None,
    ground_probe: GroundProbe | None = None,
) -> Layout:
    """Generate a single layout.  See :class:`LayoutGenerator`."""
    generator = LayoutGenerator(extent, room_params, corridor_params, entity_params)
    return generator.generate(seed, ground_probe)


def validate_parameters(extent: GridExtent, room_params: RoomParams) -> None:
    """Reject parameter combinations whose rooms cannot fit the grid margin.

    Raises
    ------
    LayoutConfigError
        If the largest room the sampler can draw does not fit inside the
        one-cell wall margin on either axis.
    """
    needed = room_params.largest_side + 2
    if extent.width < needed or extent.height < needed:
        raise LayoutConfigError(
            f"Grid extent {extent.width}x{extent.height} is too small for rooms "
            f"up to {room_params.largest_side} cells; need at least {needed}x{needed}"
        )
