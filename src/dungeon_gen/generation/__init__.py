"""Generation stages and the pipeline that chains them."""

from dungeon_gen.generation.classifier import classify_rooms, find_exit
from dungeon_gen.generation.entities import (
    MAX_PLACEMENT_ATTEMPTS,
    GroundProbe,
    choose_spawn,
    collectible_range,
    place_collectibles,
    place_entities,
)
from dungeon_gen.generation.floor_builder import FloorPlan, build_floor
from dungeon_gen.generation.pipeline import LayoutGenerator, generate, validate_parameters
from dungeon_gen.generation.room_placer import ROOM_PADDING, place_rooms
from dungeon_gen.generation.walls import count_adjacencies, synthesize_walls

__all__ = [
    # pipeline
    "LayoutGenerator",
    "generate",
    "validate_parameters",
    # stages
    "place_rooms",
    "classify_rooms",
    "build_floor",
    "synthesize_walls",
    "place_entities",
    # helpers
    "FloorPlan",
    "GroundProbe",
    "MAX_PLACEMENT_ATTEMPTS",
    "ROOM_PADDING",
    "choose_spawn",
    "collectible_range",
    "count_adjacencies",
    "find_exit",
    "place_collectibles",
]
