"""Tests for collectible and spawn placement."""

import logging

import pytest

from dungeon_gen.core.rng import LayoutRNG
from dungeon_gen.generation.entities import (
    MAX_PLACEMENT_ATTEMPTS,
    choose_spawn,
    collectible_range,
    place_collectibles,
    place_entities,
)
from dungeon_gen.layout.geometry import GridPoint
from dungeon_gen.layout.layout import DEFAULT_SPAWN_ELEVATION
from dungeon_gen.layout.params import CountRange, EntityParams, GridExtent
from dungeon_gen.layout.rooms import Room, RoomRole


class CountingRNG(LayoutRNG):
    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.int_calls = 0
        self.range_calls = 0

    def random_int(self, low: int, high: int) -> int:
        self.int_calls += 1
        return super().random_int(low, high)

    def random_range(self, low: int, high: int) -> int:
        self.range_calls += 1
        return super().random_range(low, high)


def _room(role: RoomRole, x: int = 2, y: int = 2, size: int = 8) -> Room:
    return Room(x=x, y=y, width=size, height=size, role=role)


def _floor(*rooms: Room) -> frozenset[GridPoint]:
    cells: set[GridPoint] = set()
    for room in rooms:
        cells.update(room.cells())
    return frozenset(cells)


class TestCollectibleRange:
    def test_roles(self):
        params = EntityParams()
        assert collectible_range(RoomRole.START, params) is None
        assert collectible_range(RoomRole.EMPTY, params) is None
        assert collectible_range(RoomRole.TREASURE, params) == params.treasure_range
        assert collectible_range(RoomRole.COMBAT, params) == params.default_range
        assert collectible_range(RoomRole.EXIT, params) == params.default_range


class TestPlaceCollectibles:
    def test_start_and_empty_rooms_skipped(self):
        rooms = [_room(RoomRole.START), _room(RoomRole.EMPTY, x=20)]
        placed = place_collectibles(_floor(*rooms), rooms, EntityParams(), LayoutRNG(seed=1))
        assert placed == {}

    def test_treasure_gets_wider_range(self):
        rooms = [_room(RoomRole.TREASURE), _room(RoomRole.COMBAT, x=20), _room(RoomRole.EXIT, y=20)]
        floor = _floor(*rooms)
        for seed in range(100):
            placed = place_collectibles(floor, rooms, EntityParams(), LayoutRNG(seed=seed))
            assert 3 <= len(placed[0]) <= 5, f"seed={seed}"
            assert 1 <= len(placed[1]) <= 2, f"seed={seed}"
            assert 1 <= len(placed[2]) <= 2, f"seed={seed}"

    def test_cells_unique_in_floor_and_inset(self):
        rooms = [_room(RoomRole.TREASURE, size=5), _room(RoomRole.COMBAT, x=20, size=6)]
        floor = _floor(*rooms)
        for seed in range(100):
            placed = place_collectibles(floor, rooms, EntityParams(), LayoutRNG(seed=seed))
            for index, cells in placed.items():
                room = rooms[index]
                assert len(cells) == len(set(cells))
                for cell in cells:
                    assert cell in floor
                    assert room.x + 1 <= cell.x < room.x_max - 1
                    assert room.y + 1 <= cell.y < room.y_max - 1

    def test_one_cell_inset_holds_one_collectible(self):
        rooms = [_room(RoomRole.TREASURE, size=3)]
        placed = place_collectibles(_floor(*rooms), rooms, EntityParams(), LayoutRNG(seed=4))
        assert placed[0] == [GridPoint(3, 3)]

    def test_exhausted_attempts_skip_silently(self):
        rooms = [_room(RoomRole.COMBAT)]
        params = EntityParams(default_range=CountRange(low=2, high=2))
        rng = CountingRNG(seed=8)
        placed = place_collectibles(frozenset(), rooms, params, rng)
        assert placed == {0: []}
        assert rng.int_calls == 1
        assert rng.range_calls == 2 * 2 * MAX_PLACEMENT_ATTEMPTS

    def test_attempt_cap_is_ten(self):
        assert MAX_PLACEMENT_ATTEMPTS == 10

    def test_zero_count_range(self):
        rooms = [_room(RoomRole.COMBAT)]
        params = EntityParams(default_range=CountRange(low=0, high=0))
        placed = place_collectibles(_floor(*rooms), rooms, params, LayoutRNG(seed=1))
        assert placed == {0: []}


class TestChooseSpawn:
    def test_no_rooms(self):
        assert choose_spawn([], GridExtent(), LayoutRNG(seed=1)) is None

    def test_prefers_start_room(self):
        rooms = [_room(RoomRole.COMBAT), _room(RoomRole.START, x=20)]
        for seed in range(30):
            spawn = choose_spawn(rooms, GridExtent(), LayoutRNG(seed=seed))
            assert spawn.room_index == 1
            assert rooms[1].x + 1 <= spawn.cell.x < rooms[1].x_max - 1
            assert rooms[1].y + 1 <= spawn.cell.y < rooms[1].y_max - 1

    def test_falls_back_to_first_room(self, caplog):
        rooms = [_room(RoomRole.EMPTY), _room(RoomRole.COMBAT, x=20)]
        with caplog.at_level(logging.WARNING, logger="dungeon_gen.generation.entities"):
            spawn = choose_spawn(rooms, GridExtent(), LayoutRNG(seed=2))
        assert spawn.room_index == 0
        assert "No start room" in caplog.text

    def test_clamped_to_grid(self):
        extent = GridExtent(width=6, height=6)
        rooms = [Room(x=3, y=3, width=8, height=8, role=RoomRole.START)]
        for seed in range(30):
            spawn = choose_spawn(rooms, extent, LayoutRNG(seed=seed))
            assert extent.contains(spawn.cell)

    def test_default_elevation(self):
        spawn = choose_spawn([_room(RoomRole.START)], GridExtent(), LayoutRNG(seed=3))
        assert spawn.elevation == DEFAULT_SPAWN_ELEVATION

    def test_probe_hit_adjusts_elevation_only(self):
        rooms = [_room(RoomRole.START)]
        probed: list[GridPoint] = []

        def probe(cell: GridPoint) -> float:
            probed.append(cell)
            return 2.5

        plain = choose_spawn(rooms, GridExtent(), LayoutRNG(seed=3))
        adjusted = choose_spawn(rooms, GridExtent(), LayoutRNG(seed=3), ground_probe=probe)
        assert adjusted.cell == plain.cell
        assert probed == [plain.cell]
        assert adjusted.elevation == pytest.approx(3.5)

    def test_probe_miss_uses_default(self):
        spawn = choose_spawn(
            [_room(RoomRole.START)], GridExtent(), LayoutRNG(seed=3),
            ground_probe=lambda cell: None,
        )
        assert spawn.elevation == DEFAULT_SPAWN_ELEVATION


class TestPlaceEntities:
    def test_collectibles_drawn_before_spawn(self):
        rooms = [_room(RoomRole.START), _room(RoomRole.TREASURE, x=20)]
        floor = _floor(*rooms)

        rng = LayoutRNG(seed=6)
        expected_collectibles = place_collectibles(floor, rooms, EntityParams(), rng)
        expected_spawn = choose_spawn(rooms, GridExtent(), rng)

        placement = place_entities(floor, rooms, GridExtent(), EntityParams(), LayoutRNG(seed=6))
        assert placement.collectibles == expected_collectibles
        assert placement.spawn == expected_spawn

    def test_collectibles_disabled(self):
        rooms = [_room(RoomRole.START), _room(RoomRole.TREASURE, x=20)]
        floor = _floor(*rooms)
        params = EntityParams(place_collectibles=False)

        placement = place_entities(floor, rooms, GridExtent(), params, LayoutRNG(seed=6))
        assert placement.collectibles == {}
        assert placement.spawn == choose_spawn(rooms, GridExtent(), LayoutRNG(seed=6))

    def test_spawn_disabled(self):
        rooms = [_room(RoomRole.START), _room(RoomRole.TREASURE, x=20)]
        params = EntityParams(place_spawn=False)
        placement = place_entities(_floor(*rooms), rooms, GridExtent(), params, LayoutRNG(seed=6))
        assert placement.spawn is None
        assert placement.total_collectibles >= 3

    def test_containment_on_generated_layouts(self, sample_layouts):
        for layout in sample_layouts:
            cells = layout.entities.all_collectibles()
            if layout.entities.spawn is not None:
                cells.append(layout.entities.spawn.cell)
            for cell in cells:
                assert cell in layout.floor, f"seed={layout.seed}, cell={cell}"
                assert layout.extent.contains(cell)
