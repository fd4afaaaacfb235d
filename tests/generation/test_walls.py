"""Tests for wall synthesis."""

from dungeon_gen.generation.walls import count_adjacencies, synthesize_walls
from dungeon_gen.layout.geometry import CARDINAL_DIRECTIONS, Direction, GridPoint


class TestSynthesizeWalls:
    def test_empty_floor(self):
        assert synthesize_walls(frozenset()) == []

    def test_single_cell(self):
        walls = synthesize_walls({GridPoint(3, 3)})
        assert [w.direction for w in walls] == [
            Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT,
        ]
        assert all(w.cell == GridPoint(3, 3) for w in walls)

    def test_no_wall_between_floor_cells(self):
        floor = {GridPoint(3, 3), GridPoint(4, 3)}
        walls = synthesize_walls(floor)
        assert len(walls) == 6
        faces = {(w.cell, w.direction) for w in walls}
        assert (GridPoint(3, 3), Direction.RIGHT) not in faces
        assert (GridPoint(4, 3), Direction.LEFT) not in faces

    def test_ordered_by_cell(self):
        floor = {GridPoint(5, 1), GridPoint(1, 5), GridPoint(1, 2)}
        cells = [w.cell for w in synthesize_walls(floor)]
        assert cells == sorted(cells)

    def test_block_boundary(self):
        floor = {GridPoint(x, y) for x in range(3) for y in range(3)}
        walls = synthesize_walls(floor)
        assert len(walls) == 12
        assert all(w.neighbor not in floor for w in walls)

    def test_iff_property_on_generated_layouts(self, sample_layouts):
        for layout in sample_layouts:
            faces = {(w.cell, w.direction) for w in layout.walls}
            assert len(faces) == len(layout.walls), f"seed={layout.seed}: duplicate walls"
            for cell in layout.floor:
                for direction in CARDINAL_DIRECTIONS:
                    exposed = cell.step(direction) not in layout.floor
                    assert ((cell, direction) in faces) == exposed, (
                        f"seed={layout.seed}, cell={cell}, direction={direction}"
                    )

    def test_every_wall_on_floor_cell(self, sample_layouts):
        for layout in sample_layouts:
            for wall in layout.walls:
                assert wall.cell in layout.floor


class TestAdjacencies:
    def test_single_cell(self):
        assert count_adjacencies({GridPoint(0, 0)}) == 0

    def test_block(self):
        floor = {GridPoint(x, y) for x in range(2) for y in range(2)}
        assert count_adjacencies(floor) == 4

    def test_line(self):
        floor = {GridPoint(x, 0) for x in range(5)}
        assert count_adjacencies(floor) == 4

    def test_wall_count_formula(self, sample_layouts):
        for layout in sample_layouts:
            expected = 4 * len(layout.floor) - 2 * count_adjacencies(layout.floor)
            assert len(layout.walls) == expected, f"seed={layout.seed}"
