"""Tests for the rectangular and hexagonal topology providers."""

import math

import pytest

from hexagonal_grid import HexagonalGrid, hex_distance
from maze_core import InvalidCell, InvalidDimensions
from rectangular_grid import RectangularGrid


def assert_contract(grid) -> None:
    """Properties every grid provider shares."""
    cells = grid.cells()
    assert len(cells) == len(set(cells))
    assert cells == grid.cells()
    assert grid.entrance_cell() in cells
    assert grid.exit_cell() in cells
    assert grid.is_boundary(grid.entrance_cell())
    assert grid.is_boundary(grid.exit_cell())
    for cell in cells:
        for neighbor in grid.neighbors(cell):
            assert neighbor in cells
            assert cell in grid.neighbors(neighbor)
        walls = grid.boundary_walls(cell)
        assert bool(walls) == grid.is_boundary(cell)
        outside = [b if a == cell else a for a, b in walls]
        assert len(set(outside)) == len(outside)
        for node in outside:
            assert node not in cells


class TestRectangularGrid:
    def test_three_by_three(self) -> None:
        grid = RectangularGrid(3, 3)
        assert len(grid.cells()) == 9
        assert set(grid.neighbors((1, 1))) == {(0, 1), (2, 1), (1, 0), (1, 2)}
        assert len(grid.neighbors((0, 0))) == 2

    def test_entrance_and_exit_are_opposite_corners(self) -> None:
        grid = RectangularGrid(5, 4)
        assert grid.entrance_cell() == (0, 0)
        assert grid.exit_cell() == (4, 3)

    @pytest.mark.parametrize("width,height", [(1, 1), (1, 5), (4, 1), (3, 3), (6, 4)])
    def test_contract(self, width: int, height: int) -> None:
        assert_contract(RectangularGrid(width, height))

    def test_boundary_walls(self) -> None:
        grid = RectangularGrid(3, 3)
        assert grid.boundary_walls((1, 1)) == []
        assert grid.boundary_walls((0, 0)) == [((0, 0), (0, 0, "N")), ((0, 0), (0, 0, "W"))]
        assert grid.boundary_walls((1, 0)) == [((1, 0), (1, 0, "N"))]
        assert len(grid.boundary_walls((2, 2))) == 2

    @pytest.mark.parametrize("width,height", [(2.5, 3), (3, 2.0), (True, 3), ("3", 3)])
    def test_non_integer_dimensions(self, width, height) -> None:
        with pytest.raises(InvalidDimensions):
            RectangularGrid(width, height)

    def test_single_cell_has_four_walls(self) -> None:
        grid = RectangularGrid(1, 1)
        assert len(grid.boundary_walls((0, 0))) == 4
        assert grid.neighbors((0, 0)) == []

    @pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
    def test_invalid_dimensions(self, width: int, height: int) -> None:
        with pytest.raises(InvalidDimensions):
            RectangularGrid(width, height)

    @pytest.mark.parametrize("cell", [(3, 0), (0, -1), "0,0", (0, 0, "N"), (1.0, 1.0)])
    def test_invalid_cell(self, cell) -> None:
        grid = RectangularGrid(3, 3)
        assert cell not in grid
        with pytest.raises(InvalidCell):
            grid.neighbors(cell)
        with pytest.raises(InvalidCell):
            grid.boundary_walls(cell)

    def test_positions(self) -> None:
        grid = RectangularGrid(3, 2)
        assert grid.position((2, 1)) == (2.0, 1.0)
        assert grid.outside_position((0, 0, "N")) == (0.0, -1.0)
        assert grid.outside_position((2, 1, "E")) == (3.0, 1.0)


class TestHexagonalGrid:
    @pytest.mark.parametrize("radius", [1, 2, 3, 4])
    def test_cell_count(self, radius: int) -> None:
        assert len(HexagonalGrid(radius).cells()) == 3 * radius * (radius + 1) + 1

    def test_radius_one_and_two(self) -> None:
        assert len(HexagonalGrid(1).cells()) == 7
        assert len(HexagonalGrid(2).cells()) == 19

    @pytest.mark.parametrize("radius", [2, 3, 5])
    def test_center_has_six_neighbors(self, radius: int) -> None:
        assert len(HexagonalGrid(radius).neighbors((0, 0))) == 6

    @pytest.mark.parametrize("radius", [1, 2, 3])
    def test_contract(self, radius: int) -> None:
        assert_contract(HexagonalGrid(radius))

    def test_entrance_and_exit_on_central_row(self) -> None:
        grid = HexagonalGrid(3)
        assert grid.entrance_cell() == (-3, 0)
        assert grid.exit_cell() == (3, 0)

    def test_boundary_test(self) -> None:
        grid = HexagonalGrid(2)
        assert grid.is_boundary((2, 0))
        assert grid.is_boundary((1, -2))
        assert not grid.is_boundary((1, 0))
        assert not grid.is_boundary((0, 0))
        for cell in grid.cells():
            assert grid.is_boundary(cell) == (hex_distance(*cell) == 2)

    def test_corner_and_edge_walls(self) -> None:
        grid = HexagonalGrid(2)
        assert len(grid.boundary_walls((2, 0))) == 3
        assert len(grid.boundary_walls((2, -1))) == 2
        assert grid.boundary_walls((0, 0)) == []

    def test_invalid_radius(self) -> None:
        with pytest.raises(InvalidDimensions):
            HexagonalGrid(0)
        with pytest.raises(InvalidDimensions):
            HexagonalGrid(-2)

    @pytest.mark.parametrize("radius", [2.5, 1.0, True, "2"])
    def test_non_integer_radius(self, radius) -> None:
        with pytest.raises(InvalidDimensions):
            HexagonalGrid(radius)

    def test_invalid_cell(self) -> None:
        grid = HexagonalGrid(1)
        with pytest.raises(InvalidCell):
            grid.neighbors((2, 0))
        with pytest.raises(InvalidCell):
            grid.position((1, 1))

    def test_positions(self) -> None:
        grid = HexagonalGrid(2)
        assert grid.position((1, 0)) == pytest.approx((1.0, 0.0))
        assert grid.position((0, 1)) == pytest.approx((0.5, math.sqrt(3) / 2))

    def test_neighbors_one_unit_apart(self) -> None:
        grid = HexagonalGrid(3)
        for cell in grid.cells():
            x1, y1 = grid.position(cell)
            for neighbor in grid.neighbors(cell):
                x2, y2 = grid.position(neighbor)
                assert math.hypot(x2 - x1, y2 - y1) == pytest.approx(1.0)
