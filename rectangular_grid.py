#Rectangular topology: cells are (x, y) on [0, width) x [0, height), 4-neighbor adjacency

from __future__ import annotations

from typing import List, Tuple

from maze_core import BoundaryWall, CellId, Grid, InvalidDimensions, Point, canonical_edge

DIRS = {
    "N": (0, -1),
    "S": (0, 1),
    "E": (1, 0),
    "W": (-1, 0),
}


def within_bounds(width: int, height: int, x: int, y: int) -> bool:
    return 0 <= x < width and 0 <= y < height


class RectangularGrid(Grid):
    wall_length = 1.0

    def __init__(self, width: int, height: int):
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (width, height)):
            raise InvalidDimensions(f"grid dimensions must be integers, got {width!r}x{height!r}")
        if width < 1 or height < 1:
            raise InvalidDimensions(f"grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def __repr__(self) -> str:
        return f"RectangularGrid({self.width}, {self.height})"

    def __contains__(self, cell: object) -> bool:
        return (
            isinstance(cell, tuple)
            and len(cell) == 2
            and all(isinstance(v, int) for v in cell)
            and within_bounds(self.width, self.height, cell[0], cell[1])
        )

    def cells(self) -> List[CellId]:
        return [(x, y) for y in range(self.height) for x in range(self.width)]

    def neighbors(self, cell: CellId) -> List[CellId]:
        self._require(cell)
        x, y = cell
        return [
            (nx, ny)
            for dx, dy in DIRS.values()
            if within_bounds(self.width, self.height, nx := x + dx, ny := y + dy)
        ]

    def entrance_cell(self) -> CellId:
        return (0, 0)

    def exit_cell(self) -> CellId:
        return (self.width - 1, self.height - 1)

    def boundary_sides(self, cell: CellId) -> List[str]:
        self._require(cell)
        x, y = cell
        return [
            direction
            for direction, (dx, dy) in DIRS.items()
            if not within_bounds(self.width, self.height, x + dx, y + dy)
        ]

    def is_boundary(self, cell: CellId) -> bool:
        return bool(self.boundary_sides(cell))

    def boundary_walls(self, cell: CellId) -> List[BoundaryWall]:
        sides = self.boundary_sides(cell)
        x, y = cell
        return [canonical_edge(cell, (x, y, side)) for side in sides]

    def position(self, cell: CellId) -> Point:
        self._require(cell)
        x, y = cell
        return (float(x), float(y))

    def outside_position(self, node: Tuple[int, int, str]) -> Point:
        x, y, side = node
        self._require((x, y))
        dx, dy = DIRS[side]
        return (float(x + dx), float(y + dy))
