#Hexagonal topology on axial coordinates (q, r), hexagon-shaped board of a given radius
#Cartesian conversion is only used by position(), adjacency stays in axial space

from __future__ import annotations

import math
from typing import List, Tuple

from maze_core import BoundaryWall, CellId, Grid, InvalidDimensions, Point, canonical_edge

HEX_DIRS = {
    "E": (1, 0),
    "W": (-1, 0),
    "SE": (0, 1),
    "NW": (0, -1),
    "NE": (1, -1),
    "SW": (-1, 1),
}

SQRT3 = math.sqrt(3)


def hex_distance(q: int, r: int) -> int:
    #Distance from the centre cell (0, 0)
    return max(abs(q), abs(r), abs(q + r))


def axial_to_point(q: float, r: float) -> Point:
    return (q + r / 2, r * SQRT3 / 2)


class HexagonalGrid(Grid):
    #Centres of adjacent cells are one unit apart, so a shared side is 1/sqrt(3) long
    wall_length = 1 / SQRT3

    def __init__(self, radius: int):
        if not isinstance(radius, int) or isinstance(radius, bool):
            raise InvalidDimensions(f"hexagonal grid radius must be an integer, got {radius!r}")
        if radius < 1:
            raise InvalidDimensions(f"hexagonal grid radius must be at least 1, got {radius}")
        self.radius = radius

    def __repr__(self) -> str:
        return f"HexagonalGrid({self.radius})"

    def __contains__(self, cell: object) -> bool:
        return (
            isinstance(cell, tuple)
            and len(cell) == 2
            and all(isinstance(v, int) for v in cell)
            and hex_distance(cell[0], cell[1]) <= self.radius
        )

    def cells(self) -> List[CellId]:
        cells = []
        for q in range(-self.radius, self.radius + 1):
            r1 = max(-self.radius, -q - self.radius)
            r2 = min(self.radius, -q + self.radius)
            for r in range(r1, r2 + 1):
                cells.append((q, r))
        return cells

    def neighbors(self, cell: CellId) -> List[CellId]:
        self._require(cell)
        q, r = cell
        return [
            (nq, nr)
            for dq, dr in HEX_DIRS.values()
            if hex_distance(nq := q + dq, nr := r + dr) <= self.radius
        ]

    def entrance_cell(self) -> CellId:
        return (-self.radius, 0)

    def exit_cell(self) -> CellId:
        return (self.radius, 0)

    def boundary_sides(self, cell: CellId) -> List[str]:
        self._require(cell)
        q, r = cell
        return [
            side
            for side, (dq, dr) in HEX_DIRS.items()
            if hex_distance(q + dq, r + dr) > self.radius
        ]

    def is_boundary(self, cell: CellId) -> bool:
        self._require(cell)
        return hex_distance(*cell) == self.radius

    def boundary_walls(self, cell: CellId) -> List[BoundaryWall]:
        sides = self.boundary_sides(cell)
        q, r = cell
        return [canonical_edge(cell, (q, r, side)) for side in sides]

    def position(self, cell: CellId) -> Point:
        self._require(cell)
        return axial_to_point(*cell)

    def outside_position(self, node: Tuple[int, int, str]) -> Point:
        q, r, side = node
        self._require((q, r))
        dq, dr = HEX_DIRS[side]
        return axial_to_point(q + dq, r + dr)
