#Read-only projection of a Maze for renderers
#Wall geometry comes from grid.position, grid.outside_position and grid.wall_length only

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from maze_core import CellId, Grid, Maze, Point
from rectangular_grid import RectangularGrid


class MarkerKind(Enum):
    ENTRANCE = "entrance"
    EXIT = "exit"
    SOLUTION = "solution"
    NORMAL = "normal"


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point


@dataclass(frozen=True)
class Marker:
    cell: CellId
    position: Point
    kind: MarkerKind


@dataclass
class Renderable:
    walls: List[Segment] = field(default_factory=list)
    markers: List[Marker] = field(default_factory=list)
    solution: Optional[List[Point]] = None

    def bounds(self) -> Tuple[float, float, float, float]:
        xs = [p[0] for s in self.walls for p in (s.start, s.end)] + [m.position[0] for m in self.markers]
        ys = [p[1] for s in self.walls for p in (s.start, s.end)] + [m.position[1] for m in self.markers]
        if not xs:
            return (0.0, 0.0, 0.0, 0.0)
        return (min(xs), min(ys), max(xs), max(ys))


def wall_between(p1: Point, p2: Point, length: float) -> Segment:
    #Perpendicular to the centre-to-centre line, through its midpoint
    mid_x = (p1[0] + p2[0]) / 2
    mid_y = (p1[1] + p2[1]) / 2
    dx = p2[0] - p1[0]
    dy = p2[1] - p1[1]
    norm = math.hypot(dx, dy)
    px, py = -dy / norm * length / 2, dx / norm * length / 2
    return Segment((mid_x + px, mid_y + py), (mid_x - px, mid_y - py))


def project(maze: Maze, grid: Grid, solution: Optional[Sequence[CellId]] = None) -> Renderable:
    renderable = Renderable()

    for cell in grid.cells():
        pos = grid.position(cell)
        for neighbor in grid.neighbors(cell):
            if cell < neighbor and not maze.has_passage(cell, neighbor):
                renderable.walls.append(wall_between(pos, grid.position(neighbor), grid.wall_length))

    for a, b in sorted(maze.boundary_walls):
        cell, outside = (a, b) if a in maze.cells else (b, a)
        renderable.walls.append(wall_between(grid.position(cell), grid.outside_position(outside), grid.wall_length))

    on_path = set(solution or ())
    for cell in grid.cells():
        if cell == maze.entrance:
            kind = MarkerKind.ENTRANCE
        elif cell == maze.exit:
            kind = MarkerKind.EXIT
        elif cell in on_path:
            kind = MarkerKind.SOLUTION
        else:
            kind = MarkerKind.NORMAL
        renderable.markers.append(Marker(cell, grid.position(cell), kind))

    if solution:
        renderable.solution = [grid.position(cell) for cell in solution]
    return renderable


def to_grid(maze: Maze, grid: RectangularGrid) -> List[List[int]]:
    #1 = floor, 0 = wall; cell (x, y) sits at (2x+1, 2y+1)
    grid_w = grid.width * 2 + 1
    grid_h = grid.height * 2 + 1
    out = [[0 for _ in range(grid_w)] for _ in range(grid_h)]
    for x, y in grid.cells():
        out[2 * y + 1][2 * x + 1] = 1
    for (ax, ay), (bx, by) in maze.passages:
        out[ay + by + 1][ax + bx + 1] = 1
    #Openings are the boundary sides left without a wall at entrance and exit
    for x, y in (maze.entrance, maze.exit):
        for side in grid.boundary_sides((x, y)):
            ox, oy = grid.outside_position((x, y, side))
            out[y + int(oy) + 1][x + int(ox) + 1] = 1
    return out


def render_text(maze: Maze, grid: RectangularGrid, solution: Optional[Sequence[CellId]] = None) -> str:
    cells = to_grid(maze, grid)
    chars = [["#" if v == 0 else " " for v in row] for row in cells]
    for x, y in solution or ():
        chars[2 * y + 1][2 * x + 1] = "*"
    ex, ey = maze.entrance
    chars[2 * ey + 1][2 * ex + 1] = "E"
    xx, xy = maze.exit
    chars[2 * xy + 1][2 * xx + 1] = "X"
    return "\n".join("".join(row) for row in chars)
