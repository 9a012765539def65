#Core types shared by every grid topology, the generator, the validator and the solver
#A grid only describes adjacency and geometry, it knows nothing about mazes

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import FrozenSet, Hashable, List, Tuple

#Cells are small integer tuples: (x, y) on rectangles, axial (q, r) on hexagons
#Virtual exterior nodes are (a, b, side) and never appear in cells()
CellId = Tuple[Hashable, ...]
Passage = Tuple[CellId, CellId]
BoundaryWall = Tuple[CellId, CellId]
Point = Tuple[float, float]


class MazeError(Exception):
    pass


class InvalidDimensions(MazeError, ValueError):
    #Grid built with a non-positive size or radius
    pass


class InvalidCell(MazeError, ValueError):
    #A cell id that the grid never produced
    pass


class InvalidTopology(MazeError, RuntimeError):
    #The grid broke its own contract, e.g. an entrance outside cells()
    pass


def canonical_edge(a: CellId, b: CellId) -> Tuple[CellId, CellId]:
    return tuple(sorted((a, b)))


@dataclass(frozen=True)
class Maze:
    cells: FrozenSet[CellId]
    passages: FrozenSet[Passage]
    boundary_walls: FrozenSet[BoundaryWall]
    entrance: CellId
    exit: CellId

    def passage_count(self) -> int:
        return len(self.passages)

    def has_passage(self, a: CellId, b: CellId) -> bool:
        return canonical_edge(a, b) in self.passages


class Grid(ABC):
    """Topology provider shared by every maze shape.

    Implementations are immutable once constructed and can be shared between
    threads. ``position`` and ``outside_position`` exist only for renderers;
    the generator never calls them.
    """

    #Length of the side two adjacent cells share, in position() units
    wall_length: float = 1.0

    @abstractmethod
    def cells(self) -> List[CellId]:
        ...

    @abstractmethod
    def neighbors(self, cell: CellId) -> List[CellId]:
        ...

    @abstractmethod
    def entrance_cell(self) -> CellId:
        ...

    @abstractmethod
    def exit_cell(self) -> CellId:
        ...

    @abstractmethod
    def is_boundary(self, cell: CellId) -> bool:
        ...

    @abstractmethod
    def boundary_walls(self, cell: CellId) -> List[BoundaryWall]:
        ...

    @abstractmethod
    def position(self, cell: CellId) -> Point:
        ...

    @abstractmethod
    def outside_position(self, node: CellId) -> Point:
        #Where the missing neighbor across a boundary side would sit
        ...

    @abstractmethod
    def __contains__(self, cell: object) -> bool:
        ...

    def _require(self, cell: CellId) -> None:
        if cell not in self:
            raise InvalidCell(f"{cell!r} is not a cell of {self!r}")
