"""Post-hoc property checks for a Maze against the Grid it claims to live on.

The validator makes no assumption about how the maze was built, so it can be
pointed at hand-made or deliberately broken Maze values. Every check runs and
reports on its own; nothing here raises, grid errors are turned into
violations instead.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Set, Tuple

from maze_core import CellId, Grid, InvalidCell, Maze, canonical_edge
from spanning_tree import DisjointSet


class ViolationKind(Enum):
    """What property a maze failed."""

    ENTRANCE_MISSING = "entrance_missing"
    EXIT_MISSING = "exit_missing"
    CELLS_MISMATCH = "cells_mismatch"
    UNKNOWN_CELL = "unknown_cell"  # Passage endpoint outside maze.cells
    NOT_ADJACENT = "not_adjacent"  # Passage between cells the grid does not connect
    PASSAGE_COUNT = "passage_count"  # |passages| != |cells| - 1
    CYCLE = "cycle"
    DISCONNECTED = "disconnected"
    EXIT_UNREACHABLE = "exit_unreachable"
    BOUNDARY_BREACH = "boundary_breach"  # Passage running through a perimeter wall
    OPENING_WALLED = "opening_walled"  # Boundary wall at the entrance or exit
    WALL_MISSING = "wall_missing"  # Expected perimeter wall absent
    MALFORMED_EDGE = "malformed_edge"  # Passage or wall entry that is not a pair


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


def _is_pair(edge: object) -> bool:
    if not (isinstance(edge, tuple) and len(edge) == 2):
        return False
    try:
        hash(edge)
    except TypeError:
        return False
    return True


def _pairs(edges) -> List[Tuple[CellId, CellId]]:
    #Well-formed entries only, in a stable order
    return sorted((edge for edge in edges if _is_pair(edge)), key=repr)


def _adjacency(maze: Maze) -> Dict[CellId, Set[CellId]]:
    adj: Dict[CellId, Set[CellId]] = {cell: set() for cell in maze.cells}
    for a, b in _pairs(maze.passages):
        if a in adj and b in adj:
            adj[a].add(b)
            adj[b].add(a)
    return adj


def _reachable(adj: Dict[CellId, Set[CellId]], start: CellId) -> Set[CellId]:
    if start not in adj:
        return set()
    visited = {start}
    q = deque([start])
    while q:
        current = q.popleft()
        for nxt in adj[current]:
            if nxt not in visited:
                visited.add(nxt)
                q.append(nxt)
    return visited


def check_endpoints(maze: Maze) -> List[Violation]:
    violations = []
    if maze.entrance not in maze.cells:
        violations.append(Violation(ViolationKind.ENTRANCE_MISSING, f"entrance {maze.entrance!r} not in cells"))
    if maze.exit not in maze.cells:
        violations.append(Violation(ViolationKind.EXIT_MISSING, f"exit {maze.exit!r} not in cells"))
    return violations


def check_edges(maze: Maze) -> List[Violation]:
    violations = []
    for name, edges in (("passage", maze.passages), ("boundary wall", maze.boundary_walls)):
        for edge in sorted(edges, key=repr):
            if not _is_pair(edge):
                violations.append(Violation(ViolationKind.MALFORMED_EDGE, f"{name} {edge!r} is not a pair of cells"))
    return violations


def check_cells(maze: Maze, grid: Grid) -> List[Violation]:
    expected = set(grid.cells())
    if set(maze.cells) == expected:
        return []
    missing = len(expected - maze.cells)
    extra = len(maze.cells - expected)
    return [Violation(ViolationKind.CELLS_MISMATCH, f"{missing} grid cells missing, {extra} unknown cells")]


def check_adjacency(maze: Maze, grid: Grid) -> List[Violation]:
    violations = []
    for a, b in _pairs(maze.passages):
        if a not in maze.cells or b not in maze.cells:
            violations.append(Violation(ViolationKind.UNKNOWN_CELL, f"passage {a!r}-{b!r} leaves the cell set"))
            continue
        try:
            adjacent = b in grid.neighbors(a)
        except InvalidCell as exc:
            violations.append(Violation(ViolationKind.UNKNOWN_CELL, str(exc)))
            continue
        if not adjacent:
            violations.append(Violation(ViolationKind.NOT_ADJACENT, f"passage between non-neighbors {a!r}-{b!r}"))
    return violations


def check_spanning(maze: Maze) -> List[Violation]:
    violations = []
    expected = len(maze.cells) - 1
    if len(maze.passages) != expected:
        violations.append(
            Violation(ViolationKind.PASSAGE_COUNT, f"expected {expected} passages, found {len(maze.passages)}")
        )

    sets: DisjointSet[CellId] = DisjointSet()
    for a, b in _pairs(maze.passages):
        if not sets.union(a, b):
            violations.append(Violation(ViolationKind.CYCLE, f"passage {a!r}-{b!r} closes a cycle"))
    return violations


def check_connectivity(maze: Maze) -> List[Violation]:
    violations = []
    visited = _reachable(_adjacency(maze), maze.entrance)
    if len(visited) != len(maze.cells):
        violations.append(
            Violation(ViolationKind.DISCONNECTED, f"not all cells reachable: {len(visited)}/{len(maze.cells)}")
        )
    if maze.exit not in visited:
        violations.append(Violation(ViolationKind.EXIT_UNREACHABLE, "exit not reachable from entrance"))
    return violations


def check_boundary(maze: Maze, grid: Grid) -> List[Violation]:
    violations = []
    openings = {maze.entrance, maze.exit}

    for a, b in _pairs(maze.boundary_walls):
        if a in openings or b in openings:
            violations.append(Violation(ViolationKind.OPENING_WALLED, f"boundary wall {a!r}-{b!r} closes an opening"))

    for cell in sorted(maze.cells, key=repr):
        if cell in openings:
            continue
        try:
            walls = grid.boundary_walls(cell)
        except InvalidCell as exc:
            violations.append(Violation(ViolationKind.UNKNOWN_CELL, str(exc)))
            continue
        for wall in walls:
            wall = canonical_edge(*wall)
            if wall in maze.passages:
                violations.append(Violation(ViolationKind.BOUNDARY_BREACH, f"passage {wall[0]!r}-{wall[1]!r} crosses the perimeter"))
            if wall not in maze.boundary_walls:
                violations.append(Violation(ViolationKind.WALL_MISSING, f"boundary wall {wall[0]!r}-{wall[1]!r} missing"))
    return violations


def validate(maze: Maze, grid: Grid) -> List[Violation]:
    return (
        check_endpoints(maze)
        + check_edges(maze)
        + check_cells(maze, grid)
        + check_adjacency(maze, grid)
        + check_spanning(maze)
        + check_connectivity(maze)
        + check_boundary(maze, grid)
    )


def connected_components(maze: Maze) -> List[Set[CellId]]:
    #Passage-connected groups of cells, largest first
    adj = _adjacency(maze)
    seen: Set[CellId] = set()
    components = []
    for cell in sorted(adj, key=repr):
        if cell in seen:
            continue
        component = _reachable(adj, cell)
        seen |= component
        components.append(component)
    components.sort(key=len, reverse=True)
    return components
