#Builds a perfect maze from any Grid with the randomized spanning-tree engine
#Internal edges are removable, perimeter edges to virtual exterior nodes are fixed
#The entrance and exit cells get no perimeter edge at all, which is what opens them

from __future__ import annotations

import logging
import random
from typing import List, Optional, Set, Union

from maze_core import BoundaryWall, CellId, Grid, InvalidTopology, Maze, Passage, canonical_edge
from spanning_tree import Edge, Graph, spanning_tree

logger = logging.getLogger(__name__)


def build_graph(grid: Grid, cells: Set[CellId], entrance: CellId, exit: CellId) -> Graph[CellId]:
    edges: List[Edge[CellId]] = []

    for cell in grid.cells():
        for neighbor in grid.neighbors(cell):
            if cell < neighbor:
                edges.append(Edge(cell, neighbor))

    removable_count = len(edges)

    for cell in grid.cells():
        if cell == entrance or cell == exit:
            continue
        for a, b in grid.boundary_walls(cell):
            edges.append(Edge(a, b, is_fixed=True))

    logger.debug(
        "%r: %d removable edges, %d fixed boundary edges",
        grid,
        removable_count,
        len(edges) - removable_count,
    )

    nodes = set(cells)
    for edge in edges:
        nodes.add(edge.a)
        nodes.add(edge.b)
    return Graph(nodes, edges)


def generate_maze(grid: Grid, rng: Optional[Union[random.Random, int]] = None) -> Maze:
    if rng is None:
        rng = random.Random()
    elif isinstance(rng, int):
        rng = random.Random(rng)

    cells = set(grid.cells())
    entrance = grid.entrance_cell()
    exit = grid.exit_cell()
    if entrance not in cells:
        raise InvalidTopology(f"entrance {entrance!r} is not a cell of {grid!r}")
    if exit not in cells:
        raise InvalidTopology(f"exit {exit!r} is not a cell of {grid!r}")

    graph = build_graph(grid, cells, entrance, exit)

    passages: Set[Passage] = set()
    boundary_walls: Set[BoundaryWall] = set()
    for edge in spanning_tree(graph, rng):
        a_inside = edge.a in cells
        b_inside = edge.b in cells
        if a_inside and b_inside:
            passages.add(canonical_edge(edge.a, edge.b))
        elif a_inside or b_inside:
            boundary_walls.add(canonical_edge(edge.a, edge.b))
        else:
            raise InvalidTopology(f"edge {edge.a!r}-{edge.b!r} touches no cell of {grid!r}")

    logger.info(
        "generated maze on %r: %d cells, %d passages, %d boundary walls",
        grid,
        len(cells),
        len(passages),
        len(boundary_walls),
    )
    return Maze(
        cells=frozenset(cells),
        passages=frozenset(passages),
        boundary_walls=frozenset(boundary_walls),
        entrance=entrance,
        exit=exit,
    )
