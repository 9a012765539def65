#BFS solver over the passage graph of a Maze
#Boundary walls are never consulted, only passages open a way between cells

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Generator, Iterator, List, Optional, Set, Tuple

from maze_core import CellId, Maze


@dataclass
class SolverSnapshot:
    visited: Set[CellId]
    frontier: Set[CellId]
    current: Optional[CellId]
    path: List[CellId]
    done: bool
    success: bool
    expanded: int


@dataclass
class SolverVisualizer:
    name: str
    color: Tuple[int, int, int]
    generator: Iterator[SolverSnapshot]
    snapshot: SolverSnapshot = field(init=False)
    finished: bool = field(default=False, init=False)

    def __post_init__(self):
        self.snapshot = SolverSnapshot(set(), set(), None, [], False, False, 0)
        self.advance()

    def advance(self, steps: int = 1):
        if self.finished:
            return
        for _ in range(steps):
            try:
                self.snapshot = next(self.generator)
            except StopIteration:
                self.finished = True
                break


@dataclass
class Difficulty:
    dead_ends: int
    solution_length: int
    solution_ratio: float


def passage_adjacency(maze: Maze) -> Dict[CellId, Set[CellId]]:
    adj: Dict[CellId, Set[CellId]] = {cell: set() for cell in maze.cells}
    for a, b in maze.passages:
        if a in adj and b in adj:
            adj[a].add(b)
            adj[b].add(a)
    return adj


def reconstruct_path(parent: Dict[CellId, CellId], start: CellId, goal: CellId) -> List[CellId]:
    if goal != start and goal not in parent:
        return []
    cur = goal
    result = [cur]
    while cur != start:
        cur = parent[cur]
        result.append(cur)
    result.reverse()
    return result


def bfs_search(maze: Maze) -> Generator[SolverSnapshot, None, None]:
    #Yields one snapshot per dequeued cell, the last one has done=True

    adj = passage_adjacency(maze)
    start, goal = maze.entrance, maze.exit
    q = deque([start])
    parent: Dict[CellId, CellId] = {}
    visited = {start}
    expanded = 0

    while q:
        current = q.popleft()
        expanded += 1
        success = current == goal
        path = reconstruct_path(parent, start, goal) if success else []
        yield SolverSnapshot(set(visited), set(q), current, path, success, success, expanded)
        if success:
            return
        for nxt in sorted(adj.get(current, ())):
            if nxt in visited:
                continue
            visited.add(nxt)
            parent[nxt] = current
            q.append(nxt)

    yield SolverSnapshot(set(visited), set(), None, [], True, False, expanded)


def consume_solver(generator: Iterator[SolverSnapshot]) -> SolverSnapshot:
    last = None
    for snapshot in generator:
        last = snapshot
        if snapshot.done:
            break
    return last if last is not None else SolverSnapshot(set(), set(), None, [], True, False, 0)


def solve(maze: Maze) -> Optional[List[CellId]]:
    """Shortest path from entrance to exit, or None when no path exists.

    None is an ordinary result, e.g. for a hand-built maze with a cut passage.
    """
    snapshot = consume_solver(bfs_search(maze))
    return snapshot.path if snapshot.success else None


def validate_solution(maze: Maze, solution: List[CellId]) -> List[str]:
    errors: List[str] = []
    if not solution:
        return ["empty solution"]

    if solution[0] != maze.entrance:
        errors.append(f"solution does not start at entrance: {solution[0]!r} != {maze.entrance!r}")
    if solution[-1] != maze.exit:
        errors.append(f"solution does not end at exit: {solution[-1]!r} != {maze.exit!r}")

    for cell in solution:
        if cell not in maze.cells:
            errors.append(f"solution contains unknown cell {cell!r}")

    adj = passage_adjacency(maze)
    for current, nxt in zip(solution, solution[1:]):
        if nxt not in adj.get(current, ()):
            errors.append(f"invalid step: no passage from {current!r} to {nxt!r}")
    return errors


def dead_ends(maze: Maze) -> List[CellId]:
    #Every cell with a single passage, entrance and exit included
    adj = passage_adjacency(maze)
    return sorted(cell for cell, links in adj.items() if len(links) == 1)


def analyze_difficulty(maze: Maze) -> Difficulty:
    path = solve(maze) or []
    ratio = len(path) / len(maze.cells) if maze.cells else 0.0
    return Difficulty(len(dead_ends(maze)), len(path), ratio)
