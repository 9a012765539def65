"""Randomized Kruskal's algorithm over a generic graph.

Nothing in here knows about cells, mazes or walls. Edges flagged as fixed are
always part of the output; the remaining edges are shuffled and kept only when
they join two previously separate components.

Nodes are discovered from the edges themselves, so an edge may reference a
node that is missing from ``Graph.nodes``. That is accepted on purpose: callers
such as the maze generator add virtual nodes without enumerating them.
"""

from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Generic, Hashable, Iterable, List, Sequence, Set, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class Edge(Generic[T]):
    a: T
    b: T
    is_fixed: bool = False


@dataclass
class Graph(Generic[T]):
    nodes: Set[T] = field(default_factory=set)
    edges: List[Edge[T]] = field(default_factory=list)


class DisjointSet(Generic[T]):
    #Union-find with path compression and union by rank, singletons created on first use

    def __init__(self):
        self.parent: Dict[T, T] = {}
        self.rank: Dict[T, int] = {}

    def find(self, x: T) -> T:
        if x not in self.parent:
            self.parent[x] = x
            self.rank[x] = 0
            return x
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: T, y: T) -> bool:
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        if self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1
        return True

    def connected(self, x: T, y: T) -> bool:
        return self.find(x) == self.find(y)


def fisher_yates(items: Sequence[T], rng: random.Random) -> List[T]:
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def spanning_tree(graph: Graph[T], rng: random.Random) -> List[Edge[T]]:
    if not graph.nodes:
        return []

    fixed = [edge for edge in graph.edges if edge.is_fixed]
    removable = [edge for edge in graph.edges if not edge.is_fixed]

    sets: DisjointSet[T] = DisjointSet()
    result: List[Edge[T]] = []

    #Fixed edges are structural, they go in even when their ends are already joined
    for edge in fixed:
        sets.union(edge.a, edge.b)
        result.append(edge)

    for edge in fisher_yates(removable, rng):
        if sets.union(edge.a, edge.b):
            result.append(edge)

    return result


def is_connected(nodes: Iterable[T], edges: Iterable[Edge[T]]) -> bool:
    nodes = list(nodes)
    if len(nodes) <= 1:
        return True
    adj: Dict[T, Set[T]] = {node: set() for node in nodes}
    for edge in edges:
        if edge.a in adj and edge.b in adj:
            adj[edge.a].add(edge.b)
            adj[edge.b].add(edge.a)
    start = nodes[0]
    visited = {start}
    q = deque([start])
    while q:
        current = q.popleft()
        for nxt in adj[current]:
            if nxt not in visited:
                visited.add(nxt)
                q.append(nxt)
    return len(visited) == len(adj)
