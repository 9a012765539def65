"""Tests for the randomized Kruskal engine on small labelled graphs."""

import random

import pytest

from spanning_tree import DisjointSet, Edge, Graph, fisher_yates, is_connected, spanning_tree


def lattice(width: int, height: int) -> Graph:
    """Plain integer-labelled lattice graph, no cells or walls involved."""
    nodes = {y * width + x for y in range(height) for x in range(width)}
    edges = []
    for y in range(height):
        for x in range(width):
            node = y * width + x
            if x + 1 < width:
                edges.append(Edge(node, node + 1))
            if y + 1 < height:
                edges.append(Edge(node, node + width))
    return Graph(nodes, edges)


class TestDisjointSet:
    def test_union_joins_once(self) -> None:
        sets = DisjointSet()
        assert sets.union("a", "b") is True
        assert sets.union("b", "a") is False
        assert sets.connected("a", "b")
        assert not sets.connected("a", "c")

    def test_find_creates_singletons(self) -> None:
        sets = DisjointSet()
        assert sets.find("x") == "x"
        assert sets.rank["x"] == 0

    def test_path_compression(self) -> None:
        """After find, every node on the chain points straight at the root."""
        sets = DisjointSet()
        for a, b in [(1, 2), (3, 4), (1, 3), (5, 6), (7, 8), (5, 7), (1, 5)]:
            sets.union(a, b)
        root = sets.find(8)
        for node in range(1, 9):
            assert sets.find(node) == root
            assert sets.parent[node] == root

    def test_union_by_rank_keeps_taller_root(self) -> None:
        sets = DisjointSet()
        sets.union(1, 2)
        sets.union(1, 3)
        tall = sets.find(1)
        sets.union(4, tall)
        assert sets.find(4) == tall


class TestFisherYates:
    def test_is_permutation_and_leaves_input_alone(self) -> None:
        items = list(range(20))
        shuffled = fisher_yates(items, random.Random(3))
        assert sorted(shuffled) == items
        assert items == list(range(20))

    def test_same_seed_same_order(self) -> None:
        items = list("abcdefghij")
        assert fisher_yates(items, random.Random(9)) == fisher_yates(items, random.Random(9))


class TestSpanningTree:
    def test_empty_graph(self) -> None:
        assert spanning_tree(Graph(), random.Random(0)) == []

    def test_triangle_drops_one_edge(self) -> None:
        graph = Graph({"a", "b", "c"}, [Edge("a", "b"), Edge("b", "c"), Edge("a", "c")])
        tree = spanning_tree(graph, random.Random(1))
        assert len(tree) == 2
        assert is_connected(graph.nodes, tree)

    def test_fixed_edges_always_kept(self) -> None:
        """Fixed edges stay even when they close a cycle."""
        fixed = [Edge("a", "b", True), Edge("b", "c", True), Edge("c", "a", True)]
        graph = Graph({"a", "b", "c"}, fixed + [Edge("a", "d")])
        tree = spanning_tree(graph, random.Random(2))
        for edge in fixed:
            assert edge in tree
        assert Edge("a", "d") in tree
        assert len(tree) == 4

    def test_removable_edge_between_fixed_joined_nodes_is_dropped(self) -> None:
        graph = Graph({"a", "b"}, [Edge("a", "b", True), Edge("a", "b")])
        tree = spanning_tree(graph, random.Random(0))
        assert tree == [Edge("a", "b", True)]

    def test_nodes_discovered_from_edges(self) -> None:
        """Edges may reference nodes that were never listed."""
        graph = Graph({"a"}, [Edge("a", "b"), Edge("b", "c")])
        tree = spanning_tree(graph, random.Random(4))
        assert len(tree) == 2

    @pytest.mark.parametrize("seed", range(20))
    def test_lattice_spanning_tree(self, seed: int) -> None:
        graph = lattice(6, 5)
        tree = spanning_tree(graph, random.Random(seed))
        assert len(tree) == len(graph.nodes) - 1
        assert is_connected(graph.nodes, tree)

    def test_deterministic_under_seed(self) -> None:
        graph = lattice(5, 5)
        assert spanning_tree(graph, random.Random(42)) == spanning_tree(graph, random.Random(42))

    def test_different_seeds_differ(self) -> None:
        graph = lattice(5, 5)
        first = set(spanning_tree(graph, random.Random(1)))
        second = set(spanning_tree(graph, random.Random(2)))
        assert first != second


class TestIsConnected:
    def test_trivial(self) -> None:
        assert is_connected([], [])
        assert is_connected(["a"], [])

    def test_split(self) -> None:
        assert not is_connected(["a", "b", "c"], [Edge("a", "b")])
        assert is_connected(["a", "b", "c"], [Edge("a", "b"), Edge("c", "b")])
