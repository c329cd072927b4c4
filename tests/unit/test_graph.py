"""
Unit tests for the graph store and the Edge value object.

Tests vertex and edge insertion policies, symmetric adjacency for undirected
graphs, edge removal, derived graphs and NetworkX conversion.
"""

import pytest

from CommunityWeb_Analyzer.core.exceptions import (
    DuplicateVertexError,
    GraphError,
    InvalidEdgeRemovalError,
    UnknownVertexError,
)
from CommunityWeb_Analyzer.core.graph import Graph
from CommunityWeb_Analyzer.core.types import Edge, make_partition

pytestmark = [pytest.mark.unit, pytest.mark.core]


class TestEdge:
    """Test Edge equality and helpers."""

    def test_undirected_edges_ignore_orientation(self):
        assert Edge(1, 2) == Edge(2, 1)
        assert hash(Edge(1, 2)) == hash(Edge(2, 1))
        assert len({Edge(1, 2), Edge(2, 1)}) == 1

    def test_directed_edges_respect_orientation(self):
        assert Edge(1, 2, directed=True) != Edge(2, 1, directed=True)
        assert Edge(1, 2, directed=True) != Edge(1, 2)

    def test_other_endpoint(self):
        edge = Edge(3, 7)
        assert edge.other(3) == 7
        assert edge.other(7) == 3
        with pytest.raises(ValueError):
            edge.other(5)

    def test_repr_and_self_loop(self):
        assert repr(Edge(0, 1)) == "Edge(0-1)"
        assert repr(Edge(0, 1, directed=True)) == "Edge(0->1)"
        assert Edge(4, 4).is_self_loop
        assert Edge(0, 1).reversed().endpoints == (1, 0)


class TestMakePartition:
    def test_keys_are_minimum_members_ascending(self):
        partition = make_partition([[5, 3], [2, 9], [7]])
        assert list(partition) == [2, 3, 7]
        assert partition[3] == frozenset({3, 5})

    def test_empty_group_rejected(self):
        with pytest.raises(ValueError):
            make_partition([[1], []])


class TestGraphVertices:
    """Test vertex insertion and lookup."""

    def test_empty_graph(self):
        graph = Graph()
        assert graph.number_of_vertices() == 0
        assert graph.number_of_edges() == 0
        assert graph.export_snapshot() == {}

    def test_add_vertex(self):
        graph = Graph()
        graph.add_vertex(3)
        assert graph.has_vertex(3)
        assert 3 in graph
        assert graph.neighbors(3) == []
        assert graph.degree(3) == 0

    def test_duplicate_vertex_raises(self):
        graph = Graph()
        graph.add_vertex(1)
        with pytest.raises(DuplicateVertexError) as exc_info:
            graph.add_vertex(1)
        assert exc_info.value.vertex == 1
        assert graph.number_of_vertices() == 1

    def test_duplicate_vertex_exist_ok(self):
        graph = Graph.from_edges([(1, 2)])
        graph.add_vertex(1, exist_ok=True)
        assert graph.number_of_vertices() == 2
        assert graph.neighbors(1) == [2]

    def test_vertices_keep_insertion_order(self):
        graph = Graph()
        for vertex in (5, 1, 3):
            graph.add_vertex(vertex)
        assert graph.vertices == [5, 1, 3]
        assert list(graph) == [5, 1, 3]

    def test_unknown_vertex_queries_raise(self):
        graph = Graph()
        with pytest.raises(UnknownVertexError):
            graph.neighbors(0)
        with pytest.raises(UnknownVertexError):
            graph.degree(0)


class TestGraphEdges:
    """Test edge insertion, symmetry and removal."""

    def test_add_edge_requires_both_vertices(self):
        graph = Graph()
        graph.add_vertex(0)
        with pytest.raises(UnknownVertexError) as exc_info:
            graph.add_edge(0, 1)
        assert exc_info.value.vertex == 1
        assert graph.number_of_edges() == 0
        assert graph.neighbors(0) == []

    def test_undirected_adjacency_is_symmetric(self, barbell_graph):
        snapshot = barbell_graph.export_snapshot()
        for vertex, neighbors in snapshot.items():
            for neighbor in neighbors:
                assert vertex in snapshot[neighbor]

    def test_edge_count_matches_degree_sum(self, barbell_graph):
        degree_sum = sum(barbell_graph.degree(v) for v in barbell_graph)
        assert degree_sum == 2 * barbell_graph.number_of_edges()

    def test_duplicate_edge_is_noop(self):
        graph = Graph.from_edges([(0, 1)])
        graph.add_edge(1, 0)
        graph.add_edge(0, 1)
        assert graph.number_of_edges() == 1
        assert graph.neighbors(0) == [1]
        assert graph.neighbors(1) == [0]

    def test_directed_edges_only_in_source_adjacency(self):
        graph = Graph.from_edges([(0, 1)], directed=True)
        assert graph.neighbors(0) == [1]
        assert graph.neighbors(1) == []
        assert graph.has_edge(0, 1)
        assert not graph.has_edge(1, 0)

    def test_directed_reciprocal_edges_are_distinct(self):
        graph = Graph.from_edges([(0, 1), (1, 0)], directed=True)
        assert graph.number_of_edges() == 2

    def test_neighbors_follow_edge_insertion_order(self):
        graph = Graph.from_edges([(0, 3), (0, 1), (2, 0)])
        assert graph.neighbors(0) == [3, 1, 2]

    def test_remove_edge(self, path_graph):
        path_graph.remove_edge(Edge(2, 1))
        assert path_graph.number_of_edges() == 2
        assert 2 not in path_graph.neighbors(1)
        assert 1 not in path_graph.neighbors(2)
        assert not path_graph.has_edge(1, 2)

    def test_remove_absent_edge_raises(self, path_graph):
        with pytest.raises(InvalidEdgeRemovalError):
            path_graph.remove_edge(Edge(0, 3))
        assert path_graph.number_of_edges() == 3

    def test_remove_edge_twice_raises(self, path_graph):
        path_graph.remove_edge(Edge(0, 1))
        with pytest.raises(GraphError):
            path_graph.remove_edge(Edge(0, 1))

    def test_remove_edge_accepts_undirected_edge_on_directed_graph(self, directed_scc_graph):
        directed_scc_graph.remove_edge(Edge(2, 3))
        assert not directed_scc_graph.has_edge(2, 3)

    def test_self_loop_counts_once(self):
        graph = Graph.from_edges([(0, 0), (0, 1)])
        assert graph.number_of_edges() == 2
        assert graph.neighbors(0) == [0, 1]


class TestGraphSnapshotAndDerivedGraphs:
    def test_snapshot_is_independent(self, path_graph):
        snapshot = path_graph.export_snapshot()
        snapshot[0].add(99)
        assert path_graph.export_snapshot()[0] == {1}

    def test_snapshot_contents(self, path_graph):
        assert path_graph.export_snapshot() == {0: {1}, 1: {0, 2}, 2: {1, 3}, 3: {2}}

    def test_reverse_directed(self, directed_scc_graph):
        reversed_graph = directed_scc_graph.reverse()
        assert reversed_graph.vertices == directed_scc_graph.vertices
        assert reversed_graph.has_edge(1, 0)
        assert not reversed_graph.has_edge(0, 1)
        assert reversed_graph.number_of_edges() == directed_scc_graph.number_of_edges()

    def test_copy_is_independent(self, path_graph):
        duplicate = path_graph.copy()
        duplicate.remove_edge(Edge(0, 1))
        assert path_graph.has_edge(0, 1)
        assert duplicate.vertices == path_graph.vertices

    def test_induced_subgraph(self, barbell_graph):
        subgraph = barbell_graph.induced_subgraph([2, 3, 4])
        assert subgraph.vertices == [2, 3, 4]
        assert {edge for edge in subgraph.edges} == {Edge(2, 3), Edge(3, 4)}

    def test_induced_subgraph_unknown_vertex(self, path_graph):
        with pytest.raises(UnknownVertexError):
            path_graph.induced_subgraph([0, 42])

    def test_networkx_conversion(self, karate_nx):
        graph = Graph.from_networkx(karate_nx)
        assert graph.number_of_vertices() == karate_nx.number_of_nodes()
        assert graph.number_of_edges() == karate_nx.number_of_edges()
        back = graph.to_networkx()
        assert {frozenset(e) for e in back.edges()} == {frozenset(e) for e in karate_nx.edges()}

    def test_repr(self, path_graph):
        assert repr(path_graph) == "Graph(undirected, 4 vertices, 3 edges)"

    def test_snapshot_size_and_symmetry(self, karate_graph):
        snapshot = karate_graph.export_snapshot()
        assert len(snapshot) == karate_graph.number_of_vertices()
        for vertex, neighbors in snapshot.items():
            assert all(vertex in snapshot[n] for n in neighbors)
        assert karate_graph.export_snapshot() == snapshot
