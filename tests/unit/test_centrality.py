"""
Unit tests for edge betweenness centrality.

Hand-checked values on small graphs plus NetworkX as a reference
implementation on trees, where every shortest path is unique and both
accumulation rules agree. NetworkX halves unnormalised undirected scores,
so undirected comparisons use twice its value.
"""

import networkx as nx
import pytest

from CommunityWeb_Analyzer.analysis.centrality import (
    edge_betweenness,
    max_betweenness_edges,
    single_source_contributions,
)
from CommunityWeb_Analyzer.core.exceptions import AnalysisCancelledError, UnknownVertexError
from CommunityWeb_Analyzer.core.graph import Graph
from CommunityWeb_Analyzer.core.types import Edge

pytestmark = [pytest.mark.unit, pytest.mark.analysis]


class TestSingleSourceContributions:
    def test_path_from_endpoint(self, path_graph):
        contributions = single_source_contributions(path_graph, 0)
        assert contributions == {Edge(0, 1): 3.0, Edge(1, 2): 2.0, Edge(2, 3): 1.0}

    def test_split_shortest_paths(self):
        # Square 0-1-3-2-0: two shortest paths from 0 to 3
        graph = Graph.from_edges([(0, 1), (0, 2), (1, 3), (2, 3)])
        contributions = single_source_contributions(graph, 0)
        assert contributions == {
            Edge(1, 3): 1.0,
            Edge(2, 3): 1.0,
            Edge(0, 1): 2.0,
            Edge(0, 2): 2.0,
        }

    def test_unreachable_edges_omitted(self, two_pairs_graph):
        assert single_source_contributions(two_pairs_graph, 0) == {Edge(0, 1): 1.0}

    def test_unknown_source(self, path_graph):
        with pytest.raises(UnknownVertexError):
            single_source_contributions(path_graph, 10)


class TestEdgeBetweenness:
    """Test the full edge betweenness map."""

    def test_path_graph(self, path_graph):
        betweenness = edge_betweenness(path_graph)
        assert betweenness == {Edge(0, 1): 6.0, Edge(1, 2): 8.0, Edge(2, 3): 6.0}

    def test_complete_graph_scores_two_per_edge(self, complete_graph):
        betweenness = edge_betweenness(complete_graph)
        assert len(betweenness) == 6
        assert set(betweenness.values()) == {2.0}
        # Every pair is adjacent, so the total is V(V - 1)
        assert sum(betweenness.values()) == 4 * 3

    def test_every_edge_has_a_score(self, barbell_graph):
        barbell_graph.add_vertex(9)
        betweenness = edge_betweenness(barbell_graph)
        assert set(betweenness) == set(barbell_graph.edges)
        assert all(score > 0 for score in betweenness.values())

    def test_edgeless_graph(self):
        graph = Graph()
        graph.add_vertex(0)
        assert edge_betweenness(graph) == {}

    def test_total_equals_sum_of_distances_on_tree(self):
        tree = nx.balanced_tree(2, 4)
        betweenness = edge_betweenness(Graph.from_networkx(tree))
        distances = sum(
            length
            for _, lengths in nx.all_pairs_shortest_path_length(tree)
            for length in lengths.values()
        )
        assert sum(betweenness.values()) == pytest.approx(distances)

    def test_matches_networkx_on_tree(self):
        tree = nx.balanced_tree(3, 3)
        ours = edge_betweenness(Graph.from_networkx(tree))
        reference = nx.edge_betweenness_centrality(tree, normalized=False)
        for (u, v), score in reference.items():
            assert ours[Edge(u, v)] == pytest.approx(2 * score)

    def test_matches_networkx_on_directed_tree(self):
        directed = nx.bfs_tree(nx.balanced_tree(2, 4), 0)
        ours = edge_betweenness(Graph.from_networkx(directed))
        reference = nx.edge_betweenness_centrality(directed, normalized=False)
        for (u, v), score in reference.items():
            assert ours[Edge(u, v, directed=True)] == pytest.approx(score)

    def test_graph_not_modified(self, barbell_graph):
        before = barbell_graph.export_snapshot()
        edge_betweenness(barbell_graph)
        assert barbell_graph.export_snapshot() == before

    def test_cancellation(self, karate_graph):
        calls = []

        def should_cancel():
            calls.append(1)
            return len(calls) > 2

        with pytest.raises(AnalysisCancelledError) as exc_info:
            edge_betweenness(karate_graph, should_cancel=should_cancel)
        assert exc_info.value.stage == "edge betweenness"
        assert exc_info.value.completed == 2

    @pytest.mark.slow
    def test_parallel_matches_sequential(self, karate_graph, monkeypatch):
        monkeypatch.setattr("CommunityWeb_Analyzer.utils.parallel.PARALLEL_THRESHOLD", 0)
        sequential = edge_betweenness(karate_graph, n_jobs=1)
        parallel = edge_betweenness(karate_graph, n_jobs=2)
        assert list(parallel) == list(sequential)
        assert parallel == sequential


class TestMaxBetweennessEdges:
    def test_single_maximum(self, path_graph):
        max_score, edges = max_betweenness_edges(edge_betweenness(path_graph))
        assert max_score == 8.0
        assert edges == [Edge(1, 2)]

    def test_ties_returned_in_map_order(self, complete_graph):
        betweenness = edge_betweenness(complete_graph)
        max_score, edges = max_betweenness_edges(betweenness)
        assert max_score == 2.0
        assert edges == list(betweenness)

    def test_empty_map(self):
        assert max_betweenness_edges({}) == (0.0, [])
