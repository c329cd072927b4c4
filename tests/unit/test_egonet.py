"""
Unit tests for ego-network extraction.
"""

import pytest

from CommunityWeb_Analyzer.analysis.egonet import egonet_density, get_egonet
from CommunityWeb_Analyzer.core.exceptions import UnknownVertexError
from CommunityWeb_Analyzer.core.graph import Graph
from CommunityWeb_Analyzer.core.types import Edge

pytestmark = [pytest.mark.unit, pytest.mark.analysis]


@pytest.fixture
def ego_graph() -> Graph:
    """Triangle 0-1-2 with a tail 2-3-4."""
    return Graph.from_edges([(0, 1), (0, 2), (1, 2), (2, 3), (3, 4)])


class TestGetEgonet:
    def test_center_first_then_neighbors(self, ego_graph):
        egonet = get_egonet(ego_graph, 2)
        assert egonet.vertices == [2, 0, 1, 3]

    def test_includes_edges_between_neighbors(self, ego_graph):
        egonet = get_egonet(ego_graph, 2)
        assert set(egonet.edges) == {Edge(2, 0), Edge(2, 1), Edge(2, 3), Edge(0, 1)}

    def test_edges_leaving_neighborhood_excluded(self, ego_graph):
        egonet = get_egonet(ego_graph, 2)
        assert 4 not in egonet
        assert not egonet.has_edge(3, 4)

    def test_center_edges_added_first(self, ego_graph):
        egonet = get_egonet(ego_graph, 2)
        assert egonet.edges[:3] == [Edge(2, 0), Edge(2, 1), Edge(2, 3)]

    def test_source_graph_untouched(self, ego_graph):
        before = ego_graph.export_snapshot()
        get_egonet(ego_graph, 2)
        assert ego_graph.export_snapshot() == before

    def test_isolated_center(self):
        graph = Graph()
        graph.add_vertex(9)
        egonet = get_egonet(graph, 9)
        assert egonet.vertices == [9]
        assert egonet.number_of_edges() == 0

    def test_unknown_center_raises(self, ego_graph):
        with pytest.raises(UnknownVertexError):
            get_egonet(ego_graph, 42)

    def test_directed_egonet_uses_out_neighbors(self, directed_scc_graph):
        egonet = get_egonet(directed_scc_graph, 2)
        assert egonet.directed
        assert egonet.vertices == [2, 0, 3]
        assert set(egonet.edges) == {Edge(2, 0, True), Edge(2, 3, True)}

    def test_self_loop_on_center_ignored(self):
        graph = Graph.from_edges([(0, 0), (0, 1)])
        egonet = get_egonet(graph, 0)
        assert egonet.vertices == [0, 1]
        assert egonet.number_of_edges() == 1


class TestEgonetDensity:
    def test_clique_neighborhood(self, ego_graph):
        assert egonet_density(ego_graph, 0) == pytest.approx(1.0)

    def test_partial_neighborhood(self, ego_graph):
        assert egonet_density(ego_graph, 2) == pytest.approx(4 / 6)

    def test_isolated_center(self):
        graph = Graph()
        graph.add_vertex(0)
        assert egonet_density(graph, 0) == 0.0
