"""
Pytest configuration and shared fixtures for CommunityWeb tests.

This module provides small hand-checkable graphs, a real-world reference
graph (Zachary's karate club via NetworkX) and helpers for writing edge-list
files.
"""

import logging
from pathlib import Path

import networkx as nx
import pytest

from CommunityWeb_Analyzer.core.graph import Graph


def pytest_runtest_teardown(item, nextitem):
    """Clean up memory after each test to prevent accumulation."""
    import gc

    gc.collect()


@pytest.fixture
def mock_logger():
    """Fixture providing a test logger."""
    return logging.getLogger("communityweb.tests")


@pytest.fixture
def path_graph() -> Graph:
    """Path 0 - 1 - 2 - 3."""
    return Graph.from_edges([(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def complete_graph() -> Graph:
    """Complete graph on four vertices."""
    return Graph.from_networkx(nx.complete_graph(4))


@pytest.fixture
def two_pairs_graph() -> Graph:
    """Two disjoint edges: 0 - 1 and 2 - 3."""
    return Graph.from_edges([(0, 1), (2, 3)])


@pytest.fixture
def barbell_graph() -> Graph:
    """Two triangles {0, 1, 2} and {3, 4, 5} joined by the bridge 2 - 3."""
    return Graph.from_edges([(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)])


@pytest.fixture
def directed_scc_graph() -> Graph:
    """
    Directed graph with components {0, 1, 2}, {3, 4} and the isolated {5}.

    Cycle 0 -> 1 -> 2 -> 0, bridge 2 -> 3, cycle 3 <-> 4.
    """
    graph = Graph.from_edges([(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3)], directed=True)
    graph.add_vertex(5)
    return graph


@pytest.fixture
def karate_nx() -> nx.Graph:
    """Zachary's karate club as a NetworkX graph."""
    return nx.karate_club_graph()


@pytest.fixture
def karate_graph(karate_nx) -> Graph:
    """Zachary's karate club as a CommunityWeb graph."""
    return Graph.from_networkx(karate_nx)


@pytest.fixture
def write_edge_list(tmp_path):
    """Factory fixture writing edge-list text to a temporary file."""

    def _write(content: str, name: str = "edges.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def barbell_edge_file(write_edge_list) -> Path:
    """Edge-list file describing the barbell graph."""
    return write_edge_list(
        "# two triangles joined by a bridge\n"
        "0 1\n1 2\n2 0\n2 3\n3 4\n4 5\n5 3\n"
    )
