"""
Analysis layer for CommunityWeb social network analysis.

This module provides the graph algorithms: traversal primitives, ego-network
extraction, strongly connected components, edge betweenness centrality and
two community detectors (divisive Girvan-Newman and greedy agglomerative
modularity optimization).
"""

from .centrality import edge_betweenness, max_betweenness_edges, single_source_contributions
from .connectivity import calculate_connectivity_metrics, find_sccs, scc_partition
from .divisive import GirvanNewmanDetector
from .egonet import egonet_density, get_egonet
from .modularity import FastNewmanOptimizer, delta_modularity, modularity
from .traversal import (
    bfs_order,
    components_to_partition,
    connected_components,
    dfs_postorder,
    dfs_preorder,
    reachable,
)

__all__ = [
    "bfs_order",
    "dfs_preorder",
    "dfs_postorder",
    "reachable",
    "connected_components",
    "components_to_partition",
    "get_egonet",
    "egonet_density",
    "find_sccs",
    "scc_partition",
    "calculate_connectivity_metrics",
    "single_source_contributions",
    "edge_betweenness",
    "max_betweenness_edges",
    "GirvanNewmanDetector",
    "delta_modularity",
    "modularity",
    "FastNewmanOptimizer",
]
