"""
CommunityWeb Community Analysis Package

A social network analysis tool for finding communities in undirected and
directed graphs loaded from plain-text edge lists.

This package provides:
- A graph store with insertion-ordered adjacency
- Ego-network extraction and strongly connected components
- Edge betweenness centrality with optional process parallelism
- Divisive (Girvan-Newman) and agglomerative (greedy modularity)
  community detection
- Tabular and JSON reporting of results

Modules:
    main: Entry point and logging setup
    config: Configuration management and validation
    pipeline: Load, analyze and report orchestration
    core: Graph store, result types and exceptions
    analysis: Graph algorithms and community detection
    data: Edge-list loading
    output: Console formatting and result export
    utils: Shared utilities and helper functions

Example:
    >>> from CommunityWeb_Analyzer import Graph, GirvanNewmanDetector
    >>>
    >>> graph = Graph.from_edges([(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)])
    >>> result = GirvanNewmanDetector(graph, copy=True).run()
    >>> result.first_split(2).partition
    {0: frozenset({0, 1, 2}), 3: frozenset({3, 4, 5})}
"""

__version__ = "1.0.0"

from .analysis import (
    FastNewmanOptimizer,
    GirvanNewmanDetector,
    edge_betweenness,
    find_sccs,
    get_egonet,
    modularity,
)
from .config import CommunityWebConfig, get_configuration_manager, load_config_from_dict
from .core import (
    CommunityWebError,
    DivisiveResult,
    Edge,
    Graph,
    ModularityResult,
    Partition,
)
from .data import load_edge_list
from .pipeline import AnalysisPipeline
from .utils import ProgressTracker

__all__ = [
    "__version__",
    # Configuration
    "CommunityWebConfig",
    "get_configuration_manager",
    "load_config_from_dict",
    # Core
    "Graph",
    "Edge",
    "Partition",
    "DivisiveResult",
    "ModularityResult",
    "CommunityWebError",
    # Analysis
    "get_egonet",
    "find_sccs",
    "edge_betweenness",
    "GirvanNewmanDetector",
    "FastNewmanOptimizer",
    "modularity",
    # Pipeline
    "AnalysisPipeline",
    "load_edge_list",
    "ProgressTracker",
]
