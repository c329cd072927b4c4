"""
Connectivity analysis: strongly connected components and summary metrics.

Components are found with Kosaraju's two-pass algorithm. On an undirected
graph the same procedure yields the connected components.
"""

# Standard library imports
import logging
from typing import Any, Optional

# Local imports
from ..core.graph import Graph
from ..core.types import Partition, make_partition
from ..utils.math import safe_divide
from .traversal import dfs_postorder, dfs_preorder


def find_sccs(graph: Graph, logger: Optional[logging.Logger] = None) -> list[Graph]:
    """
    Partition the graph into strongly connected components.

    Pass one runs a depth-first search from every unvisited vertex in
    insertion order and pushes each vertex onto a finished stack when its
    search completes. Pass two pops that stack and, for every vertex not yet
    assigned, collects the vertices reachable from it in the reversed graph:
    each such search tree is exactly one component.

    Args:
        graph: Graph to decompose (not modified)
        logger: Optional logger instance

    Returns:
        One graph per component, in the order the components were found.
        Each holds the component's vertices in discovery order and every
        edge of ``graph`` with both endpoints in the component.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    visited: set[int] = set()
    finished: list[int] = []
    for vertex in graph:
        if vertex not in visited:
            finished.extend(dfs_postorder(graph, vertex, visited))

    reverse_graph = graph.reverse()
    visited = set()
    components = []
    while finished:
        vertex = finished.pop()
        if vertex not in visited:
            members = dfs_preorder(reverse_graph, vertex, visited)
            components.append(graph.induced_subgraph(members))

    logger.debug(
        f"Found {len(components)} strongly connected components "
        f"in graph with {graph.number_of_vertices():,} vertices"
    )
    return components


def scc_partition(graph: Graph) -> Partition:
    """Return the strongly connected components as a leader-keyed partition."""
    return make_partition(component.vertices for component in find_sccs(graph))


def calculate_connectivity_metrics(
    graph: Graph, logger: Optional[logging.Logger] = None
) -> dict[str, Any]:
    """
    Calculate connectivity metrics for a graph.

    Args:
        graph: Graph (directed or undirected) to analyze
        logger: Optional logger instance

    Returns:
        Dictionary containing connectivity metrics:
            - num_components (int): Number of strongly connected components
            - largest_component_size (int): Vertices in the largest component
            - largest_component_pct (float): Percentage of vertices in it
            - component_sizes (list[int]): All sizes, descending
            - num_isolated_vertices (int): Vertices without any edge
            - density (float): Edge density (0 to 1)
            - is_connected (bool): Whether there is exactly one component
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    graph_size = graph.number_of_vertices()
    if graph_size == 0:
        logger.warning("Empty graph provided for connectivity analysis")
        return {
            "num_components": 0,
            "largest_component_size": 0,
            "largest_component_pct": 0.0,
            "component_sizes": [],
            "num_isolated_vertices": 0,
            "density": 0.0,
            "is_connected": False,
        }

    component_sizes = sorted(
        (component.number_of_vertices() for component in find_sccs(graph, logger)),
        reverse=True,
    )
    touched = set()
    for edge in graph.edges:
        touched.update(edge.endpoints)

    possible_edges = graph_size * (graph_size - 1)
    if not graph.directed:
        possible_edges //= 2

    metrics = {
        "num_components": len(component_sizes),
        "largest_component_size": component_sizes[0],
        "largest_component_pct": (component_sizes[0] / graph_size) * 100,
        "component_sizes": component_sizes,
        "num_isolated_vertices": graph_size - len(touched),
        "density": safe_divide(graph.number_of_edges(), possible_edges),
        "is_connected": len(component_sizes) == 1,
    }

    logger.debug(
        f"Connectivity metrics: {metrics['num_components']} components, "
        f"{metrics['largest_component_pct']:.1f}% in largest, "
        f"density={metrics['density']:.4f}"
    )
    return metrics


__all__ = ["find_sccs", "scc_partition", "calculate_connectivity_metrics"]
