"""
Edge betweenness centrality (Brandes' algorithm).

Edge betweenness counts, for every edge, the shortest paths between pairs of
vertices that run through it. A high score marks an edge that bridges two
tightly knit groups, which is what the divisive community detector removes.

One breadth-first search is run per source vertex. The search records each
vertex's depth, its number of shortest paths from the source and its
predecessors on those paths; the vertices are then processed deepest first,
pushing dependency values back towards the source and crediting each
traversed edge. For a vertex v and each predecessor p the credit is

    sigma[p] * (delta[v] / sigma[v] + 1)

which is added both to delta[p] and to the edge (p, v). Where every shortest
path is unique (sigma == 1 throughout) this is the classical Brandes
dependency; where several shortest paths exist, a predecessor p of v is
credited sigma[p] for v itself rather than the sigma[p] / sigma[v] share.

Scores are unnormalised and summed over every source, so each unordered pair
of an undirected graph is counted in both directions.
"""

# Standard library imports
import logging
from collections import deque
from typing import Callable, Optional

# Third-party imports
import joblib

# Local imports
from ..core.exceptions import AnalysisCancelledError, UnknownVertexError
from ..core.graph import Graph
from ..core.types import Edge
from ..utils.parallel import get_analysis_parallel_config, log_parallel_usage
from ..utils.progress import ProgressTracker

# Sources handed to each worker per dispatch; cancellation is polled between batches
SOURCES_PER_WORKER = 16


def single_source_contributions(graph: Graph, source: int) -> dict[Edge, float]:
    """
    Compute the betweenness credited to each edge by one source vertex.

    Args:
        graph: Graph to analyze
        source: Source vertex of the breadth-first search

    Returns:
        Mapping of edge to its contribution from ``source``; edges outside
        the source's shortest-path tree are omitted

    Raises:
        UnknownVertexError: If ``source`` is absent
    """
    if source not in graph:
        raise UnknownVertexError(source, "betweenness source")

    # Scratch state for this source only: -1 depth marks an unvisited vertex
    depth = dict.fromkeys(graph, -1)
    shortest_path_count = dict.fromkeys(graph, 0)
    predecessors: dict[int, list[int]] = {source: []}
    depth[source] = 0
    shortest_path_count[source] = 1

    traversal_order = []
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        traversal_order.append(vertex)
        for neighbor in graph.neighbors(vertex):
            if depth[neighbor] < 0:
                depth[neighbor] = depth[vertex] + 1
                predecessors[neighbor] = []
                queue.append(neighbor)
            if depth[neighbor] == depth[vertex] + 1:
                shortest_path_count[neighbor] += shortest_path_count[vertex]
                predecessors[neighbor].append(vertex)

    delta = dict.fromkeys(traversal_order, 0.0)
    contributions: dict[Edge, float] = {}
    # Deepest vertices first; BFS order reversed never visits a vertex before its successors
    for vertex in reversed(traversal_order):
        for predecessor in predecessors[vertex]:
            value = shortest_path_count[predecessor] * (
                delta[vertex] / shortest_path_count[vertex] + 1
            )
            delta[predecessor] += value
            edge = Edge(predecessor, vertex, graph.directed)
            contributions[edge] = contributions.get(edge, 0.0) + value

    return contributions


def _contributions_for_sources(graph: Graph, sources: list[int]) -> list[dict[Edge, float]]:
    """Worker entry point: contributions for a chunk of sources, in order."""
    return [single_source_contributions(graph, source) for source in sources]


def _accumulate(betweenness: dict[Edge, float], contributions: dict[Edge, float]) -> None:
    for edge, value in contributions.items():
        betweenness[edge] += value


def _check_cancel(should_cancel: Optional[Callable[[], bool]], completed: int) -> None:
    if should_cancel is not None and should_cancel():
        raise AnalysisCancelledError("edge betweenness", completed)


def edge_betweenness(
    graph: Graph,
    n_jobs: int = 1,
    should_cancel: Optional[Callable[[], bool]] = None,
    logger: Optional[logging.Logger] = None,
) -> dict[Edge, float]:
    """
    Calculate the edge betweenness of every current edge.

    The map is rebuilt from scratch on every call. Contributions are summed
    source by source in vertex insertion order; when worker processes are
    used their per-source results are reduced in that same order, so the
    returned floats do not depend on ``n_jobs``.

    Args:
        graph: Graph to analyze (not modified)
        n_jobs: Worker processes for the per-source passes (-1 for all cores)
        should_cancel: Optional callable polled between source passes;
            returning True aborts the calculation
        logger: Optional logger instance

    Returns:
        Mapping of every edge to its betweenness score

    Raises:
        AnalysisCancelledError: If ``should_cancel`` requested a stop
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    betweenness = dict.fromkeys(graph.edges, 0.0)
    sources = graph.vertices
    parallel_config = get_analysis_parallel_config(len(sources), n_jobs)
    log_parallel_usage(parallel_config, logger)

    with ProgressTracker(
        total=len(sources),
        title=f"Calculating edge betweenness from {len(sources):,} sources",
        logger=logger,
    ) as tracker:
        if parallel_config.enabled:
            workers = parallel_config.cores_used
            batch_size = workers * SOURCES_PER_WORKER
            with joblib.Parallel(n_jobs=workers) as parallel:
                for batch_start in range(0, len(sources), batch_size):
                    _check_cancel(should_cancel, batch_start)
                    batch = sources[batch_start : batch_start + batch_size]
                    chunks = [
                        batch[i : i + SOURCES_PER_WORKER]
                        for i in range(0, len(batch), SOURCES_PER_WORKER)
                    ]
                    chunk_results = parallel(
                        joblib.delayed(_contributions_for_sources)(graph, chunk)
                        for chunk in chunks
                    )
                    for chunk_result in chunk_results:
                        for contributions in chunk_result:
                            _accumulate(betweenness, contributions)
                    tracker.update(batch_start + len(batch))
        else:
            for index, source in enumerate(sources):
                _check_cancel(should_cancel, index)
                _accumulate(betweenness, single_source_contributions(graph, source))
                tracker.update(index + 1)

    logger.debug(f"Edge betweenness calculated for {len(betweenness):,} edges")
    return betweenness


def max_betweenness_edges(betweenness: dict[Edge, float]) -> tuple[float, list[Edge]]:
    """
    Find the maximum score and every edge that reaches it.

    Ties are detected by exact equality and returned in map order.

    Returns:
        ``(max_score, edges)``; ``(0.0, [])`` for an empty map
    """
    if not betweenness:
        return 0.0, []
    max_score = max(betweenness.values())
    return max_score, [edge for edge, score in betweenness.items() if score == max_score]


__all__ = [
    "single_source_contributions",
    "edge_betweenness",
    "max_betweenness_edges",
]
