"""
Traversal primitives built on the graph store.

All traversals use explicit work stacks or queues instead of recursion, so
graph size and diameter are not limited by the interpreter's recursion
depth. Neighbours are visited in adjacency insertion order, which makes the
visiting order identical to that of the textbook recursive formulations.
"""

# Standard library imports
from collections import deque
from typing import Iterable, Optional

# Local imports
from ..core.exceptions import UnknownVertexError
from ..core.graph import Graph
from ..core.types import Partition, make_partition


def _require_vertex(graph: Graph, vertex: int) -> None:
    if vertex not in graph:
        raise UnknownVertexError(vertex, "traversal source")


def bfs_order(graph: Graph, source: int) -> list[int]:
    """
    Return vertices reachable from ``source`` in breadth-first order.

    Raises:
        UnknownVertexError: If ``source`` is absent
    """
    _require_vertex(graph, source)
    visited = {source}
    order = []
    queue = deque([source])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbor in graph.neighbors(vertex):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return order


def dfs_preorder(graph: Graph, source: int, visited: Optional[set[int]] = None) -> list[int]:
    """
    Return vertices reachable from ``source`` in depth-first preorder.

    Args:
        graph: Graph to traverse
        source: Start vertex
        visited: Shared visited set; updated in place and vertices already in
            it are skipped, so repeated calls partition the graph

    Returns:
        Newly discovered vertices in discovery order (empty if ``source`` was
        already visited)

    Raises:
        UnknownVertexError: If ``source`` is absent
    """
    _require_vertex(graph, source)
    if visited is None:
        visited = set()
    if source in visited:
        return []

    visited.add(source)
    order = [source]
    stack = [iter(graph.neighbors(source))]
    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(graph.neighbors(neighbor)))
                break
        else:
            stack.pop()
    return order


def dfs_postorder(graph: Graph, source: int, visited: Optional[set[int]] = None) -> list[int]:
    """
    Return vertices reachable from ``source`` in depth-first finishing order.

    A vertex is emitted once every neighbour reachable through it has been
    finished. Arguments behave as in :func:`dfs_preorder`.

    Raises:
        UnknownVertexError: If ``source`` is absent
    """
    _require_vertex(graph, source)
    if visited is None:
        visited = set()
    if source in visited:
        return []

    visited.add(source)
    finished = []
    stack = [(source, iter(graph.neighbors(source)))]
    while stack:
        vertex, neighbors = stack[-1]
        for neighbor in neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append((neighbor, iter(graph.neighbors(neighbor))))
                break
        else:
            stack.pop()
            finished.append(vertex)
    return finished


def reachable(graph: Graph, source: int) -> set[int]:
    """Return the set of vertices reachable from ``source`` (itself included)."""
    return set(dfs_preorder(graph, source))


def connected_components(graph: Graph) -> list[list[int]]:
    """
    Split the graph into components by plain DFS reachability.

    Components are listed in insertion order of their first vertex and
    members in DFS preorder. On a directed graph only out-edges are followed,
    so the result depends on vertex order; use
    :func:`~CommunityWeb_Analyzer.analysis.connectivity.find_sccs` there.

    Returns:
        List of components, each a list of vertex ids
    """
    visited: set[int] = set()
    components = []
    for vertex in graph:
        if vertex not in visited:
            components.append(dfs_preorder(graph, vertex, visited))
    return components


def components_to_partition(components: Iterable[Iterable[int]]) -> Partition:
    """Convert component lists into a leader-keyed partition."""
    return make_partition(components)


__all__ = [
    "bfs_order",
    "dfs_preorder",
    "dfs_postorder",
    "reachable",
    "connected_components",
    "components_to_partition",
]
