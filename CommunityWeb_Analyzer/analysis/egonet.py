"""
Ego-network extraction.

The egonet of a vertex is the subgraph made of the vertex (the "center"),
its direct neighbours and the edges among them. How densely the neighbours
are linked to each other is a signal of local community cohesion: a sparse
egonet means the neighbours do not form a close-knit group.
"""

# Local imports
from ..core.exceptions import UnknownVertexError
from ..core.graph import Graph
from ..utils.math import safe_divide


def get_egonet(graph: Graph, center: int) -> Graph:
    """
    Build the ego network of ``center``.

    The result has the same directedness as ``graph``. Vertices are the
    center followed by its neighbours in adjacency order. Edges are added in
    two passes: first center-to-neighbour, then every edge from one
    neighbour to another neighbour. Edges leaving the neighbourhood, or
    leading back to the center, are not part of the second pass.

    Args:
        graph: Source graph
        center: Vertex whose egonet is extracted

    Returns:
        A new graph; ``graph`` is not modified

    Raises:
        UnknownVertexError: If ``center`` is absent
    """
    if center not in graph:
        raise UnknownVertexError(center, "egonet center")

    # A self-loop on the center does not make it its own neighbour here
    neighbors = [vertex for vertex in graph.neighbors(center) if vertex != center]
    neighbor_set = set(neighbors)

    egonet = Graph(directed=graph.directed)
    egonet.add_vertex(center)
    for neighbor in neighbors:
        egonet.add_vertex(neighbor)
        egonet.add_edge(center, neighbor)

    for neighbor in neighbors:
        for other in graph.neighbors(neighbor):
            if other in neighbor_set:
                egonet.add_edge(neighbor, other)

    return egonet


def egonet_density(graph: Graph, center: int) -> float:
    """
    Edge density of the egonet of ``center``.

    Self-loops are ignored. The density is the number of edges divided by the
    number of possible edges among ``{center} ∪ N(center)``; an isolated
    center has density 0.0.

    Raises:
        UnknownVertexError: If ``center`` is absent
    """
    egonet = get_egonet(graph, center)
    size = egonet.number_of_vertices()
    possible = size * (size - 1)
    if not graph.directed:
        possible //= 2
    edges = sum(1 for edge in egonet.edges if not edge.is_self_loop)
    return safe_divide(edges, possible)


__all__ = ["get_egonet", "egonet_density"]
