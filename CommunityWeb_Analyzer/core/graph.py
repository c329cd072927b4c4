"""
Mutable graph store shared by every CommunityWeb analysis.

The store keeps one adjacency entry per vertex and a single edge set. Both
are insertion-ordered dictionaries, so iteration over vertices, edges and
neighbours is deterministic: vertices come back in the order they were added
and neighbours in the order their edges were added. Every traversal and
community detector relies on that order for reproducible results.

Vertex and edge counts are always derived from these collections; the only
mutation paths are ``add_vertex``, ``add_edge`` and ``remove_edge``.
"""

# Standard library imports
from typing import Iterable, Iterator

# Third-party imports
import networkx as nx

# Local imports
from .exceptions import DuplicateVertexError, InvalidEdgeRemovalError, UnknownVertexError
from .types import Edge


class Graph:
    """
    Adjacency-list graph over integer vertex labels.

    An undirected graph records every edge in the adjacency of both
    endpoints and once in the edge set. A directed graph records an edge only
    in the adjacency of its source, so ``neighbors`` returns out-neighbours.

    Policies:
        - Adding an existing vertex raises ``DuplicateVertexError`` unless
          ``exist_ok=True`` is passed, in which case it is a no-op.
        - Adding an existing edge (either orientation when undirected) is a
          no-op; edge counts never double.
        - Removing an absent edge raises ``InvalidEdgeRemovalError``.

    Example:
        >>> graph = Graph()
        >>> for v in (0, 1, 2):
        ...     graph.add_vertex(v)
        >>> graph.add_edge(0, 1)
        Edge(0-1)
        >>> graph.neighbors(1)
        [0]
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: Whether edge orientation is significant
        """
        self.directed = directed
        self._adjacency: dict[int, dict[Edge, None]] = {}
        self._edges: dict[Edge, None] = {}

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]], directed: bool = False) -> "Graph":
        """
        Build a graph from ``(source, target)`` pairs.

        Vertices are added the first time they are referenced.
        """
        graph = cls(directed=directed)
        for source, target in edges:
            graph.add_vertex(source, exist_ok=True)
            graph.add_vertex(target, exist_ok=True)
            graph.add_edge(source, target)
        return graph

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph) -> "Graph":
        """Build a graph from a NetworkX graph with integer node labels."""
        graph = cls(directed=nx_graph.is_directed())
        for node in nx_graph.nodes():
            graph.add_vertex(node)
        for source, target in nx_graph.edges():
            graph.add_edge(source, target)
        return graph

    def to_networkx(self) -> nx.Graph:
        """Return an equivalent ``nx.Graph`` (or ``nx.DiGraph`` when directed)."""
        nx_graph = nx.DiGraph() if self.directed else nx.Graph()
        nx_graph.add_nodes_from(self._adjacency)
        nx_graph.add_edges_from(edge.endpoints for edge in self._edges)
        return nx_graph

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, vertex: int, exist_ok: bool = False) -> None:
        """
        Insert a vertex with an empty adjacency.

        Args:
            vertex: Vertex label
            exist_ok: Treat an already present vertex as a no-op

        Raises:
            DuplicateVertexError: If the vertex exists and ``exist_ok`` is False
        """
        if vertex in self._adjacency:
            if exist_ok:
                return
            raise DuplicateVertexError(vertex)
        self._adjacency[vertex] = {}

    def add_edge(self, source: int, target: int) -> Edge:
        """
        Insert an edge between two existing vertices.

        Args:
            source: The "from" endpoint
            target: The "to" endpoint

        Returns:
            The edge as stored (an equal, previously stored edge is kept)

        Raises:
            UnknownVertexError: If either endpoint is absent
        """
        for vertex in (source, target):
            if vertex not in self._adjacency:
                raise UnknownVertexError(vertex, f"while adding edge ({source}, {target})")

        edge = Edge(source, target, self.directed)
        if edge in self._edges:
            return edge

        self._edges[edge] = None
        self._adjacency[source][edge] = None
        if not self.directed:
            self._adjacency[target][edge] = None
        return edge

    def remove_edge(self, edge: Edge) -> None:
        """
        Remove an edge from the edge set and from its endpoints' adjacency.

        Raises:
            InvalidEdgeRemovalError: If the edge is not currently present
        """
        if edge.directed != self.directed:
            edge = Edge(edge.source, edge.target, self.directed)
        if edge not in self._edges:
            raise InvalidEdgeRemovalError(edge)

        del self._edges[edge]
        self._adjacency[edge.source].pop(edge, None)
        if not self.directed:
            self._adjacency[edge.target].pop(edge, None)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._adjacency

    def has_edge(self, source: int, target: int) -> bool:
        """
        Check for an edge.

        Undirected graphs match either orientation; directed graphs only
        ``source -> target``.
        """
        return Edge(source, target, self.directed) in self._edges

    def neighbors(self, vertex: int) -> list[int]:
        """
        Return the distinct opposite endpoints of the vertex's edges.

        Neighbours come back in edge insertion order (out-neighbours for
        directed graphs).

        Raises:
            UnknownVertexError: If the vertex is absent
        """
        return [edge.other(vertex) for edge in self._incident(vertex)]

    def incident_edges(self, vertex: int) -> list[Edge]:
        """Return the edges in the vertex's adjacency, in insertion order."""
        return list(self._incident(vertex))

    def degree(self, vertex: int) -> int:
        """Number of distinct neighbours (out-degree for directed graphs)."""
        return len(self._incident(vertex))

    def _incident(self, vertex: int) -> dict[Edge, None]:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise UnknownVertexError(vertex) from None

    @property
    def vertices(self) -> list[int]:
        """Vertices in insertion order."""
        return list(self._adjacency)

    @property
    def edges(self) -> list[Edge]:
        """Edges in insertion order."""
        return list(self._edges)

    def number_of_vertices(self) -> int:
        return len(self._adjacency)

    def number_of_edges(self) -> int:
        return len(self._edges)

    def export_snapshot(self) -> dict[int, set[int]]:
        """
        Export the graph as a mapping of vertex to neighbour set.

        This is the hand-off format for printers, visualizers and tests. Each
        call builds fresh sets, so callers may mutate the result.
        """
        return {vertex: set(self.neighbors(vertex)) for vertex in self._adjacency}

    # ------------------------------------------------------------------
    # Derived graphs
    # ------------------------------------------------------------------

    def reverse(self) -> "Graph":
        """
        Return a new graph with every edge direction flipped.

        Vertex order is preserved. For undirected graphs this is a copy.
        """
        reversed_graph = Graph(directed=self.directed)
        for vertex in self._adjacency:
            reversed_graph.add_vertex(vertex)
        for edge in self._edges:
            if self.directed:
                reversed_graph.add_edge(edge.target, edge.source)
            else:
                reversed_graph.add_edge(edge.source, edge.target)
        return reversed_graph

    def copy(self) -> "Graph":
        """Return an independent copy with the same vertex and edge order."""
        duplicate = Graph(directed=self.directed)
        for vertex in self._adjacency:
            duplicate.add_vertex(vertex)
        for edge in self._edges:
            duplicate.add_edge(edge.source, edge.target)
        return duplicate

    def induced_subgraph(self, vertices: Iterable[int]) -> "Graph":
        """
        Return the subgraph induced by ``vertices``.

        Vertices keep the given order; edges keep this graph's edge order.

        Raises:
            UnknownVertexError: If any vertex is absent
        """
        subgraph = Graph(directed=self.directed)
        for vertex in vertices:
            if vertex not in self._adjacency:
                raise UnknownVertexError(vertex, "while building induced subgraph")
            subgraph.add_vertex(vertex, exist_ok=True)
        for edge in self._edges:
            if edge.source in subgraph._adjacency and edge.target in subgraph._adjacency:
                subgraph.add_edge(edge.source, edge.target)
        return subgraph

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[int]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return (
            f"Graph({kind}, {self.number_of_vertices()} vertices, "
            f"{self.number_of_edges()} edges)"
        )


__all__ = ["Graph"]
