"""
Exception classes for CommunityWeb graph analysis.

Provides a hierarchy of exceptions for the different failure classes of the
graph store and the analysis algorithms. Graph contract violations are
programmer errors: they are raised immediately, never retried, and leave the
graph unchanged.
"""

from typing import Any


class CommunityWebError(Exception):
    """
    Base exception for CommunityWeb.

    All package exceptions inherit from this class, allowing for catch-all
    error handling in drivers.
    """


class GraphError(CommunityWebError):
    """Base class for graph store contract violations."""


class UnknownVertexError(GraphError):
    """
    Raised when an operation references a vertex id not present in the graph.

    Attributes:
        vertex: The offending vertex id
    """

    def __init__(self, vertex: int, message: str = "") -> None:
        """
        Initialize unknown vertex error.

        Args:
            vertex: The vertex id that was not found
            message: Optional extra context
        """
        self.vertex = vertex
        error_msg = f"Unknown vertex: {vertex}"
        if message:
            error_msg = f"{error_msg} ({message})"
        super().__init__(error_msg)


class DuplicateVertexError(GraphError):
    """
    Raised when a vertex id is inserted twice.

    Attributes:
        vertex: The duplicated vertex id
    """

    def __init__(self, vertex: int) -> None:
        self.vertex = vertex
        super().__init__(f"Vertex already present: {vertex}")


class InvalidEdgeRemovalError(GraphError):
    """
    Raised when removing an edge that is not currently in the graph.

    Attributes:
        edge: The edge that could not be removed
    """

    def __init__(self, edge: Any) -> None:
        self.edge = edge
        super().__init__(f"Cannot remove edge {edge}: edge not present")


class UnsupportedGraphError(GraphError):
    """Raised when an algorithm is given a graph kind it does not support."""


class ConfigurationError(CommunityWebError):
    """Raised for invalid configuration values."""


class DataProcessingError(CommunityWebError):
    """Raised when input data cannot be read or parsed into a graph."""


class AnalysisCancelledError(CommunityWebError):
    """
    Raised at a cancellation checkpoint when the caller requested a stop.

    Scratch state of the interrupted computation is discarded; the graph is
    only mutated at commit points, so it is left consistent.

    Attributes:
        stage: Name of the computation that was interrupted
        completed: Number of units (sources, steps) finished before the stop
    """

    def __init__(self, stage: str, completed: int) -> None:
        self.stage = stage
        self.completed = completed
        super().__init__(f"{stage} cancelled after {completed} completed units")


__all__ = [
    "CommunityWebError",
    "GraphError",
    "UnknownVertexError",
    "DuplicateVertexError",
    "InvalidEdgeRemovalError",
    "UnsupportedGraphError",
    "ConfigurationError",
    "DataProcessingError",
    "AnalysisCancelledError",
]
