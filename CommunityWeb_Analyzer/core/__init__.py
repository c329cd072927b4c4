"""
Core foundation components for CommunityWeb.

This module contains the functionality every analysis depends on:
- Custom exception classes and error hierarchy
- Type definitions and result data structures
- The mutable graph store

Modules:
    exceptions: Custom exception classes (CommunityWebError hierarchy)
    types: Edge value object, Partition alias and result dataclasses
    graph: Graph store with adjacency lookup
"""

from .exceptions import (
    AnalysisCancelledError,
    CommunityWebError,
    ConfigurationError,
    DataProcessingError,
    DuplicateVertexError,
    GraphError,
    InvalidEdgeRemovalError,
    UnknownVertexError,
    UnsupportedGraphError,
)
from .graph import Graph
from .types import (
    DivisiveResult,
    DivisiveStep,
    Edge,
    LocalOptimum,
    MergeStep,
    ModularityResult,
    Partition,
    make_partition,
)

__all__ = [
    # Exceptions
    "CommunityWebError",
    "GraphError",
    "UnknownVertexError",
    "DuplicateVertexError",
    "InvalidEdgeRemovalError",
    "UnsupportedGraphError",
    "ConfigurationError",
    "DataProcessingError",
    "AnalysisCancelledError",
    # Types
    "Edge",
    "Partition",
    "make_partition",
    "DivisiveStep",
    "DivisiveResult",
    "MergeStep",
    "LocalOptimum",
    "ModularityResult",
    # Graph store
    "Graph",
]
