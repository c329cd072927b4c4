"""
Abstract base class for data loaders in CommunityWeb.

This module defines the DataLoader interface that every graph source must
follow. It provides a template method for loading data and building graphs,
with built-in validation and statistics logging.

Classes:
    DataLoader: Abstract base class defining the standard interface for data loaders

Example:
    Creating a custom data loader::

        from CommunityWeb_Analyzer.data.loaders.base import DataLoader
        from CommunityWeb_Analyzer.core.graph import Graph

        class PairListLoader(DataLoader):
            def fetch_data(self, pairs):
                return {'edges': list(pairs)}

            def build_graph(self, data):
                return Graph.from_edges(data['edges'])

        graph = PairListLoader().load(pairs=[(0, 1), (1, 2)])
"""

# Standard library imports
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

# Local imports
from ...core.exceptions import CommunityWebError, DataProcessingError
from ...core.graph import Graph


class DataLoader(ABC):
    """
    Abstract base class for data loaders.

    Subclasses implement fetch_data() and build_graph(). The load() method
    orchestrates the complete workflow: fetch data, build graph, validate
    graph, and log statistics.

    Attributes:
        config: Configuration dictionary for the loader
        logger: Logger instance named after the subclass
    """

    def __init__(self, config: Optional[dict[str, Any]] = None):
        """
        Initialize the data loader.

        Args:
            config: Loader configuration. Subclasses define their own keys;
                ``directed`` (bool) is understood by every loader.
        """
        self.config = config or {}
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def directed(self) -> bool:
        return bool(self.config.get("directed", False))

    @abstractmethod
    def fetch_data(self, **params) -> dict[str, Any]:
        """
        Fetch raw data from the source.

        Returns:
            Source-specific raw data, typically with an ``edges`` key

        Raises:
            DataProcessingError: If the data cannot be read or parsed
        """

    @abstractmethod
    def build_graph(self, data: dict[str, Any]) -> Graph:
        """
        Convert raw data into a graph.

        Implementations must call ``add_vertex`` for every vertex before the
        first ``add_edge`` that references it.
        """

    def validate_graph(self, graph: Graph) -> None:
        """
        Check the store's counting and symmetry invariants.

        Raises:
            DataProcessingError: If an invariant does not hold
        """
        if not isinstance(graph, Graph):
            raise DataProcessingError(
                f"build_graph must return a Graph, got {type(graph).__name__}"
            )
        if graph.directed != self.directed:
            raise DataProcessingError("Built graph directedness does not match loader config")
        if not graph.directed:
            snapshot = graph.export_snapshot()
            for vertex, neighbors in snapshot.items():
                for neighbor in neighbors:
                    if vertex not in snapshot[neighbor]:
                        raise DataProcessingError(
                            f"Asymmetric adjacency between {vertex} and {neighbor}"
                        )

    def load(self, **params) -> Graph:
        """
        Fetch, build, validate and report on a graph.

        Args:
            **params: Passed through to fetch_data()

        Returns:
            The loaded graph

        Raises:
            FileNotFoundError: If a file-based source is missing
            DataProcessingError: If any step fails
        """
        data = self.fetch_data(**params)
        try:
            graph = self.build_graph(data)
        except DataProcessingError:
            raise
        except CommunityWebError as e:
            raise DataProcessingError(f"Could not build graph: {e}") from e

        self.validate_graph(graph)
        self.logger.info(
            f"Loaded graph: {graph.number_of_vertices():,} vertices, "
            f"{graph.number_of_edges():,} edges"
        )
        return graph


__all__ = ["DataLoader"]
