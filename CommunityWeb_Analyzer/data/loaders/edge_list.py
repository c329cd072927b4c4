"""
Edge-list data loader for CommunityWeb.

This module provides the EdgeListLoader class for reading plain-text edge
lists, one edge per line, and feeding them into the graph store.
"""

# Standard library imports
import os
import re
from typing import Any, Optional

# Local imports
from ...core.exceptions import DataProcessingError
from ...core.graph import Graph
from ...output.formatters import EmojiFormatter
from ...utils.progress import ProgressTracker
from .base import DataLoader

_DELIMITER = re.compile(r"[,\s]+")


class EdgeListLoader(DataLoader):
    """
    Loader for plain-text edge lists.

    Each non-empty line holds two integer vertex ids separated by whitespace
    or a comma. Blank lines and lines starting with ``#`` are skipped.

    Expected format::

        # source target
        0 1
        0,2
        1  2

    Example:
        loader = EdgeListLoader(config={"directed": False})
        graph = loader.load(filepath="football.txt")
    """

    def fetch_data(self, filepath: str) -> dict[str, Any]:  # type: ignore[override]
        """
        Read and parse an edge-list file.

        Args:
            filepath: Path to the edge-list file

        Returns:
            Dictionary with an ``edges`` key holding ``(source, target)`` pairs
            in file order

        Raises:
            FileNotFoundError: If the file does not exist
            DataProcessingError: If the file cannot be read or a line is malformed
        """
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"Input file not found: {filepath}")

        try:
            with open(filepath, encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise DataProcessingError(f"Could not read file {filepath}: {e}") from e

        edges = []
        for line_number, line in enumerate(lines, start=1):
            edge = parse_edge_line(line, line_number)
            if edge is not None:
                edges.append(edge)

        self.logger.info(
            EmojiFormatter.format("progress", f"Parsed {len(edges):,} edges from {filepath}")
        )
        return {"edges": edges}

    def build_graph(self, data: dict[str, Any]) -> Graph:
        """
        Build a graph from parsed edge pairs.

        Every vertex is added before the first edge that references it, then
        the edge is added. Repeated lines are absorbed by the graph store.
        """
        edges = data.get("edges", [])
        graph = Graph(directed=self.directed)
        if not edges:
            self.logger.info("No edges to process, returning empty graph")
            return graph

        with ProgressTracker(
            total=len(edges), title="Building graph from edge list", logger=self.logger
        ) as tracker:
            for index, (source, target) in enumerate(edges):
                graph.add_vertex(source, exist_ok=True)
                graph.add_vertex(target, exist_ok=True)
                graph.add_edge(source, target)
                tracker.update(index + 1)

        self.logger.info(
            EmojiFormatter.format(
                "success",
                f"Graph loaded: {graph.number_of_vertices():,} vertices, "
                f"{graph.number_of_edges():,} edges",
            )
        )
        return graph


def parse_edge_line(line: str, line_number: int = 0) -> Optional[tuple[int, int]]:
    """
    Parse one edge-list line.

    Returns:
        ``(source, target)``, or None for blank and comment lines

    Raises:
        DataProcessingError: If the line does not hold exactly two integers
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    tokens = [token for token in _DELIMITER.split(stripped) if token]
    if len(tokens) != 2:
        raise DataProcessingError(
            f"Line {line_number}: expected two vertex ids, got {len(tokens)} field(s): {stripped!r}"
        )
    try:
        return int(tokens[0]), int(tokens[1])
    except ValueError as e:
        raise DataProcessingError(f"Line {line_number}: vertex ids must be integers: {stripped!r}") from e


def load_edge_list(filepath: str, directed: bool = False) -> Graph:
    """Load an edge-list file into a new graph."""
    return EdgeListLoader(config={"directed": directed}).load(filepath=filepath)


__all__ = ["EdgeListLoader", "parse_edge_line", "load_edge_list"]
