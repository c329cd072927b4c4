"""
Text formatting utilities for CommunityWeb output.

This module contains formatters for console output and logging.
"""

from ..analysis.traversal import connected_components
from ..core.graph import Graph
from ..core.types import Partition


class EmojiFormatter:
    """
    Formatter for adding emojis and styling to console output.
    """

    EMOJI_MAP = {
        "progress": "🔄",
        "success": "✅",
        "error": "❌",
        "warning": "⚠️",
        "info": "ℹ️",
    }

    @staticmethod
    def format(message_type: str, message: str) -> str:
        """
        Format a message with appropriate emoji and styling.

        Args:
            message_type: Type of message (progress, success, error, etc.)
            message: The message to format

        Returns:
            Formatted message string
        """
        emoji = EmojiFormatter.EMOJI_MAP.get(message_type, "")
        if emoji:
            return f"{emoji} {message}"
        return message


def format_partition(partition: Partition) -> str:
    """
    Render a partition one community per line, members ascending.

    Example:
        >>> print(format_partition({0: frozenset({0, 1}), 2: frozenset({2})}))
        0: 0 1
        2: 2
    """
    return "\n".join(
        f"{leader}: {' '.join(str(member) for member in sorted(members))}"
        for leader, members in partition.items()
    )


def format_graph(graph: Graph) -> str:
    """
    Render a graph component by component.

    Components are walked with the iterative depth-first search, so each
    block lists its vertices in discovery order, one ``vertex: neighbours``
    line each. Blocks are separated by a blank line.
    """
    blocks = []
    for component in connected_components(graph):
        lines = []
        for vertex in component:
            neighbors = " ".join(str(n) for n in sorted(graph.neighbors(vertex)))
            lines.append(f"{vertex}: {neighbors}".rstrip())
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


__all__ = ["EmojiFormatter", "format_partition", "format_graph"]
