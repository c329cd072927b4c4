"""
Output system components for CommunityWeb.

This module handles formatting and reporting of analysis results:
- Console message formatting
- pandas tables for logging results
- JSON export of every result kind

Modules:
    formatters: EmojiFormatter and text formatting utilities
    reporting: Result tables and JSON export
"""

from .formatters import EmojiFormatter, format_graph, format_partition
from .reporting import (
    betweenness_frame,
    betweenness_to_dict,
    display_betweenness_results,
    display_partition,
    divisive_result_to_dict,
    graph_to_dict,
    modularity_result_to_dict,
    partition_frame,
    partition_to_dict,
    write_results_json,
)

__all__ = [
    "EmojiFormatter",
    "format_partition",
    "format_graph",
    "betweenness_frame",
    "partition_frame",
    "display_betweenness_results",
    "display_partition",
    "partition_to_dict",
    "graph_to_dict",
    "betweenness_to_dict",
    "divisive_result_to_dict",
    "modularity_result_to_dict",
    "write_results_json",
]
