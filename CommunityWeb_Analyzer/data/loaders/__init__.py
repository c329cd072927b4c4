"""
Data loaders for CommunityWeb.

Classes:
    DataLoader: Abstract base class for graph sources
    EdgeListLoader: Plain-text edge-list reader
"""

from .base import DataLoader
from .edge_list import EdgeListLoader, load_edge_list, parse_edge_line

__all__ = ["DataLoader", "EdgeListLoader", "load_edge_list", "parse_edge_line"]
