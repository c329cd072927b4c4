"""
Data layer for CommunityWeb.

Provides the loaders that turn external graph descriptions into graph store
calls.
"""

from .loaders import DataLoader, EdgeListLoader, load_edge_list, parse_edge_line

__all__ = ["DataLoader", "EdgeListLoader", "load_edge_list", "parse_edge_line"]
