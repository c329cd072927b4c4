"""
Main module for CommunityWeb - imports from __main__ for compatibility.

This module provides a standard import path for the main function and
logging setup, which are actually defined in __main__.py.
"""

from .__main__ import main, setup_logging
from .pipeline import AnalysisPipeline

__all__ = [
    "AnalysisPipeline",
    "main",
    "setup_logging",
]
