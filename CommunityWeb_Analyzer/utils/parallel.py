"""
Parallel processing utilities for CommunityWeb.

This module decides how many worker processes an analysis may use. Only the
per-source passes of the edge betweenness calculation are parallelised.
"""

import logging
from dataclasses import dataclass

import joblib

# Below this many vertices the process start-up cost outweighs the gain
PARALLEL_THRESHOLD = 200


@dataclass
class ParallelConfig:
    """
    Configuration for parallel processing operations.

    Attributes:
        enabled: Whether work is dispatched to joblib workers
        cores_used: Number of worker processes
        operation_type: Type of operation being performed
    """

    enabled: bool = False
    cores_used: int = 1
    operation_type: str = "analysis"


def resolve_n_jobs(n_jobs: int) -> int:
    """
    Turn a joblib-style ``n_jobs`` value into a concrete worker count.

    Args:
        n_jobs: Positive worker count, or -1 for all available cores

    Returns:
        Number of workers (at least 1)

    Raises:
        ValueError: If ``n_jobs`` is 0 or below -1
    """
    if n_jobs == -1:
        return max(1, joblib.cpu_count())
    if n_jobs < 1:
        raise ValueError(f"n_jobs must be -1 or a positive integer, got {n_jobs}")
    return n_jobs


def get_analysis_parallel_config(graph_size: int, n_jobs: int = 1) -> ParallelConfig:
    """
    Get parallel configuration for analysis operations.

    Args:
        graph_size: Number of vertices in the graph being processed
        n_jobs: Requested workers (-1 for all cores)

    Returns:
        ParallelConfig instance
    """
    cores = min(resolve_n_jobs(n_jobs), max(1, graph_size))
    if cores <= 1 or graph_size < PARALLEL_THRESHOLD:
        return ParallelConfig(enabled=False, cores_used=1, operation_type="analysis")
    return ParallelConfig(enabled=True, cores_used=cores, operation_type="analysis")


def log_parallel_usage(config: ParallelConfig, logger: logging.Logger) -> None:
    """
    Log parallel processing configuration.

    Args:
        config: Parallel configuration
        logger: Logger instance
    """
    if config.enabled:
        logger.debug(f"Using parallel processing with {config.cores_used} workers")
    else:
        logger.debug("Using sequential processing")


__all__ = [
    "PARALLEL_THRESHOLD",
    "ParallelConfig",
    "resolve_n_jobs",
    "get_analysis_parallel_config",
    "log_parallel_usage",
]
