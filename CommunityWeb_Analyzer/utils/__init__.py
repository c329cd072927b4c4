"""
Utility components for CommunityWeb.

This module provides shared utility functions and helpers:
- Input validation and parameter checking
- Parallel processing configuration
- Mathematical helpers and duration formatting
- Progress tracking for long-running loops

Modules:
    validation: Parameter validation functions
    parallel: Worker-count resolution for parallel passes
    math: Numeric helpers and formatting
    progress: ProgressTracker context manager
"""

from .math import format_time_duration, safe_divide
from .parallel import (
    PARALLEL_THRESHOLD,
    ParallelConfig,
    get_analysis_parallel_config,
    log_parallel_usage,
    resolve_n_jobs,
)
from .progress import ProgressTracker
from .validation import (
    validate_choice,
    validate_n_jobs,
    validate_non_negative_integer,
    validate_optional_positive_integer,
    validate_positive_integer,
)

__all__ = [
    # Validation functions
    "validate_positive_integer",
    "validate_non_negative_integer",
    "validate_optional_positive_integer",
    "validate_choice",
    "validate_n_jobs",
    # Parallel processing
    "PARALLEL_THRESHOLD",
    "ParallelConfig",
    "resolve_n_jobs",
    "get_analysis_parallel_config",
    "log_parallel_usage",
    # Mathematical functions
    "safe_divide",
    "format_time_duration",
    # Progress tracking
    "ProgressTracker",
]
