"""
Progress tracking for long-running graph computations.

This module contains a lightweight context-manager progress tracker that
reports through the standard logging system.
"""

import logging
import time
from typing import Optional

from .math import format_time_duration


class ProgressTracker:
    """
    Simple progress tracker for long-running operations.

    Logs a start line, a debug line every 10% of progress and a completion
    line with the elapsed time.

    Example:
        >>> with ProgressTracker(total=len(sources), title="Edge betweenness") as tracker:
        ...     for i, source in enumerate(sources):
        ...         tracker.update(i + 1)
    """

    def __init__(self, total: int, title: str = "Processing", logger: Optional[logging.Logger] = None):
        """
        Initialize the progress tracker.

        Args:
            total: Total number of items to process
            title: Title for the progress display
            logger: Logger instance for output
        """
        self.total = total
        self.title = title
        self.logger = logger or logging.getLogger(__name__)
        self.current = 0
        self.start_time: Optional[float] = None
        self.duration: Optional[float] = None

    def __enter__(self):
        """Enter context manager."""
        self.start_time = time.time()
        self.logger.debug(f"Starting {self.title}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager."""
        if self.start_time is None:
            return
        self.duration = time.time() - self.start_time
        if exc_type is None:
            self.logger.debug(
                f"Completed {self.title} in {format_time_duration(self.duration)}"
            )
        else:
            self.logger.debug(
                f"Stopped {self.title} after {self.current}/{self.total} items "
                f"({exc_type.__name__})"
            )

    def update(self, current: int):
        """
        Update the progress.

        Args:
            current: Current progress value
        """
        self.current = current
        if self.total > 0:
            percentage = (current / self.total) * 100
            if current % max(1, self.total // 10) == 0:  # Log every 10%
                self.logger.debug(f"{self.title}: {percentage:.1f}% ({current}/{self.total})")


__all__ = ["ProgressTracker"]
