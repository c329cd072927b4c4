"""
Mathematical utility functions for CommunityWeb.

This module contains numeric helpers and formatting functions.
"""

from typing import Union


def safe_divide(numerator: Union[int, float], denominator: Union[int, float], default: float = 0.0) -> float:
    """
    Divide two numbers, returning ``default`` when the denominator is zero.

    Args:
        numerator: Dividend
        denominator: Divisor
        default: Value returned for a zero divisor

    Returns:
        The quotient or ``default``
    """
    if denominator == 0:
        return default
    return numerator / denominator


def format_time_duration(seconds: float) -> str:
    """
    Format time duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted time string (e.g., "45.2 seconds" or "1 minute 8 seconds")

    Raises:
        ValueError: If seconds is negative
    """
    if seconds < 0:
        raise ValueError("Duration cannot be negative")

    # For durations under 60 seconds, display in seconds with one decimal place
    if seconds < 60.0:
        return f"{seconds:.1f} seconds"

    total_seconds = round(seconds)
    minutes = total_seconds // 60
    remaining_seconds = total_seconds % 60

    minute_label = "1 minute" if minutes == 1 else f"{minutes} minutes"
    if remaining_seconds == 0:
        return minute_label
    return f"{minute_label} {remaining_seconds} seconds"


__all__ = ["safe_divide", "format_time_duration"]
