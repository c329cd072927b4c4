"""
Validation utilities for CommunityWeb.

This module contains parameter validation functions used by the
configuration layer.
"""

from typing import Any, List, Optional


def validate_positive_integer(value: Any, param_name: str) -> int:
    """
    Validate that a parameter is a positive integer.

    Args:
        value: Value to validate
        param_name: Name of the parameter for error messages

    Returns:
        int: The validated integer value

    Raises:
        ValueError: If value is not a positive integer
    """
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"{param_name} must be a positive integer")
    return value


def validate_non_negative_integer(value: Any, param_name: str) -> int:
    """
    Validate that a parameter is a non-negative integer.

    Raises:
        ValueError: If value is not a non-negative integer
    """
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError(f"{param_name} cannot be negative")
    return value


def validate_optional_positive_integer(value: Optional[Any], param_name: str) -> Optional[int]:
    """Validate a positive integer that may also be None."""
    if value is None:
        return None
    return validate_positive_integer(value, param_name)


def validate_choice(value: Any, param_name: str, valid_choices: List[Any]) -> Any:
    """
    Validate that a parameter is one of the allowed choices.

    Args:
        value: Value to validate
        param_name: Name of the parameter for error messages
        valid_choices: List of valid choices

    Returns:
        Any: The validated value

    Raises:
        ValueError: If value is not in the list of valid choices
    """
    if value not in valid_choices:
        raise ValueError(
            f"Invalid {param_name} '{value}'. Must be one of: {valid_choices}"
        )
    return value


def validate_n_jobs(value: Any) -> int:
    """
    Validate a joblib-style worker count (-1 or a positive integer).

    Raises:
        ValueError: If the value is neither -1 nor a positive integer
    """
    if value == -1 and not isinstance(value, bool):
        return value
    return validate_positive_integer(value, "n_jobs")


__all__ = [
    "validate_positive_integer",
    "validate_non_negative_integer",
    "validate_optional_positive_integer",
    "validate_choice",
    "validate_n_jobs",
]
