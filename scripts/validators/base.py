"""Base validation utilities for concordance scheme configuration.

This module provides the shared exception type and small value checks used
when validating configuration before a scheme is built.
"""

from typing import Any, Iterable


class ValidationError(Exception):
    """Custom exception for data validation failures."""

    pass


def validate_allowed_keys(data: dict, allowed: Iterable[str], source: str) -> None:
    """Validate that a mapping has no keys outside the allowed set.

    Args:
        data: Mapping to validate
        allowed: Permitted key names
        source: Name of the mapping being validated

    Raises:
        ValidationError: If unknown keys are present
    """
    unknown = set(data.keys()) - set(allowed)
    if unknown:
        raise ValidationError(
            f"{source} contains unknown keys: {sorted(unknown)}. "
            f"Valid keys are: {sorted(allowed)}"
        )


def validate_bool(value: Any, field: str) -> None:
    """Validate that a config value is a boolean.

    YAML ``yes``/``no`` load as booleans; strings such as ``"true"`` do not
    and are rejected.

    Raises:
        ValidationError: If value is not a bool
    """
    if not isinstance(value, bool):
        raise ValidationError(
            f"Config field '{field}' must be a boolean, "
            f"got: {type(value).__name__}"
        )
