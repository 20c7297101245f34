"""Validation utilities for the genotype concordance scheme.

Modules:
    base: Shared exception and value checks (allowed keys, booleans)
    config: Configuration structure validation

Example:
    >>> from validators import ValidationError, validate_config
    >>> try:
    ...     validate_config({"genotype_concordance": {"missing_as_no_call": "yes"}})
    ... except ValidationError as e:
    ...     print(f"Validation failed: {e}")
"""

from .base import (
    ValidationError,
    validate_allowed_keys,
    validate_bool,
)

from .config import (
    VALID_CONCORDANCE_KEYS,
    validate_concordance_config,
    validate_config,
)

__all__ = [
    # Exception
    "ValidationError",
    # Base validators
    "validate_allowed_keys",
    "validate_bool",
    # Config validators
    "VALID_CONCORDANCE_KEYS",
    "validate_concordance_config",
    "validate_config",
]
