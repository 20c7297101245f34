"""Configuration validation for the genotype concordance config.yaml.

This module provides validators to ensure the ``genotype_concordance`` block
has valid values and proper structure before a scheme is built from it.
"""

from constants import ConfigKey

from .base import (
    ValidationError,
    validate_allowed_keys,
    validate_bool,
)

VALID_CONCORDANCE_KEYS = {ConfigKey.MISSING_AS_NO_CALL, ConfigKey.VALIDATE_SCHEME}


def validate_concordance_config(block: dict) -> None:
    """Validate the genotype_concordance configuration block.

    Args:
        block: Value of the ``genotype_concordance`` key

    Raises:
        ValidationError: If the block is invalid
    """
    if not isinstance(block, dict):
        raise ValidationError(
            f"Config field '{ConfigKey.CONCORDANCE}' must be a dictionary, "
            f"got: {type(block).__name__}"
        )

    validate_allowed_keys(block, VALID_CONCORDANCE_KEYS, f"Config block '{ConfigKey.CONCORDANCE}'")

    for key in sorted(VALID_CONCORDANCE_KEYS):
        if key in block:
            validate_bool(block[key], f"{ConfigKey.CONCORDANCE}.{key}")


def validate_config(config: dict) -> None:
    """Comprehensive configuration validation.

    The ``genotype_concordance`` block is optional; when absent the default
    GA4GH scheme is used and validated.

    Args:
        config: Configuration dictionary from config.yaml

    Raises:
        ValidationError: If configuration is invalid

    Example:
        >>> validate_config({
        ...     "genotype_concordance": {
        ...         "missing_as_no_call": True,
        ...         "validate_scheme": True,
        ...     }
        ... })
    """
    if not isinstance(config, dict):
        raise ValidationError(
            f"Configuration must be a dictionary, got: {type(config).__name__}"
        )

    block = config.get(ConfigKey.CONCORDANCE)
    if block is not None:
        validate_concordance_config(block)
