"""Pre-flight validation of genotype concordance schemes.

Validates configuration and scheme tables before any comparison is
classified. It uses a collect-all-errors strategy to report all issues at once.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from concordance.factory import scheme_from_config
from concordance.scheme import GenotypeConcordanceScheme, SchemeDefinitionError
from concordance.schemes import SCHEME_ROWS, build_table
from validators import ValidationError

log = logging.getLogger(__name__)


class ValidationContext:
    """Context for collecting validation errors without failing fast."""

    def __init__(self):
        self.errors: list[Exception] = []

    def validate(self, func, *args, **kwargs) -> Any:
        """Run validation function, collecting errors instead of raising.

        Scheme definition errors are collected alongside validation errors.

        Returns:
            Result of validation function, or None if error occurred
        """
        try:
            return func(*args, **kwargs)
        except (ValidationError, SchemeDefinitionError) as e:
            self.errors.append(e)
            return None

    def raise_if_errors(self):
        """Raise combined error if any validations failed."""
        if self.errors:
            error_list = "\n".join(f"  {i+1}. {e}" for i, e in enumerate(self.errors))
            raise ValidationError(
                f"Validation failed with {len(self.errors)} error(s):\n{error_list}"
            )

    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0


def load_config(config_path: str | Path) -> dict:
    """Load configuration from YAML file.

    An empty file loads as an empty configuration.

    Args:
        config_path: Path to config.yaml

    Returns:
        Configuration dictionary

    Raises:
        ValidationError: If config cannot be loaded
    """
    path = Path(config_path)

    if not path.exists():
        raise ValidationError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValidationError(f"Failed to parse configuration file {path}: {e}") from e
    except OSError as e:
        raise ValidationError(f"Failed to load configuration file {path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValidationError(
            f"Configuration file {path} does not contain a valid YAML dictionary"
        )
    return config


def _build_and_validate(policy: str) -> GenotypeConcordanceScheme:
    scheme = build_table(policy)
    scheme.validate()
    return scheme


def validate_all_schemes(policies: list[str] | None = None) -> ValidationContext:
    """Build and validate every registered scheme.

    Args:
        policies: Scheme policies to check (defaults to all registered)

    Returns:
        ValidationContext with collected errors
    """
    if policies is None:
        policies = sorted(SCHEME_ROWS)

    ctx = ValidationContext()
    for policy in policies:
        log.info("Validating scheme '%s'", policy)
        ctx.validate(_build_and_validate, policy)

    if ctx.has_errors():
        log.error("%d scheme(s) failed validation", len(ctx.errors))
    else:
        log.info("All schemes validated")
    return ctx


def preflight(config_path: str | Path) -> GenotypeConcordanceScheme:
    """Load configuration and build the validated scheme it selects.

    Args:
        config_path: Path to config.yaml

    Returns:
        The selected scheme, validated unless the config disables it

    Raises:
        ValidationError: Combining every configuration or scheme error found
    """
    ctx = ValidationContext()

    log.info("Loading configuration from: %s", config_path)
    config = ctx.validate(load_config, config_path)
    if config is None:
        ctx.raise_if_errors()

    scheme = ctx.validate(scheme_from_config, config)
    ctx.raise_if_errors()
    return scheme
