"""Scheme selection by configuration flag."""

from __future__ import annotations

import logging

from constants import ConfigKey, SchemePolicy
from validators.config import validate_config

from .scheme import GenotypeConcordanceScheme
from .schemes import build_table

log = logging.getLogger(__name__)


def policy_for(missing_as_no_call: bool) -> str:
    """Map the missing-as-no-call flag to a scheme policy."""
    if missing_as_no_call:
        return SchemePolicy.GA4GH_MISSING_AS_NO_CALL
    return SchemePolicy.GA4GH


def get_scheme(missing_as_no_call: bool) -> GenotypeConcordanceScheme:
    """Get a populated scheme.

    Args:
        missing_as_no_call: If True, sites missing from the truth set are
            treated as no-calls; otherwise they are treated as HOM_REF (GA4GH)

    Returns:
        Populated scheme, not yet validated
    """
    return build_table(policy_for(missing_as_no_call))


def get_validated_scheme(missing_as_no_call: bool) -> GenotypeConcordanceScheme:
    """Get a populated and validated scheme."""
    scheme = get_scheme(missing_as_no_call)
    scheme.validate()
    return scheme


def scheme_from_config(config: dict) -> GenotypeConcordanceScheme:
    """Build the scheme selected by a configuration dictionary.

    Args:
        config: Configuration dictionary from config.yaml

    Returns:
        Populated scheme, validated unless ``validate_scheme`` is False

    Raises:
        ValidationError: If the configuration is invalid
        SchemeValidationError: If the selected scheme is incomplete
    """
    validate_config(config)
    block = config.get(ConfigKey.CONCORDANCE) or {}
    missing_as_no_call = block.get(ConfigKey.MISSING_AS_NO_CALL, False)
    validate_scheme = block.get(ConfigKey.VALIDATE_SCHEME, True)

    scheme = get_scheme(missing_as_no_call)
    log.info("Selected genotype concordance scheme: %s", scheme.name)

    if validate_scheme:
        scheme.validate()
    else:
        log.warning("Scheme validation disabled for '%s'", scheme.name)
    return scheme
