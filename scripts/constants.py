"""Constants for the genotype concordance scheme.

Centralizes magic strings into named constants for type safety and IDE support.
"""


class SchemePolicy:
    """Genotype concordance scheme variants."""

    GA4GH = "ga4gh"
    GA4GH_MISSING_AS_NO_CALL = "ga4gh_missing_as_no_call"

    ALL = {GA4GH, GA4GH_MISSING_AS_NO_CALL}


class ConfigKey:
    """Keys of the genotype_concordance config block."""

    CONCORDANCE = "genotype_concordance"
    MISSING_AS_NO_CALL = "missing_as_no_call"
    VALIDATE_SCHEME = "validate_scheme"


# Rendered form of a comparison that contributes nothing countable
EMPTY_LABEL = "EMPTY"
