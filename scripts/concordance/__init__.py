"""Genotype concordance classification for variant-calling benchmarks.

Modules:
    states: Truth, call and contingency enumerations and the pair key
    scheme: Scheme engine (population, lookup, rendering, validation)
    schemes: GA4GH scheme tables and build_table
    factory: Scheme selection by missing-as-no-call flag or config

Example:
    >>> from concordance import CallState, TruthState, get_validated_scheme
    >>> scheme = get_validated_scheme(missing_as_no_call=True)
    >>> scheme.render(TruthState.HOM_REF, CallState.HET_REF_VAR1)
    'FP,TN'
"""

from .states import (
    COUNTABLE_STATES,
    CallState,
    ContingencyState,
    TruthAndCallStates,
    TruthState,
)

from .scheme import (
    GenotypeConcordanceScheme,
    SchemeDefinitionError,
    SchemeValidationError,
    UnreachableComparisonError,
)

from .schemes import (
    GA4GH_MISSING_AS_NO_CALL_ROWS,
    GA4GH_ROWS,
    SCHEME_ROWS,
    build_table,
)

from .factory import (
    get_scheme,
    get_validated_scheme,
    policy_for,
    scheme_from_config,
)

__all__ = [
    # States
    "COUNTABLE_STATES",
    "CallState",
    "ContingencyState",
    "TruthAndCallStates",
    "TruthState",
    # Engine
    "GenotypeConcordanceScheme",
    "SchemeDefinitionError",
    "SchemeValidationError",
    "UnreachableComparisonError",
    # Tables
    "GA4GH_MISSING_AS_NO_CALL_ROWS",
    "GA4GH_ROWS",
    "SCHEME_ROWS",
    "build_table",
    # Selection
    "get_scheme",
    "get_validated_scheme",
    "policy_for",
    "scheme_from_config",
]
