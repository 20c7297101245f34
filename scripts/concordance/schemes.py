"""GA4GH genotype concordance scheme tables.

Derived from the GA4GH Benchmarking Work Group's proposed evaluation scheme.
Each table is plain data: one row per CallState, one cell per TruthState in
TruthState declaration order:

    MISSING, HOM_REF, HET_REF_VAR1, HET_VAR1_VAR2, HOM_VAR1, NO_CALL,
    LOW_GQ, LOW_DP, VC_FILTERED, GT_FILTERED, IS_MIXED

A TN is included where the reference allele is found in both truth and call.
There is no HET_VAR2_VAR3 call state: VAR2/VAR3 are symbolic, so that case is
expressed as HET_VAR3_VAR4. NA cells are comparisons upstream normalization
never produces.

The two tables differ only in the MISSING truth column (and the MISSING call
row against it). ``ga4gh`` treats a site missing from the truth set as
HOM_REF; ``ga4gh_missing_as_no_call`` treats it as a no-call that contributes
nothing, except that a site missing from both sources is a TN.
"""

from __future__ import annotations

import logging

from constants import SchemePolicy

from .scheme import GenotypeConcordanceScheme, SchemeDefinitionError
from .states import CallState, ContingencyState

log = logging.getLogger(__name__)

_TP = ContingencyState.TP
_FP = ContingencyState.FP
_TN = ContingencyState.TN
_FN = ContingencyState.FN

NA = (ContingencyState.NA,)
EMPTY = (ContingencyState.EMPTY,)
TP_ONLY = (_TP,)
FP_ONLY = (_FP,)
TN_ONLY = (_TN,)
FN_ONLY = (_FN,)
TP_FN = (_TP, _FN)
TP_FP = (_TP, _FP)
TP_TN = (_TP, _TN)
FP_FN = (_FP, _FN)
FP_TN = (_FP, _TN)
FP_TN_FN = (_FP, _TN, _FN)
TP_FP_FN = (_TP, _FP, _FN)
TN_FN = (_TN, _FN)

_FILTERED_ROW = (EMPTY, TN_ONLY, TN_FN, FN_ONLY, FN_ONLY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY, EMPTY)
_EMPTY_ROW = (EMPTY,) * 11

# fmt: off
#  ROW STATE                MISSING   HOM_REF   HET_REF_VAR1 HET_VAR1_VAR2 HOM_VAR1  NO_CALL LOW_GQ LOW_DP VC_FILT GT_FILT IS_MIXED
GA4GH_MISSING_AS_NO_CALL_ROWS = (
    (CallState.MISSING,       (TN_ONLY, TN_ONLY,  TN_FN,       FN_ONLY,      FN_ONLY,  EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HOM_REF,       (EMPTY,   TN_ONLY,  TN_FN,       FN_ONLY,      FN_ONLY,  EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HET_REF_VAR1,  (EMPTY,   FP_TN,    TP_TN,       TP_FN,        TP_FN,    EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HET_REF_VAR2,  (NA,      NA,       FP_TN_FN,    NA,           FP_FN,    NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HET_REF_VAR3,  (NA,      NA,       NA,          FP_FN,        NA,       NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HET_VAR1_VAR2, (EMPTY,   FP_ONLY,  TP_FP,       TP_ONLY,      TP_FP_FN, EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HET_VAR1_VAR3, (NA,      NA,       NA,          TP_FP_FN,     NA,       NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HET_VAR3_VAR4, (NA,      FP_ONLY,  FP_FN,       FP_FN,        FP_FN,    NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HOM_VAR1,      (EMPTY,   FP_ONLY,  TP_FP,       TP_FN,        TP_ONLY,  EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HOM_VAR2,      (NA,      NA,       FP_FN,       TP_FN,        FP_FN,    NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HOM_VAR3,      (NA,      NA,       NA,          FP_FN,        NA,       NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.NO_CALL,       _EMPTY_ROW),
    (CallState.VC_FILTERED,   _FILTERED_ROW),
    (CallState.GT_FILTERED,   _FILTERED_ROW),
    (CallState.LOW_GQ,        _FILTERED_ROW),
    (CallState.LOW_DP,        _FILTERED_ROW),
    (CallState.IS_MIXED,      _EMPTY_ROW),
)

GA4GH_ROWS = (
    (CallState.MISSING,       (NA,      TN_ONLY,  TN_FN,       FN_ONLY,      FN_ONLY,  EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HOM_REF,       (TN_ONLY, TN_ONLY,  TN_FN,       FN_ONLY,      FN_ONLY,  EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HET_REF_VAR1,  (FP_TN,   FP_TN,    TP_TN,       TP_FN,        TP_FN,    EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HET_REF_VAR2,  (NA,      NA,       FP_TN_FN,    NA,           FP_FN,    NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HET_REF_VAR3,  (NA,      NA,       NA,          FP_FN,        NA,       NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HET_VAR1_VAR2, (FP_ONLY, FP_ONLY,  TP_FP,       TP_ONLY,      TP_FP_FN, EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HET_VAR1_VAR3, (NA,      NA,       NA,          TP_FP_FN,     NA,       NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HET_VAR3_VAR4, (FP_ONLY, FP_ONLY,  FP_FN,       FP_FN,        FP_FN,    NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HOM_VAR1,      (FP_ONLY, FP_ONLY,  TP_FP,       TP_FN,        TP_ONLY,  EMPTY,  EMPTY, EMPTY, EMPTY,  EMPTY,  EMPTY)),
    (CallState.HOM_VAR2,      (NA,      NA,       FP_FN,       TP_FN,        FP_FN,    NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.HOM_VAR3,      (NA,      NA,       NA,          FP_FN,        NA,       NA,     NA,    NA,    NA,     NA,     NA)),
    (CallState.NO_CALL,       _EMPTY_ROW),
    (CallState.VC_FILTERED,   _FILTERED_ROW),
    (CallState.GT_FILTERED,   _FILTERED_ROW),
    (CallState.LOW_GQ,        _FILTERED_ROW),
    (CallState.LOW_DP,        _FILTERED_ROW),
    (CallState.IS_MIXED,      _EMPTY_ROW),
)
# fmt: on

SCHEME_ROWS = {
    SchemePolicy.GA4GH: GA4GH_ROWS,
    SchemePolicy.GA4GH_MISSING_AS_NO_CALL: GA4GH_MISSING_AS_NO_CALL_ROWS,
}


def build_table(policy: str) -> GenotypeConcordanceScheme:
    """Build the scheme for a policy.

    Args:
        policy: One of SchemePolicy.ALL

    Returns:
        Populated, not yet validated scheme named after the policy

    Raises:
        SchemeDefinitionError: If the policy is unknown or a row is malformed
    """
    rows = SCHEME_ROWS.get(policy)
    if rows is None:
        raise SchemeDefinitionError(
            f"Unknown scheme policy '{policy}'. "
            f"Valid options are: {sorted(SCHEME_ROWS)}"
        )

    scheme = GenotypeConcordanceScheme(name=policy)
    for call_state, cells in rows:
        scheme.add_row(call_state, *cells)

    log.debug("Built scheme '%s' with %d rows", policy, len(rows))
    return scheme
