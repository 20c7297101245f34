"""Genotype categories and contingency outcomes for concordance benchmarking.

Member declaration order is significant: it is the ordinal position used as
the canonical column (TruthState) and row (CallState) order of a scheme.
Truth genotypes are normalized to at most two distinct alleles, so only
CallState carries third/fourth allele categories.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TruthState(Enum):
    """Genotype category of the truth (gold-standard) call at a site."""

    MISSING = "MISSING"
    HOM_REF = "HOM_REF"
    HET_REF_VAR1 = "HET_REF_VAR1"
    HET_VAR1_VAR2 = "HET_VAR1_VAR2"
    HOM_VAR1 = "HOM_VAR1"
    NO_CALL = "NO_CALL"
    LOW_GQ = "LOW_GQ"
    LOW_DP = "LOW_DP"
    VC_FILTERED = "VC_FILTERED"
    GT_FILTERED = "GT_FILTERED"
    IS_MIXED = "IS_MIXED"

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    def as_call_state(self) -> CallState:
        """Return the CallState denoting the same genotype category."""
        return CallState[self.name]


class CallState(Enum):
    """Genotype category of the call under evaluation at a site."""

    MISSING = "MISSING"
    HOM_REF = "HOM_REF"
    HET_REF_VAR1 = "HET_REF_VAR1"
    HET_REF_VAR2 = "HET_REF_VAR2"
    HET_REF_VAR3 = "HET_REF_VAR3"
    HET_VAR1_VAR2 = "HET_VAR1_VAR2"
    HET_VAR1_VAR3 = "HET_VAR1_VAR3"
    HET_VAR3_VAR4 = "HET_VAR3_VAR4"
    HOM_VAR1 = "HOM_VAR1"
    HOM_VAR2 = "HOM_VAR2"
    HOM_VAR3 = "HOM_VAR3"
    NO_CALL = "NO_CALL"
    LOW_GQ = "LOW_GQ"
    LOW_DP = "LOW_DP"
    VC_FILTERED = "VC_FILTERED"
    GT_FILTERED = "GT_FILTERED"
    IS_MIXED = "IS_MIXED"

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]


# Declaration position of every truth and call state
_ORDINALS = {
    **{state: i for i, state in enumerate(TruthState)},
    **{state: i for i, state in enumerate(CallState)},
}


class ContingencyState(Enum):
    """Contingency table outcome a truth/call comparison contributes to.

    EMPTY: the comparison contributes nothing countable.
    NA: the comparison cannot occur after upstream normalization.
    """

    TP = "TP"
    FP = "FP"
    TN = "TN"
    FN = "FN"
    EMPTY = "EMPTY"
    NA = "NA"


COUNTABLE_STATES = frozenset(
    {ContingencyState.TP, ContingencyState.FP, ContingencyState.TN, ContingencyState.FN}
)


@dataclass(frozen=True)
class TruthAndCallStates:
    """Immutable (truth, call) pair addressing one cell of a scheme."""

    truth_state: TruthState
    call_state: CallState

    def __post_init__(self):
        if not isinstance(self.truth_state, TruthState):
            raise TypeError(f"truth_state must be a TruthState, got: {self.truth_state!r}")
        if not isinstance(self.call_state, CallState):
            raise TypeError(f"call_state must be a CallState, got: {self.call_state!r}")

    def sort_key(self) -> tuple[int, int]:
        return (self.truth_state.ordinal, self.call_state.ordinal)

    def __lt__(self, other: TruthAndCallStates) -> bool:
        if not isinstance(other, TruthAndCallStates):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"[{self.truth_state.name}, {self.call_state.name}]"
