"""Genotype concordance scheme engine.

A scheme maps every (TruthState, CallState) pair to the ordered contingency
outcomes that comparison contributes to. A single comparison may contribute
to several buckets at once, e.g. a call sharing one alternate allele with the
truth but carrying another yields TP, FP and FN for the same site.

Lifecycle: constructed, populated row by row with ``add_row``, validated once,
then read-only. ``lookup`` and ``render`` are the build-time access path and
may be used before validation; ``classify`` is the production path and
requires a validated scheme.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType

from constants import EMPTY_LABEL
from validators.base import ValidationError

from .states import (
    COUNTABLE_STATES,
    CallState,
    ContingencyState,
    TruthAndCallStates,
    TruthState,
)

log = logging.getLogger(__name__)

ContingencyStates = tuple[ContingencyState, ...]


class SchemeDefinitionError(Exception):
    """Raised when a scheme row is malformed at population time."""

    pass


class SchemeValidationError(ValidationError):
    """Raised when a scheme is incomplete or used before validation."""

    def __init__(
        self,
        message: str,
        truth_state: TruthState | None = None,
        call_state: CallState | None = None,
    ):
        super().__init__(message)
        self.truth_state = truth_state
        self.call_state = call_state


class UnreachableComparisonError(ValidationError):
    """Raised when a comparison classified NA is observed.

    NA cells cannot arise from correctly normalized genotypes, so observing
    one points at the component that categorized the site.
    """

    def __init__(self, truth_state: TruthState, call_state: CallState):
        super().__init__(
            f"Unreachable comparison observed: truth {truth_state.name}, "
            f"call {call_state.name} is classified NA"
        )
        self.truth_state = truth_state
        self.call_state = call_state


class GenotypeConcordanceScheme:
    """Mapping from truth/call state pairs to contingency outcomes.

    Args:
        name: Scheme name used in log and error messages
    """

    def __init__(self, name: str = "custom"):
        self.name = name
        self._scheme: dict[TruthAndCallStates, ContingencyStates] = {}
        self._rows: set[CallState] = set()
        self._validated = False

    def __repr__(self) -> str:
        return (
            f"GenotypeConcordanceScheme(name={self.name!r}, "
            f"cells={len(self._scheme)}, validated={self._validated})"
        )

    def __len__(self) -> int:
        return len(self._scheme)

    def __contains__(self, key: object) -> bool:
        return key in self._scheme

    @property
    def is_validated(self) -> bool:
        return self._validated

    def add_row(
        self, call_state: CallState, *contingency_states: Sequence[ContingencyState]
    ) -> None:
        """Add the row for one call state.

        Args:
            call_state: The call state (row)
            *contingency_states: One outcome sequence per TruthState, in
                TruthState declaration order

        Raises:
            SchemeDefinitionError: On an arity mismatch, a repeated row, an
                element that is not a ContingencyState, or a validated scheme
        """
        if self._validated:
            raise SchemeDefinitionError(
                f"Scheme '{self.name}' is validated and can no longer be modified"
            )
        if not isinstance(call_state, CallState):
            raise SchemeDefinitionError(f"Row state must be a CallState, got: {call_state!r}")
        if len(contingency_states) != len(TruthState):
            raise SchemeDefinitionError(
                f"Length mismatch between contingency state arrays ({len(contingency_states)}) "
                f"and TruthState values ({len(TruthState)}) for row {call_state.name}"
            )
        if call_state in self._rows:
            raise SchemeDefinitionError(
                f"Duplicate row {call_state.name} in scheme '{self.name}'"
            )

        cells = []
        for truth_state, states in zip(TruthState, contingency_states):
            if isinstance(states, (ContingencyState, str)) or not isinstance(states, Iterable):
                raise SchemeDefinitionError(
                    f"Contingency states at [{truth_state.name}, {call_state.name}] "
                    f"must be a sequence, got: {states!r}"
                )
            states = tuple(states)
            for state in states:
                if not isinstance(state, ContingencyState):
                    raise SchemeDefinitionError(
                        f"Invalid contingency state {state!r} at "
                        f"[{truth_state.name}, {call_state.name}]"
                    )
            cells.append(
                (TruthAndCallStates(truth_state, call_state), states or (ContingencyState.EMPTY,))
            )

        self._scheme.update(cells)
        self._rows.add(call_state)
        log.debug("Scheme '%s': added row %s", self.name, call_state.name)

    def lookup(self, truth_state: TruthState, call_state: CallState) -> ContingencyStates | None:
        """Get the contingency states for a truth/call pair.

        Returns:
            The stored outcome tuple, or None if the pair was never populated
        """
        return self._scheme.get(TruthAndCallStates(truth_state, call_state))

    def render(self, truth_state: TruthState, call_state: CallState) -> str:
        """Get the contingency states of a pair as a parse-able string.

        Returns ``"EMPTY"`` for a pair that contributes nothing, otherwise the
        outcome names comma-joined in stored order (e.g. ``"TP,FN"``).

        Raises:
            SchemeValidationError: If the pair is not populated
        """
        states = self._require(truth_state, call_state)
        if states == (ContingencyState.EMPTY,):
            return EMPTY_LABEL
        return ",".join(state.name for state in states)

    @staticmethod
    def as_set(contingency_states: Iterable[ContingencyState]) -> frozenset[ContingencyState]:
        """Get the distinct contingency states of a sequence."""
        return frozenset(contingency_states)

    def validate(self) -> None:
        """Check that every truth/call pair has an entry.

        A no-op once the scheme has been validated.

        Raises:
            SchemeValidationError: Naming the first missing pair
        """
        if self._validated:
            return

        for truth_state in TruthState:
            for call_state in CallState:
                if TruthAndCallStates(truth_state, call_state) not in self._scheme:
                    raise SchemeValidationError(
                        f"Missing scheme tuple: [{truth_state.name}, {call_state.name}]",
                        truth_state=truth_state,
                        call_state=call_state,
                    )

        self._validated = True
        log.info("Validated scheme '%s' (%d cells)", self.name, len(self._scheme))

    def classify(self, truth_state: TruthState, call_state: CallState) -> frozenset[ContingencyState]:
        """Get the countable outcomes of a comparison.

        EMPTY cells yield an empty set.

        Raises:
            SchemeValidationError: If the scheme has not been validated
            UnreachableComparisonError: If the pair is classified NA
        """
        if not self._validated:
            raise SchemeValidationError(
                f"Scheme '{self.name}' must be validated before classifying comparisons"
            )
        states = self._scheme[TruthAndCallStates(truth_state, call_state)]
        if ContingencyState.NA in states:
            log.error(
                "Scheme '%s': unreachable comparison truth=%s call=%s",
                self.name,
                truth_state.name,
                call_state.name,
            )
            raise UnreachableComparisonError(truth_state, call_state)
        return self.as_set(states) & COUNTABLE_STATES

    def items(self) -> Iterator[tuple[TruthAndCallStates, ContingencyStates]]:
        """Iterate populated cells by call-state row, then truth-state column."""
        for call_state in CallState:
            for truth_state in TruthState:
                key = TruthAndCallStates(truth_state, call_state)
                if key in self._scheme:
                    yield key, self._scheme[key]

    def as_mapping(self) -> Mapping[TruthAndCallStates, ContingencyStates]:
        """Read-only view of the underlying mapping."""
        return MappingProxyType(self._scheme)

    def _require(self, truth_state: TruthState, call_state: CallState) -> ContingencyStates:
        states = self.lookup(truth_state, call_state)
        if states is None:
            raise SchemeValidationError(
                f"Missing scheme tuple: [{truth_state.name}, {call_state.name}]",
                truth_state=truth_state,
                call_state=call_state,
            )
        return states
