"""Tabular views of a genotype concordance scheme.

Renders a scheme as pandas DataFrames for diagnostics, comparison of scheme
variants, and TSV export alongside benchmark metrics.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from concordance.scheme import GenotypeConcordanceScheme
from concordance.states import CallState, TruthState

log = logging.getLogger(__name__)

SCHEME_COLUMNS = ["call_state", "truth_state", "contingency_values"]
_CALL_ORDER = {s.name: s.ordinal for s in CallState}
_TRUTH_ORDER = {s.name: s.ordinal for s in TruthState}


def scheme_to_frame(scheme: GenotypeConcordanceScheme) -> pd.DataFrame:
    """Render a scheme as one row per populated truth/call pair.

    Args:
        scheme: Scheme to render

    Returns:
        DataFrame with call_state, truth_state and contingency_values
        columns, ordered by call-state row then truth-state column
    """
    records = [
        {
            "call_state": key.call_state.name,
            "truth_state": key.truth_state.name,
            "contingency_values": scheme.render(key.truth_state, key.call_state),
        }
        for key, _ in scheme.items()
    ]
    return pd.DataFrame(records, columns=SCHEME_COLUMNS)


def scheme_to_matrix(scheme: GenotypeConcordanceScheme) -> pd.DataFrame:
    """Render a scheme as a call-state by truth-state matrix.

    Unpopulated cells are left as NaN.

    Returns:
        DataFrame indexed by call state with one column per truth state,
        both in declaration order
    """
    df = scheme_to_frame(scheme)
    matrix = df.pivot(index="call_state", columns="truth_state", values="contingency_values")
    matrix = matrix.reindex(
        index=[s.name for s in CallState],
        columns=[s.name for s in TruthState],
    )
    matrix.index.name = "call_state"
    matrix.columns.name = "truth_state"
    return matrix


def diff_schemes(
    left: GenotypeConcordanceScheme, right: GenotypeConcordanceScheme
) -> pd.DataFrame:
    """Find truth/call pairs whose contingency values differ between schemes.

    Args:
        left: First scheme
        right: Second scheme

    Returns:
        DataFrame with call_state, truth_state and one contingency column per
        scheme (suffixed with the scheme names), one row per differing pair,
        ordered by call-state row then truth-state column
    """
    left_name, right_name = left.name, right.name
    if left_name == right_name:
        left_name, right_name = f"{left_name}_left", f"{right_name}_right"

    merged = scheme_to_frame(left).merge(
        scheme_to_frame(right),
        on=["call_state", "truth_state"],
        how="outer",
        suffixes=(f"_{left_name}", f"_{right_name}"),
    )
    left_col = f"contingency_values_{left_name}"
    right_col = f"contingency_values_{right_name}"
    differs = merged[left_col].fillna("") != merged[right_col].fillna("")
    diff = (
        merged[differs]
        .assign(
            _call_order=lambda d: d["call_state"].map(_CALL_ORDER),
            _truth_order=lambda d: d["truth_state"].map(_TRUTH_ORDER),
        )
        .sort_values(["_call_order", "_truth_order"])
        .drop(columns=["_call_order", "_truth_order"])
        .reset_index(drop=True)
    )

    log.info(
        "Schemes '%s' and '%s' differ in %d of %d pairs",
        left.name,
        right.name,
        len(diff),
        len(merged),
    )
    return diff


def write_scheme_tsv(scheme: GenotypeConcordanceScheme, output_path: str | Path) -> Path:
    """Write a scheme in long form as TSV.

    Args:
        scheme: Scheme to write
        output_path: Destination file

    Returns:
        Path to the written file
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = scheme_to_frame(scheme)
    df.to_csv(path, sep="\t", index=False)

    log.info("Wrote %d scheme cells for '%s' to %s", len(df), scheme.name, path)
    return path
