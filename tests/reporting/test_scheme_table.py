"""Tests for tabular scheme rendering."""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

from concordance.scheme import GenotypeConcordanceScheme  # noqa: E402
from concordance.states import CallState, ContingencyState, TruthState  # noqa: E402
from reporting.scheme_table import (  # noqa: E402
    SCHEME_COLUMNS,
    diff_schemes,
    scheme_to_frame,
    scheme_to_matrix,
    write_scheme_tsv,
)

N_CELLS = len(TruthState) * len(CallState)


class TestSchemeToFrame:
    def test_one_row_per_cell(self, missing_as_no_call_scheme):
        df = scheme_to_frame(missing_as_no_call_scheme)
        assert list(df.columns) == SCHEME_COLUMNS
        assert len(df) == N_CELLS

    def test_first_row_is_missing_missing(self, missing_as_no_call_scheme):
        df = scheme_to_frame(missing_as_no_call_scheme)
        first = df.iloc[0]
        assert first["call_state"] == "MISSING"
        assert first["truth_state"] == "MISSING"
        assert first["contingency_values"] == "TN"

    def test_render_strings(self, missing_as_no_call_scheme):
        df = scheme_to_frame(missing_as_no_call_scheme)
        row = df[(df["call_state"] == "HET_VAR1_VAR2") & (df["truth_state"] == "HOM_VAR1")]
        assert row["contingency_values"].tolist() == ["TP,FP,FN"]

    def test_partial_scheme(self):
        scheme = GenotypeConcordanceScheme("partial")
        scheme.add_row(CallState.HOM_REF, *([(ContingencyState.TN,)] * len(TruthState)))
        df = scheme_to_frame(scheme)
        assert len(df) == len(TruthState)
        assert set(df["call_state"]) == {"HOM_REF"}

    def test_empty_scheme(self):
        df = scheme_to_frame(GenotypeConcordanceScheme("empty"))
        assert df.empty
        assert list(df.columns) == SCHEME_COLUMNS


class TestSchemeToMatrix:
    def test_shape_and_order(self, ga4gh_scheme):
        matrix = scheme_to_matrix(ga4gh_scheme)
        assert matrix.shape == (len(CallState), len(TruthState))
        assert list(matrix.index) == [s.name for s in CallState]
        assert list(matrix.columns) == [s.name for s in TruthState]

    def test_cell_values(self, ga4gh_scheme):
        matrix = scheme_to_matrix(ga4gh_scheme)
        assert matrix.loc["HET_REF_VAR1", "HOM_REF"] == "FP,TN"
        assert matrix.loc["NO_CALL", "HOM_VAR1"] == "EMPTY"
        assert matrix.loc["HOM_VAR3", "MISSING"] == "NA"

    def test_unpopulated_cells_are_nan(self):
        scheme = GenotypeConcordanceScheme("partial")
        scheme.add_row(CallState.HOM_REF, *([(ContingencyState.TN,)] * len(TruthState)))
        matrix = scheme_to_matrix(scheme)
        assert matrix.loc["HOM_REF", "MISSING"] == "TN"
        assert pd.isna(matrix.loc["HOM_VAR1", "MISSING"])


class TestDiffSchemes:
    def test_variants_differ_in_missing_truth_column(self, ga4gh_scheme, missing_as_no_call_scheme):
        diff = diff_schemes(ga4gh_scheme, missing_as_no_call_scheme)
        assert len(diff) == 6
        assert set(diff["truth_state"]) == {"MISSING"}
        row = diff[diff["call_state"] == "MISSING"].iloc[0]
        assert row["contingency_values_ga4gh"] == "NA"
        assert row["contingency_values_ga4gh_missing_as_no_call"] == "TN"

    def test_rows_in_canonical_order(self, ga4gh_scheme, missing_as_no_call_scheme):
        diff = diff_schemes(ga4gh_scheme, missing_as_no_call_scheme)
        assert diff["call_state"].tolist() == [
            "MISSING",
            "HOM_REF",
            "HET_REF_VAR1",
            "HET_VAR1_VAR2",
            "HET_VAR3_VAR4",
            "HOM_VAR1",
        ]
        assert list(diff.index) == list(range(len(diff)))

    def test_identical_schemes(self, ga4gh_scheme):
        diff = diff_schemes(ga4gh_scheme, ga4gh_scheme)
        assert diff.empty
        assert "contingency_values_ga4gh_left" in diff.columns


class TestWriteSchemeTsv:
    def test_writes_tsv(self, tmp_path, missing_as_no_call_scheme):
        path = write_scheme_tsv(missing_as_no_call_scheme, tmp_path / "out" / "scheme.tsv")
        assert path.exists()
        df = pd.read_csv(path, sep="\t", keep_default_na=False)
        assert len(df) == N_CELLS
        assert list(df.columns) == SCHEME_COLUMNS
        assert "EMPTY" in set(df["contingency_values"])
        assert "NA" in set(df["contingency_values"])
