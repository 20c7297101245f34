"""Tests for base validator functions."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

from validators import (  # noqa: E402
    ValidationError,
    validate_allowed_keys,
    validate_bool,
)


class TestValidateAllowedKeys:
    """Tests for validate_allowed_keys function."""

    def test_subset_passes(self):
        """Test validation passes for known keys."""
        validate_allowed_keys({"a": 1}, {"a", "b"}, "block")  # Should not raise

    def test_unknown_keys_raise(self):
        """Test validation fails for unknown keys."""
        with pytest.raises(ValidationError, match="block contains unknown keys"):
            validate_allowed_keys({"z": 1}, {"a"}, "block")


class TestValidateBool:
    """Tests for validate_bool function."""

    @pytest.mark.parametrize("value", [True, False])
    def test_bools_pass(self, value):
        """Test booleans pass."""
        validate_bool(value, "flag")  # Should not raise

    @pytest.mark.parametrize("value", ["true", 0, None])
    def test_non_bools_raise(self, value):
        """Test non-booleans raise error naming the field."""
        with pytest.raises(ValidationError, match="'flag' must be a boolean"):
            validate_bool(value, "flag")
