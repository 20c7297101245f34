"""Shared test fixtures for genotype concordance tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add scripts directory to path so all tests can import from it
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)


@pytest.fixture
def missing_as_no_call_scheme():
    """Validated GA4GH scheme treating missing truth as no-call."""
    from concordance import get_validated_scheme

    return get_validated_scheme(missing_as_no_call=True)


@pytest.fixture
def ga4gh_scheme():
    """Validated default GA4GH scheme."""
    from concordance import get_validated_scheme

    return get_validated_scheme(missing_as_no_call=False)


@pytest.fixture
def temp_config_file(tmp_path):
    """Fixture to create temporary YAML config files for testing."""

    def _create_config(content: str, filename: str = "config.yaml") -> Path:
        """Create a config file with given content.

        Args:
            content: YAML content
            filename: Name of the file

        Returns:
            Path to the created file
        """
        file_path = tmp_path / filename
        file_path.write_text(content)
        return file_path

    return _create_config
