"""
Tests for package metadata.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import pytest

import msgbox


class TestVersion:
    """__version__ follows the installed distribution."""

    def test_matches_installed_distribution(self):
        try:
            expected = version("msgbox")
        except PackageNotFoundError:
            pytest.skip("msgbox is not installed")
        assert msgbox.__version__ == expected

    def test_matches_version_file(self):
        version_file = Path(__file__).parent.parent / "VERSION"
        assert msgbox.__version__ == version_file.read_text().strip()
