"""Pytest configuration and fixtures."""

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "stress: property sweeps over many generated inputs"
    )


@pytest.fixture
def rust_editions():
    return [
        f"2015 is {2015:#b} in binary!",
        f"2018 is {2018:#o} in octal!",
        f"2021 is {2021:#x} in hex!",
    ]
