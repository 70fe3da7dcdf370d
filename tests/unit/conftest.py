"""Fixtures and markers for the unit test suite."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark every test collected from tests/unit/ as a unit test."""
    for item in items:
        if "/unit/" in str(item.path):
            item.add_marker(pytest.mark.unit)
