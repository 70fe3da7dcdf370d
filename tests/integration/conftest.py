"""Fixtures and markers for the integration test suite."""

import pytest


def pytest_collection_modifyitems(items):
    """Mark every test collected from tests/integration/ as an integration test."""
    for item in items:
        if "/integration/" in str(item.path):
            item.add_marker(pytest.mark.integration)
