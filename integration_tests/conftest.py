"""Pytest configuration for integration tests."""

import pytest

from atomi_fit.config import settings


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """A fresh data directory for the CLI to write its database into."""
    monkeypatch.setattr(settings, "data_dir", tmp_path)
    return tmp_path
