"""Pytest configuration and fixtures for pathmaster tests."""

import pytest


def pytest_configure(config):
    """Register custom test markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that do not touch the real environment"
    )
    config.addinivalue_line("markers", "shell: Tests for shell dialect handlers")
    config.addinivalue_line(
        "markers", "integration: Integration tests combining multiple components"
    )


@pytest.fixture(autouse=True)
def fake_home(tmp_path, monkeypatch):
    """Point $HOME at a temp directory so no test touches real dotfiles."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def existing_dir(tmp_path):
    """Return a directory that exists, for use as a valid PATH entry."""
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def missing_dir(tmp_path):
    """Return a directory path that does not exist."""
    return tmp_path / "gone" / "bin"


@pytest.fixture
def generic_handler(fake_home):
    """Return a generic handler rooted at the fake home."""
    from pathmaster.shell.generic import GenericHandler

    return GenericHandler(home=fake_home)


@pytest.fixture
def ksh_handler(fake_home):
    """Return a Korn-shell handler rooted at the fake home."""
    from pathmaster.shell.ksh import KshHandler

    return KshHandler(home=fake_home)
