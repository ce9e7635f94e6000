"""Shared fixtures: keep every test away from the real user directories."""

import pytest


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point XDG data/config dirs at a temporary location."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("HEALTH_TRACKER_CONFIG", raising=False)
    return tmp_path
