import logging

import pytest

from srctracker.core.config import reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings and stats at a temp dir so tests never touch the user's files."""
    monkeypatch.setenv("SCT_SETTINGS_PATH", str(tmp_path / "settings.json"))
    monkeypatch.setenv("SCT_STATS_PATH", str(tmp_path / "stats" / "stats.json"))
    reset_settings()

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield tmp_path / "stats" / "stats.json"
    root.handlers[:] = handlers
    root.setLevel(level)
    reset_settings()
