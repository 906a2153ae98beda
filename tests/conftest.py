"""
Shared fixtures for the rem test suite.
"""

import pytest

from rem.config import RemConfig
from rem.engine import NoteEngine


@pytest.fixture
def notes_path(tmp_path):
    """Path of a notes store that does not exist yet."""
    return tmp_path / "rem_notes.txt"


@pytest.fixture
def engine(notes_path):
    """NoteEngine bound to a temporary store."""
    return NoteEngine(notes_path)


@pytest.fixture
def rem_config(tmp_path, notes_path):
    """Resolved configuration pointing at temporary locations."""
    return RemConfig(
        notes_path=str(notes_path),
        editor=None,
        log_dir=str(tmp_path / "logs"),
        log_level="INFO",
    )


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep tests away from the real home directory and editor."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in ("REM_CLI_NOTES_PATH", "REM_CLI_CONFIG", "REM_CLI_LOG_DIR",
                "REM_CLI_LOG_LEVEL", "EDITOR"):
        monkeypatch.delenv(var, raising=False)
    return home
