import subprocess
from pathlib import Path

import pytest

from qit.config import DISABLE_EMOJIS_ENV, LOG_LEVEL_ENV


class RecordingRunner:
    """Records every argv it is asked to run and replays scripted exit codes."""

    def __init__(self, returncodes=None):
        self.calls = []
        self.quiet = []
        self._returncodes = dict(returncodes or {})

    def run(self, cmd, quiet=False):
        args = list(cmd)
        self.calls.append(args)
        self.quiet.append(quiet)
        return self._returncodes.get(tuple(args), 0)


@pytest.fixture
def tmp_git_repo(tmp_path):
    """Create a temporary git repository with user config set."""
    repo = tmp_path / "repo"
    repo.mkdir()

    def git(*args):
        subprocess.check_call(["git", "-C", str(repo), *args])

    git("init")
    git("config", "user.email", "test@example.com")
    git("config", "user.name", "Test User")
    return repo, git


@pytest.fixture(autouse=True)
def clear_qit_env(monkeypatch):
    """Ensure qit's environment toggles are absent during tests."""
    monkeypatch.delenv(DISABLE_EMOJIS_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@pytest.fixture
def recording_runner():
    return RecordingRunner()


@pytest.fixture
def make_runner():
    return RecordingRunner


@pytest.fixture
def write_file():
    def _write(base: Path, name: str, content: str = "sample"):
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
