"""Pytest fixtures for review tools tests."""

from pathlib import Path

import pytest
from git import Repo

from review_tools.config import reload_settings
from review_tools.vcs.operations import ChangeSummary, FileChangeStat

INITIAL_FILES = {
    "app.py": "print('hello')\n",
    "src/tools.py": "def tool():\n    return 1\n",
    "bun.lock": "lockfile v1\n",
}


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Run every test against default settings."""
    for name in ("REVIEW_TOOLS_EXCLUDE", "REVIEW_TOOLS_REVIEW_TITLE", "REVIEW_TOOLS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    reload_settings()


@pytest.fixture
def temp_git_repo(tmp_path):
    """Create a temporary git repository with one commit."""
    repo = Repo.init(tmp_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    for name, content in INITIAL_FILES.items():
        file_path = tmp_path / name
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
    repo.index.add(list(INITIAL_FILES))
    repo.index.commit("Initial commit")

    yield repo


@pytest.fixture
def repo_path(temp_git_repo) -> Path:
    """Working tree path of the temporary repository."""
    return Path(temp_git_repo.working_dir)


@pytest.fixture
def modified_repo(temp_git_repo, repo_path):
    """Repository with unstaged changes to src/tools.py and bun.lock."""
    (repo_path / "src" / "tools.py").write_text(
        "def tool():\n    return 1\n\n\ndef other():\n    return 2\n"
    )
    (repo_path / "bun.lock").write_text("lockfile v2\n")
    yield temp_git_repo


@pytest.fixture
def make_summary():
    """Build a ChangeSummary from (path, insertions, deletions) tuples."""

    def _make(*files: tuple[str, int, int]) -> ChangeSummary:
        return ChangeSummary(
            files=tuple(FileChangeStat(path=p, insertions=i, deletions=d) for p, i, d in files)
        )

    return _make
