"""Shared pytest fixtures for Clasp tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from click.testing import CliRunner
from clasp.core.config import Config
from clasp.core.repository import Repository


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep tests away from the real ~/.claspconfig and CLASP_* variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.claspconfig')
    monkeypatch.delenv('CLASP_COLOR_UI', raising=False)
    monkeypatch.delenv('CLASP_CORE_LOGLEVEL', raising=False)
    return home


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Initialized repository that is also the working directory."""
    monkeypatch.chdir(repo.work_tree)
    return repo


@pytest.fixture
def runner():
    return CliRunner()


def write_file(repo, name, content):
    """Write content into the repository's working tree and return the path."""
    path = repo.work_tree / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


def stage_and_commit(repo, files, message):
    """
    Write and stage files, then commit.

    Args:
        repo: Repository instance
        files: Sequence of (name, content) pairs, staged in order
        message: Commit message

    Returns:
        str: Commit hash
    """
    for name, content in files:
        repo.graph.add(write_file(repo, name, content))
    return repo.graph.commit(message)


@pytest.fixture
def repo_with_commits(repo):
    """
    Repository with two commits.

    First commit stages a.txt and b.txt; the second changes a.txt.
    """
    first = stage_and_commit(
        repo, [('a.txt', 'line1\nline2\n'), ('b.txt', 'bee\n')], 'First commit'
    )
    second = stage_and_commit(repo, [('a.txt', 'line1\nline3\n')], 'Second commit')
    repo.commit_hashes = [first, second]
    return repo


@pytest.fixture
def write():
    """The write_file helper."""
    return write_file


@pytest.fixture
def commit_files():
    """The stage_and_commit helper."""
    return stage_and_commit
