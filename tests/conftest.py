"""Shared pytest fixtures for minivcs tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from click.testing import CliRunner
from minivcs.core.config import Config
from minivcs.core.repository import Repository
from minivcs.core.objects import Blob, Tree, Commit


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep tests away from the real ~/.minivcsconfig and pin the author."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.minivcsconfig')
    monkeypatch.setenv('MINIVCS_USER_NAME', 'Test User')
    monkeypatch.setenv('MINIVCS_USER_EMAIL', 'test@example.com')


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
def write_file(repo):
    """Write a working file relative to the repository root."""
    def _write_file(path, content):
        file_path = repo.work_tree / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)
        return file_path
    return _write_file


@pytest.fixture
def make_commit(repo, write_file):
    """
    Write, stage and commit files.

    Usage: make_commit({'a.txt': 'hello'}, 'message') -> commit digest
    """
    def _make_commit(files, message="Test commit"):
        for path, content in files.items():
            write_file(path, content)
            repo.index.add_file(path)
        return repo.graph.commit_index(message)
    return _make_commit


@pytest.fixture
def repo_with_commits(repo, make_commit):
    """Repository with two commits on main."""
    first = make_commit({'file1.txt': 'Hello, World!'}, 'First commit')
    second = make_commit({'file2.txt': 'Second file'}, 'Second commit')
    repo.commits = [first, second]
    return repo


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob(b"Hello, World!\n")


@pytest.fixture
def sample_tree(repo, sample_blob):
    """Create a sample tree with one blob."""
    blob_hash = repo.write_object(sample_blob)
    tree = Tree()
    tree.add_entry('test.txt', blob_hash)
    return tree


@pytest.fixture
def sample_commit(repo, sample_tree):
    """Sample root commit object."""
    tree_hash = repo.write_object(sample_tree)
    return Commit.create(
        tree_hash=tree_hash,
        parent_hash=None,
        author="Test User <test@example.com>",
        message="Test commit",
        timestamp="2026-01-01T00:00:00Z"
    )


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Run from inside the repository working tree."""
    monkeypatch.chdir(repo.work_tree)
    return repo
