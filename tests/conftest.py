"""
Shared pytest fixtures: throwaway git repositories built with GitPython.
"""

from pathlib import Path

import pytest
from git import Repo

from git_commit_mcp.dispatcher import ToolDispatcher


def set_identity(repo: Repo) -> None:
    with repo.config_writer() as cw:
        cw.set_value("user", "name", "Test User")
        cw.set_value("user", "email", "test@example.com")
        cw.set_value("commit", "gpgsign", "false")


def commit_file(repo: Repo, name: str, content: str, message: str):
    path = Path(repo.working_tree_dir) / name
    path.write_text(content, encoding="utf-8")
    repo.index.add([name])
    return repo.index.commit(message)


@pytest.fixture
def repo(tmp_path) -> Repo:
    work = tmp_path / "work"
    work.mkdir()
    r = Repo.init(work)
    set_identity(r)
    return r


@pytest.fixture
def seeded_repo(repo) -> Repo:
    commit_file(repo, "README.md", "hello\n", "initial commit")
    return repo


@pytest.fixture
def dispatcher(repo) -> ToolDispatcher:
    return ToolDispatcher(cwd=lambda: repo.working_tree_dir)


@pytest.fixture
def remote(tmp_path, seeded_repo) -> Repo:
    """Bare origin with the seeded repo's branch pushed and tracked."""
    bare = Repo.init(tmp_path / "origin.git", bare=True)
    seeded_repo.create_remote("origin", bare.working_dir)
    seeded_repo.git.push("-u", "origin", "HEAD")
    return bare


def workdir(repo: Repo) -> Path:
    return Path(repo.working_tree_dir)
