from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import git
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from ..errors import GitClientError, NotARepositoryError
from .models import CommitResult, LogEntry, PullResult, PushResult, StatusResult
from .parsing import parse_push_porcelain, parse_shortstat, parse_status


def _strip_stream(raw: str | None, label: str) -> str:
    # GitCommandError wraps streams as "\n  stderr: '...'"
    text = (raw or "").strip()
    prefix = f"{label}: '"
    if text.startswith(prefix) and text.endswith("'"):
        text = text[len(prefix):-1]
    return text.strip()


def command_error_text(exc: GitCommandError) -> str:
    return _strip_stream(exc.stderr, "stderr") or _strip_stream(exc.stdout, "stdout") or str(exc)


class GitClient:
    """Thin wrapper around a GitPython ``Repo`` bound to one directory.

    One instance serves one tool invocation. The repository is opened lazily so
    that ``is_repository`` can be asked about any existing directory.
    """

    def __init__(self, path: str | Path):
        p = Path(path).expanduser()
        if not p.is_dir():
            raise GitClientError(f'Directory "{path}" does not exist.')
        self.path = p
        self._repo: git.Repo | None = None

    @property
    def repo(self) -> git.Repo:
        if self._repo is None:
            try:
                self._repo = git.Repo(self.path, search_parent_directories=True)
            except (InvalidGitRepositoryError, NoSuchPathError):
                raise NotARepositoryError(str(self.path))
        return self._repo

    def close(self) -> None:
        if self._repo is not None:
            self._repo.close()
            self._repo = None

    def is_repository(self) -> bool:
        try:
            return not self.repo.bare
        except NotARepositoryError:
            return False

    def _git(self, command: str, *args: Any, **kwargs: Any) -> str:
        try:
            return getattr(self.repo.git, command)(*args, **kwargs)
        except GitCommandError as e:
            raise GitClientError(command_error_text(e)) from e

    def _has_commits(self) -> bool:
        return self.repo.head.is_valid()

    def status(self) -> StatusResult:
        raw = self._git("status", "--porcelain=v1", "--branch", "-z")
        return parse_status(raw)

    def diff(self, staged: bool = False) -> str:
        if staged:
            return self._git("diff", "--staged", strip_newline_in_stdout=False)
        return self._git("diff", strip_newline_in_stdout=False)

    def add(self, files: Sequence[str]) -> None:
        self._git("add", "--", *files)

    def commit(self, message: str) -> CommitResult:
        # verbatim keeps the message byte-for-byte as given
        out = self._git("commit", "--cleanup=verbatim", "-m", message)
        head = self.repo.head
        branch = None if head.is_detached else head.ref.name
        return CommitResult(id=head.commit.hexsha, branch=branch, summary=parse_shortstat(out))

    def push(self, remote: str | None = None, branch: str | None = None) -> PushResult:
        args = [a for a in (remote, branch) if a]
        out = self._git("push", "--porcelain", *args)
        result = parse_push_porcelain(out, remote, branch)
        rejected = [p for p in result.pushed if p.flag == "!"]
        if rejected:
            refs = ", ".join(f"{p.remote_ref} ({p.summary})" for p in rejected)
            raise GitClientError(f"Push rejected: {refs}")
        return result

    def pull(self, remote: str | None = None, branch: str | None = None) -> PullResult:
        args = [a for a in (remote, branch) if a]
        out = self._git("pull", "--no-edit", *args)
        return PullResult(remote=remote, branch=branch, summary=parse_shortstat(out))

    def log(self, max_count: int) -> list[LogEntry]:
        if max_count <= 0 or not self._has_commits():
            return []
        try:
            commits = list(self.repo.iter_commits(max_count=max_count))
        except GitCommandError as e:
            raise GitClientError(command_error_text(e)) from e
        return [
            LogEntry(date=c.authored_datetime.isoformat(), hash=c.hexsha, message=c.summary)
            for c in commits
        ]
