from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..errors import ToolArgumentError

COMMIT_TYPES = ("feat", "fix", "style", "refactor", "docs", "chore", "test")


def _opt_str(args: Mapping[str, Any], key: str) -> str | None:
    v = args.get(key)
    if v is None:
        return None
    if not isinstance(v, str):
        raise ToolArgumentError(f"Argument '{key}' must be a string.")
    return v or None


def _req_str(args: Mapping[str, Any], key: str) -> str:
    v = _opt_str(args, key)
    if v is None or not v.strip():
        raise ToolArgumentError(f"Missing required argument: {key}")
    return v


def _opt_bool(args: Mapping[str, Any], key: str) -> bool:
    v = args.get(key)
    if v is None:
        return False
    if not isinstance(v, bool):
        raise ToolArgumentError(f"Argument '{key}' must be a boolean.")
    return v


def resolve_repo_path(args: Mapping[str, Any] | None, cwd: str) -> str:
    v = (args or {}).get("repoPath")
    if isinstance(v, str) and v.strip():
        return v.strip()
    return cwd


@dataclass(frozen=True)
class StatusArgs:
    @staticmethod
    def from_obj(args: Mapping[str, Any]) -> "StatusArgs":
        return StatusArgs()


@dataclass(frozen=True)
class DiffArgs:
    staged: bool = False

    @staticmethod
    def from_obj(args: Mapping[str, Any]) -> "DiffArgs":
        return DiffArgs(staged=_opt_bool(args, "staged"))


@dataclass(frozen=True)
class AddArgs:
    files: tuple[str, ...]

    @staticmethod
    def from_obj(args: Mapping[str, Any]) -> "AddArgs":
        files = args.get("files")
        if files is None:
            raise ToolArgumentError("Missing required argument: files")
        if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
            raise ToolArgumentError("Argument 'files' must be a list of strings.")
        if not files:
            raise ToolArgumentError("Argument 'files' must not be empty; use [\".\"] to add all changes.")
        if any(not f.strip() for f in files):
            raise ToolArgumentError("Argument 'files' must not contain blank paths.")
        return AddArgs(files=tuple(files))


@dataclass(frozen=True)
class CommitArgs:
    type: str
    message: str
    scope: str | None = None
    push: bool = False

    @staticmethod
    def from_obj(args: Mapping[str, Any]) -> "CommitArgs":
        ctype = _req_str(args, "type")
        if ctype not in COMMIT_TYPES:
            raise ToolArgumentError(f"Invalid commit type '{ctype}'. Expected one of: {', '.join(COMMIT_TYPES)}")
        return CommitArgs(
            type=ctype,
            message=_req_str(args, "message"),
            scope=_opt_str(args, "scope"),
            push=_opt_bool(args, "push"),
        )

    @property
    def full_message(self) -> str:
        if self.scope:
            return f"{self.type}({self.scope}): {self.message}"
        return f"{self.type}: {self.message}"


@dataclass(frozen=True)
class RemoteArgs:
    remote: str | None = None
    branch: str | None = None

    @staticmethod
    def from_obj(args: Mapping[str, Any]) -> "RemoteArgs":
        return RemoteArgs(remote=_opt_str(args, "remote"), branch=_opt_str(args, "branch"))


PushArgs = RemoteArgs
PullArgs = RemoteArgs


@dataclass(frozen=True)
class LogArgs:
    count: int | None = None

    @staticmethod
    def from_obj(args: Mapping[str, Any]) -> "LogArgs":
        v = args.get("count")
        if v is None:
            return LogArgs()
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ToolArgumentError("Argument 'count' must be a number.")
        return LogArgs(count=int(v))
