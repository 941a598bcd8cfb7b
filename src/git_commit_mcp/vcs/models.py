from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class FileStatus:
    path: str
    index: str
    working_dir: str


@dataclass
class RenamedFile:
    from_path: str
    to_path: str

    def to_dict(self) -> dict[str, str]:
        return {"from": self.from_path, "to": self.to_path}


@dataclass
class StatusResult:
    not_added: list[str] = field(default_factory=list)
    conflicted: list[str] = field(default_factory=list)
    created: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    modified: list[str] = field(default_factory=list)
    renamed: list[RenamedFile] = field(default_factory=list)
    staged: list[str] = field(default_factory=list)
    files: list[FileStatus] = field(default_factory=list)
    ahead: int = 0
    behind: int = 0
    current: str | None = None
    tracking: str | None = None
    detached: bool = False

    @property
    def is_clean(self) -> bool:
        return not self.files

    def to_dict(self) -> dict[str, Any]:
        return {
            "not_added": list(self.not_added),
            "conflicted": list(self.conflicted),
            "created": list(self.created),
            "deleted": list(self.deleted),
            "modified": list(self.modified),
            "renamed": [r.to_dict() for r in self.renamed],
            "staged": list(self.staged),
            "files": [asdict(f) for f in self.files],
            "ahead": self.ahead,
            "behind": self.behind,
            "current": self.current,
            "tracking": self.tracking,
            "detached": self.detached,
            "is_clean": self.is_clean,
        }


@dataclass
class ChangeSummary:
    changes: int = 0
    insertions: int = 0
    deletions: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class CommitResult:
    id: str
    branch: str | None
    summary: ChangeSummary


@dataclass
class PushedRef:
    flag: str
    local_ref: str
    remote_ref: str
    summary: str


@dataclass
class PushResult:
    remote: str | None
    branch: str | None
    repo: str | None = None
    pushed: list[PushedRef] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "remote": self.remote,
            "branch": self.branch,
            "repo": self.repo,
            "pushed": [asdict(p) for p in self.pushed],
        }


@dataclass
class PullResult:
    remote: str | None
    branch: str | None
    summary: ChangeSummary


@dataclass(frozen=True)
class LogEntry:
    date: str
    hash: str
    message: str
