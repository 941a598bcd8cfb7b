from __future__ import annotations

import re

from .models import ChangeSummary, FileStatus, PushedRef, PushResult, RenamedFile, StatusResult

_UNBORN_PREFIXES = ("No commits yet on ", "Initial commit on ")
_BRANCH_RE = re.compile(r"^(?P<current>.+?)(?:\.\.\.(?P<tracking>\S+))?(?: \[(?P<info>[^\]]*)\])?$")
_AHEAD_RE = re.compile(r"ahead (\d+)")
_BEHIND_RE = re.compile(r"behind (\d+)")
_SHORTSTAT_RE = re.compile(
    r"(\d+) files? changed(?:, (\d+) insertions?\(\+\))?(?:, (\d+) deletions?\(-\))?"
)


def _parse_branch_header(header: str, out: StatusResult) -> None:
    for prefix in _UNBORN_PREFIXES:
        if header.startswith(prefix):
            out.current = header[len(prefix):].strip()
            return
    if header.startswith("HEAD (no branch)"):
        out.current = "HEAD"
        out.detached = True
        return
    m = _BRANCH_RE.match(header)
    if m is None:
        out.current = header
        return
    out.current = m.group("current")
    out.tracking = m.group("tracking")
    info = m.group("info") or ""
    ahead = _AHEAD_RE.search(info)
    behind = _BEHIND_RE.search(info)
    out.ahead = int(ahead.group(1)) if ahead else 0
    out.behind = int(behind.group(1)) if behind else 0


def parse_status(raw: str) -> StatusResult:
    """Parse the output of ``git status --porcelain=v1 --branch -z``."""
    out = StatusResult()
    entries = [e for e in raw.split("\0") if e]
    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1
        if entry.startswith("## "):
            _parse_branch_header(entry[3:], out)
            continue
        if len(entry) < 4:
            continue
        index, work, path = entry[0], entry[1], entry[3:]
        code = index + work

        renamed_from = None
        if index in ("R", "C") and i < len(entries):
            # -z puts the source path in the following field
            renamed_from = entries[i]
            i += 1

        out.files.append(FileStatus(path=path, index=index, working_dir=work))

        if code == "??":
            out.not_added.append(path)
            continue
        if "U" in code or code in ("AA", "DD"):
            out.conflicted.append(path)
            continue
        if index == "A":
            out.created.append(path)
        if "D" in code:
            out.deleted.append(path)
        if "M" in code:
            out.modified.append(path)
        if index == "R" and renamed_from is not None:
            out.renamed.append(RenamedFile(from_path=renamed_from, to_path=path))
        if index not in (" ", "?", "!"):
            out.staged.append(path)
    return out


def parse_shortstat(text: str) -> ChangeSummary:
    m = _SHORTSTAT_RE.search(text or "")
    if m is None:
        return ChangeSummary()
    return ChangeSummary(
        changes=int(m.group(1)),
        insertions=int(m.group(2) or 0),
        deletions=int(m.group(3) or 0),
    )


def parse_push_porcelain(text: str, remote: str | None, branch: str | None) -> PushResult:
    out = PushResult(remote=remote, branch=branch)
    for line in (text or "").splitlines():
        if line.startswith("To "):
            out.repo = line[3:].strip()
            continue
        parts = line.split("\t")
        if len(parts) < 3:
            continue
        flag, refs, summary = parts[0], parts[1], parts[2]
        local_ref, _, remote_ref = refs.partition(":")
        out.pushed.append(PushedRef(flag=flag, local_ref=local_ref, remote_ref=remote_ref, summary=summary.strip()))
    return out
