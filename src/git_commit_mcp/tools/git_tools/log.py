from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..base import ToolSpec, ToolResult, ToolContext
from ..arguments import LogArgs
from .common import object_schema

NO_LOG = "No log found."

@dataclass
class LogTool:
    spec: ToolSpec = ToolSpec(
        name="git_log",
        description="Show recent commit history, newest first (git log).",
        parameters=object_schema({
            "count": {"type": "number", "description": "Number of commits to show.", "default": 5},
        }),
    )

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        a = LogArgs.from_obj(args)
        count = ctx.default_log_count if a.count is None else a.count
        entries = ctx.git.log(max_count=count)
        lines = [f"{e.date} [{e.hash[:7]}] {e.message}" for e in entries]
        return ToolResult("\n".join(lines) or NO_LOG)
