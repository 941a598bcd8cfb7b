from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..base import ToolSpec, ToolResult, ToolContext
from ..arguments import DiffArgs
from .common import object_schema

NO_CHANGES = "No changes detected."

@dataclass
class DiffTool:
    spec: ToolSpec = ToolSpec(
        name="git_diff",
        description="Show changes in the working tree, or in the staging area when staged is true (git diff).",
        parameters=object_schema({
            "staged": {"type": "boolean", "description": "Show staged changes instead (git diff --staged)."},
        }),
    )

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        a = DiffArgs.from_obj(args)
        diff = ctx.git.diff(staged=a.staged)
        return ToolResult(diff or NO_CHANGES)
