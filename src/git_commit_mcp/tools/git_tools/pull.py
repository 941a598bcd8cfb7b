from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..base import ToolSpec, ToolResult, ToolContext
from ..arguments import PullArgs
from .common import object_schema, to_json

@dataclass
class PullTool:
    spec: ToolSpec = ToolSpec(
        name="git_pull",
        description="Fetch and merge updates from a remote repository (git pull).",
        parameters=object_schema({
            "remote": {"type": "string", "description": "Remote name (defaults to origin)."},
            "branch": {"type": "string", "description": "Branch name."},
        }),
    )

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        a = PullArgs.from_obj(args)
        result = ctx.git.pull(a.remote or ctx.default_remote, a.branch)
        return ToolResult(f"Pull successful: {to_json(result.summary.to_dict())}")
