from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..base import ToolSpec, ToolResult, ToolContext
from ..arguments import PushArgs
from .common import object_schema, to_json

@dataclass
class PushTool:
    spec: ToolSpec = ToolSpec(
        name="git_push",
        description="Push commits to a remote repository (git push).",
        parameters=object_schema({
            "remote": {"type": "string", "description": "Remote name (defaults to origin)."},
            "branch": {"type": "string", "description": "Branch name."},
        }),
    )

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        a = PushArgs.from_obj(args)
        result = ctx.git.push(a.remote or ctx.default_remote, a.branch)
        return ToolResult(f"Push successful: {to_json(result.to_dict())}")
