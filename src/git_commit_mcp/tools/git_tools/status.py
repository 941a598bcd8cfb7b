from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..base import ToolSpec, ToolResult, ToolContext
from ..arguments import StatusArgs
from .common import object_schema, to_json

@dataclass
class StatusTool:
    spec: ToolSpec = ToolSpec(
        name="git_status",
        description="Show the working tree status (git status).",
        parameters=object_schema({}),
    )

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        StatusArgs.from_obj(args)
        status = ctx.git.status()
        return ToolResult(to_json(status.to_dict()))
