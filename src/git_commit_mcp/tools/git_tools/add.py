from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..base import ToolSpec, ToolResult, ToolContext
from ..arguments import AddArgs
from .common import object_schema

@dataclass
class AddTool:
    spec: ToolSpec = ToolSpec(
        name="git_add",
        description="Stage files for the next commit (git add).",
        parameters=object_schema(
            {
                "files": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "File paths to stage; use [\".\"] for all changes.",
                },
            },
            required=["files"],
        ),
    )

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        a = AddArgs.from_obj(args)
        ctx.git.add(a.files)
        return ToolResult(f"Successfully added: {', '.join(a.files)}")
