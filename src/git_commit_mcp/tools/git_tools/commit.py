from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from ..base import ToolSpec, ToolResult, ToolContext
from ..arguments import CommitArgs, COMMIT_TYPES
from .common import object_schema, to_json

@dataclass
class CommitTool:
    spec: ToolSpec = ToolSpec(
        name="git_commit",
        description=(
            "Record staged changes (git commit) with a conventional-commit prefix, "
            "e.g. 'feat(api): message'. Optionally push right after committing."
        ),
        parameters=object_schema(
            {
                "type": {
                    "type": "string",
                    "enum": list(COMMIT_TYPES),
                    "description": "Commit type (feat: feature, fix: bug fix, style: formatting, ...).",
                },
                "scope": {"type": "string", "description": "Scope of the change (optional, e.g. ui, api, db)."},
                "message": {"type": "string", "description": "Commit description."},
                "push": {"type": "boolean", "description": "Run git push after a successful commit (optional)."},
            },
            required=["type", "message"],
        ),
    )

    def execute(self, ctx: ToolContext, args: dict[str, Any]) -> ToolResult:
        a = CommitArgs.from_obj(args)
        result = ctx.git.commit(a.full_message)
        out = f"Commit successful: {result.id}\nSummary: {to_json(result.summary.to_dict())}"

        if a.push:
            # a failed push never turns a recorded commit into an error
            try:
                pushed = ctx.git.push()
                out += f"\nPush successful: {to_json(pushed.to_dict())}"
            except Exception as e:
                out += f"\nPush failed: {e}"
        return ToolResult(out)
