from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Protocol

from ..vcs.client import GitClient

@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    parameters: dict[str, Any]   # JSONSchema

    def to_descriptor(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "inputSchema": self.parameters}

class Tool(Protocol):
    spec: ToolSpec
    def execute(self, ctx: "ToolContext", args: dict[str, Any]) -> "ToolResult": ...

@dataclass
class ToolResult:
    content: str
    is_error: bool = False

    def to_envelope(self) -> dict[str, Any]:
        return {"content": [{"type": "text", "text": self.content}], "isError": self.is_error}

@dataclass
class ToolContext:
    repo_path: str
    # Client bound to repo_path, built fresh for every invocation.
    git: GitClient
    default_remote: str = "origin"
    default_log_count: int = 5
