from __future__ import annotations

import json
from typing import Any

REPO_PATH = {"type": "string", "description": "Local repository path (optional, defaults to the server's working directory)."}

def object_schema(properties: dict[str, Any], required: list[str] | None = None) -> dict[str, Any]:
    schema: dict[str, Any] = {
        "type": "object",
        "properties": {"repoPath": REPO_PATH, **properties},
    }
    if required:
        schema["required"] = required
    return schema

def to_json(obj: Any) -> str:
    return json.dumps(obj, ensure_ascii=False, indent=2)
