from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base import Tool, ToolSpec
from ..errors import ToolNotFoundError

@dataclass
class ToolRegistry:
    _tools: Dict[str, Tool] = None  # type: ignore

    def __post_init__(self):
        if self._tools is None:
            self._tools = {}

    def register(self, tool: Tool) -> None:
        name = tool.spec.name
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        self._tools[name] = tool

    def get(self, name: str) -> Tool:
        if name not in self._tools:
            raise ToolNotFoundError(name)
        return self._tools[name]

    def get_optional(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def list_specs(self) -> list[ToolSpec]:
        return [t.spec for t in self._tools.values()]

    def list_tools(self) -> list[dict[str, Any]]:
        """Wire descriptors in registration order."""
        return [s.to_descriptor() for s in self.list_specs()]
