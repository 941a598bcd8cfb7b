from __future__ import annotations

from .registry import ToolRegistry

from .git_tools.status import StatusTool
from .git_tools.diff import DiffTool
from .git_tools.add import AddTool
from .git_tools.commit import CommitTool
from .git_tools.push import PushTool
from .git_tools.pull import PullTool
from .git_tools.log import LogTool

def register_git_tools(registry: ToolRegistry) -> None:
    registry.register(StatusTool())
    registry.register(DiffTool())
    registry.register(AddTool())
    registry.register(CommitTool())
    registry.register(PushTool())
    registry.register(PullTool())
    registry.register(LogTool())

def default_registry() -> ToolRegistry:
    registry = ToolRegistry()
    register_git_tools(registry)
    return registry
