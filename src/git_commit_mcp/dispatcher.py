from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

from rich.console import Console
from rich.markup import escape

from .config.models import ServerConfig
from .errors import NotARepositoryError, ToolArgumentError
from .tools.arguments import resolve_repo_path
from .tools.base import ToolContext, ToolResult
from .tools.builtin import default_registry
from .tools.registry import ToolRegistry
from .vcs.client import GitClient

ClientFactory = Callable[[str], GitClient]

# stdout belongs to the protocol; diagnostics go to stderr
console = Console(stderr=True)


@dataclass
class ToolDispatcher:
    """Routes one tool invocation to its handler and always returns a ToolResult.

    Every invocation resolves its own repository path and builds its own
    client, so nothing is shared between calls.
    """

    config: ServerConfig = field(default_factory=ServerConfig)
    registry: ToolRegistry = field(default_factory=default_registry)
    client_factory: ClientFactory = GitClient
    cwd: Callable[[], str] = os.getcwd

    def list_tools(self) -> list[dict[str, Any]]:
        return self.registry.list_tools()

    def invoke(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        repo_path = None
        client = None
        try:
            if arguments is not None and not isinstance(arguments, Mapping):
                raise ToolArgumentError("Tool arguments must be a JSON object.")
            args = dict(arguments or {})
            tool = self.registry.get(name)
            repo_path = resolve_repo_path(args, self.cwd())
            client = self.client_factory(repo_path)
            if self.config.check_repository and not client.is_repository():
                raise NotARepositoryError(repo_path)
            ctx = ToolContext(
                repo_path=repo_path,
                git=client,
                default_remote=self.config.default_remote,
                default_log_count=self.config.default_log_count,
            )
            res = tool.execute(ctx, args)
        except Exception as e:
            res = ToolResult(content=f"Error: {e}", is_error=True)
        finally:
            if client is not None:
                client.close()

        if self.config.trace:
            status = "[red]error[/red]" if res.is_error else "[green]ok[/green]"
            console.print(f"[cyan]{escape(str(name))}[/cyan] ({escape(repo_path or '-')}) {status}")
        return res
