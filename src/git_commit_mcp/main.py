from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from . import __version__
from .config.loader import load_server_config
from .config.models import ServerConfig
from .dispatcher import ToolDispatcher
from .mcp.server import StdioServer

app = typer.Typer(add_completion=False, help="git-commit-mcp: git status/diff/add/commit/push/pull/log as MCP tools over stdio.")
# stdout carries protocol frames when serving
console = Console(stderr=True)
out = Console()


def _load_config(config: Path | None) -> ServerConfig:
    try:
        return load_server_config(cwd=Path.cwd(), explicit_path=config)
    except (OSError, ValueError) as e:
        raise typer.BadParameter(str(e), param_hint="--config")


@app.command()
def serve(
    config: Path = typer.Option(None, "--config", help="JSON/YAML config path (default: ./.git-commit-mcp.json or user config)."),
    trace: bool = typer.Option(None, "--trace/--no-trace", help="Log every tool call to stderr."),
    no_repo_check: bool = typer.Option(False, "--no-repo-check", help="Skip the 'is this a git repository' check before each call."),
    default_remote: str = typer.Option(None, "--default-remote", help="Remote used by git_push/git_pull when none is given."),
):
    """Run the MCP server on stdin/stdout."""
    cfg = _load_config(config)
    if trace is not None:
        cfg.trace = trace
    if no_repo_check:
        cfg.check_repository = False
    if default_remote:
        cfg.default_remote = default_remote

    try:
        server = StdioServer(dispatcher=ToolDispatcher(config=cfg))
    except Exception as e:
        console.print(f"[red]Fatal error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]Git Commit MCP Server[/green] v{__version__} running on stdio")
    if cfg.loaded_from:
        console.print(f"[dim]config: {cfg.loaded_from}[/dim]")
    try:
        server.serve()
    except KeyboardInterrupt:
        pass


@app.command()
def tools():
    """List the available tools."""
    table = Table(title="git-commit-mcp tools")
    table.add_column("name", style="bold cyan")
    table.add_column("description")
    table.add_column("parameters", style="dim")
    for t in ToolDispatcher().list_tools():
        schema = t["inputSchema"]
        required = set(schema.get("required", []))
        params = [f"{k}{'' if k in required else '?'}" for k in schema.get("properties", {})]
        table.add_row(t["name"], t["description"], ", ".join(params))
    out.print(table)


@app.command()
def call(
    name: str = typer.Argument(..., help="Tool name, e.g. git_status."),
    args: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object."),
    config: Path = typer.Option(None, "--config", help="JSON/YAML config path."),
):
    """Invoke one tool locally and print the result."""
    try:
        parsed = json.loads(args)
    except ValueError as e:
        raise typer.BadParameter(f"invalid JSON: {e}", param_hint="--args")
    if not isinstance(parsed, dict):
        raise typer.BadParameter("must be a JSON object", param_hint="--args")

    res = ToolDispatcher(config=_load_config(config)).invoke(name, parsed)
    out.print(
        Panel(
            Text(res.content),
            title=f"{name} ({'error' if res.is_error else 'ok'})",
            border_style="red" if res.is_error else "green",
        )
    )
    if res.is_error:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
