"""
Tests for the tool catalog and the typed argument records.
"""

import pytest

from git_commit_mcp.errors import ToolArgumentError, ToolNotFoundError
from git_commit_mcp.tools.arguments import (
    AddArgs,
    CommitArgs,
    DiffArgs,
    LogArgs,
    RemoteArgs,
    resolve_repo_path,
)
from git_commit_mcp.tools.builtin import default_registry
from git_commit_mcp.tools.git_tools.status import StatusTool

EXPECTED = ["git_status", "git_diff", "git_add", "git_commit", "git_push", "git_pull", "git_log"]


class TestRegistry:
    def test_catalog_order(self):
        assert [t["name"] for t in default_registry().list_tools()] == EXPECTED

    def test_list_tools_idempotent(self):
        reg = default_registry()
        assert reg.list_tools() == reg.list_tools()
        assert default_registry().list_tools() == reg.list_tools()

    def test_descriptor_shape(self):
        for t in default_registry().list_tools():
            assert set(t) == {"name", "description", "inputSchema"}
            assert t["inputSchema"]["type"] == "object"
            assert t["inputSchema"]["properties"]["repoPath"]["type"] == "string"

    def test_required_fields(self):
        tools = {t["name"]: t["inputSchema"] for t in default_registry().list_tools()}
        assert tools["git_add"]["required"] == ["files"]
        assert tools["git_commit"]["required"] == ["type", "message"]
        assert "required" not in tools["git_status"]
        assert tools["git_commit"]["properties"]["type"]["enum"] == [
            "feat", "fix", "style", "refactor", "docs", "chore", "test",
        ]
        assert tools["git_log"]["properties"]["count"]["default"] == 5

    def test_duplicate_registration(self):
        reg = default_registry()
        with pytest.raises(ValueError):
            reg.register(StatusTool())

    def test_unknown_tool(self):
        reg = default_registry()
        with pytest.raises(ToolNotFoundError, match="Tool not found: git_stash"):
            reg.get("git_stash")
        assert reg.get_optional("git_stash") is None


class TestArguments:
    def test_commit_message_format(self):
        assert CommitArgs.from_obj({"type": "feat", "message": "x"}).full_message == "feat: x"
        assert CommitArgs.from_obj({"type": "fix", "scope": "api", "message": "y"}).full_message == "fix(api): y"

    def test_empty_scope_is_ignored(self):
        assert CommitArgs.from_obj({"type": "docs", "scope": "", "message": "z"}).full_message == "docs: z"

    def test_message_and_scope_kept_verbatim(self):
        args = CommitArgs.from_obj({"type": "feat", "scope": " ui ", "message": "  x  "})
        assert args.full_message == "feat( ui ):   x  "

    def test_blank_message_is_missing(self):
        with pytest.raises(ToolArgumentError, match="Missing required argument: message"):
            CommitArgs.from_obj({"type": "feat", "message": "   "})

    def test_add_rejects_blank_entries(self):
        with pytest.raises(ToolArgumentError, match="blank"):
            AddArgs.from_obj({"files": ["a.txt", "  "]})

    def test_commit_rejects_unknown_type(self):
        with pytest.raises(ToolArgumentError, match="Invalid commit type"):
            CommitArgs.from_obj({"type": "wip", "message": "x"})

    def test_commit_push_must_be_bool(self):
        with pytest.raises(ToolArgumentError):
            CommitArgs.from_obj({"type": "feat", "message": "x", "push": "yes"})

    def test_add_requires_list(self):
        with pytest.raises(ToolArgumentError, match="Missing required argument: files"):
            AddArgs.from_obj({})
        with pytest.raises(ToolArgumentError):
            AddArgs.from_obj({"files": "a.txt"})
        with pytest.raises(ToolArgumentError):
            AddArgs.from_obj({"files": []})
        assert AddArgs.from_obj({"files": ["."]}).files == (".",)

    def test_diff_defaults(self):
        assert DiffArgs.from_obj({}).staged is False
        assert DiffArgs.from_obj({"staged": True}).staged is True

    def test_remote_args(self):
        assert RemoteArgs.from_obj({}) == RemoteArgs(remote=None, branch=None)
        assert RemoteArgs.from_obj({"remote": "up", "branch": "main"}) == RemoteArgs(remote="up", branch="main")

    def test_log_count(self):
        assert LogArgs.from_obj({}).count is None
        assert LogArgs.from_obj({"count": 3}).count == 3
        assert LogArgs.from_obj({"count": 3.0}).count == 3
        with pytest.raises(ToolArgumentError):
            LogArgs.from_obj({"count": True})
        with pytest.raises(ToolArgumentError):
            LogArgs.from_obj({"count": "3"})

    def test_resolve_repo_path(self):
        assert resolve_repo_path({"repoPath": "/srv/repo"}, "/cwd") == "/srv/repo"
        assert resolve_repo_path({"repoPath": ""}, "/cwd") == "/cwd"
        assert resolve_repo_path({}, "/cwd") == "/cwd"
        assert resolve_repo_path(None, "/cwd") == "/cwd"
