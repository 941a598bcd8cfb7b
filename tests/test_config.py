"""
Tests for config discovery and merging.
"""

import json

import pytest

from git_commit_mcp.config import loader
from git_commit_mcp.config.loader import load_server_config
from git_commit_mcp.config.models import ServerConfig


@pytest.fixture(autouse=True)
def no_global_config(monkeypatch):
    monkeypatch.setattr(loader, "_global_candidate_paths", lambda: [])


def test_defaults(tmp_path):
    cfg = load_server_config(cwd=tmp_path)
    assert cfg == ServerConfig()
    assert cfg.loaded_from is None


def test_project_json(tmp_path):
    p = tmp_path / ".git-commit-mcp.json"
    p.write_text(json.dumps({"default_remote": "upstream", "check_repository": False}))
    cfg = load_server_config(cwd=tmp_path)
    assert cfg.default_remote == "upstream"
    assert cfg.check_repository is False
    assert cfg.loaded_from == p


def test_project_yaml(tmp_path):
    (tmp_path / ".git-commit-mcp.yaml").write_text("default_log_count: 10\ntrace: true\n")
    cfg = load_server_config(cwd=tmp_path)
    assert cfg.default_log_count == 10
    assert cfg.trace is True


def test_json_wins_over_yaml(tmp_path):
    (tmp_path / ".git-commit-mcp.json").write_text(json.dumps({"default_log_count": 3}))
    (tmp_path / ".git-commit-mcp.yaml").write_text("default_log_count: 10\n")
    assert load_server_config(cwd=tmp_path).default_log_count == 3


def test_explicit_overrides_project(tmp_path):
    (tmp_path / ".git-commit-mcp.json").write_text(json.dumps({"default_remote": "upstream", "default_log_count": 3}))
    explicit = tmp_path / "custom.yml"
    explicit.write_text("default_remote: mirror\n")
    cfg = load_server_config(cwd=tmp_path, explicit_path=explicit)
    assert cfg.default_remote == "mirror"
    assert cfg.default_log_count == 3
    assert cfg.loaded_from == explicit.resolve()


def test_global_then_project(tmp_path, monkeypatch):
    gdir = tmp_path / "global"
    gdir.mkdir()
    (gdir / "config.json").write_text(json.dumps({"default_remote": "g", "trace": True}))
    monkeypatch.setattr(loader, "_global_candidate_paths", lambda: [gdir / "config.json"])
    proj = tmp_path / "proj"
    proj.mkdir()
    (proj / ".git-commit-mcp.json").write_text(json.dumps({"default_remote": "p"}))
    cfg = load_server_config(cwd=proj)
    assert cfg.default_remote == "p"
    assert cfg.trace is True


def test_invalid_values_keep_defaults(tmp_path):
    (tmp_path / ".git-commit-mcp.json").write_text(
        json.dumps({"default_log_count": -1, "check_repository": "no", "default_remote": ""})
    )
    cfg = load_server_config(cwd=tmp_path)
    assert cfg.default_log_count == 5
    assert cfg.check_repository is True
    assert cfg.default_remote == "origin"


def test_broken_project_file_is_skipped(tmp_path):
    (tmp_path / ".git-commit-mcp.json").write_text("{broken")
    assert load_server_config(cwd=tmp_path).loaded_from is None


def test_explicit_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_server_config(cwd=tmp_path, explicit_path=tmp_path / "missing.json")


def test_explicit_not_a_mapping(tmp_path):
    p = tmp_path / "list.json"
    p.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_server_config(cwd=tmp_path, explicit_path=p)
