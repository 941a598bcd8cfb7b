from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from platformdirs import user_config_dir

from .models import ServerConfig

APP_NAME = "git-commit-mcp"

_SUFFIXES = (".json", ".yaml", ".yml")


def _candidate_paths(cwd: Path) -> list[Path]:
    # project-level (higher priority)
    return [cwd / f".git-commit-mcp{s}" for s in _SUFFIXES]


def _global_candidate_paths() -> list[Path]:
    cfg_dir = Path(user_config_dir(APP_NAME))
    return [cfg_dir / f"config{s}" for s in _SUFFIXES]


def _load_file(p: Path) -> dict[str, Any] | None:
    try:
        text = p.read_text(encoding="utf-8")
        if p.suffix in (".yaml", ".yml"):
            obj = yaml.safe_load(text)
        else:
            obj = json.loads(text)
    except (OSError, ValueError, yaml.YAMLError):
        return None
    if isinstance(obj, dict):
        return obj
    return None


def _merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge_dicts(out[k], v)  # type: ignore
        else:
            out[k] = v
    return out


def load_server_config(*, cwd: Path, explicit_path: Path | None = None) -> ServerConfig:
    """Load server config.

    Merge order: global < project < explicit_path.
    """
    merged: dict[str, Any] = {}
    loaded_from: Path | None = None

    for p in _global_candidate_paths():
        if p.exists() and p.is_file():
            obj = _load_file(p)
            if obj is not None:
                merged = _merge_dicts(merged, obj)
                loaded_from = p
                break

    for p in _candidate_paths(cwd):
        if p.exists() and p.is_file():
            obj = _load_file(p)
            if obj is not None:
                merged = _merge_dicts(merged, obj)
                loaded_from = p
                break  # first match wins for project-level

    if explicit_path is not None:
        p = explicit_path.expanduser().resolve()
        if not p.is_file():
            raise FileNotFoundError(f"Config file not found: {p}")
        obj = _load_file(p)
        if obj is None:
            raise ValueError(f"Config file must contain a JSON/YAML mapping: {p}")
        merged = _merge_dicts(merged, obj)
        loaded_from = p

    cfg = ServerConfig()
    cfg.apply(merged)
    cfg.loaded_from = loaded_from
    return cfg
