from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class ServerConfig:
    """Server behavior loaded from JSON or YAML."""

    check_repository: bool = True
    default_remote: str = "origin"
    default_log_count: int = 5
    trace: bool = False

    loaded_from: Path | None = None

    def apply(self, obj: dict[str, Any]) -> None:
        """Take the recognized keys from a merged config mapping; bad values keep defaults."""
        cr = obj.get("check_repository")
        if isinstance(cr, bool):
            self.check_repository = cr

        dr = obj.get("default_remote")
        if isinstance(dr, str) and dr.strip():
            self.default_remote = dr.strip()

        lc = obj.get("default_log_count")
        if isinstance(lc, int) and not isinstance(lc, bool) and lc > 0:
            self.default_log_count = lc

        tr = obj.get("trace")
        if isinstance(tr, bool):
            self.trace = tr
