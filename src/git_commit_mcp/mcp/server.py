from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from typing import Any, IO

from .. import __version__
from ..dispatcher import ToolDispatcher

SERVER_NAME = "git-commit-mcp"
PROTOCOL_VERSION = "2024-11-05"

METHOD_NOT_FOUND = -32601
PARSE_ERROR = -32700
INVALID_REQUEST = -32600


def _reply(rid: Any, result=None, error: tuple[int, str] | None = None) -> dict[str, Any]:
    msg: dict[str, Any] = {"jsonrpc": "2.0", "id": rid}
    if error is not None:
        msg["error"] = {"code": error[0], "message": error[1]}
    else:
        msg["result"] = result
    return msg


@dataclass
class StdioServer:
    """Line-delimited JSON-RPC server exposing the git tools.

    Methods:
      - initialize -> server info and capabilities
      - tools/list -> { tools: [{name, description, inputSchema}] }
      - tools/call -> { content: [{type: "text", text}], isError }
    """

    dispatcher: ToolDispatcher = field(default_factory=ToolDispatcher)

    def handle(self, req: Any) -> dict[str, Any] | None:
        """Answer one decoded request; notifications (no id) get no reply."""
        if not isinstance(req, dict):
            return _reply(None, error=(INVALID_REQUEST, "Request must be a JSON object"))
        if "id" not in req:
            return None
        rid = req.get("id")
        method = req.get("method")
        params = req.get("params") or {}
        if not isinstance(params, dict):
            params = {}

        if method == "initialize":
            return _reply(rid, {
                "protocolVersion": params.get("protocolVersion") or PROTOCOL_VERSION,
                "capabilities": {"tools": {}},
                "serverInfo": {"name": SERVER_NAME, "version": __version__},
            })
        if method == "ping":
            return _reply(rid, {})
        if method == "tools/list":
            return _reply(rid, {"tools": self.dispatcher.list_tools()})
        if method == "tools/call":
            name = params.get("name")
            args = params.get("arguments") or {}
            res = self.dispatcher.invoke(str(name), args if isinstance(args, dict) else {})
            return _reply(rid, res.to_envelope())
        return _reply(rid, error=(METHOD_NOT_FOUND, f"Unknown method: {method}"))

    def serve(self, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> None:
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        for line in stdin:
            line = line.strip()
            if not line:
                continue
            try:
                req = json.loads(line)
            except ValueError as e:
                msg = _reply(None, error=(PARSE_ERROR, f"Parse error: {e}"))
            else:
                msg = self.handle(req)
            if msg is None:
                continue
            stdout.write(json.dumps(msg, ensure_ascii=False) + "\n")
            stdout.flush()
