from __future__ import annotations
import tempfile
from pathlib import Path
import subprocess

from git_commit_mcp.dispatcher import ToolDispatcher

def main():
    with tempfile.TemporaryDirectory() as td:
        cwd = Path(td)
        subprocess.run(["git", "init"], cwd=cwd, check=True, stdout=subprocess.DEVNULL)
        subprocess.run(["git", "config", "user.name", "Selftest"], cwd=cwd, check=True)
        subprocess.run(["git", "config", "user.email", "selftest@example.com"], cwd=cwd, check=True)
        (cwd / "a.txt").write_text("hello\nworld\n", encoding="utf-8")

        d = ToolDispatcher(cwd=lambda: str(cwd))

        print("TOOLS:", ", ".join(t["name"] for t in d.list_tools()))
        print("STATUS:", d.invoke("git_status", {}).content)
        print("ADD:", d.invoke("git_add", {"files": ["."]}).content)
        print("DIFF:", d.invoke("git_diff", {"staged": True}).content)
        print("COMMIT:", d.invoke("git_commit", {"type": "feat", "scope": "demo", "message": "first", "push": True}).content)
        print("LOG:", d.invoke("git_log", {"count": 3}).content)
        print("PUSH:", d.invoke("git_push", {}).content)
        print("UNKNOWN:", d.invoke("git_rebase", {}).content)

if __name__ == "__main__":
    main()
