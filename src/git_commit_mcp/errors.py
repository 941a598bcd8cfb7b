from __future__ import annotations


class GitToolError(RuntimeError):
    pass


class ToolNotFoundError(GitToolError):
    def __init__(self, name: str):
        super().__init__(f"Tool not found: {name}")
        self.name = name


class ToolArgumentError(GitToolError):
    pass


class NotARepositoryError(GitToolError):
    def __init__(self, path: str):
        super().__init__(f'Directory "{path}" is not a valid git repository.')
        self.path = path


class GitClientError(GitToolError):
    """A delegated git operation failed; the message is git's own output."""
