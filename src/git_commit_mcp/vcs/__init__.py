from .client import GitClient
from .models import ChangeSummary, CommitResult, LogEntry, PullResult, PushResult, StatusResult

__all__ = [
    "GitClient",
    "ChangeSummary",
    "CommitResult",
    "LogEntry",
    "PullResult",
    "PushResult",
    "StatusResult",
]
