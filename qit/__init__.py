"""qit: fewer keystrokes for everyday git."""

from .cli import cli, main
from .config import Settings, __version__
from .git import (  # noqa: F401
    CommandFailedError,
    GitError,
    NotARepositoryError,
    SubprocessRunner,
    UncommittedChangesError,
    commit,
    count_pending_changes,
    log,
    push,
    switch_branch,
    undo,
)
from .message import COMMIT_TYPE_NAMES, CommitType, format_commit_message  # noqa: F401

__all__ = [
    "__version__",
    # CLI
    "cli",
    "main",
    # Config/formatting
    "Settings",
    "CommitType",
    "COMMIT_TYPE_NAMES",
    "format_commit_message",
    # Git
    "GitError",
    "CommandFailedError",
    "UncommittedChangesError",
    "NotARepositoryError",
    "SubprocessRunner",
    "count_pending_changes",
    "commit",
    "push",
    "undo",
    "log",
    "switch_branch",
]
