"""Git utilities package."""

from .actions import (
    commit,
    log,
    pending_changes_or_zero,
    push,
    switch_branch,
    undo,
)
from .core import (
    CommandFailedError,
    GitError,
    NotARepositoryError,
    SubprocessRunner,
    UncommittedChangesError,
    run_checked,
)
from .status import count_pending_changes, get_pending_entries, open_repo

__all__ = [
    "GitError",
    "CommandFailedError",
    "UncommittedChangesError",
    "NotARepositoryError",
    "SubprocessRunner",
    "run_checked",
    "open_repo",
    "get_pending_entries",
    "count_pending_changes",
    "pending_changes_or_zero",
    "commit",
    "push",
    "undo",
    "log",
    "switch_branch",
]
