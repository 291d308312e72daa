"""Pending-change detection through GitPython."""

import logging

from git import Repo
from git.exc import CommandError, InvalidGitRepositoryError, NoSuchPathError

from .core import CommandFailedError, NotARepositoryError

logger = logging.getLogger(__name__)

IGNORED_MARKER = "!!"


def open_repo(path="."):
    """Open the repository containing ``path``, searching parent directories."""
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError) as exc:
        raise NotARepositoryError(f"Not a git repository: {path}") from exc


def get_pending_entries(repo):
    """
    Return porcelain status entries that are modified, added, deleted or untracked.
    Renames are reported as a deletion plus an addition. Ignored entries are excluded.
    """
    try:
        out = repo.git.status("--porcelain", "--untracked-files=normal", "--no-renames")
    except CommandError as exc:
        raise CommandFailedError(exc.command, returncode=exc.status) from exc
    return [
        line
        for line in out.splitlines()
        if line.strip() and not line.startswith(IGNORED_MARKER)
    ]


def count_pending_changes(path="."):
    """Count non-ignored changed entries in the repository at ``path``. Read-only."""
    repo = open_repo(path)
    try:
        count = len(get_pending_entries(repo))
    finally:
        repo.close()
    logger.debug("%d pending change(s) in %s", count, repo.working_tree_dir)
    return count
