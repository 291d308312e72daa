"""Core git errors and the subprocess runner."""

import logging
import shlex
import subprocess

logger = logging.getLogger(__name__)


def as_argv(cmd):
    """Accept either an argv list or a string (split using shlex)."""
    if isinstance(cmd, (list, tuple)):
        return [str(part) for part in cmd]
    return shlex.split(cmd)


class GitError(RuntimeError):
    """Base class for every failure qit reports (usage errors excluded)."""


class CommandFailedError(GitError):
    """Raised when git cannot be spawned or exits with a non-zero status."""

    def __init__(self, cmd, returncode=None, cause=None):
        self.argv = as_argv(cmd)
        self.returncode = returncode
        self.cause = cause
        command = shlex.join(self.argv)
        if cause is not None:
            detail = f"Could not run `{command}`: {cause}"
        else:
            detail = f"`{command}` exited with status {returncode}"
        super().__init__(detail)


class UncommittedChangesError(GitError):
    """Raised when a non-forced push is attempted with pending changes."""

    def __init__(self, count):
        self.count = count
        super().__init__(f"There are uncommitted changes ({count} pending)")


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""


class SubprocessRunner:
    """
    Run git through ``subprocess`` and wait for it to exit.

    No shell is involved, so arguments such as commit messages are passed through
    verbatim. Output is inherited from the parent process unless ``quiet`` is set.
    """

    def run(self, cmd, quiet=False):
        args = as_argv(cmd)
        logger.debug("Running %s", shlex.join(args))
        stream = subprocess.DEVNULL if quiet else None
        try:
            result = subprocess.run(args, stdout=stream, stderr=stream)
        except OSError as exc:
            raise CommandFailedError(args, cause=exc) from exc
        logger.debug("%s exited with %s", args[0], result.returncode)
        return result.returncode


def run_checked(runner, cmd, quiet=False):
    """Run ``cmd`` with ``runner``; raise CommandFailedError on a non-zero exit."""
    cmd = as_argv(cmd)
    returncode = runner.run(cmd, quiet=quiet)
    if returncode != 0:
        raise CommandFailedError(cmd, returncode=returncode)
    return returncode
