"""Git actions: each builds an argv and runs it, propagating the first failure."""

import logging

from .core import UncommittedChangesError, SubprocessRunner, run_checked
from .status import count_pending_changes

logger = logging.getLogger(__name__)


def _runner(runner):
    return runner if runner is not None else SubprocessRunner()


def commit(message, no_verify=False, runner=None):
    """
    Stage everything in the working tree, then commit it with ``message``.

    The commit step never runs if staging fails. Nothing is rolled back.
    """
    runner = _runner(runner)
    run_checked(runner, ["git", "add", "--all"])

    args = ["git", "commit", "-a", "-m", message]
    if no_verify:
        args.append("--no-verify")
    run_checked(runner, args)


def pending_changes_or_zero(pending_changes=None):
    """
    Count pending changes, treating any failure to do so as "no pending changes".
    The failure is logged as a warning.
    """
    pending_changes = pending_changes or count_pending_changes
    try:
        return pending_changes()
    except Exception as exc:  # noqa: BLE001
        logger.warning("Could not check for uncommitted changes (%s); pushing anyway", exc)
        return 0


def push(force=False, runner=None, pending_changes=None):
    """Push the current branch. Refuses to push over uncommitted changes unless forced."""
    count = pending_changes_or_zero(pending_changes)
    if count > 0 and not force:
        raise UncommittedChangesError(count)

    args = ["git", "push"]
    if force:
        args.append("--force")
    run_checked(_runner(runner), args)


def undo(runner=None):
    """Undo the last commit, keeping its changes in the working tree."""
    run_checked(_runner(runner), ["git", "reset", "--soft", "HEAD~1"])


def log(short=False, runner=None):
    """Stream the git log to stdout without capturing it."""
    args = ["git", "log"]
    if short:
        args.append("--oneline")
    run_checked(_runner(runner), args)


def switch_branch(name, runner=None):
    """
    Check out ``name``, creating it when the checkout fails.

    Returns True when the branch was created.
    """
    runner = _runner(runner)
    if runner.run(["git", "checkout", name], quiet=True) == 0:
        return False

    logger.info("Branch %s not checked out; creating it", name)
    run_checked(runner, ["git", "checkout", "-b", name])
    return True
