"""CLI commands and entry point."""

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Optional

import click

from .config import Settings, __version__
from .git import GitError, SubprocessRunner, actions, count_pending_changes
from .logger import setup_logging
from .message import COMMIT_TYPE_NAMES, CommitType, format_commit_message, format_emoji_table

FAILURE_MARKER = "💥 Unable to run command:"

COMMIT_EPILOG = f"""\b
Format:
    <emoji> <type>[(<area>)]: <message>

\b
Emojis:
{format_emoji_table()}

Emojis inspired by https://gitmoji.dev/

\b
Examples:
    ✨ feature: Add thing
    ✨ feature(cli): Improve args
    🚧 chore: Do thing
    🚀 deploy(api): Deploy to production
"""


@dataclass
class AppState:
    """Objects shared by every command. Tests pass their own via ``obj=``."""

    settings: Optional[Settings] = None
    runner: Optional[SubprocessRunner] = None
    pending_changes: Optional[Callable[[], int]] = None


@contextmanager
def reported_errors():
    """Report GitError on stderr with the failure marker and exit with status 1."""
    try:
        yield
    except GitError as exc:
        click.secho(FAILURE_MARKER, fg="red", err=True)
        click.echo(str(exc), err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log every git command that runs")
@click.pass_context
def cli(ctx, verbose):
    """qit: fewer keystrokes for everyday git."""
    state = ctx.ensure_object(AppState)
    if state.settings is None:
        state.settings = Settings.from_env()
    if state.runner is None:
        state.runner = SubprocessRunner()
    if state.pending_changes is None:
        state.pending_changes = count_pending_changes

    setup_logging("DEBUG" if verbose else state.settings.log_level)


@cli.command(name="commit", epilog=COMMIT_EPILOG)
@click.argument("commit_type", metavar="TYPE", type=click.Choice(COMMIT_TYPE_NAMES))
@click.argument("message")
@click.option("--area", "-a", help="The section of the code this commit focuses on")
@click.option("--no-verify", "-n", is_flag=True, help="Skip the pre-commit and commit-msg hooks")
@click.pass_obj
def commit_command(state, commit_type, message, area, no_verify):
    """Commits all changes with a meaningful commit message."""
    try:
        formatted = format_commit_message(
            CommitType(commit_type), message, area=area, settings=state.settings
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="MESSAGE") from exc

    with reported_errors():
        actions.commit(formatted, no_verify=no_verify, runner=state.runner)


@cli.command(name="push")
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Force push. Ignores uncommitted changes. **WARNING**: This is the same as `git push --force`!",
)
@click.pass_obj
def push_command(state, force):
    """Pushes the current branch. Will not push if there are uncommitted changes."""
    with reported_errors():
        actions.push(force=force, runner=state.runner, pending_changes=state.pending_changes)


@cli.command(name="undo")
@click.pass_obj
def undo_command(state):
    """Undoes the last commit, keeping its changes."""
    with reported_errors():
        actions.undo(runner=state.runner)


@cli.command(name="log")
@click.option("--short", "-s", is_flag=True, help="Show one line per commit")
@click.pass_obj
def log_command(state, short):
    """Shows the git log."""
    with reported_errors():
        actions.log(short=short, runner=state.runner)


@cli.command(name="switch")
@click.argument("branch")
@click.pass_obj
def switch_command(state, branch):
    """Switches to a branch, creating it if it does not exist."""
    with reported_errors():
        actions.switch_branch(branch, runner=state.runner)


@cli.command(name="status")
@click.pass_obj
def status_command(state):
    """Prints the number of uncommitted changes."""
    with reported_errors():
        count = state.pending_changes()
    click.echo(count)


# Short aliases (same command objects).
cli.add_command(commit_command, name="c")
cli.add_command(push_command, name="p")
cli.add_command(undo_command, name="u")
cli.add_command(log_command, name="l")
cli.add_command(switch_command, name="s")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
