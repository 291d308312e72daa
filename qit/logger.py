"""Logging setup with rich output on stderr.

Modules log through ``logging.getLogger(__name__)``; the CLI entry point calls
``setup_logging`` once before dispatching to a command.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)


def setup_logging(level="WARNING"):
    """Configure the ``qit`` logger hierarchy.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...). Unknown names fall back to WARNING.
    """
    logger = logging.getLogger("qit")
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logger.setLevel(resolved)

    # Repeated CLI invocations in one process (tests) must not stack handlers.
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s"))
        logger.addHandler(handler)

    # Keep propagation so pytest's caplog sees records.
    logger.propagate = True
    return logger
