"""Logging configuration for the ``matrix`` command.

Records from the ``matrix_cli`` logger hierarchy are rendered on stderr
by :class:`rich.logging.RichHandler`, or by a plain
:class:`logging.StreamHandler` when Rich is not installed.  Nothing is
ever logged to stdout, which carries matrix data only.
"""

from __future__ import annotations

import logging
import sys

from matrix_cli.cli.console import get_rich_console
from matrix_cli.exceptions import EnvironmentError

LOGGER_NAME: str = "matrix_cli"
PLAIN_FORMAT: str = "%(levelname)s [%(name)s] %(message)s"

_HANDLER_ATTR = "_matrix_cli_handler"


def resolve_level(base: int, verbose: int = 0, quiet: bool = False) -> int:
    """Apply ``-v`` / ``-q`` flags to the *base* level.

    Each ``-v`` lowers the threshold one step (WARNING → INFO → DEBUG);
    ``-q`` raises it to ERROR and wins over ``-v``.
    """
    if quiet:
        return logging.ERROR
    if verbose <= 0:
        return base
    return max(logging.DEBUG, min(base, logging.WARNING) - 10 * verbose)


def _build_handler() -> logging.Handler:
    try:
        console = get_rich_console()
        from rich.logging import RichHandler
    except (EnvironmentError, ModuleNotFoundError):
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
        return handler
    return RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(level: int) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this again replaces the previously installed handler, so
    repeated ``main()`` calls in one process do not duplicate output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_ATTR, False):
            logger.removeHandler(existing)

    handler = _build_handler()
    setattr(handler, _HANDLER_ATTR, True)
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
