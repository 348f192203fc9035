"""CLI application entry point and command routing for ``matrix``.

This module is the **sole error boundary** for the entire application.
It catches :class:`~matrix_cli.exceptions.MatrixCliError`,
``KeyboardInterrupt`` (which termination signals are routed through)
and any unexpected ``Exception``, rendering messages on stderr and
returning well-defined exit codes.

Architecture notes
------------------
* No arithmetic lives here — parsing and operations belong to ``core``,
  file and stdin handling to ``infra``.
* Matrix data is written to stdout only after the whole result has been
  computed, so a failing command never leaves partial output.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import IO, NoReturn

from matrix_cli.cli import exit_codes
from matrix_cli.cli.console import console, escape
from matrix_cli.cli.logging_setup import configure_logging, resolve_level
from matrix_cli.config import load_settings
from matrix_cli.core.formatter import format_dims, format_matrix
from matrix_cli.core.matrix_service import MatrixService
from matrix_cli.core.protocols import MatrixSource
from matrix_cli.exceptions import MatrixCliError, UsageError
from matrix_cli.infra.signals import termination_as_interrupt
from matrix_cli.infra.sources import open_sources
from matrix_cli.version import __version__

logger = logging.getLogger(__name__)

PROG: str = "matrix"

USAGE: str = "\n".join(
    (
        "Usage:",
        f"  {PROG} dims [MATRIX]",
        f"  {PROG} transpose [MATRIX]",
        f"  {PROG} mean [MATRIX]",
        f"  {PROG} add MATRIX_LEFT MATRIX_RIGHT",
        f"  {PROG} multiply MATRIX_LEFT MATRIX_RIGHT",
    )
)


# ---------------------------------------------------------------------------
# Command table
# ---------------------------------------------------------------------------

Handler = Callable[[MatrixService, Sequence[MatrixSource]], str]


def _handle_dims(service: MatrixService, sources: Sequence[MatrixSource]) -> str:
    return format_dims(service.dims(sources[0]))


def _handle_transpose(service: MatrixService, sources: Sequence[MatrixSource]) -> str:
    return format_matrix(service.transpose(sources[0]))


def _handle_mean(service: MatrixService, sources: Sequence[MatrixSource]) -> str:
    return format_matrix(service.mean(sources[0]))


def _handle_add(service: MatrixService, sources: Sequence[MatrixSource]) -> str:
    return format_matrix(service.add(sources[0], sources[1]))


def _handle_multiply(service: MatrixService, sources: Sequence[MatrixSource]) -> str:
    return format_matrix(service.multiply(sources[0], sources[1]))


# command -> (operand count, handler, help text); one-operand commands may read stdin
COMMANDS: dict[str, tuple[int, Handler, str]] = {
    "dims": (1, _handle_dims, "Print the row and column counts"),
    "transpose": (1, _handle_transpose, "Swap rows and columns"),
    "mean": (1, _handle_mean, "Print the rounded mean of each column"),
    "add": (2, _handle_add, "Add two matrices element-wise"),
    "multiply": (2, _handle_multiply, "Multiply two matrices"),
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, hint=USAGE)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with one sub-command per operation."""
    parser = _ArgumentParser(
        prog=PROG,
        description="Basic operations on tab-delimited integer matrices.",
        epilog="Single-matrix commands read standard input when MATRIX is omitted.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity on stderr (repeatable).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )

    subparsers = parser.add_subparsers(
        dest="command", metavar="COMMAND", required=True,
    )
    for name, (arity, _handler, help_text) in COMMANDS.items():
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        if arity == 1:
            sub.add_argument(
                "matrix",
                nargs="?",
                default=None,
                metavar="MATRIX",
                help="Matrix file (default: standard input).",
            )
        else:
            sub.add_argument("left", metavar="MATRIX_LEFT", help="Left operand file.")
            sub.add_argument("right", metavar="MATRIX_RIGHT", help="Right operand file.")
    return parser


def _input_paths(args: argparse.Namespace) -> list[str]:
    arity = COMMANDS[args.command][0]
    if arity == 1:
        return [args.matrix] if args.matrix is not None else []
    return [args.left, args.right]


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> int:
    """Run the ``matrix`` CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    stdin, stdout:
        Streams used instead of ``sys.stdin`` / ``sys.stdout``; accepting
        them enables deterministic testing without monkeypatching.

    Returns
    -------
    int
        OS process exit code.  Domain errors propagate as exceptions to
        :func:`cli`.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    configure_logging(resolve_level(settings.log_level, args.verbose, args.quiet))

    _arity, handler, _help = COMMANDS[args.command]
    paths = _input_paths(args)
    logger.info("Running %s on %s", args.command, ", ".join(paths) or "<stdin>")

    service = MatrixService()
    with termination_as_interrupt():
        with open_sources(paths, stdin=stdin, settings=settings) as sources:
            output = handler(service, sources)

        out = stdout if stdout is not None else sys.stdout
        out.write(output)
        out.flush()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UsageError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        console.print(escape(exc.hint or USAGE))
        sys.exit(exit_codes.GENERAL_ERROR)
    except MatrixCliError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt as exc:
        reason = f" ({exc.args[0]})" if exc.args else ""
        console.print(f"\n[yellow]Aborted{escape(reason)}.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
