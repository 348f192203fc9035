"""Regression tests for the optional Rich dependency.

These tests verify that every command, and the error boundary, keep
working when Rich is missing: diagnostics fall back to plain stderr
text and matrix output is unaffected.
"""

from __future__ import annotations

import io
import sys

import pytest

from matrix_cli.cli import exit_codes
from matrix_cli.cli.app import cli, main
from matrix_cli.cli.console import escape, get_rich_console, strip_markup
from matrix_cli.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_commands_work_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    out = io.StringIO()
    code = main(["-v", "transpose"], stdin=io.StringIO("1\t2\n"), stdout=out)
    assert code == exit_codes.SUCCESS
    assert out.getvalue() == "1\n2\n"


def test_get_rich_console_raises_when_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_usage_error_plain_output(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr(sys, "argv", ["matrix", "foo"])

    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR

    err = capsys.readouterr().err
    assert "[bold red]" not in err
    assert err.startswith("Error: ")
    assert "matrix dims [MATRIX]" in err


def test_plain_escape_round_trip(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    text = "data/[red]x.tsv"
    assert strip_markup(f"[bold red]Error:[/bold red] {escape(text)}") == f"Error: {text}"
