"""Shared pytest fixtures and configuration for the matrix-cli test suite.

Guidelines
----------
* Core tests must be pure — no files, no streams.
* Files are created under ``tmp_path`` only.
* Standard input is supplied as ``io.StringIO``, never the real stdin.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture
def matrix_file(tmp_path: Path) -> Callable[..., str]:
    """Factory writing matrix text to a file and returning its path."""
    counter = {"n": 0}

    def _write(text: str, name: str | None = None) -> str:
        counter["n"] += 1
        path = tmp_path / (name or f"matrix_{counter['n']}.tsv")
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of every test."""
    monkeypatch.delenv("MATRIX_CLI_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MATRIX_CLI_SPOOL_MAX_BYTES", raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo ``configure_logging`` so handlers never outlive captured streams."""
    logger = logging.getLogger("matrix_cli")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
