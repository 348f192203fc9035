"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete file or
stream adapters — so parsing and arithmetic stay free of I/O.
"""

from __future__ import annotations

from typing import Protocol


class MatrixSource(Protocol):
    """Contract for anything that can supply matrix text.

    Any object exposing :attr:`label` and :meth:`read_text` satisfies
    this protocol structurally (no explicit inheritance required).
    """

    @property
    def label(self) -> str:
        """Human-readable name used in diagnostics (path or ``<stdin>``)."""
        ...  # pragma: no cover

    def read_text(self) -> str:
        """Return the full matrix text.

        May be called more than once and must return the same content
        each time.  Implementations map I/O failures to
        :class:`~matrix_cli.exceptions.FileError`.
        """
        ...  # pragma: no cover
