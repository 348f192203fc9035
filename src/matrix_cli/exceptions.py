"""Custom exception hierarchy for matrix-cli.

All exceptions that cross layer boundaries must inherit from
:class:`MatrixCliError`.  Raw ``OSError`` / ``ValueError`` instances
raised while reading or parsing input must never propagate beyond the
layer that produced them — they are caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
MatrixCliError
├── UsageError
├── FileError
├── MalformedMatrixError
├── DimensionMismatchError
├── ConfigError
└── EnvironmentError
"""

from __future__ import annotations


class MatrixCliError(Exception):
    """Base exception for all matrix-cli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    and exit with status 1.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(MatrixCliError):
    """Raised for an unknown command or a wrong argument combination."""


# --- Input -----------------------------------------------------------------

class FileError(MatrixCliError):
    """Raised when a named input path is missing or unreadable."""

    def __init__(self, path: str, reason: str, *, hint: str | None = None) -> None:
        super().__init__(f"Cannot read '{path}': {reason}", hint=hint)
        self.path: str = path


class MalformedMatrixError(MatrixCliError):
    """Raised when input text is not a rectangular integer matrix."""

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        line: int | None = None,
        hint: str | None = None,
    ) -> None:
        where = ""
        if source is not None:
            where = source if line is None else f"{source}:{line}"
        elif line is not None:
            where = f"line {line}"
        super().__init__(f"{where}: {message}" if where else message, hint=hint)
        self.source: str | None = source
        self.line: int | None = line


# --- Operations ------------------------------------------------------------

class DimensionMismatchError(MatrixCliError):
    """Raised when operand shapes are incompatible for an operation."""

    def __init__(
        self,
        operation: str,
        explanation: str,
        *,
        left: tuple[int, int],
        right: tuple[int, int],
    ) -> None:
        super().__init__(
            f"{operation}: dimension mismatch: {explanation} "
            f"(left is {left[0]}x{left[1]}, right is {right[0]}x{right[1]})",
        )
        self.operation: str = operation
        self.left: tuple[int, int] = left
        self.right: tuple[int, int] = right


# --- Environment / tooling -------------------------------------------------

class ConfigError(MatrixCliError):
    """Raised when an environment setting holds an invalid value."""


class EnvironmentError(MatrixCliError):
    """Raised when an optional runtime dependency is not available."""
