"""Core matrix service — reads, parses and operates.

This is the central service consumed by the CLI layer.  It reads text
through :class:`~matrix_cli.core.protocols.MatrixSource` objects handed
to each call, so the core never touches files or streams directly.

Guarantees
----------
* Pure orchestration — no ``print()``, no filesystem access.
* Only :class:`~matrix_cli.exceptions.MatrixCliError` subclasses escape.
* Both operands of a binary operation are parsed before any arithmetic.
"""

from __future__ import annotations

import logging

from matrix_cli.core import operations
from matrix_cli.core.models import Dimensions, Matrix
from matrix_cli.core.parser import parse_matrix
from matrix_cli.core.protocols import MatrixSource
from matrix_cli.exceptions import FileError, MatrixCliError

logger = logging.getLogger(__name__)


class MatrixService:
    """Stateless service exposing one method per command."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dims(self, source: MatrixSource) -> Dimensions:
        return operations.dims(self.load(source))

    def transpose(self, source: MatrixSource) -> Matrix:
        return operations.transpose(self.load(source))

    def mean(self, source: MatrixSource) -> Matrix:
        return operations.mean(self.load(source))

    def add(self, left: MatrixSource, right: MatrixSource) -> Matrix:
        """Element-wise sum of two sources.

        Raises
        ------
        DimensionMismatchError
            If the matrices differ in shape.
        """
        return operations.add(self.load(left), self.load(right))

    def multiply(self, left: MatrixSource, right: MatrixSource) -> Matrix:
        """Matrix product of two sources.

        Raises
        ------
        DimensionMismatchError
            If the left column count differs from the right row count.
        """
        return operations.multiply(self.load(left), self.load(right))

    # ------------------------------------------------------------------
    # Source delegation (safe boundary)
    # ------------------------------------------------------------------

    def load(self, source: MatrixSource) -> Matrix:
        """Read and parse *source*.

        Raises
        ------
        FileError
            If the source cannot be read.
        MalformedMatrixError
            If its text is not a rectangular integer matrix.
        """
        text = self._read(source)
        matrix = parse_matrix(text, source=source.label)
        logger.debug("Parsed %dx%d matrix from %s", matrix.rows, matrix.cols, source.label)
        return matrix

    @staticmethod
    def _read(source: MatrixSource) -> str:
        """Call the source and ensure only our exceptions escape."""
        try:
            return source.read_text()
        except MatrixCliError:
            # Already one of ours; propagate unchanged.
            raise
        except Exception as exc:
            raise FileError(source.label, f"unexpected read error: {exc}") from exc
