"""Core / service layer — pure models, parsing and matrix arithmetic.

Rules
-----
* No ``print()`` calls.
* No direct filesystem or stream I/O; text arrives through
  :class:`~matrix_cli.core.protocols.MatrixSource`.
* No imports from ``cli`` or ``infra``.
"""

from matrix_cli.core.matrix_service import MatrixService
from matrix_cli.core.models import Dimensions, Matrix
from matrix_cli.core.operations import add, dims, mean, multiply, transpose
from matrix_cli.core.parser import parse_matrix
from matrix_cli.core.protocols import MatrixSource

__all__: list[str] = [
    "Dimensions",
    "Matrix",
    "MatrixService",
    "MatrixSource",
    "add",
    "dims",
    "mean",
    "multiply",
    "parse_matrix",
    "transpose",
]
