"""Render matrices and dimensions as output text.

Pure string transforms; the CLI layer decides where the text goes.
"""

from __future__ import annotations

from matrix_cli.core.models import Dimensions, Matrix


def format_row(values: tuple[int, ...] | list[int]) -> str:
    """Join one row with tabs, newline-terminated."""
    return "\t".join(str(v) for v in values) + "\n"


def format_matrix(matrix: Matrix) -> str:
    """Render *matrix* as tab-separated rows with no trailing blank line."""
    return "".join(format_row(row) for row in matrix.iter_rows())


def format_dims(dims: Dimensions) -> str:
    """Render *dims* as ``"<rows> <cols>\\n"``."""
    return f"{dims.rows} {dims.cols}\n"
