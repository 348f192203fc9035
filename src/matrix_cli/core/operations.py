"""Pure matrix operations.

Every function in this module is a **pure** transformation over
:class:`~matrix_cli.core.models.Matrix` values — no I/O, no side
effects.  Values are Python ``int`` so sums and products never
overflow.

Operations
----------
1. :func:`dims`      — shape of a matrix.
2. :func:`transpose` — rows become columns.
3. :func:`mean`      — per-column mean, rounded half away from zero.
4. :func:`add`       — element-wise sum of equally shaped matrices.
5. :func:`multiply`  — standard matrix product.
"""

from __future__ import annotations

from collections.abc import Sequence

from matrix_cli.core.models import Dimensions, Matrix
from matrix_cli.exceptions import DimensionMismatchError


# ---------------------------------------------------------------------------
# 1. Dims
# ---------------------------------------------------------------------------

def dims(matrix: Matrix) -> Dimensions:
    """Return the ``(rows, cols)`` shape of *matrix*."""
    return matrix.dims


# ---------------------------------------------------------------------------
# 2. Transpose
# ---------------------------------------------------------------------------

def transpose(matrix: Matrix) -> Matrix:
    """Return the transpose of *matrix*.

    The flat row-major buffer is walked in column-major order: output
    position ``j * rows + i`` reads input position ``i * cols + j``.
    """
    rows, cols = matrix.rows, matrix.cols
    src = matrix.values
    flipped = tuple(src[i * cols + j] for j in range(cols) for i in range(rows))
    return Matrix(rows=cols, cols=rows, values=flipped)


# ---------------------------------------------------------------------------
# 3. Mean
# ---------------------------------------------------------------------------

def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (``//`` floors)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def rounded_mean(values: Sequence[int]) -> int:
    """Mean of *values* rounded half away from zero.

    Computes ``(total + (n // 2) * sign) / n`` with truncating division,
    where ``sign`` is ``+1`` for a positive total and ``-1`` otherwise.
    A zero total takes the negative branch.
    """
    count = len(values)
    if count == 0:
        raise ValueError("cannot take the mean of an empty row")
    total = sum(values)
    sign = 1 if total > 0 else -1
    return _truncating_div(total + (count // 2) * sign, count)


def mean(matrix: Matrix) -> Matrix:
    """Return a single-row matrix holding the rounded mean of each column."""
    columns = transpose(matrix)
    return Matrix(
        rows=1,
        cols=columns.rows,
        values=tuple(rounded_mean(col) for col in columns.iter_rows()),
    )


# ---------------------------------------------------------------------------
# 4. Add
# ---------------------------------------------------------------------------

def add(left: Matrix, right: Matrix) -> Matrix:
    """Element-wise sum of two matrices of identical shape.

    Raises
    ------
    DimensionMismatchError
        If the shapes differ.
    """
    if left.dims != right.dims:
        raise DimensionMismatchError(
            "add",
            "operands must have the same number of rows and columns",
            left=left.dims.as_tuple(),
            right=right.dims.as_tuple(),
        )
    summed = tuple(a + b for a, b in zip(left.values, right.values))
    return Matrix(rows=left.rows, cols=left.cols, values=summed)


# ---------------------------------------------------------------------------
# 5. Multiply
# ---------------------------------------------------------------------------

def multiply(left: Matrix, right: Matrix) -> Matrix:
    """Matrix product of an ``M×N`` and an ``N×P`` matrix.

    *right* is transposed first so each of its columns is a contiguous
    row; every output element is then a row-by-row dot product.

    Raises
    ------
    DimensionMismatchError
        If ``left.cols != right.rows``.
    """
    if left.cols != right.rows:
        raise DimensionMismatchError(
            "multiply",
            "left column count must equal right row count",
            left=left.dims.as_tuple(),
            right=right.dims.as_tuple(),
        )
    right_columns = list(transpose(right).iter_rows())
    product: list[int] = []
    for row in left.iter_rows():
        for column in right_columns:
            product.append(sum(a * b for a, b in zip(row, column)))
    return Matrix(rows=left.rows, cols=right.cols, values=tuple(product))
