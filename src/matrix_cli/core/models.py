"""Domain models for matrix-cli.

All models are **frozen** dataclasses — immutable value objects with no
I/O and no dependencies on external packages.  A :class:`Matrix` stores
its values in a flat row-major tuple; rectangularity is guaranteed by
construction.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Dimensions:
    """Shape of a matrix as a ``(rows, cols)`` pair."""

    rows: int
    """Number of rows."""

    cols: int
    """Number of columns."""

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.cols)


# ---------------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Matrix:
    """Rectangular grid of signed integers in row-major order.

    Use :meth:`from_rows` to build one from nested sequences; the
    primary constructor takes the flat buffer directly and validates
    that it holds exactly ``rows * cols`` values.
    """

    rows: int
    cols: int
    values: tuple[int, ...]
    """Flat row-major buffer: element ``(i, j)`` lives at ``i * cols + j``."""

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(
                f"Matrix must have at least one row and one column, "
                f"got {self.rows}x{self.cols}",
            )
        if len(self.values) != self.rows * self.cols:
            raise ValueError(
                f"Matrix {self.rows}x{self.cols} needs {self.rows * self.cols} "
                f"values, got {len(self.values)}",
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Matrix:
        """Build a matrix from a sequence of equal-length rows.

        Raises
        ------
        ValueError
            If *rows* is empty, a row is empty, or row lengths differ.
        """
        if not rows:
            raise ValueError("Matrix must have at least one row")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {index + 1} has {len(row)} values, expected {width}",
                )
        flat = tuple(int(value) for row in rows for value in row)
        return cls(rows=len(rows), cols=width, values=flat)

    @property
    def dims(self) -> Dimensions:
        return Dimensions(rows=self.rows, cols=self.cols)

    def row(self, i: int) -> tuple[int, ...]:
        if not 0 <= i < self.rows:
            raise IndexError(f"row {i} outside {self.rows}x{self.cols} matrix")
        start = i * self.cols
        return self.values[start:start + self.cols]

    def iter_rows(self) -> Iterator[tuple[int, ...]]:
        for i in range(self.rows):
            yield self.row(i)
