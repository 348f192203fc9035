"""Parse whitespace-delimited integer text into a :class:`Matrix`.

Format
------
* One row per line; ``\\n`` and ``\\r\\n`` line endings are accepted.
* Values within a row are separated by runs of tabs and/or spaces.
* Every value is a base-10 signed integer (``-3``, ``+7``, ``42``).
* Trailing blank lines are ignored; any other blank line is an empty
  row and therefore breaks rectangularity.

The column count is taken from the last row and every other row is
checked against it.
"""

from __future__ import annotations

import re

from matrix_cli.core.models import Matrix
from matrix_cli.exceptions import MalformedMatrixError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_LINE_BREAK_RE = re.compile(r"\r?\n")


def parse_integer(token: str) -> int:
    """Convert a single token to ``int`` or raise ``ValueError``."""
    if _INTEGER_RE.fullmatch(token) is None:
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def split_rows(text: str) -> list[list[str]]:
    """Split *text* into token rows, dropping trailing blank lines.

    Only ``\\n`` and ``\\r\\n`` end a row; other line-breaking characters
    (form feed, vertical tab, ``\\u2028``, …) are whitespace inside a row.
    """
    lines = _LINE_BREAK_RE.split(text)
    while lines and not lines[-1].strip():
        lines.pop()
    return [line.split() for line in lines]


def parse_matrix(text: str, *, source: str | None = None) -> Matrix:
    """Parse *text* into a rectangular integer :class:`Matrix`.

    Parameters
    ----------
    text:
        Raw matrix text.
    source:
        Optional label (path or ``<stdin>``) used in error messages.

    Raises
    ------
    MalformedMatrixError
        If the input is empty, contains a non-integer token, or has rows
        of differing lengths.
    """
    token_rows = split_rows(text)
    if not token_rows:
        raise MalformedMatrixError(
            "input is empty",
            source=source,
            hint="Provide at least one row of tab-separated integers.",
        )

    width = len(token_rows[-1])
    values: list[int] = []
    for lineno, tokens in enumerate(token_rows, start=1):
        if len(tokens) != width:
            raise MalformedMatrixError(
                f"row has {len(tokens)} values, expected {width}",
                source=source,
                line=lineno,
                hint="Every row must have the same number of columns.",
            )
        for token in tokens:
            try:
                values.append(parse_integer(token))
            except ValueError:
                raise MalformedMatrixError(
                    f"{token!r} is not an integer",
                    source=source,
                    line=lineno,
                ) from None

    return Matrix(rows=len(token_rows), cols=width, values=tuple(values))
