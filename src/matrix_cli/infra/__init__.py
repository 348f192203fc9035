"""Infrastructure layer — files, standard input and process signals.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~matrix_cli.exceptions.MatrixCliError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from matrix_cli.infra.signals import termination_as_interrupt
from matrix_cli.infra.sources import BufferedStdinSource, FileSource, open_sources

__all__: list[str] = [
    "BufferedStdinSource",
    "FileSource",
    "open_sources",
    "termination_as_interrupt",
]
