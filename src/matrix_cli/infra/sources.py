"""Concrete :class:`~matrix_cli.core.protocols.MatrixSource` adapters.

* :class:`FileSource` — a named path on disk.
* :class:`BufferedStdinSource` — standard input drained into a scoped
  temporary buffer so it can be read more than once.
* :func:`open_sources` — resolves the inputs of one command and owns
  every temporary it creates until the ``with`` block exits.

Every ``OSError`` raised here is re-raised as
:class:`~matrix_cli.exceptions.FileError`.
"""

from __future__ import annotations

import logging
import os
import sys
import tempfile
from collections.abc import Iterator, Sequence
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import IO, Any

from matrix_cli.config import DEFAULT_SPOOL_MAX_BYTES, Settings
from matrix_cli.exceptions import FileError

logger = logging.getLogger(__name__)

STDIN_LABEL: str = "<stdin>"


# ---------------------------------------------------------------------------
# File-backed source
# ---------------------------------------------------------------------------

class FileSource:
    """Matrix text stored in a file at *path*."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        self._label = os.fspath(path)

    @property
    def label(self) -> str:
        return self._label

    @property
    def path(self) -> Path:
        return self._path

    def check(self) -> None:
        """Verify the path exists, is a regular file, and is readable.

        Raises
        ------
        FileError
            Naming the offending path.
        """
        if not self._path.exists():
            raise FileError(self._label, "no such file")
        if not self._path.is_file():
            raise FileError(self._label, "not a regular file")
        if not os.access(self._path, os.R_OK):
            raise FileError(
                self._label,
                "permission denied",
                hint="Check the file permissions.",
            )

    def read_text(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise FileError(self._label, "file is not valid UTF-8 text") from exc
        except OSError as exc:
            raise FileError(self._label, exc.strerror or str(exc)) from exc


# ---------------------------------------------------------------------------
# Buffered standard input
# ---------------------------------------------------------------------------

class BufferedStdinSource:
    """Standard input captured into a spooled temporary buffer.

    Usage::

        with BufferedStdinSource() as source:
            text = source.read_text()   # may be called repeatedly

    The buffer stays in memory up to *max_size* bytes and then rolls
    over to an anonymous temporary file.  It is released when the
    ``with`` block exits, whether normally, by exception, or by
    ``KeyboardInterrupt``.
    """

    def __init__(
        self,
        stream: IO[str] | None = None,
        *,
        max_size: int = DEFAULT_SPOOL_MAX_BYTES,
    ) -> None:
        self._stream = stream
        self._max_size = max_size
        self._buffer: Any = None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> BufferedStdinSource:
        self.open()
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Drain the input stream into a fresh buffer."""
        if self._buffer is not None:
            return
        stream = self._stream if self._stream is not None else sys.stdin
        if stream is None:
            raise FileError(STDIN_LABEL, "standard input is not available")

        buffer = tempfile.SpooledTemporaryFile(
            max_size=self._max_size, mode="w+", encoding="utf-8", newline="",
        )
        try:
            for chunk in iter(lambda: stream.read(65536), ""):
                buffer.write(chunk)
        except (OSError, UnicodeDecodeError) as exc:
            buffer.close()
            raise FileError(STDIN_LABEL, str(exc)) from exc
        except BaseException:
            buffer.close()
            raise
        self._buffer = buffer
        logger.debug("Buffered standard input (%d bytes)", buffer.tell())

    def close(self) -> None:
        """Release the buffer (idempotent)."""
        if self._buffer is not None:
            self._buffer.close()
            self._buffer = None
            logger.debug("Released standard input buffer")

    @property
    def closed(self) -> bool:
        return self._buffer is None

    # ------------------------------------------------------------------
    # MatrixSource protocol
    # ------------------------------------------------------------------

    @property
    def label(self) -> str:
        return STDIN_LABEL

    def read_text(self) -> str:
        if self._buffer is None:
            raise FileError(STDIN_LABEL, "input buffer is not open")
        self._buffer.seek(0)
        return self._buffer.read()


# ---------------------------------------------------------------------------
# Input resolution
# ---------------------------------------------------------------------------

@contextmanager
def open_sources(
    paths: Sequence[str],
    *,
    stdin: IO[str] | None = None,
    settings: Settings | None = None,
) -> Iterator[list[FileSource | BufferedStdinSource]]:
    """Resolve the matrix sources for one command.

    With *paths*, yields one checked :class:`FileSource` per path (all
    checked before the caller computes anything).  Without paths, yields
    a single :class:`BufferedStdinSource` that is released on exit.

    Raises
    ------
    FileError
        If any path is missing or unreadable, or stdin cannot be read.
    """
    settings = settings or Settings()
    with ExitStack() as stack:
        if paths:
            sources: list[FileSource | BufferedStdinSource] = []
            for path in paths:
                source = FileSource(path)
                source.check()
                sources.append(source)
        else:
            buffered = BufferedStdinSource(stdin, max_size=settings.spool_max_bytes)
            sources = [stack.enter_context(buffered)]
        yield sources
