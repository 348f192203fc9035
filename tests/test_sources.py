"""Tests for matrix sources (infra/sources.py).

Coverage:
* ``FileSource`` checks and read errors map to ``FileError``.
* ``BufferedStdinSource`` drains once, re-reads, and always releases.
* ``open_sources`` picks files or stdin and cleans up on every path.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from matrix_cli.config import Settings
from matrix_cli.exceptions import FileError
from matrix_cli.infra.sources import (
    STDIN_LABEL,
    BufferedStdinSource,
    FileSource,
    open_sources,
)


# ---------------------------------------------------------------------------
# FileSource
# ---------------------------------------------------------------------------

class TestFileSource:
    def test_reads_text(self, matrix_file: Callable[..., str]) -> None:
        path = matrix_file("1\t2\n")
        source = FileSource(path)
        source.check()
        assert source.label == path
        assert source.read_text() == "1\t2\n"
        assert source.read_text() == "1\t2\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "nope.tsv")
        with pytest.raises(FileError, match="no such file") as exc_info:
            FileSource(missing).check()
        assert exc_info.value.path == missing

    def test_directory_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(FileError, match="not a regular file"):
            FileSource(tmp_path).check()

    def test_unreadable(self, matrix_file: Callable[..., str], monkeypatch: pytest.MonkeyPatch) -> None:
        path = matrix_file("1\n")
        monkeypatch.setattr("matrix_cli.infra.sources.os.access", lambda *_a: False)
        with pytest.raises(FileError, match="permission denied") as exc_info:
            FileSource(path).check()
        assert exc_info.value.hint is not None

    def test_read_error_mapped(self, tmp_path: Path) -> None:
        with pytest.raises(FileError) as exc_info:
            FileSource(tmp_path / "gone.tsv").read_text()
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_binary_content_mapped(self, tmp_path: Path) -> None:
        path = tmp_path / "bin.tsv"
        path.write_bytes(b"\xff\xfe\x00\x01")
        with pytest.raises(FileError, match="UTF-8"):
            FileSource(path).read_text()


# ---------------------------------------------------------------------------
# BufferedStdinSource
# ---------------------------------------------------------------------------

class TestBufferedStdinSource:
    def test_repeatable_reads(self) -> None:
        with BufferedStdinSource(io.StringIO("1\t2\n3\t4\n")) as source:
            assert source.label == STDIN_LABEL
            assert source.read_text() == "1\t2\n3\t4\n"
            assert source.read_text() == "1\t2\n3\t4\n"

    def test_released_on_exit(self) -> None:
        source = BufferedStdinSource(io.StringIO("1\n"))
        with source:
            assert not source.closed
        assert source.closed
        with pytest.raises(FileError, match="not open"):
            source.read_text()

    def test_released_on_error(self) -> None:
        source = BufferedStdinSource(io.StringIO("1\n"))
        with pytest.raises(RuntimeError):
            with source:
                raise RuntimeError("boom")
        assert source.closed

    def test_released_on_interrupt(self) -> None:
        source = BufferedStdinSource(io.StringIO("1\n"))
        with pytest.raises(KeyboardInterrupt):
            with source:
                raise KeyboardInterrupt
        assert source.closed

    def test_rolls_over_to_disk(self) -> None:
        text = "1\t2\n" * 100
        with BufferedStdinSource(io.StringIO(text), max_size=16) as source:
            assert source.read_text() == text

    def test_preserves_crlf(self) -> None:
        with BufferedStdinSource(io.StringIO("1\r\n2\r\n")) as source:
            assert source.read_text() == "1\r\n2\r\n"

    def test_close_is_idempotent(self) -> None:
        source = BufferedStdinSource(io.StringIO("1\n"))
        source.open()
        source.close()
        source.close()
        assert source.closed

    def test_read_failure_mapped(self) -> None:
        class _Failing(io.StringIO):
            def read(self, *_args: object) -> str:
                raise OSError("bad descriptor")

        with pytest.raises(FileError, match="bad descriptor") as exc_info:
            BufferedStdinSource(_Failing()).open()
        assert exc_info.value.path == STDIN_LABEL

    def test_uses_sys_stdin_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
        with BufferedStdinSource() as source:
            assert source.read_text() == "7\n"

    def test_missing_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", None)
        with pytest.raises(FileError, match="not available"):
            BufferedStdinSource().open()


# ---------------------------------------------------------------------------
# open_sources
# ---------------------------------------------------------------------------

class TestOpenSources:
    def test_files(self, matrix_file: Callable[..., str]) -> None:
        left, right = matrix_file("1\n"), matrix_file("2\n")
        with open_sources([left, right]) as sources:
            assert [s.label for s in sources] == [left, right]
            assert all(isinstance(s, FileSource) for s in sources)

    def test_stdin_when_no_paths(self) -> None:
        with open_sources([], stdin=io.StringIO("5\n")) as sources:
            assert len(sources) == 1
            buffered = sources[0]
            assert isinstance(buffered, BufferedStdinSource)
            assert buffered.read_text() == "5\n"
        assert buffered.closed

    def test_stdin_released_on_error(self) -> None:
        with pytest.raises(ValueError):
            with open_sources([], stdin=io.StringIO("5\n")) as sources:
                buffered = sources[0]
                raise ValueError("fail")
        assert buffered.closed  # type: ignore[union-attr]

    def test_second_path_checked(
        self, matrix_file: Callable[..., str], tmp_path: Path,
    ) -> None:
        left = matrix_file("1\n")
        missing = str(tmp_path / "missing.tsv")
        with pytest.raises(FileError) as exc_info:
            with open_sources([left, missing]):
                pytest.fail("body must not run")
        assert exc_info.value.path == missing

    def test_settings_spool_size(self) -> None:
        settings = Settings(spool_max_bytes=0)
        with open_sources([], stdin=io.StringIO("1\t2\n"), settings=settings) as sources:
            assert sources[0].read_text() == "1\t2\n"
