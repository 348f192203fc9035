"""Route termination signals through ``KeyboardInterrupt``.

Python already turns SIGINT into :class:`KeyboardInterrupt`, which
unwinds every ``with`` block on its way out.  :func:`termination_as_interrupt`
gives SIGTERM (and SIGHUP where it exists) the same behaviour so that
buffered input and other scoped temporaries are released before the
process exits.
"""

from __future__ import annotations

import logging
import signal
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType
from typing import Any

logger = logging.getLogger(__name__)


def _termination_signals() -> tuple[signal.Signals, ...]:
    """Signals converted while the guard is active on this platform."""
    names = ("SIGTERM", "SIGHUP")
    return tuple(getattr(signal, name) for name in names if hasattr(signal, name))


def _raise_interrupt(signum: int, _frame: FrameType | None) -> None:
    logger.debug("Received %s", signal.Signals(signum).name)
    raise KeyboardInterrupt(signal.Signals(signum).name)


@contextmanager
def termination_as_interrupt() -> Iterator[None]:
    """Raise ``KeyboardInterrupt`` on termination signals inside the block.

    Previous handlers are restored on exit.  Outside the main thread
    signal handlers cannot be installed, so the block runs unguarded.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous: dict[signal.Signals, Any] = {}
    try:
        for signum in _termination_signals():
            previous[signum] = signal.signal(signum, _raise_interrupt)
        yield
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
