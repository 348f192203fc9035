"""Runtime settings resolved from environment variables.

Recognised variables
--------------------
``MATRIX_CLI_LOG_LEVEL``
    Default logging level name (``DEBUG``, ``INFO``, ``WARNING``, …).
    Command-line ``-v`` / ``-q`` flags override it.
``MATRIX_CLI_SPOOL_MAX_BYTES``
    Size in bytes that buffered standard input may occupy in memory
    before it rolls over to a temporary file on disk.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from matrix_cli.exceptions import ConfigError

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV: str = "MATRIX_CLI_LOG_LEVEL"
SPOOL_MAX_BYTES_ENV: str = "MATRIX_CLI_SPOOL_MAX_BYTES"

DEFAULT_LOG_LEVEL: int = logging.WARNING
DEFAULT_SPOOL_MAX_BYTES: int = 1024 * 1024

_SPOOL_HINT = f"Set {SPOOL_MAX_BYTES_ENV} to a non-negative integer or unset it."


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings for a single invocation."""

    log_level: int = DEFAULT_LOG_LEVEL
    """Baseline ``logging`` level before ``-v`` / ``-q`` adjustments."""

    spool_max_bytes: int = DEFAULT_SPOOL_MAX_BYTES
    """In-memory limit for the standard-input buffer."""


def _parse_log_level(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    if isinstance(level, int):
        return level
    logger.warning(
        "Ignoring unknown log level %s=%r; using WARNING.", LOG_LEVEL_ENV, raw,
    )
    return DEFAULT_LOG_LEVEL


def _parse_spool_max_bytes(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_SPOOL_MAX_BYTES
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise ConfigError(
            f"{SPOOL_MAX_BYTES_ENV} must be an integer, got {raw!r}.",
            hint=_SPOOL_HINT,
        ) from exc
    if value < 0:
        raise ConfigError(
            f"{SPOOL_MAX_BYTES_ENV} must not be negative, got {value}.",
            hint=_SPOOL_HINT,
        )
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from *environ* (default: ``os.environ``).

    Raises
    ------
    ConfigError
        If a numeric variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    return Settings(
        log_level=_parse_log_level(env.get(LOG_LEVEL_ENV)),
        spool_max_bytes=_parse_spool_max_bytes(env.get(SPOOL_MAX_BYTES_ENV)),
    )
