"""Logging configuration for mdlint using Loguru.

>>> from mdlint.logging import get_logger
>>> logger = get_logger(__name__)
>>> logger.warning("Skipping {}", "docs/broken.md")
"""

from __future__ import annotations

import sys
from contextlib import suppress
from typing import TYPE_CHECKING, List, Literal

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"

_HANDLER_IDS: List[int] = []
_CURRENT_LEVEL: str | None = None


def _write_stderr(message: str) -> None:
    sys.stderr.write(message)


def configure_logging(level: LogLevel = "WARNING", force_reconfigure: bool = False) -> None:
    """Send mdlint log records to stderr at ``level``.

    Idempotent: only handlers added by a previous call are replaced, so sinks
    installed by tests or host applications are left alone.
    """

    global _CURRENT_LEVEL

    if not force_reconfigure and level == _CURRENT_LEVEL:
        return

    for handler_id in _HANDLER_IDS:
        with suppress(ValueError):
            logger.remove(handler_id)
    _HANDLER_IDS.clear()

    # Loguru ships with a DEBUG handler on stderr (id 0).
    with suppress(ValueError):
        logger.remove(0)

    handler_id = logger.add(
        sink=_write_stderr,
        level=level,
        format=_FORMAT,
        colorize=sys.stderr.isatty(),
        backtrace=False,
        diagnose=False,
    )
    _HANDLER_IDS.append(handler_id)
    _CURRENT_LEVEL = level


def get_logger(name: str) -> "Logger":
    """Return a logger bound to the calling module's name."""

    return logger.bind(module=name)
