"""Severity levels understood by checkstyle consumers."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Checkstyle severity levels.

    Every rule violation is reported as ``ERROR``; the remaining levels exist
    so the structured report speaks the same vocabulary as other checkstyle
    producers.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    IGNORE = "ignore"
