"""Exception hierarchy for mdlint.

Failures are contained at the smallest unit that can fail: a ``ParseError``
skips one file, a ``RuleEvaluationError`` drops one rule's output for one file
and a ``ReportGenerationError`` skips one report. Only a
``ConfigurationError`` stops a run, and it does so before any file is read.
"""

from __future__ import annotations


class MarkdownLintError(Exception):
    """Base exception for all mdlint errors."""


class ParseError(MarkdownLintError):
    """Raised when a document cannot be read or parsed."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"Unable to parse '{filename}': {reason}")
        self.filename = filename
        self.reason = reason


class RuleEvaluationError(MarkdownLintError):
    """Raised when a rule fails while visiting a document."""

    def __init__(self, rule: str, filename: str, cause: BaseException) -> None:
        super().__init__(f"Rule '{rule}' failed on '{filename}': {cause!r}")
        self.rule = rule
        self.filename = filename
        self.cause = cause


class ConfigurationError(MarkdownLintError):
    """Raised when a configuration is missing, malformed or names unknown rules."""


class ReportGenerationError(MarkdownLintError):
    """Raised when a report cannot be rendered or written."""

    def __init__(self, report: str, path: object, reason: str) -> None:
        super().__init__(f"Failed to generate {report} report at {path}: {reason}")
        self.report = report
        self.path = path
        self.reason = reason
