"""Core result data structures for the analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Tuple

from .exceptions import ParseError, RuleEvaluationError
from .severity import Severity

if TYPE_CHECKING:
    from .document import MarkdownDocument


@dataclass(frozen=True)
class Error:
    """A single rule violation.

    Line and column are resolved against the owning document when the error
    is created, so the record stays meaningful after the document is gone.
    """

    rule: str
    start_offset: int
    end_offset: int
    line_number: int
    column_number: int
    message: str
    severity: Severity = Severity.ERROR

    @classmethod
    def at(cls, document: "MarkdownDocument", rule: str, start: int, end: int, message: str) -> "Error":
        length = len(document.chars)
        if not 0 <= start <= end <= length:
            raise ValueError(f"Invalid error range {start}..{end} for document of length {length}")
        return cls(
            rule=rule,
            start_offset=start,
            end_offset=end,
            line_number=document.line_number_of(start),
            column_number=document.column_number_of(start),
            message=message,
        )


@dataclass
class ScanResult:
    """Errors grouped by file, plus bookkeeping about what was scanned."""

    file_count: int = 0
    errors: Dict[str, List[Error]] = field(default_factory=dict)
    parse_failures: List[ParseError] = field(default_factory=list)
    rule_failures: List[RuleEvaluationError] = field(default_factory=list)

    def add_file(self, filename: str, errors: List[Error]) -> None:
        """Record a scanned file; files without errors are only counted."""

        self.file_count += 1
        if errors:
            self.errors[filename] = list(errors)

    @property
    def total(self) -> int:
        return sum(len(errors) for errors in self.errors.values())

    def items(self) -> Iterator[Tuple[str, List[Error]]]:
        return iter(self.errors.items())


def format_summary(result: ScanResult) -> str:
    """Create the human-readable summary printed after a scan."""

    lines: List[str] = []
    lines.append(f"{result.file_count} markdown files were analysed")
    lines.append("")
    if result.errors:
        lines.append("Errors:")
        for filename, errors in result.items():
            for error in errors:
                lines.append(f"    {error.rule} at {filename}:{error.line_number}:{error.column_number}")
    else:
        lines.append("No errors reported")
    return "\n".join(lines)
