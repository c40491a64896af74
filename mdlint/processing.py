"""End-to-end run: configuration, scan, summary, reports and threshold check."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, TextIO

from .config import Configuration, Report, default_configuration, load_configuration
from .exceptions import ReportGenerationError
from .logging import get_logger
from .parser import ParserOptions
from .reports import generate_reports
from .result import ScanResult, format_summary
from .scan import scan

DEFAULT_REPORTS_DIR = Path("build") / "reports" / "markdownlint"

logger = get_logger(__name__)


@dataclass
class ScanOutcome:
    """Result of a complete run.

    Exceeding the threshold is a normal outcome: reports are written either
    way and the caller decides how to signal the failure.
    """

    result: ScanResult
    threshold: int
    reports: Dict[Report, Path] = field(default_factory=dict)
    report_failures: List[ReportGenerationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return self.result.total

    @property
    def passed(self) -> bool:
        return self.error_count <= self.threshold

    @property
    def failure_message(self) -> Optional[str]:
        if self.passed:
            return None
        return f"Build failure threshold of {self.threshold} reached with {self.error_count} errors!"

    def exit_code(self) -> int:
        return 0 if self.passed else 1


def resolve_configuration(config: Optional[Configuration], config_file: Optional[Path]) -> Configuration:
    if config is not None:
        return config
    if config_file is not None:
        return load_configuration(Path(config_file))
    return default_configuration()


def process(
    root_dir: Path,
    reports_dir: Optional[Path] = None,
    config: Optional[Configuration] = None,
    config_file: Optional[Path] = None,
    summary_stream: Optional[TextIO] = None,
    parser_options: Optional[ParserOptions] = None,
    jobs: int = 1,
) -> ScanOutcome:
    """Lint ``root_dir`` and write the configured reports.

    ``ConfigurationError`` propagates before any file is scanned. Everything
    after that point is contained: unreadable files, failing rules and
    unwritable reports are logged and the run carries on.
    """

    root = Path(root_dir)
    configuration = resolve_configuration(config, config_file)
    result = scan(root, configuration, parser_options=parser_options, jobs=jobs)

    if summary_stream is not None:
        print(format_summary(result), file=summary_stream)
        print(file=summary_stream)

    target_dir = Path(reports_dir) if reports_dir is not None else root / DEFAULT_REPORTS_DIR
    generated = generate_reports(result, target_dir, configuration, summary_stream)

    outcome = ScanOutcome(
        result=result,
        threshold=configuration.threshold,
        reports=generated.written,
        report_failures=generated.failures,
    )
    if not outcome.passed:
        logger.info("{}", outcome.failure_message)
    return outcome
