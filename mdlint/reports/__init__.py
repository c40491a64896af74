"""Structured and human-readable reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, TextIO
from xml.etree.ElementTree import ParseError as XMLParseError

from jinja2 import TemplateError

from mdlint.config import Configuration, Report
from mdlint.exceptions import ReportGenerationError
from mdlint.logging import get_logger
from mdlint.result import ScanResult

from .checkstyle import render_checkstyle, write_checkstyle_report
from .html import render_html, write_html_report

XML_REPORT_NAME = "markdownlint.xml"
HTML_REPORT_NAME = "markdownlint.html"

logger = get_logger(__name__)


@dataclass
class GeneratedReports:
    written: Dict[Report, Path] = field(default_factory=dict)
    failures: List[ReportGenerationError] = field(default_factory=list)


def generate_reports(
    result: ScanResult,
    reports_dir: Path,
    config: Configuration,
    stream: Optional[TextIO] = None,
) -> GeneratedReports:
    """Write the reports requested by ``config`` into ``reports_dir``.

    A report that cannot be written is logged, echoed to ``stream`` and
    recorded; the other report is still attempted.
    """

    generated = GeneratedReports()
    checkstyle_xml = render_checkstyle(result)

    if config.wants(Report.CHECKSTYLE):
        xml_file = Path(reports_dir) / XML_REPORT_NAME
        try:
            write_checkstyle_report(xml_file, checkstyle_xml)
        except OSError as exc:
            _record_failure(generated, ReportGenerationError("Checkstyle XML", xml_file, str(exc)), stream)
        else:
            generated.written[Report.CHECKSTYLE] = xml_file
            _echo(stream, f"Successfully generated Checkstyle XML report at {xml_file}")

    if config.wants(Report.HTML):
        html_file = Path(reports_dir) / HTML_REPORT_NAME
        try:
            write_html_report(html_file, checkstyle_xml)
        except (OSError, XMLParseError, TemplateError) as exc:
            _record_failure(generated, ReportGenerationError("HTML", html_file, str(exc)), stream)
        else:
            generated.written[Report.HTML] = html_file
            _echo(stream, f"Successfully generated HTML report at {html_file}")

    return generated


def _record_failure(generated: GeneratedReports, failure: ReportGenerationError, stream: Optional[TextIO]) -> None:
    logger.warning("{}", failure)
    generated.failures.append(failure)
    _echo(stream, f"Warning: {failure}")


def _echo(stream: Optional[TextIO], message: str) -> None:
    if stream is not None:
        print(message, file=stream)


__all__ = [
    "GeneratedReports",
    "HTML_REPORT_NAME",
    "XML_REPORT_NAME",
    "generate_reports",
    "render_checkstyle",
    "render_html",
]
