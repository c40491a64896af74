"""Walk a project, parse Markdown files and apply the active rules."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from markdown_it import MarkdownIt

from .config import Configuration
from .document import MarkdownDocument, load_document
from .exceptions import ParseError, RuleEvaluationError
from .logging import get_logger
from .parser import ParserOptions
from .result import Error, ScanResult
from .rules import Rule
from .rules.registry import instantiate
from .utils import iter_markdown_files, read_text_file

logger = get_logger(__name__)


@dataclass
class FileScan:
    """Outcome of scanning a single file."""

    filename: str
    errors: List[Error] = field(default_factory=list)
    parse_failure: Optional[ParseError] = None
    rule_failures: List[RuleEvaluationError] = field(default_factory=list)


def apply_rules(document: MarkdownDocument, rules: Sequence[Rule]) -> FileScan:
    """Run ``rules`` in order; a failing rule contributes no errors."""

    scan = FileScan(document.filename)
    for rule in rules:
        try:
            scan.errors.extend(rule.process(document))
        except Exception as exc:  # pylint: disable=broad-except
            failure = RuleEvaluationError(rule.name, document.filename, exc)
            logger.opt(exception=exc).warning("{}", failure)
            scan.rule_failures.append(failure)
    return scan


def scan_file(path: Path, root: Path, rules: Sequence[Rule], parser: MarkdownIt) -> FileScan:
    filename = path.relative_to(root).as_posix()
    try:
        document = load_document(read_text_file(path), filename, parser)
    except UnicodeDecodeError as exc:
        failure = ParseError(filename, f"not valid UTF-8 ({exc.reason})")
    except ParseError as exc:
        failure = exc
    else:
        return apply_rules(document, rules)
    logger.warning("Skipping {}", failure)
    return FileScan(filename, parse_failure=failure)


def scan(
    root_dir: Path,
    config: Configuration,
    parser_options: Optional[ParserOptions] = None,
    jobs: int = 1,
    rules: Optional[Sequence[Rule]] = None,
) -> ScanResult:
    """Scan every Markdown file beneath ``root_dir``.

    Rules are instantiated before any file is read, so an invalid
    configuration fails the run up front. Files are scanned in lexical order
    of their root-relative paths; with ``jobs > 1`` they are scanned on a
    thread pool and the results are collected back in that same order by
    this thread, the only writer of the returned ``ScanResult``.
    """

    root = Path(root_dir)
    active_rules = list(rules) if rules is not None else instantiate(config)
    parser = (parser_options or ParserOptions()).build()
    paths = iter_markdown_files(root)
    logger.debug("Scanning {} files with {} rules", len(paths), len(active_rules))

    if jobs > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            scans = list(executor.map(lambda path: scan_file(path, root, active_rules, parser), paths))
    else:
        scans = [scan_file(path, root, active_rules, parser) for path in paths]

    result = ScanResult()
    for file_scan in scans:
        result.add_file(file_scan.filename, file_scan.errors)
        if file_scan.parse_failure is not None:
            result.parse_failures.append(file_scan.parse_failure)
        result.rule_failures.extend(file_scan.rule_failures)
    return result
