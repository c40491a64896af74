"""Command-line entry point for mdlint."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

from .exceptions import ConfigurationError
from .logging import configure_logging
from .processing import process

DEFAULT_CONFIG_FILE = "markdownlint.yaml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdlint",
        description="Rule-based static analyzer for Markdown documents",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Project directory to scan (defaults to the current directory).",
    )
    parser.add_argument(
        "--config",
        "-c",
        dest="config_file",
        default=None,
        help=f"YAML configuration file (defaults to {DEFAULT_CONFIG_FILE} in the project directory if present).",
    )
    parser.add_argument(
        "--reports-dir",
        default=None,
        help="Directory for markdownlint.xml and markdownlint.html (defaults to build/reports/markdownlint).",
    )
    parser.add_argument(
        "--jobs",
        "-j",
        type=int,
        default=1,
        help="Number of files to scan in parallel.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Diagnostics written to stderr.",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    root = Path(args.root)
    if not root.is_dir():
        parser.error(f"{root} is not a directory")
    if args.jobs < 1:
        parser.error("--jobs must be at least 1")

    config_file = Path(args.config_file) if args.config_file else root / DEFAULT_CONFIG_FILE
    if args.config_file is None and not config_file.exists():
        config_file = None

    try:
        outcome = process(
            root,
            reports_dir=Path(args.reports_dir) if args.reports_dir else None,
            config_file=config_file,
            summary_stream=sys.stdout,
            jobs=args.jobs,
        )
    except ConfigurationError as exc:
        raise SystemExit(str(exc)) from exc

    if not outcome.passed:
        print(outcome.failure_message, file=sys.stderr)
    return outcome.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
