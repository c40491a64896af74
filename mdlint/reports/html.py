"""HTML report rendered from the checkstyle XML.

The HTML is derived from the structured report rather than from the scan
result, so both reports always describe the same errors.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any, Dict, List
from xml.etree import ElementTree

from jinja2 import Environment, PackageLoader

from mdlint.utils import write_bytes

TEMPLATE_NAME = "report.html"


def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("mdlint", "reports/templates"),
        autoescape=True,
        keep_trailing_newline=True,
    )


def read_checkstyle(checkstyle_xml: bytes) -> List[Dict[str, Any]]:
    """Return the files in a checkstyle document, sorted by name."""

    root = ElementTree.fromstring(checkstyle_xml)
    files = []
    for file_element in root.iter("file"):
        errors = [
            {
                "line": int(error.get("line", "0")),
                "column": int(error.get("column", "0")),
                "severity": error.get("severity", "error"),
                "message": error.get("message", ""),
                "source": error.get("source", ""),
            }
            for error in file_element.iter("error")
        ]
        files.append({"name": file_element.get("name", ""), "errors": errors})
    return sorted(files, key=lambda item: item["name"])


def render_html(checkstyle_xml: bytes) -> str:
    files = read_checkstyle(checkstyle_xml)
    rule_counts = Counter(error["source"] for item in files for error in item["errors"])
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(
        files=files,
        rules=sorted(rule_counts.items()),
        error_count=sum(len(item["errors"]) for item in files),
    )


def write_html_report(path: Path, checkstyle_xml: bytes) -> Path:
    return write_bytes(path, render_html(checkstyle_xml).encode("utf-8"))
