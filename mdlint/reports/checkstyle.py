"""Checkstyle-compatible XML serialization of scan results."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List
from xml.sax.saxutils import escape

from mdlint import __version__
from mdlint.result import Error, ScanResult
from mdlint.utils import write_bytes

ATTRIBUTE_ENTITIES = {'"': "&quot;", "'": "&apos;", "\n": "&#10;", "\r": "&#13;", "\t": "&#9;"}
# Characters that cannot appear in an XML 1.0 document, even as references.
ILLEGAL_XML_CHARS = re.compile("[^\u0009\u000a\u000d\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def encode(text: str) -> str:
    """Escape ``text`` for use inside a double-quoted XML attribute."""

    return escape(ILLEGAL_XML_CHARS.sub("", text), ATTRIBUTE_ENTITIES)


def _error_element(error: Error) -> str:
    return (
        f'<error line="{error.line_number}" column="{error.column_number}" '
        f'severity="{error.severity.value}" message="{encode(error.message)}" '
        f'source="{encode(error.rule)}"/>'
    )


def render_checkstyle(result: ScanResult) -> bytes:
    """Serialize ``result`` as checkstyle XML.

    The output depends only on ``result``: the same errors always produce the
    same bytes.
    """

    lines: List[str] = ['<?xml version="1.0" encoding="UTF-8"?>', f'<checkstyle version="{encode(__version__)}">']
    for filename, errors in result.items():
        lines.append(f'<file name="{encode(filename)}">')
        lines.extend(_error_element(error) for error in errors)
        lines.append("</file>")
    lines.append("</checkstyle>")
    return ("\n".join(lines) + "\n").encode("utf-8")


def write_checkstyle_report(path: Path, checkstyle_xml: bytes) -> Path:
    return write_bytes(path, checkstyle_xml)
