"""Detect whitespace at the end of lines."""

from __future__ import annotations

from typing import List

from mdlint.document import MarkdownDocument
from mdlint.result import Error

from . import Rule


class NoTrailingSpacesRule(Rule):
    """Lines must not end with spaces or tabs."""

    name = "NoTrailingSpacesRule"
    description = "Trailing spaces"
    tags = ("whitespace",)

    def visit(self, document: MarkdownDocument) -> List[Error]:
        errors = []
        for index in range(document.line_count):
            text = document.line_text(index)
            stripped = text.rstrip(" \t")
            if len(stripped) != len(text):
                start = document.line_start(index) + len(stripped)
                errors.append(self.error(document, start, document.line_end(index)))
        return errors
