"""Detect consecutive blank lines."""

from __future__ import annotations

from typing import List

from mdlint.document import MarkdownDocument
from mdlint.result import Error

from . import Rule


class NoMultipleBlanksRule(Rule):
    """Only one blank line may separate blocks.

    Blank lines inside fenced or indented code blocks are part of the code
    and are left alone.
    """

    name = "NoMultipleBlanksRule"
    description = "Multiple consecutive blank lines"
    tags = ("whitespace", "blank_lines")

    def visit(self, document: MarkdownDocument) -> List[Error]:
        code_lines = document.code_block_lines
        errors = []
        for index in range(1, document.line_count):
            if index in code_lines or index - 1 in code_lines:
                continue
            if document.is_blank(index) and document.is_blank(index - 1):
                errors.append(self.error(document, document.line_start(index), document.line_end(index)))
        return errors
