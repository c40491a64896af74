"""Detect overly long lines."""

from __future__ import annotations

import re
from typing import List, Optional

from mdlint.config import RuleSetup
from mdlint.document import MarkdownDocument
from mdlint.result import Error

from . import Rule

WHITESPACE = re.compile(r"\s")


class LineLengthRule(Rule):
    """Lines must not exceed ``max_line_length`` characters.

    A line is only reported when there is whitespace beyond the limit, so a
    long URL or other unbreakable token on its own does not trigger the rule.
    Set ``code_blocks`` to ``False`` to skip lines inside code blocks.
    """

    name = "LineLengthRule"
    description = "Line length"
    tags = ("line_length",)

    def __init__(self, max_line_length: int = 80, code_blocks: bool = True, setup: Optional[RuleSetup] = None) -> None:
        super().__init__(setup)
        if isinstance(max_line_length, bool) or not isinstance(max_line_length, int) or max_line_length < 1:
            raise ValueError(f"max_line_length must be a positive integer, got {max_line_length!r}")
        self.max_line_length = max_line_length
        self.code_blocks = bool(code_blocks)

    def visit(self, document: MarkdownDocument) -> List[Error]:
        skipped = frozenset() if self.code_blocks else document.code_block_lines
        limit = self.max_line_length
        errors = []
        for index in range(document.line_count):
            if index in skipped:
                continue
            text = document.line_text(index)
            if len(text) > limit and WHITESPACE.search(text, limit):
                start = document.line_start(index) + limit
                errors.append(
                    self.error(document, start, document.line_end(index), f"{self.description} (> {limit})")
                )
        return errors
