"""Check the level of the first heading."""

from __future__ import annotations

from typing import List, Optional

from mdlint.config import RuleSetup
from mdlint.document import MarkdownDocument
from mdlint.result import Error

from . import Rule


class FirstHeaderH1Rule(Rule):
    """The first heading of a document should be a top level heading."""

    name = "FirstHeaderH1Rule"
    description = "First header should be a top level header"
    tags = ("headers",)

    def __init__(self, level: int = 1, setup: Optional[RuleSetup] = None) -> None:
        super().__init__(setup)
        if level not in range(1, 7):
            raise ValueError(f"level must be between 1 and 6, got {level!r}")
        self.level = level

    def visit(self, document: MarkdownDocument) -> List[Error]:
        headings = document.headings
        if not headings or document.heading_level(headings[0]) == self.level:
            return []
        start, end = document.block_range(headings[0])
        return [self.error(document, start, end)]
