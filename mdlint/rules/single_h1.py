"""Detect more than one top level heading."""

from __future__ import annotations

from typing import List, Optional

from mdlint.config import RuleSetup
from mdlint.document import MarkdownDocument
from mdlint.result import Error

from . import Rule


class SingleH1Rule(Rule):
    """A document should have a single top level heading acting as its title.

    Each top level heading after the first is reported.
    """

    name = "SingleH1Rule"
    description = "Multiple top level headers in the same document"
    tags = ("headers",)

    def __init__(self, level: int = 1, setup: Optional[RuleSetup] = None) -> None:
        super().__init__(setup)
        if level not in range(1, 7):
            raise ValueError(f"level must be between 1 and 6, got {level!r}")
        self.level = level

    def visit(self, document: MarkdownDocument) -> List[Error]:
        top_level = [heading for heading in document.headings if document.heading_level(heading) == self.level]
        errors = []
        for heading in top_level[1:]:
            start, end = document.block_range(heading)
            errors.append(self.error(document, start, end))
        return errors
