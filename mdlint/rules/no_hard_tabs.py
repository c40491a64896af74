"""Detect hard tab characters."""

from __future__ import annotations

import re
from typing import List

from mdlint.document import MarkdownDocument
from mdlint.result import Error

from . import Rule

TAB = re.compile(r"\t")


class NoHardTabsRule(Rule):
    """Flag every hard tab; indentation should use spaces.

    Example, with ``→`` standing for a tab::

        Some text

        → * hard tab character used to indent the list item
    """

    name = "NoHardTabsRule"
    description = "Hard tabs"
    tags = ("whitespace", "hard_tab")

    def visit(self, document: MarkdownDocument) -> List[Error]:
        return [self.error(document, match.start(), match.end()) for match in TAB.finditer(document.chars)]
