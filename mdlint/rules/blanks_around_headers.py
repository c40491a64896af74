"""Check spacing around headings."""

from __future__ import annotations

from typing import List

from mdlint.document import MarkdownDocument
from mdlint.result import Error

from . import Rule


class BlanksAroundHeadersRule(Rule):
    """Headings should be surrounded by blank lines.

    The start and end of the document count as blank. Headings nested in
    lists or block quotes are not checked.
    """

    name = "BlanksAroundHeadersRule"
    description = "Headers should be surrounded by blank lines"
    tags = ("headers", "blank_lines")

    def visit(self, document: MarkdownDocument) -> List[Error]:
        errors = []
        for heading in document.headings:
            if heading.parent is None or heading.parent.type != "root":
                continue
            first, last = heading.map
            blank_before = first == 0 or document.is_blank(first - 1)
            blank_after = last >= document.line_count or document.is_blank(last)
            if not (blank_before and blank_after):
                start, end = document.block_range(heading)
                errors.append(self.error(document, start, end))
        return errors
