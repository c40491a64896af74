"""Check horizontal rule style."""

from __future__ import annotations

import re
from typing import List, Optional

from markdown_it.tree import SyntaxTreeNode

from mdlint.config import RuleSetup
from mdlint.document import MarkdownDocument
from mdlint.result import Error

from . import Rule

CONSISTENT = "consistent"
NAMED_STYLES = {
    "dash": "---",
    "asterisk": "***",
    "underscore": "___",
}

BLOCKQUOTE_PREFIX = re.compile(r"^[ \t]*>")
LIST_MARKER = re.compile(r"^[ \t]*(?:[-*+]|[0-9]{1,9}[.)])(?=[ \t])")


def rule_text(line: str, node: SyntaxTreeNode) -> str:
    """Return the text of the rule on ``line`` without its container prefixes."""

    containers = []
    parent = node.parent
    while parent is not None and parent.type != "root":
        containers.append(parent)
        parent = parent.parent
    # outermost container first
    for container in reversed(containers):
        if container.type == "blockquote":
            line = BLOCKQUOTE_PREFIX.sub("", line, count=1)
        elif container.type == "list_item" and container.map and container.map[0] == node.map[0]:
            line = LIST_MARKER.sub("", line, count=1)
    return line.strip()


class HrStyleRule(Rule):
    """Horizontal rules must all be written the same way.

    ``style`` is ``consistent`` (match the first rule in the document), one of
    ``dash``, ``asterisk`` or ``underscore``, or the exact text to require,
    e.g. ``_____``. Rules inside block quotes and list items are compared
    without the quote or list markers that precede them.
    """

    name = "HrStyleRule"
    description = "Horizontal rule style"
    tags = ("hr",)

    def __init__(self, style: str = CONSISTENT, setup: Optional[RuleSetup] = None) -> None:
        super().__init__(setup)
        if not isinstance(style, str) or not style.strip():
            raise ValueError(f"style must be a non-empty string, got {style!r}")
        self.style = style.strip()

    def visit(self, document: MarkdownDocument) -> List[Error]:
        expected = None if self.style == CONSISTENT else NAMED_STYLES.get(self.style, self.style)
        errors = []
        for node in document.nodes("hr"):
            start, end = document.block_range(node)
            text = rule_text(document.substring(start, end), node)
            if expected is None:
                expected = text
            elif text != expected:
                errors.append(self.error(document, start, end, f"{self.description} (expected '{expected}')"))
        return errors
