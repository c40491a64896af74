"""Check document filenames."""

from __future__ import annotations

import re
from typing import List

from mdlint.document import MarkdownDocument
from mdlint.result import Error

from . import Rule

WHITESPACE = re.compile(r"\s")


class NoWhitespaceInFilenameRule(Rule):
    """Document filenames must not contain whitespace."""

    name = "NoWhitespaceInFilenameRule"
    description = "Filename contains whitespace"
    tags = ("filename",)

    def visit(self, document: MarkdownDocument) -> List[Error]:
        basename = document.filename.rsplit("/", 1)[-1]
        if WHITESPACE.search(basename):
            return [self.error(document, 0, 0, f"{self.description}: {basename}")]
        return []
