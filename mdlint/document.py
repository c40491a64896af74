"""Parsed Markdown document with a line index over its raw text."""

from __future__ import annotations

import re
from bisect import bisect_right
from typing import FrozenSet, List, Optional, Tuple

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .exceptions import ParseError
from .parser import ParserOptions

LINE_TERMINATOR = re.compile(r"\r\n|\r|\n")
CODE_BLOCK_TYPES = ("fence", "code_block")


class MarkdownDocument:
    """A parsed document plus its source text.

    Line *indices* are 0-based, matching ``SyntaxTreeNode.map``. Line and
    column *numbers* are 1-based, matching what is reported to users.
    """

    def __init__(self, filename: str, tree: SyntaxTreeNode, chars: str) -> None:
        self._filename = filename
        self._tree = tree
        self._chars = chars
        offsets = [0]
        offsets.extend(match.end() for match in LINE_TERMINATOR.finditer(chars))
        self._line_offsets: Tuple[int, ...] = tuple(offsets)

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def tree(self) -> SyntaxTreeNode:
        return self._tree

    @property
    def chars(self) -> str:
        return self._chars

    @property
    def line_offsets(self) -> Tuple[int, ...]:
        return self._line_offsets

    @property
    def line_count(self) -> int:
        return len(self._line_offsets)

    # ------------------------------------------------------------------
    # Offset lookups
    # ------------------------------------------------------------------
    def line_index_of(self, offset: int) -> int:
        """Return the 0-based index of the line containing ``offset``."""

        offset = min(max(offset, 0), len(self._chars))
        return bisect_right(self._line_offsets, offset) - 1

    def line_number_of(self, offset: int) -> int:
        """Return the 1-based line number containing ``offset``."""

        return self.line_index_of(offset) + 1

    def column_number_of(self, offset: int) -> int:
        """Return the 1-based column of ``offset`` within its line."""

        offset = min(max(offset, 0), len(self._chars))
        return offset - self._line_offsets[self.line_index_of(offset)] + 1

    def substring(self, start: int, end: int) -> str:
        return self._chars[start:end]

    # ------------------------------------------------------------------
    # Line access
    # ------------------------------------------------------------------
    def line_start(self, index: int) -> int:
        return self._line_offsets[index]

    def line_end(self, index: int) -> int:
        """Offset just past the last character of line ``index``, terminator excluded."""

        start = self._line_offsets[index]
        end = self._line_offsets[index + 1] if index + 1 < len(self._line_offsets) else len(self._chars)
        while end > start and self._chars[end - 1] in "\r\n":
            end -= 1
        return end

    def line_text(self, index: int) -> str:
        return self._chars[self.line_start(index):self.line_end(index)]

    @property
    def lines(self) -> List[str]:
        return [self.line_text(index) for index in range(self.line_count)]

    def is_blank(self, index: int) -> bool:
        return not self.line_text(index).strip()

    # ------------------------------------------------------------------
    # Tree helpers
    # ------------------------------------------------------------------
    def nodes(self, *types: str) -> List[SyntaxTreeNode]:
        """Return all nodes of the given types in document order."""

        return [node for node in self._tree.walk(include_self=False) if node.type in types]

    @property
    def headings(self) -> List[SyntaxTreeNode]:
        return self.nodes("heading")

    @staticmethod
    def heading_level(node: SyntaxTreeNode) -> int:
        return int(node.tag[1:])

    def block_range(self, node: SyntaxTreeNode) -> Tuple[int, int]:
        """Return start/end offsets of the source lines a block node covers."""

        first, last = node.map
        last = max(first, min(last, self.line_count) - 1)
        return self.line_start(first), self.line_end(last)

    @property
    def code_block_lines(self) -> FrozenSet[int]:
        indices = set()
        for node in self.nodes(*CODE_BLOCK_TYPES):
            if node.map:
                indices.update(range(node.map[0], node.map[1]))
        return frozenset(indices)

    def __repr__(self) -> str:
        return f"MarkdownDocument(filename={self._filename!r}, lines={self.line_count})"


def load_document(chars: str, filename: str, parser: Optional[MarkdownIt] = None) -> MarkdownDocument:
    """Parse ``chars`` into a :class:`MarkdownDocument`.

    The engine does not validate syntax itself; ``ParseError`` is raised only
    when the parser rejects the input.
    """

    if parser is None:
        parser = ParserOptions().build()
    try:
        tree = SyntaxTreeNode(parser.parse(chars))
    except Exception as exc:  # pylint: disable=broad-except
        raise ParseError(filename, str(exc) or exc.__class__.__name__) from exc
    return MarkdownDocument(filename, tree, chars)
