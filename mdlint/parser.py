"""Markdown parser configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from markdown_it import MarkdownIt

DEFAULT_EXTENSIONS: Tuple[str, ...] = ("table", "strikethrough")


@dataclass(frozen=True)
class ParserOptions:
    """Immutable description of the markdown-it parser used for every document."""

    preset: str = "commonmark"
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS

    def build(self) -> MarkdownIt:
        parser = MarkdownIt(self.preset)
        if self.extensions:
            parser.enable(list(self.extensions))
        return parser
