"""Rule contract shared by all checks."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Pattern, Tuple

from mdlint.config import Configuration, RuleSetup
from mdlint.document import MarkdownDocument
from mdlint.result import Error


class Rule(ABC):
    """Base class implemented by all rules.

    A rule is identified by ``name``, documented by ``description`` and
    grouped by ``tags``. Subclasses implement :meth:`visit` only; the engine
    never needs to change when a rule is added.

    Instances are shared between worker threads, so ``visit`` must not keep
    state between calls and must not mutate the document.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    tags: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, setup: Optional[RuleSetup] = None) -> None:
        self.setup = setup or RuleSetup()
        self._includes: List[Pattern[str]] = [re.compile(pattern) for pattern in self.setup.includes]
        self._excludes: List[Pattern[str]] = [re.compile(pattern) for pattern in self.setup.excludes]

    @classmethod
    def is_active(cls, config: Configuration) -> bool:
        return config.rule_setup(cls.name).active

    def applies_to(self, filename: str) -> bool:
        """Apply the include/exclude filters to a document filename."""

        included = any(pattern.fullmatch(filename) for pattern in self._includes)
        return included and not any(pattern.fullmatch(filename) for pattern in self._excludes)

    def process(self, document: MarkdownDocument) -> List[Error]:
        if not self.applies_to(document.filename):
            return []
        return list(self.visit(document))

    @abstractmethod
    def visit(self, document: MarkdownDocument) -> List[Error]:
        """Inspect ``document`` and return the errors found, in discovery order."""

    def error(self, document: MarkdownDocument, start: int, end: int, message: Optional[str] = None) -> Error:
        return Error.at(document, self.name, start, end, message or self.description)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


__all__ = ["Rule"]
