"""Discovery of Markdown files beneath a project root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List

MARKDOWN_EXTENSIONS = (".md", ".markdown")
BUILD_DIR_NAME = "build"


def is_pruned(directory_name: str) -> bool:
    """Build output and hidden directories (VCS, tooling caches) are never entered."""

    return directory_name == BUILD_DIR_NAME or directory_name.startswith(".")


def iter_markdown_files(root: Path, extensions: Iterable[str] = MARKDOWN_EXTENSIONS) -> List[Path]:
    """Return Markdown files beneath ``root`` in lexical order of their relative paths."""

    suffixes = tuple(extensions)
    found: List[Path] = []
    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if not is_pruned(name))
        for filename in filenames:
            if filename.endswith(suffixes):
                found.append(Path(current) / filename)
    return sorted(found, key=lambda path: path.relative_to(root).as_posix())
