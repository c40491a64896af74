"""Basic file IO helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_text_file(path: Path) -> str:
    """Return the file contents decoded as UTF-8."""

    return path.read_text(encoding="utf-8")


def write_bytes(path: Path, payload: bytes) -> Path:
    """Write ``payload`` to ``path``, creating parent directories."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)
    return path
