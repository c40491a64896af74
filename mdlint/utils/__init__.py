"""Filesystem helpers for the analyzer."""

from .fileio import read_yaml_file, read_text_file, write_bytes
from .walk import iter_markdown_files

__all__ = [
    "read_yaml_file",
    "read_text_file",
    "write_bytes",
    "iter_markdown_files",
]
