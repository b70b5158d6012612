"""Diff-derived line filters."""

from covnav.diff.filter import (
    DiffFilter,
    DiffInput,
    FileListInput,
    StdinInput,
    parse_diff,
    parse_stdin,
)

__all__ = [
    "DiffFilter",
    "DiffInput",
    "FileListInput",
    "StdinInput",
    "parse_diff",
    "parse_stdin",
]
