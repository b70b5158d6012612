"""Formatting utilities for consistent terminal output.

Design principles:
- Every list row fits on one line
- Paths compressed for deep nesting
- Grammatically correct (1 file vs 2 files)
"""

from __future__ import annotations


def compress_path(path: str, max_len: int = 60) -> str:
    """Compress path to fit within max_len.

    Examples:
        internal/model/view/render.go -> internal/.../render.go
        short/path.go -> short/path.go (unchanged)
    """
    if len(path) <= max_len:
        return path

    parts = path.split("/")
    if len(parts) <= 2:
        return path  # Can't compress further

    # Keep first and last, replace middle with ...
    compressed = f"{parts[0]}/.../{parts[-1]}"
    if len(compressed) <= max_len:
        return compressed

    return parts[-1]


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return "1 file" or "3 files"."""
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def format_percent(value: float) -> str:
    """Format a coverage percentage right-aligned to a fixed width.

    Examples:
        100.0 -> "100.0%"
        7.25 -> "  7.2%"
    """
    return f"{value:5.1f}%"


def format_hits(hits: int, width: int = 6) -> str:
    """Format a hit count, abbreviating large values.

    Examples:
        42 -> "    42"
        1234567 -> "  1.2M"
    """
    if hits >= 1_000_000:
        text = f"{hits / 1_000_000:.1f}M"
    elif hits >= 10_000:
        text = f"{hits / 1_000:.1f}k"
    else:
        text = str(hits)
    return text.rjust(width)
