"""Coverage profile parsing, file resolution and aggregation.

Usage:
    from covnav.coverage import parse_profile, resolve_files, summarize, sort_summaries

    profile = parse_profile(Path("coverage.out").read_text())
    paths = resolve_files(profile, ["pkg/a.go"])
    summaries = sort_summaries(summarize(profile, paths), by_coverage=True)
"""

from covnav.coverage.aggregate import FileSummary, sort_summaries, summarize
from covnav.coverage.models import (
    CoverageProfile,
    FileCoverage,
    LineCoverage,
    LineStatus,
    ProfileMode,
    StatementBlock,
)
from covnav.coverage.profile import load_profile, parse_profile
from covnav.coverage.resolve import resolve_files

__all__ = [
    # Models
    "CoverageProfile",
    "FileCoverage",
    "LineCoverage",
    "LineStatus",
    "ProfileMode",
    "StatementBlock",
    # Parsing
    "load_profile",
    "parse_profile",
    # Resolution and aggregation
    "FileSummary",
    "resolve_files",
    "sort_summaries",
    "summarize",
]
