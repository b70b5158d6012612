"""Per-file coverage summaries and list ordering.

Pure transforms over a parsed profile: nothing here touches I/O.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from covnav.coverage.models import CoverageProfile
from covnav.diff.filter import DiffFilter


@dataclass(frozen=True, slots=True)
class FileSummary:
    """Coverage percentage and identity for one file in the list view."""

    path: str
    percentage: float
    statements: int
    covered_statements: int
    in_diff: bool = False  # file has at least one changed line in the diff filter


def summarize(
    profile: CoverageProfile,
    paths: Iterable[str],
    diff_filter: DiffFilter | None = None,
) -> list[FileSummary]:
    """Build summaries for the given candidate paths, in the given order."""
    diff_filter = diff_filter or DiffFilter()
    summaries = []
    for path in paths:
        file_cov = profile.files[path]
        summaries.append(
            FileSummary(
                path=path,
                percentage=file_cov.percentage,
                statements=file_cov.statements,
                covered_statements=file_cov.covered_statements,
                in_diff=path in diff_filter,
            )
        )
    return summaries


def _name_key(summary: FileSummary) -> str:
    return summary.path


def _coverage_key(summary: FileSummary) -> tuple[float, str]:
    return (summary.percentage, summary.path)


def sort_summaries(summaries: Sequence[FileSummary], *, by_coverage: bool = False) -> list[FileSummary]:
    """Order summaries by path, or by ascending coverage with path tie-break.

    Least-covered files come first in coverage order. Both orders are
    stable, so re-sorting an already sorted list is a no-op.
    """
    key = _coverage_key if by_coverage else _name_key
    return sorted(summaries, key=key)
