"""Coverage navigation engine.

Wires the pipeline together for one viewing session:

    profile + requested files -> resolve_files -> summarize -> sort
    summaries + diff filter + source reader -> NavigationState

Each engine is owned by its caller; nothing is kept in module state, so
several engines (e.g. in tests) can coexist.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

import structlog

from covnav.coverage.aggregate import FileSummary, sort_summaries, summarize
from covnav.coverage.models import CoverageProfile
from covnav.coverage.resolve import resolve_files
from covnav.diff.filter import DiffFilter
from covnav.navigation.state import LineView, NavigationState, build_line_views
from covnav.source import SourceReader

log = structlog.get_logger(__name__)


@dataclass
class CoverageEngine:
    """Resolved, summarized view of one coverage profile."""

    profile: CoverageProfile
    summaries: list[FileSummary]
    diff_filter: DiffFilter = field(default_factory=DiffFilter)
    sort_by_coverage: bool = False
    source_reader: SourceReader | None = None

    @classmethod
    def build(
        cls,
        profile: CoverageProfile,
        *,
        requested_files: Iterable[str] = (),
        diff_filter: DiffFilter | None = None,
        sort_by_coverage: bool = False,
        source_reader: SourceReader | None = None,
    ) -> CoverageEngine:
        diff_filter = diff_filter or DiffFilter()
        paths = resolve_files(profile, requested_files)
        summaries = sort_summaries(
            summarize(profile, paths, diff_filter), by_coverage=sort_by_coverage
        )
        log.info(
            "files_resolved",
            profile_files=len(profile.files),
            shown=len(summaries),
            filtered=len(diff_filter),
        )
        return cls(
            profile=profile,
            summaries=summaries,
            diff_filter=diff_filter,
            sort_by_coverage=sort_by_coverage,
            source_reader=source_reader,
        )

    @property
    def is_empty(self) -> bool:
        return not self.summaries

    def line_views(self, path: str, line_count: int | None = None) -> list[LineView]:
        """Annotated lines for one profile file."""
        source_lines = self.source_reader.read_lines(path) if self.source_reader else None
        return build_line_views(
            self.profile.files[path],
            diff_filter=self.diff_filter,
            source_lines=source_lines,
            line_count=line_count,
        )

    def navigator(self, *, height: int = 1) -> NavigationState:
        """Fresh navigation state in list mode."""
        return NavigationState(
            summaries=list(self.summaries),
            line_loader=self.line_views,
            sort_by_coverage=self.sort_by_coverage,
            height=height,
        )
