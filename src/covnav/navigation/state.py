"""Two-level browsing model: file list -> annotated file detail.

NavigationState is a plain state machine over two views. The terminal
front end owns one instance, calls the transition methods in response to
keys, and renders whatever the current view exposes. No transition does
I/O of its own; file lines come from the loader passed in at construction.

    ListView --select(i)--> DetailView --back--> ListView
    ListView --move(d)-->   ListView
    DetailView --scroll(d)--> DetailView
    any --sort(by_coverage)--> same view, same selected file
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

import structlog

from covnav.core.errors import NavigationError
from covnav.coverage.aggregate import FileSummary, sort_summaries
from covnav.coverage.models import FileCoverage, LineStatus
from covnav.diff.filter import DiffFilter

log = structlog.get_logger(__name__)


class Mode(str, Enum):
    LIST = "list"
    DETAIL = "detail"


@dataclass(frozen=True, slots=True)
class LineView:
    """One source line as shown in the detail view."""

    number: int
    status: LineStatus
    hits: int
    visible: bool = True
    text: str | None = None


def build_line_views(
    file_cov: FileCoverage,
    *,
    diff_filter: DiffFilter | None = None,
    source_lines: Sequence[str] | None = None,
    line_count: int | None = None,
) -> list[LineView]:
    """Annotate every line of a file.

    Covers lines 1..N where N is the largest of the source length, the
    explicit line_count and the last instrumented line. When the diff
    filter has an entry for the file, lines outside it are kept but marked
    invisible so line numbers stay continuous.
    """
    total = max(
        file_cov.last_line,
        len(source_lines) if source_lines is not None else 0,
        line_count or 0,
    )
    changed = diff_filter.lines_for(file_cov.path) if diff_filter else None

    views = []
    for number in range(1, total + 1):
        coverage = file_cov.line(number)
        text = None
        if source_lines is not None and number <= len(source_lines):
            text = source_lines[number - 1]
        views.append(
            LineView(
                number=number,
                status=coverage.status,
                hits=coverage.hits,
                visible=changed is None or number in changed,
                text=text,
            )
        )
    return views


@dataclass(frozen=True, slots=True)
class ListView:
    """File list payload: nothing beyond the shared selection."""


@dataclass(frozen=True, slots=True)
class DetailView:
    """Single-file payload."""

    path: str
    lines: tuple[LineView, ...]

    @property
    def visible_lines(self) -> tuple[LineView, ...]:
        return tuple(line for line in self.lines if line.visible)


LineLoader = Callable[[str], Sequence[LineView]]


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


@dataclass
class NavigationState:
    """Selection, per-file scroll offsets and the current view.

    Scroll offsets index into a file's visible lines and are remembered
    per file path, so re-opening a file resumes where it was left.
    """

    summaries: list[FileSummary]
    line_loader: LineLoader
    sort_by_coverage: bool = False
    height: int = 1
    view: ListView | DetailView = field(default_factory=ListView)
    selected: int | None = None
    scroll_offsets: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.summaries = sort_summaries(self.summaries, by_coverage=self.sort_by_coverage)
        if self.selected is None and self.summaries:
            self.selected = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def mode(self) -> Mode:
        return Mode.DETAIL if isinstance(self.view, DetailView) else Mode.LIST

    @property
    def is_empty(self) -> bool:
        return not self.summaries

    @property
    def selected_summary(self) -> FileSummary | None:
        if self.selected is None:
            return None
        return self.summaries[self.selected]

    @property
    def scroll_offset(self) -> int:
        """Scroll offset of the selected file (0 when nothing is selected).

        The stored offset is kept as scrolled; an open file reads it clamped
        to the current height.
        """
        summary = self.selected_summary
        if summary is None:
            return 0
        offset = self.scroll_offsets.get(summary.path, 0)
        if isinstance(self.view, DetailView):
            return _clamp(offset, 0, self._max_scroll(self.view))
        return offset

    def snapshot(self) -> tuple[Mode, int | None, int]:
        return (self.mode, self.selected, self.scroll_offset)

    def window(self) -> tuple[LineView, ...]:
        """Visible lines currently inside the detail scroll window."""
        if not isinstance(self.view, DetailView):
            raise NavigationError.wrong_mode("window", self.mode.value)
        offset = self.scroll_offset
        return self.view.visible_lines[offset : offset + self.height]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def select(self, index: int | None = None) -> DetailView:
        """Open the file at index (default: the current selection)."""
        if not isinstance(self.view, ListView):
            raise NavigationError.wrong_mode("select", self.mode.value)
        if index is None:
            index = self.selected if self.selected is not None else 0
        if not 0 <= index < len(self.summaries):
            raise NavigationError.out_of_range(index, len(self.summaries))

        self.selected = index
        path = self.summaries[index].path
        self.view = DetailView(path=path, lines=tuple(self.line_loader(path)))
        log.debug("file_opened", path=path, offset=self.scroll_offset)
        return self.view

    def back(self) -> None:
        """Return to the file list, keeping selection and scroll offset."""
        if not isinstance(self.view, DetailView):
            raise NavigationError.wrong_mode("back", self.mode.value)
        self.view = ListView()

    def move(self, delta: int) -> None:
        """Move the list selection, saturating at both ends."""
        if not isinstance(self.view, ListView):
            raise NavigationError.wrong_mode("move", self.mode.value)
        if self.selected is None:
            return
        self.selected = _clamp(self.selected + delta, 0, len(self.summaries) - 1)

    def scroll(self, delta: int) -> None:
        """Scroll the detail view, saturating at both ends."""
        if not isinstance(self.view, DetailView):
            raise NavigationError.wrong_mode("scroll", self.mode.value)
        view = self.view
        offset = _clamp(self.scroll_offset + delta, 0, self._max_scroll(view))
        self.scroll_offsets[view.path] = offset

    def scroll_to(self, offset: int) -> None:
        self.scroll(offset - self.scroll_offset)

    def sort(self, by_coverage: bool) -> None:
        """Re-order the file list, keeping the same file selected."""
        current = self.selected_summary
        self.sort_by_coverage = by_coverage
        self.summaries = sort_summaries(self.summaries, by_coverage=by_coverage)
        if current is not None:
            self.selected = next(
                i for i, summary in enumerate(self.summaries) if summary.path == current.path
            )

    def resize(self, height: int) -> None:
        """Set the number of detail lines shown at once."""
        self.height = max(1, height)

    def _max_scroll(self, view: DetailView) -> int:
        return max(0, len(view.visible_lines) - self.height)
