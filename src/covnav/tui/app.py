"""Interactive terminal front end.

CoverageApp renders a NavigationState and turns key presses into state
transitions. All browsing logic lives in the state; this module only
paints it.
"""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from covnav.core.formatting import compress_path, format_hits, format_percent, pluralize
from covnav.coverage.models import LineStatus, ProfileMode
from covnav.navigation.state import DetailView, Mode, NavigationState

EMPTY_MESSAGE = "No files to show"

_LINE_STYLES = {
    LineStatus.COVERED: "green",
    LineStatus.UNCOVERED: "red",
    LineStatus.NOT_INSTRUMENTED: "dim",
}


def _percent_style(percentage: float) -> str:
    if percentage >= 80.0:
        return "green"
    if percentage >= 50.0:
        return "yellow"
    return "red"


class CoverageApp(App[None]):
    """File list and annotated source viewer for one coverage profile."""

    TITLE = "covnav"

    CSS = """
    Screen {
        layout: vertical;
    }
    #view {
        height: 1fr;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("up,k", "up", "Up", show=False),
        Binding("down,j", "down", "Down", show=False),
        Binding("pageup", "page_up", "Page Up", show=False),
        Binding("pagedown", "page_down", "Page Down", show=False),
        Binding("enter", "open", "Open"),
        Binding("escape,backspace", "back", "Back"),
        Binding("s", "toggle_sort", "Sort"),
    ]

    def __init__(self, state: NavigationState, *, mode: ProfileMode = ProfileMode.SET) -> None:
        super().__init__()
        self.state = state
        self.profile_mode = mode
        self._list_top = 0

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="view")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_view()
        self.call_after_refresh(self._relayout)

    def on_resize(self, event: events.Resize) -> None:  # noqa: ARG002
        self.call_after_refresh(self._relayout)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_up(self) -> None:
        self._step(-1)

    def action_down(self) -> None:
        self._step(1)

    def action_page_up(self) -> None:
        self._step(-self.state.height)

    def action_page_down(self) -> None:
        self._step(self.state.height)

    def action_open(self) -> None:
        if self.state.mode is Mode.LIST and not self.state.is_empty:
            self.state.select()
            self.refresh_view()

    def action_back(self) -> None:
        if self.state.mode is Mode.DETAIL:
            self.state.back()
            self.refresh_view()

    def action_toggle_sort(self) -> None:
        self.state.sort(not self.state.sort_by_coverage)
        self.refresh_view()

    def _step(self, delta: int) -> None:
        if self.state.mode is Mode.LIST:
            self.state.move(delta)
        else:
            self.state.scroll(delta)
        self.refresh_view()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _view_height(self) -> int:
        # One row is taken by the view's own heading
        return max(1, self.query_one("#view", Static).size.height - 1)

    def _relayout(self) -> None:
        self.state.resize(self._view_height())
        self.refresh_view()

    def refresh_view(self) -> None:
        self.query_one("#view", Static).update(self.render_view())

    def render_view(self) -> Text:
        if isinstance(self.state.view, DetailView):
            return self._render_detail(self.state.view)
        return self._render_list()

    def _render_list(self) -> Text:
        state = self.state
        text = Text()
        order = "coverage" if state.sort_by_coverage else "name"
        text.append(f"{pluralize(len(state.summaries), 'file')}, sorted by {order}\n", style="bold")

        if state.is_empty:
            text.append(EMPTY_MESSAGE, style="italic")
            return text

        selected = state.selected or 0
        height = state.height
        if selected < self._list_top:
            self._list_top = selected
        elif selected >= self._list_top + height:
            self._list_top = selected - height + 1

        for index in range(self._list_top, min(len(state.summaries), self._list_top + height)):
            summary = state.summaries[index]
            marker = "*" if summary.in_diff else " "
            row_style = "reverse" if index == selected else ""
            percent_style = f"{_percent_style(summary.percentage)} {row_style}".strip()
            text.append(format_percent(summary.percentage), style=percent_style)
            text.append(f" {marker} {compress_path(summary.path)}\n", style=row_style)
        return text

    def _render_detail(self, view: DetailView) -> Text:
        summary = self.state.selected_summary
        text = Text()
        heading = view.path if summary is None else f"{view.path}  {format_percent(summary.percentage)}"
        text.append(heading + "\n", style="bold")

        show_counts = self.profile_mode.shows_counts
        for line in self.state.window():
            style = _LINE_STYLES[line.status]
            text.append(f"{line.number:>6} ", style="dim")
            if show_counts:
                instrumented = line.status is not LineStatus.NOT_INSTRUMENTED
                hits = format_hits(line.hits) if instrumented else " " * 6
                text.append(f"{hits} ", style=style)
            text.append((line.text or "") + "\n", style=style)
        return text
