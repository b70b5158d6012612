"""Tests for the coverage engine pipeline."""

from collections.abc import Callable
from pathlib import Path

import pytest

from covnav.core.errors import ErrorCode, NavigationError
from covnav.coverage.models import LineStatus
from covnav.coverage.profile import parse_profile
from covnav.diff.filter import DiffFilter, parse_stdin
from covnav.engine import CoverageEngine
from covnav.navigation.state import Mode
from covnav.source import SourceReader

SCENARIO_C_DIFF = """\
diff --git a/c.go b/c.go
index 1111111..2222222 100644
--- a/c.go
+++ b/c.go
@@ -41,2 +41,3 @@
 \tx := 1
+\ty := 2
 \treturn x
"""


@pytest.fixture
def profile(sample_profile_text: str):
    return parse_profile(sample_profile_text, module_path="example.com/demo")


class TestBuild:
    def test_all_files_sorted_by_name(self, profile) -> None:
        engine = CoverageEngine.build(profile)

        assert [s.path for s in engine.summaries] == ["a.go", "b.go", "c.go"]

    def test_sorted_by_coverage(self, profile) -> None:
        engine = CoverageEngine.build(profile, sort_by_coverage=True)

        assert [s.path for s in engine.summaries] == ["a.go", "b.go", "c.go"]
        assert [s.percentage for s in engine.summaries] == pytest.approx([80.0, 80.0, 100.0])

    def test_requested_files_narrow_the_list(self, profile) -> None:
        engine = CoverageEngine.build(profile, requested_files=["c.go", "missing.go", "a.go"])

        assert [s.path for s in engine.summaries] == ["a.go", "c.go"]

    def test_empty_profile(self) -> None:
        engine = CoverageEngine.build(parse_profile("mode: set\n"))

        assert engine.is_empty
        assert engine.summaries == []

    def test_file_list_input_from_stdin(self, profile) -> None:
        parsed = parse_stdin("x.go\nb.go\n")

        engine = CoverageEngine.build(
            profile,
            requested_files=parsed.requested_files,
            diff_filter=parsed.diff_filter,
        )

        assert [s.path for s in engine.summaries] == ["b.go"]
        assert not engine.summaries[0].in_diff

    def test_engines_are_independent(self, profile) -> None:
        first = CoverageEngine.build(profile, requested_files=["a.go"])
        second = CoverageEngine.build(profile)

        assert len(first.summaries) == 1
        assert len(second.summaries) == 3


class TestLineViews:
    def test_without_source(self, profile) -> None:
        engine = CoverageEngine.build(profile)

        views = engine.line_views("b.go")

        assert len(views) == 6
        assert views[0].status is LineStatus.UNCOVERED
        assert views[2].status is LineStatus.NOT_INSTRUMENTED
        assert views[4].hits == 1
        assert all(v.text is None for v in views)

    def test_with_source(self, profile, write_file: Callable[[str, str], Path], tmp_path: Path) -> None:
        write_file("a.go", "\n".join(f"// {n}" for n in range(1, 13)) + "\n")
        engine = CoverageEngine.build(
            profile, source_reader=SourceReader(tmp_path, "example.com/demo")
        )

        views = engine.line_views("a.go")

        assert len(views) == 12
        assert views[3].text == "// 4"
        assert views[3].status is LineStatus.COVERED
        assert views[3].hits == 3


class TestScenarioC:
    def test_detail_shows_only_changed_line(self) -> None:
        profile = parse_profile("mode: set\nc.go:40.1,44.2 3 1\n")
        parsed = parse_stdin(SCENARIO_C_DIFF)
        assert parsed.diff_filter == DiffFilter.from_lines({"c.go": [42]})

        engine = CoverageEngine.build(
            profile,
            requested_files=parsed.requested_files,
            diff_filter=parsed.diff_filter,
        )
        navigator = engine.navigator(height=20)
        view = navigator.select(0)

        assert engine.summaries[0].in_diff
        assert [line.number for line in view.lines if line.visible] == [42]
        assert [line.number for line in navigator.window()] == [42]


class TestNavigator:
    def test_fresh_state_per_call(self, profile) -> None:
        engine = CoverageEngine.build(profile)

        first = engine.navigator()
        first.move(2)
        second = engine.navigator()

        assert second.selected == 0
        assert second.mode is Mode.LIST

    def test_resort_does_not_touch_engine(self, profile) -> None:
        engine = CoverageEngine.build(profile)
        navigator = engine.navigator()

        navigator.sort(by_coverage=True)

        assert engine.sort_by_coverage is False
        assert [s.path for s in engine.summaries] == ["a.go", "b.go", "c.go"]

    def test_scenario_e_detail_refused(self) -> None:
        engine = CoverageEngine.build(parse_profile("mode: set\n"))
        navigator = engine.navigator()

        with pytest.raises(NavigationError) as exc_info:
            navigator.select(0)

        assert exc_info.value.code == ErrorCode.NAVIGATION_OUT_OF_RANGE
