"""Tests for formatting utilities."""

import pytest

from covnav.core.formatting import compress_path, format_hits, format_percent, pluralize


class TestCompressPath:
    def test_short_path_unchanged(self) -> None:
        assert compress_path("pkg/main.go") == "pkg/main.go"

    def test_long_path_keeps_first_and_last(self) -> None:
        path = "internal/very/deeply/nested/package/structure/render.go"
        assert compress_path(path, max_len=30) == "internal/.../render.go"

    def test_falls_back_to_filename(self) -> None:
        path = "a_really_long_top_level_directory/nested/file.go"
        assert compress_path(path, max_len=20) == "file.go"

    def test_two_parts_not_compressed(self) -> None:
        path = "a_really_long_top_level_directory/file.go"
        assert compress_path(path, max_len=10) == path


class TestPluralize:
    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "0 files"), (1, "1 file"), (2, "2 files")],
    )
    def test_pluralize(self, count: int, expected: str) -> None:
        assert pluralize(count, "file") == expected

    def test_custom_plural(self) -> None:
        assert pluralize(2, "entry", "entries") == "2 entries"


class TestFormatPercent:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(100.0, "100.0%"), (0.0, "  0.0%"), (42.5, " 42.5%")],
    )
    def test_fixed_width(self, value: float, expected: str) -> None:
        assert format_percent(value) == expected


class TestFormatHits:
    @pytest.mark.parametrize(
        ("hits", "expected"),
        [(0, "     0"), (42, "    42"), (12_345, " 12.3k"), (2_500_000, "  2.5M")],
    )
    def test_abbreviates_large_counts(self, hits: int, expected: str) -> None:
        assert format_hits(hits) == expected
