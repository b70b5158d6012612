"""Tests for go.mod lookup and source reading."""

from collections.abc import Callable
from pathlib import Path

import pytest

from covnav.source import SourceReader, read_module_path


class TestReadModulePath:
    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            ("module example.com/demo\n\ngo 1.21\n", "example.com/demo"),
            ('module "example.com/quoted"\n', "example.com/quoted"),
            ("// comment\nmodule example.com/x // trailing\n", "example.com/x"),
            ("go 1.21\n", None),
        ],
    )
    def test_parses_module_line(
        self,
        write_file: Callable[[str, str], Path],
        tmp_path: Path,
        content: str,
        expected: str | None,
    ) -> None:
        write_file("go.mod", content)

        assert read_module_path(tmp_path) == expected

    def test_no_go_mod(self, tmp_path: Path) -> None:
        assert read_module_path(tmp_path) is None


class TestSourceReader:
    def test_reads_module_relative_path(
        self, write_file: Callable[[str, str], Path], tmp_path: Path
    ) -> None:
        write_file("pkg/a.go", "package pkg\n\nfunc A() {}\n")
        reader = SourceReader(tmp_path, "example.com/demo")

        assert reader.read_lines("example.com/demo/pkg/a.go") == ["package pkg", "", "func A() {}"]
        assert reader.read_lines("pkg/a.go") == ["package pkg", "", "func A() {}"]

    def test_absolute_path_used_as_is(
        self, write_file: Callable[[str, str], Path], tmp_path: Path
    ) -> None:
        path = write_file("abs.go", "package abs\n")
        reader = SourceReader(tmp_path / "elsewhere")

        assert reader.read_lines(str(path)) == ["package abs"]

    def test_missing_file_returns_none(self, tmp_path: Path) -> None:
        assert SourceReader(tmp_path).read_lines("nope.go") is None
