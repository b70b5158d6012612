"""Changed-line filter built from piped input.

Piped input is either a unified diff or a plain list of file paths.
parse_stdin() tries the diff reading first and falls back to the file
list; it never fails:

    git diff main | covnav            -> DiffInput (changed lines per file)
    git diff --name-only | covnav     -> FileListInput (requested files only)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import structlog
from unidiff import PatchSet
from unidiff.errors import UnidiffParseError

log = structlog.get_logger(__name__)

DEFAULT_SOURCE_EXTENSION = ".go"
_DEV_NULL = "/dev/null"


@dataclass(frozen=True)
class DiffFilter:
    """Immutable mapping of file path -> changed (added) new-side line numbers."""

    _lines: Mapping[str, frozenset[int]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {path: frozenset(lines) for path, lines in self._lines.items() if lines}
        object.__setattr__(self, "_lines", MappingProxyType(frozen))

    @classmethod
    def from_lines(cls, lines: Mapping[str, Iterable[int]]) -> DiffFilter:
        return cls({path: frozenset(nums) for path, nums in lines.items()})

    def __contains__(self, path: object) -> bool:
        return path in self._lines

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    def lines_for(self, path: str) -> frozenset[int] | None:
        """Changed lines for a file, or None when no filter applies to it."""
        return self._lines.get(path)

    def is_visible(self, path: str, line: int) -> bool:
        lines = self._lines.get(path)
        return lines is None or line in lines

    def as_dict(self) -> dict[str, list[int]]:
        return {path: sorted(lines) for path, lines in self._lines.items()}


@dataclass(frozen=True)
class DiffInput:
    """Input was a unified diff."""

    requested_files: tuple[str, ...]
    diff_filter: DiffFilter


@dataclass(frozen=True)
class FileListInput:
    """Input was not a diff; each non-empty line names a requested file."""

    requested_files: tuple[str, ...]

    @property
    def diff_filter(self) -> DiffFilter:
        return DiffFilter()


StdinInput = DiffInput | FileListInput


def _new_path(target_file: str) -> str:
    if target_file.startswith("b/"):
        return target_file[2:]
    return target_file


def parse_diff(text: str, *, source_extension: str = DEFAULT_SOURCE_EXTENSION) -> DiffInput | None:
    """Parse unified diff text, or return None when the text is not a diff.

    Only lines added on the new side count as changed. Files without such
    lines, and files without the source extension, get no filter entry but
    still appear in ``requested_files`` (deleted files excepted).
    """
    try:
        patch = PatchSet(text)
    except UnidiffParseError:
        return None
    if len(patch) == 0:
        return None

    requested: list[str] = []
    changed: dict[str, set[int]] = {}
    for patched_file in patch:
        if patched_file.target_file == _DEV_NULL:
            continue
        path = _new_path(patched_file.target_file)
        requested.append(path)
        if not path.endswith(source_extension):
            continue
        for hunk in patched_file:
            for line in hunk:
                if line.is_added and line.target_line_no is not None:
                    changed.setdefault(path, set()).add(line.target_line_no)

    return DiffInput(requested_files=tuple(requested), diff_filter=DiffFilter.from_lines(changed))


def split_file_list(text: str) -> tuple[str, ...]:
    """Non-empty lines of text, with carriage returns removed."""
    lines = (line.rstrip("\r").strip() for line in text.replace("\r\n", "\n").split("\n"))
    return tuple(line for line in lines if line)


def parse_stdin(text: str, *, source_extension: str = DEFAULT_SOURCE_EXTENSION) -> StdinInput:
    """Interpret piped input as a diff, falling back to a file list."""
    diff = parse_diff(text, source_extension=source_extension)
    if diff is not None:
        log.info(
            "diff_parsed",
            files=len(diff.requested_files),
            filtered_files=len(diff.diff_filter),
        )
        return diff

    files = split_file_list(text)
    log.info("stdin_fallback_file_list", files=len(files))
    return FileListInput(requested_files=files)
