"""Go coverage profile parser.

Go test produces coverage profiles with format:
mode: set|count|atomic
<package>/<file>:<startline>.<startcol>,<endline>.<endcol> <numstmt> <count>

Example:
mode: set
github.com/user/pkg/main.go:10.2,12.16 3 1
github.com/user/pkg/main.go:15.2,20.16 5 0

- mode: set (0/1), count (hit count), atomic (thread-safe count)
- numstmt: number of statements in block (at least 1)
- count: execution count (0 = not covered)

Unlike a lenient reader, every block line must match the grammar; the
first line that does not aborts parsing with ProfileError.malformed.
"""

import re
from dataclasses import replace
from pathlib import Path

import structlog

from covnav.core.errors import ProfileError
from covnav.coverage.models import CoverageProfile, ProfileMode, StatementBlock

log = structlog.get_logger(__name__)

_MODE_PREFIX = "mode:"
_BLOCK_RE = re.compile(
    r"^(?P<path>.+):(?P<start_line>\d+)\.(?P<start_col>\d+),"
    r"(?P<end_line>\d+)\.(?P<end_col>\d+) (?P<num_statements>\d+) (?P<count>\d+)$"
)


def parse_mode(line: str) -> ProfileMode:
    """Parse the leading ``mode: <mode>`` declaration."""
    stripped = line.strip()
    if not stripped.startswith(_MODE_PREFIX):
        raise ProfileError.malformed(1, line, "missing mode line")
    value = stripped[len(_MODE_PREFIX) :].strip()
    try:
        return ProfileMode(value)
    except ValueError:
        raise ProfileError.malformed(1, line, f"unknown mode {value!r}") from None


def parse_block(line: str, line_number: int) -> StatementBlock:
    """Parse one ``path:start.col,end.col numstmt count`` record."""
    match = _BLOCK_RE.match(line)
    if match is None:
        raise ProfileError.malformed(line_number, line, "expected path:l.c,l.c stmts count")

    block = StatementBlock(
        path=match["path"],
        start_line=int(match["start_line"]),
        start_col=int(match["start_col"]),
        end_line=int(match["end_line"]),
        end_col=int(match["end_col"]),
        num_statements=int(match["num_statements"]),
        count=int(match["count"]),
    )

    if block.num_statements < 1:
        raise ProfileError.malformed(line_number, line, "statement count must be at least 1")
    if (block.end_line, block.end_col) < (block.start_line, block.start_col):
        raise ProfileError.malformed(line_number, line, "block ends before it starts")
    return block


def strip_module(path: str, module_path: str | None) -> str:
    """Rewrite ``<module>/pkg/file.go`` to ``pkg/file.go``."""
    if module_path:
        prefix = module_path.rstrip("/") + "/"
        if path.startswith(prefix):
            return path[len(prefix) :]
    return path


def parse_profile(text: str, *, module_path: str | None = None) -> CoverageProfile:
    """Parse coverage profile text into a CoverageProfile.

    Blocks referencing the same file accumulate in encounter order. A
    profile holding only the mode line is valid and has no files.

    Args:
        text: Full profile text.
        module_path: Module path to strip from file paths, if known.

    Raises:
        ProfileError: On the first line that does not match the grammar.
    """
    lines = text.splitlines()
    if not lines:
        raise ProfileError.malformed(1, "", "missing mode line")

    profile = CoverageProfile(mode=parse_mode(lines[0]))

    for line_number, raw in enumerate(lines[1:], start=2):
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        block = parse_block(line, line_number)
        if module_path:
            block = replace(block, path=strip_module(block.path, module_path))
        profile.add_block(block)

    log.debug("profile_parsed", mode=profile.mode.value, files=len(profile.files))
    return profile


def load_profile(path: Path, *, module_path: str | None = None) -> CoverageProfile:
    """Read and parse a coverage profile file."""
    if not path.is_file():
        raise ProfileError.file_not_found(str(path))

    try:
        content = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise ProfileError.unreadable(str(path), str(e)) from e

    return parse_profile(content, module_path=module_path)
