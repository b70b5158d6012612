"""Coverage profile data model.

File-centric model: a profile maps file paths to the statement blocks
recorded for them. Per-line classification and summaries are derived
from the blocks and never stored separately.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property


class ProfileMode(str, Enum):
    """How execution counts in a profile are interpreted."""

    SET = "set"  # 0/1 presence only
    COUNT = "count"  # hit count
    ATOMIC = "atomic"  # thread-safe hit count

    @property
    def shows_counts(self) -> bool:
        """Whether hit counts carry information beyond covered/uncovered."""
        return self is not ProfileMode.SET


class LineStatus(str, Enum):
    """Classification of a single source line."""

    COVERED = "covered"
    UNCOVERED = "uncovered"
    NOT_INSTRUMENTED = "not-instrumented"


@dataclass(frozen=True, slots=True)
class StatementBlock:
    """One contiguous source range with its statement and execution counts."""

    path: str
    start_line: int
    start_col: int
    end_line: int
    end_col: int
    num_statements: int
    count: int

    @property
    def covered(self) -> bool:
        return self.count > 0

    def touches(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line


@dataclass(frozen=True, slots=True)
class LineCoverage:
    """Derived coverage for one line touched by at least one block.

    ``hits`` is the minimum execution count among the touching blocks.
    """

    status: LineStatus
    hits: int


@dataclass(eq=False)
class FileCoverage:
    """Coverage blocks for a single file, in profile order.

    Line numbers are 1-based to match source file conventions.
    """

    path: str
    blocks: list[StatementBlock] = field(default_factory=list)

    @cached_property
    def lines(self) -> dict[int, LineCoverage]:
        """Line number -> classification for every line spanned by a block.

        A line is uncovered as soon as one touching block never ran;
        its hit count is the minimum across touching blocks.
        """
        min_hits: dict[int, int] = {}
        for block in self.blocks:
            for line in range(block.start_line, block.end_line + 1):
                current = min_hits.get(line)
                if current is None or block.count < current:
                    min_hits[line] = block.count
        return {
            line: LineCoverage(
                status=LineStatus.COVERED if hits > 0 else LineStatus.UNCOVERED,
                hits=hits,
            )
            for line, hits in sorted(min_hits.items())
        }

    def line(self, line_number: int) -> LineCoverage:
        """Classification for any line, including ones no block touches."""
        return self.lines.get(
            line_number, LineCoverage(status=LineStatus.NOT_INSTRUMENTED, hits=0)
        )

    @property
    def last_line(self) -> int:
        """Highest line number spanned by any block (0 if none)."""
        return max((b.end_line for b in self.blocks), default=0)

    @property
    def statements(self) -> int:
        """Total number of statements recorded for this file."""
        return sum(b.num_statements for b in self.blocks)

    @property
    def covered_statements(self) -> int:
        """Number of statements in blocks that executed at least once."""
        return sum(b.num_statements for b in self.blocks if b.covered)

    @property
    def percentage(self) -> float:
        """Percentage of statements covered (0.0 to 100.0, 0 when empty)."""
        total = self.statements
        if total == 0:
            return 0.0
        return 100.0 * self.covered_statements / total

    @property
    def uncovered_lines(self) -> list[int]:
        """Sorted list of uncovered line numbers."""
        return [n for n, lc in self.lines.items() if lc.status is LineStatus.UNCOVERED]


@dataclass(eq=False)
class CoverageProfile:
    """A parsed coverage profile.

    Files are keyed by path in first-seen order.
    """

    mode: ProfileMode
    files: dict[str, FileCoverage] = field(default_factory=dict)

    def add_block(self, block: StatementBlock) -> None:
        file_cov = self.files.get(block.path)
        if file_cov is None:
            file_cov = self.files[block.path] = FileCoverage(path=block.path)
        file_cov.blocks.append(block)

    def __contains__(self, path: object) -> bool:
        return path in self.files

    def __len__(self) -> int:
        return len(self.files)

    @property
    def statements(self) -> int:
        return sum(f.statements for f in self.files.values())

    @property
    def covered_statements(self) -> int:
        return sum(f.covered_statements for f in self.files.values())

    @property
    def percentage(self) -> float:
        """Overall statement coverage across every file."""
        total = self.statements
        if total == 0:
            return 0.0
        return 100.0 * self.covered_statements / total
