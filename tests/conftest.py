"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

SAMPLE_PROFILE = """mode: count
example.com/demo/a.go:3.13,5.2 4 3
example.com/demo/a.go:7.20,9.2 1 0
example.com/demo/b.go:1.1,2.10 1 0
example.com/demo/b.go:4.1,6.2 4 1
example.com/demo/c.go:10.1,12.2 2 5
"""


@pytest.fixture
def sample_profile_text() -> str:
    """Three-file count-mode profile under module example.com/demo.

    a.go: 4/5 statements covered (80%)
    b.go: 4/5 statements covered (80%)
    c.go: 2/2 statements covered (100%)
    """
    return SAMPLE_PROFILE


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory writing text to a file below tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_structlog() -> None:
    """Start every test from structlog defaults."""
    structlog.reset_defaults()
