"""Source text lookup for the detail view.

Profile paths are module-qualified (``github.com/user/pkg/main.go``). The
module path declared in go.mod maps them back onto the working tree.
"""

from __future__ import annotations

import re
from pathlib import Path

import structlog

from covnav.coverage.profile import strip_module

log = structlog.get_logger(__name__)

_MODULE_RE = re.compile(r"^\s*module\s+(\"?)(?P<path>[^\s\"]+)\1\s*(//.*)?$")


def read_module_path(root: Path) -> str | None:
    """Module path declared in ``root/go.mod``, if there is one."""
    go_mod = root / "go.mod"
    if not go_mod.is_file():
        return None
    try:
        content = go_mod.read_text()
    except (OSError, UnicodeDecodeError) as e:
        log.warning("go_mod_unreadable", path=str(go_mod), error=str(e))
        return None
    for line in content.splitlines():
        match = _MODULE_RE.match(line)
        if match:
            return match["path"]
    return None


class SourceReader:
    """Reads source files for profile paths, relative to a root directory."""

    def __init__(self, root: Path, module_path: str | None = None) -> None:
        self.root = root
        self.module_path = module_path

    def resolve(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.root / strip_module(path, self.module_path)

    def read_lines(self, path: str) -> list[str] | None:
        """Source lines without line endings, or None if unavailable."""
        file_path = self.resolve(path)
        try:
            return file_path.read_text(errors="replace").splitlines()
        except OSError as e:
            log.debug("source_unavailable", path=str(file_path), error=str(e))
            return None
