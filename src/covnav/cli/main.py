"""covnav CLI - browse Go coverage in the terminal.

If provided, stdin is expected to be a diff or a list of files, for example:

    git diff main | covnav
    git diff --name-only | covnav
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import IO, Any

import click
import structlog

from covnav import __version__
from covnav.config.loader import load_config
from covnav.core.errors import CovNavError
from covnav.core.logging import configure_logging
from covnav.coverage.profile import load_profile
from covnav.diff.filter import FileListInput, StdinInput, parse_stdin
from covnav.engine import CoverageEngine
from covnav.source import SourceReader, read_module_path
from covnav.tui.app import CoverageApp

log = structlog.get_logger(__name__)


def read_piped_input(stream: IO[str]) -> str | None:
    """Contents of stdin when it is redirected, None for an interactive terminal."""
    if stream.isatty():
        return None
    return stream.read()


def attach_terminal_stdin(tty_path: str = "/dev/tty") -> bool:
    """Point fd 0 back at the controlling terminal once piped input is consumed.

    The terminal front end reads keys from fd 0, which is the spent pipe
    after a diff was piped in. Returns False when there is no terminal.
    """
    try:
        fd = os.open(tty_path, os.O_RDONLY)
    except OSError as e:
        log.warning("terminal_unavailable", path=tty_path, error=str(e))
        return False
    try:
        os.dup2(fd, 0)
    finally:
        os.close(fd)
    return True


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="covnav")
@click.argument("files", nargs=-1)
@click.option(
    "--profile",
    "profile_filename",
    default=None,
    help="File name of coverage profile generated by go test -coverprofile coverage.out",
)
@click.option(
    "--sort-by-coverage",
    is_flag=True,
    help="Sort files by coverage instead of alphabetically",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write debug logs to this file",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(
    files: tuple[str, ...],
    profile_filename: str | None,
    sort_by_coverage: bool,
    log_file: Path | None,
    verbose: bool,
) -> None:
    """Go coverage in your terminal.

    FILES restrict the view to the given files; more can be piped in on stdin.
    """
    viewer: dict[str, Any] = {}
    if profile_filename:
        viewer["profile_filename"] = profile_filename
    if sort_by_coverage:
        viewer["sort_by_coverage"] = True

    try:
        config = load_config(**({"viewer": viewer} if viewer else {}))
    except CovNavError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config, log_file=log_file)

    root = Path.cwd()
    module_path = read_module_path(root) if config.viewer.strip_module_prefix else None

    try:
        profile = load_profile(Path(config.viewer.profile_filename), module_path=module_path)
    except CovNavError as e:
        log.error("profile_load_failed", error=e.error_name, details=e.details)
        raise click.ClickException(str(e)) from e

    piped = read_piped_input(sys.stdin)
    parsed: StdinInput = (
        parse_stdin(piped, source_extension=config.viewer.source_extension)
        if piped is not None
        else FileListInput(requested_files=())
    )

    engine = CoverageEngine.build(
        profile,
        requested_files=[*files, *parsed.requested_files],
        diff_filter=parsed.diff_filter,
        sort_by_coverage=config.viewer.sort_by_coverage,
        source_reader=SourceReader(root, module_path),
    )

    if piped is not None:
        attach_terminal_stdin()
    CoverageApp(engine.navigator(), mode=profile.mode).run()


if __name__ == "__main__":
    cli()
