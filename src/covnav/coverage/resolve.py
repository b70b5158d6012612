"""Decide which profile files to present."""

from collections.abc import Iterable

import structlog

from covnav.coverage.models import CoverageProfile

log = structlog.get_logger(__name__)


def resolve_files(profile: CoverageProfile, requested: Iterable[str] = ()) -> list[str]:
    """Ordered candidate files for aggregation.

    With requested files, keep those the profile knows about, in request
    order and without duplicates; unknown files (e.g. non-code files in a
    diff) are dropped silently. Without requests, every profile file is a
    candidate in profile order. An empty result is valid.
    """
    requested = list(requested)
    if not requested:
        return list(profile.files)

    resolved: list[str] = []
    seen: set[str] = set()
    for path in requested:
        if path in profile.files and path not in seen:
            seen.add(path)
            resolved.append(path)

    dropped = len(requested) - len(resolved)
    if dropped:
        log.debug("requested_files_dropped", requested=len(requested), dropped=dropped)
    return resolved
