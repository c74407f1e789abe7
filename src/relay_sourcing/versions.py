from __future__ import annotations

import asyncio
import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

_RE_VERSION = re.compile(r"^v?([0-9]+(?:\.[0-9]+)*)")
# Whole cache entry suffix: "v1.12.0", "v1.12.0-rc1" or "v1.12.0-rc.1", never "v1.12.0.tar.gz".
_RE_CACHED_VERSION = re.compile(r"^v?[0-9]+(?:\.[0-9]+)*(?:-[0-9A-Za-z]+(?:\.[0-9]+)*)?$")


def _version_key(raw: str) -> tuple[tuple[int, ...], str]:
    m = _RE_VERSION.match(raw or "")
    if not m:
        return (), raw
    return tuple(int(x) for x in m.group(1).split(".")), raw


def cached_binary_path(cache: Path, name: str, version: str) -> Path:
    return cache / f"{name}-{version}"


def cached_versions(name: str, cache: Path) -> List[str]:
    """Versions of `name` present in the cache as binaries, newest first."""
    prefix = f"{name}-"
    try:
        entries = list(cache.iterdir())
    except (FileNotFoundError, NotADirectoryError):
        return []
    out: List[str] = []
    for p in entries:
        if not p.name.startswith(prefix):
            continue
        version = p.name[len(prefix):]
        # skips sibling binaries like "<name>-execute-worker-<version>" and leftover archives
        if not _RE_CACHED_VERSION.match(version) or not p.is_file():
            continue
        out.append(version)
    out.sort(key=_version_key, reverse=True)
    return out


def resolve_version(
    name: str,
    requested: Optional[str],
    releases: Sequence[str],
    cache: Path,
) -> Optional[str]:
    """
    Pick the version of binary `name` to use.

    Order of preference:
      1. the requested version, as given
      2. the newest release already present in the cache
      3. the newest release
      4. the newest cached version (when no releases are reachable)
    """
    if requested is not None:
        return requested
    for release in releases:
        if cached_binary_path(cache, name, release).is_file():
            return release
    if releases:
        return releases[0]
    cached = cached_versions(name, cache)
    if cached:
        logger.info(f"No releases available for {name}; using cached version {cached[0]}")
        return cached[0]
    return None


class CachedVersionResolver:
    """Default VersionResolver: prefers releases already present in the cache."""

    async def resolve_version(
        self,
        name: str,
        requested: Optional[str],
        releases: Sequence[str],
        cache: Path,
    ) -> Optional[str]:
        # Cache lookups touch the filesystem; keep them off the event loop.
        return await asyncio.to_thread(resolve_version, name, requested, releases, cache)
