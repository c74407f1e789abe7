from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .binary import BinaryHandle, ResolvedRelay
from .cache_paths import relay_cache_dir
from .capabilities import PlatformDetector, ReleaseSource, VersionResolver
from .errors import UnsupportedCommandError
from .registry import default_relay_chain, relay_chain_for_command
from .sources import build_release_archive
from .versions import CachedVersionResolver

logger = logging.getLogger(__name__)


class RelayResolver:
    """
    Resolve the relay chain binary to launch a network with.

    Release listing, version resolution and platform detection are injected;
    the resolver itself performs no I/O.
    """

    def __init__(
        self,
        releases: ReleaseSource,
        platform: PlatformDetector,
        versions: Optional[VersionResolver] = None,
    ) -> None:
        self._releases = releases
        self._platform = platform
        self._versions: VersionResolver = versions if versions is not None else CachedVersionResolver()

    async def resolve_default(
        self,
        version: Optional[str] = None,
        cache: Optional[Path] = None,
    ) -> ResolvedRelay:
        return await self.resolve_command(default_relay_chain().binary_name, version, cache)

    async def resolve_command(
        self,
        command: str,
        version: Optional[str] = None,
        cache: Optional[Path] = None,
    ) -> ResolvedRelay:
        """
        Resolve a relay chain from a command, e.g. "polkadot" or "./bin-v1.6.0/polkadot".

        Raises UnsupportedCommandError when no supported relay chain matches.
        Errors from the release source or version resolver propagate unchanged.
        """
        kind = relay_chain_for_command(command)
        if kind is None:
            logger.warning(f"Unsupported relay chain command: {command!r}")
            raise UnsupportedCommandError(command)
        cache = relay_cache_dir(cache)

        name = kind.binary_name
        releases = list(await self._releases.releases(kind))
        tag = await self._versions.resolve_version(name, version, releases, cache)
        # Only mark the latest release when the caller did not pin a version.
        latest = releases[0] if version is None and releases else None
        logger.debug(
            f"Resolved relay chain {kind.name} from {command!r}: "
            f"releases={len(releases)} tag={tag} latest={latest}"
        )

        source = build_release_archive(kind, tag, latest, platform=self._platform)
        binary = BinaryHandle(name=name, source=source, cache=cache)
        return ResolvedRelay(binary=binary, workers=kind.worker_binaries)
