from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Sequence

from .registry import RelayChainKind


class ReleaseSource(Protocol):
    """Lists the published releases of a relay chain, newest first."""

    async def releases(self, kind: RelayChainKind) -> Sequence[str]:
        ...


class VersionResolver(Protocol):
    async def resolve_version(
        self,
        name: str,
        requested: Optional[str],
        releases: Sequence[str],
        cache: Path,
    ) -> Optional[str]:
        ...


class PlatformDetector(Protocol):
    def target_triple(self) -> Optional[str]:
        """Target triple of the host (e.g. "x86_64-unknown-linux-gnu"), or None if unsupported."""
        ...
