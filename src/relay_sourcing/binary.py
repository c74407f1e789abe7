from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .sources import ReleaseArchive
from .versions import cached_binary_path


@dataclass(frozen=True)
class BinaryHandle:
    """The binary `name`, obtainable via `source`, stored under `cache`."""

    name: str
    source: ReleaseArchive
    cache: Path

    @property
    def version(self) -> Optional[str]:
        return self.source.tag

    @property
    def latest(self) -> Optional[str]:
        return self.source.latest

    @property
    def path(self) -> Path:
        if self.version is None:
            return self.cache / self.name
        return cached_binary_path(self.cache, self.name, self.version)

    @property
    def stale(self) -> bool:
        # Only meaningful when the version was picked automatically.
        return self.latest is not None and self.latest != self.version

    def exists(self) -> bool:
        return self.path.exists()


@dataclass(frozen=True)
class ResolvedRelay:
    binary: BinaryHandle
    workers: tuple[str, ...]
