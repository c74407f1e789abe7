from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .capabilities import PlatformDetector
from .errors import UnsupportedPlatformError
from .github import GITHUB_HOST, parse_repository
from .registry import RelayChainKind

TAG_PLACEHOLDER = "{tag}"


@dataclass(frozen=True)
class ReleaseArchive:
    """A release asset (tar.gz) published on GitHub, holding one or more binaries."""

    owner: str
    repository: str
    tag: Optional[str]
    tag_format: Optional[str]
    archive: str
    contents: tuple[str, ...]
    latest: Optional[str] = None

    @property
    def release_tag(self) -> Optional[str]:
        if self.tag is None:
            return None
        if self.tag_format:
            return self.tag_format.replace(TAG_PLACEHOLDER, self.tag)
        return self.tag

    @property
    def download_url(self) -> str:
        base = f"https://{GITHUB_HOST}/{self.owner}/{self.repository}/releases"
        tag = self.release_tag
        if tag is None:
            return f"{base}/latest/download/{self.archive}"
        return f"{base}/download/{tag}/{self.archive}"


def archive_name(binary_name: str, target_triple: str) -> str:
    return f"{binary_name}-{target_triple}.tar.gz"


def build_release_archive(
    kind: RelayChainKind,
    tag: Optional[str],
    latest: Optional[str],
    *,
    platform: PlatformDetector,
) -> ReleaseArchive:
    """
    Describe the release archive for a relay chain.

    `tag` and `latest` are passed through as given; deciding whether a
    version is the latest one is up to the caller.
    """
    repo = parse_repository(kind.repository_url)
    triple = (platform.target_triple() or "").strip()
    if not triple:
        raise UnsupportedPlatformError()
    return ReleaseArchive(
        owner=repo.owner,
        repository=repo.name,
        tag=tag,
        tag_format=kind.tag_format,
        archive=archive_name(kind.binary_name, triple),
        contents=(kind.binary_name, *kind.worker_binaries),
        latest=latest,
    )
