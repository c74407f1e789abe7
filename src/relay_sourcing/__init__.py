from .binary import BinaryHandle, ResolvedRelay
from .cache_paths import relay_cache_dir
from .capabilities import PlatformDetector, ReleaseSource, VersionResolver
from .errors import (
    InvalidRepositoryError,
    RelaySourcingError,
    UnsupportedCommandError,
    UnsupportedPlatformError,
)
from .github import GitHubRepository, parse_repository
from .handoff import decode_resolved_relay, encode_resolved_relay
from .registry import RelayChainKind, default_relay_chain, iter_relay_chains, relay_chain_for_command
from .relay import RelayResolver
from .sources import ReleaseArchive, build_release_archive
from .versions import CachedVersionResolver, resolve_version

__all__ = [
    "BinaryHandle",
    "ResolvedRelay",
    "relay_cache_dir",
    "PlatformDetector",
    "ReleaseSource",
    "VersionResolver",
    "InvalidRepositoryError",
    "RelaySourcingError",
    "UnsupportedCommandError",
    "UnsupportedPlatformError",
    "GitHubRepository",
    "parse_repository",
    "decode_resolved_relay",
    "encode_resolved_relay",
    "RelayChainKind",
    "default_relay_chain",
    "iter_relay_chains",
    "relay_chain_for_command",
    "RelayResolver",
    "ReleaseArchive",
    "build_release_archive",
    "CachedVersionResolver",
    "resolve_version",
]
