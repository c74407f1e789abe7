from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True)
class RelayChainInfo:
    repository_url: str
    binary_name: str
    tag_format: Optional[str]  # contains a "{tag}" placeholder
    fallback_version: str
    worker_binaries: tuple[str, ...] = ()


class RelayChainKind(enum.Enum):
    """Supported relay chain node implementations, in match order."""

    POLKADOT = "polkadot"

    @property
    def info(self) -> RelayChainInfo:
        return _RELAY_CHAINS[self]

    @property
    def repository_url(self) -> str:
        return self.info.repository_url

    @property
    def binary_name(self) -> str:
        return self.info.binary_name

    @property
    def tag_format(self) -> Optional[str]:
        return self.info.tag_format

    @property
    def fallback_version(self) -> str:
        return self.info.fallback_version

    @property
    def worker_binaries(self) -> tuple[str, ...]:
        return self.info.worker_binaries


_RELAY_CHAINS: dict[RelayChainKind, RelayChainInfo] = {
    RelayChainKind.POLKADOT: RelayChainInfo(
        repository_url="https://github.com/r0gue-io/polkadot",
        binary_name="polkadot",
        tag_format="polkadot-{tag}",
        fallback_version="v1.12.0",
        worker_binaries=("polkadot-execute-worker", "polkadot-prepare-worker"),
    ),
}


def iter_relay_chains() -> Iterator[RelayChainKind]:
    return iter(RelayChainKind)


def default_relay_chain() -> RelayChainKind:
    return RelayChainKind.POLKADOT


def relay_chain_for_command(command: str) -> Optional[RelayChainKind]:
    """
    Find the relay chain a command refers to.

    The command may be a bare binary name or a path ending in one
    (e.g. "./bin-v1.6.0/polkadot"). Matching is a case-insensitive suffix
    check; the first member in declaration order wins.
    """
    low = (command or "").lower()
    for kind in iter_relay_chains():
        if low.endswith(kind.binary_name):
            return kind
    return None
