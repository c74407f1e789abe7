from __future__ import annotations

import json
from pathlib import Path

import msgspec
import pytest

from relay_sourcing.binary import BinaryHandle, ResolvedRelay
from relay_sourcing.handoff import decode_resolved_relay, encode_resolved_relay
from relay_sourcing.sources import ReleaseArchive


def _resolved() -> ResolvedRelay:
    source = ReleaseArchive(
        owner="r0gue-io",
        repository="polkadot",
        tag="v1.12.0",
        tag_format="polkadot-{tag}",
        archive="polkadot-aarch64-apple-darwin.tar.gz",
        contents=("polkadot", "polkadot-execute-worker", "polkadot-prepare-worker"),
        latest=None,
    )
    return ResolvedRelay(
        binary=BinaryHandle(name="polkadot", source=source, cache=Path("/tmp/relay-cache")),
        workers=("polkadot-execute-worker", "polkadot-prepare-worker"),
    )


def test_encode_resolved_relay_shape() -> None:
    payload = json.loads(encode_resolved_relay(_resolved()))
    assert payload["binary"]["name"] == "polkadot"
    assert payload["binary"]["cache"] == "/tmp/relay-cache"
    assert payload["binary"]["source"]["tag"] == "v1.12.0"
    assert payload["binary"]["source"]["latest"] is None
    assert payload["workers"] == ["polkadot-execute-worker", "polkadot-prepare-worker"]


def test_decode_restores_resolved_relay() -> None:
    r = _resolved()
    out = decode_resolved_relay(encode_resolved_relay(r))
    assert out == r
    assert isinstance(out.binary.cache, Path)


def test_decode_rejects_incomplete_payload() -> None:
    with pytest.raises(msgspec.ValidationError):
        decode_resolved_relay(b'{"binary": {"name": "polkadot"}, "workers": []}')
