from __future__ import annotations

from pathlib import Path
from typing import Any, Type

import msgspec

from .binary import ResolvedRelay


def _enc_hook(obj: Any) -> Any:
    if isinstance(obj, Path):
        return str(obj)
    raise NotImplementedError(f"cannot encode {type(obj).__name__}")


def _dec_hook(t: Type, obj: Any) -> Any:
    if t is Path:
        return Path(obj)
    raise NotImplementedError(f"cannot decode {t!r}")


_encoder = msgspec.json.Encoder(enc_hook=_enc_hook)
_decoder = msgspec.json.Decoder(ResolvedRelay, dec_hook=_dec_hook)


def encode_resolved_relay(resolved: ResolvedRelay) -> bytes:
    """JSON payload handed to the binary fetch subsystem."""
    return _encoder.encode(resolved)


def decode_resolved_relay(data: bytes) -> ResolvedRelay:
    return _decoder.decode(data)
