from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

CACHE_DIR_ENV = "RELAY_SOURCING_CACHE_DIR"


def relay_cache_dir(cache: Optional[Path] = None) -> Path:
    """
    Directory holding relay chain binaries as "<name>-<version>".

    An explicit `cache` wins, then RELAY_SOURCING_CACHE_DIR, then
    ~/.cache/relay-sourcing. "~" is expanded in both explicit and env values.
    """
    if cache is not None:
        return Path(cache).expanduser()
    raw = (os.getenv(CACHE_DIR_ENV) or "").strip()
    if raw:
        return Path(raw).expanduser()
    return Path.home() / ".cache" / "relay-sourcing"
