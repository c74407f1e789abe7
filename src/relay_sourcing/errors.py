from __future__ import annotations

from typing import Optional


class RelaySourcingError(RuntimeError):
    pass


class UnsupportedCommandError(RelaySourcingError):
    """No supported relay chain binary name is a suffix of the command."""

    def __init__(self, command: str) -> None:
        super().__init__(f"the relay chain command is unsupported: {command}")
        self.command = command


class InvalidRepositoryError(RelaySourcingError):
    def __init__(self, url: str) -> None:
        super().__init__(f"invalid github repository url: {url!r}")
        self.url = url


class UnsupportedPlatformError(RelaySourcingError):
    def __init__(self, *, arch: Optional[str] = None, os: Optional[str] = None) -> None:
        detail = ", ".join(f"{k}={v}" for k, v in (("arch", arch), ("os", os)) if v)
        msg = "unsupported platform: could not determine target triple"
        super().__init__(f"{msg} ({detail})" if detail else msg)
        self.arch = arch
        self.os = os
