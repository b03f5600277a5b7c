"""Target operating system detection."""

from __future__ import annotations

from enum import Enum
import os
import sys


PLATFORM_ENV = "FONTINDEX_PLATFORM"


class Os(str, Enum):
    WINDOWS = "windows"
    MACOS = "macos"
    IOS = "ios"
    ANDROID = "android"
    UNIX = "unix"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Os | str) -> Os:
        if isinstance(value, cls):
            return value
        text = str(value).strip().casefold()
        aliases = {"win32": "windows", "darwin": "macos", "mac": "macos", "linux": "unix"}
        try:
            return cls(aliases.get(text, text))
        except ValueError:
            raise ValueError(f"Unknown platform: {value!r}") from None


def _detect(platform: str) -> Os:
    if platform in {"win32", "cygwin", "msys"}:
        return Os.WINDOWS
    if platform == "darwin":
        return Os.MACOS
    if platform == "ios":
        return Os.IOS
    if platform == "android" or hasattr(sys, "getandroidapilevel"):
        return Os.ANDROID
    if platform.startswith(("linux", "freebsd", "openbsd", "netbsd", "sunos", "aix")):
        return Os.UNIX
    return Os.OTHER


def current_os() -> Os:
    """Return the platform whose default tables apply to this process."""
    override = os.environ.get(PLATFORM_ENV)
    if override:
        return Os.parse(override)
    return _detect(sys.platform)


__all__ = ["PLATFORM_ENV", "Os", "current_os"]
