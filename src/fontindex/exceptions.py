"""Exception hierarchy for index construction and configuration.

Lookups never raise: absence is reported as ``None`` or an empty tuple.
These exceptions cover programming and configuration mistakes only.
"""

from __future__ import annotations


class FontIndexError(RuntimeError):
    """Base exception for font index failures."""


class UnknownSourceError(FontIndexError, LookupError):
    """Raised when a face references a source that was never registered."""


class UnknownFamilyError(FontIndexError, LookupError):
    """Raised when a face references a family that was never registered."""


class ProfileError(FontIndexError):
    """Raised when a fallback profile file cannot be loaded or validated."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "FontIndexError",
    "ProfileError",
    "UnknownFamilyError",
    "UnknownSourceError",
    "exception_hint",
    "exception_messages",
]
