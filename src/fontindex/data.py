"""Raw entity records owned by the indexes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fontindex.attributes import Attributes, CacheKey
from fontindex.types import FamilyId, FontId, SourceId


@dataclass(frozen=True, slots=True)
class MemorySource:
    """Font bytes held in memory (embedded or downloaded fonts)."""

    data: bytes

    def __repr__(self) -> str:
        return f"MemorySource(<{len(self.data)} bytes>)"


@dataclass(frozen=True, slots=True)
class FileSource:
    """Font bytes backed by a file on disk."""

    path: Path


SourceKind = MemorySource | FileSource


def source_kind(source: bytes | bytearray | memoryview | str | Path) -> SourceKind:
    """Wrap raw bytes or a path into the matching source kind."""
    if isinstance(source, (bytes, bytearray, memoryview)):
        return MemorySource(bytes(source))
    if isinstance(source, (str, Path)):
        return FileSource(Path(source).expanduser().resolve())
    raise TypeError(f"Unsupported font source: {type(source).__name__}")


@dataclass(frozen=True, slots=True)
class SourceData:
    id: SourceId
    kind: SourceKind


@dataclass(frozen=True, slots=True)
class FontData:
    """One selectable face.

    ``index`` is the face index inside a collection file and ``offset`` the
    byte offset of the face's table directory within the source.
    """

    id: FontId
    family: FamilyId
    source: SourceId
    index: int
    offset: int
    attributes: Attributes
    key: CacheKey


@dataclass(frozen=True, slots=True)
class FamilyData:
    """A named group of faces; ``fonts`` keeps registration order."""

    id: FamilyId
    name: str
    fonts: tuple[FontId, ...] = field(default_factory=tuple)


__all__ = [
    "FamilyData",
    "FileSource",
    "FontData",
    "MemorySource",
    "SourceData",
    "SourceKind",
    "source_kind",
]
