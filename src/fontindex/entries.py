"""Read-only views over the entities of an index.

Entries borrow from the index that produced them. They are cheap to create
and copy, but must not be kept beyond the lifetime of that index: once the
index is discarded the views describe data nobody maintains anymore.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from fontindex.attributes import Attributes, CacheKey, RequestedAttributes
from fontindex.base import BaseIndex
from fontindex.data import FamilyData, FileSource, FontData, MemorySource, SourceData, SourceKind
from fontindex.matching import Selector, best_match
from fontindex.types import FamilyId, FontId, GenericFamily, SourceId


FamilyKey = FamilyId | str | GenericFamily


class SourceEntry:
    """View over a font source."""

    __slots__ = ("_base", "_data")

    def __init__(self, base: BaseIndex, data: SourceData) -> None:
        self._base = base
        self._data = data

    @property
    def id(self) -> SourceId:
        return self._data.id

    @property
    def kind(self) -> SourceKind:
        return self._data.kind

    @property
    def path(self) -> Path | None:
        """Return the path of the source when it is file backed."""
        kind = self._data.kind
        return kind.path if isinstance(kind, FileSource) else None

    @property
    def data(self) -> bytes | None:
        """Return the in-memory bytes when the source is not file backed."""
        kind = self._data.kind
        return kind.data if isinstance(kind, MemorySource) else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SourceEntry):
            return NotImplemented
        return self._base is other._base and self._data.id == other._data.id

    def __hash__(self) -> int:
        return hash((id(self._base), self._data.id))

    def __repr__(self) -> str:
        return f"SourceEntry(id={int(self.id)}, kind={self.kind!r})"


class FontEntry:
    """View over one face, its family and its source."""

    __slots__ = ("_base", "_data", "_family")

    def __init__(self, base: BaseIndex, family: FamilyData, data: FontData) -> None:
        self._base = base
        self._family = family
        self._data = data

    @property
    def id(self) -> FontId:
        return self._data.id

    @property
    def family(self) -> FamilyEntry:
        return FamilyEntry(self._base, self._family)

    @property
    def family_name(self) -> str:
        return self._family.name

    @property
    def source(self) -> SourceEntry:
        return SourceEntry(self._base, self._base.sources[self._data.source.value])

    @property
    def index(self) -> int:
        """Index of the face inside its source (collections hold several)."""
        return self._data.index

    @property
    def offset(self) -> int:
        """Byte offset of the face's table directory inside its source."""
        return self._data.offset

    @property
    def attributes(self) -> Attributes:
        return self._data.attributes

    @property
    def cache_key(self) -> CacheKey:
        return self._data.key

    def _selector(self, requested: RequestedAttributes) -> Selector[FontId]:
        return (self._data.id, self._data.attributes, requested)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FontEntry):
            return NotImplemented
        return self._base is other._base and self._data.id == other._data.id

    def __hash__(self) -> int:
        return hash((id(self._base), self._data.id))

    def __repr__(self) -> str:
        return (
            f"FontEntry(id={int(self.id)}, family={self.family_name!r}, "
            f"attributes={self.attributes.describe()!r})"
        )


class FamilyEntry:
    """View over a family and its faces."""

    __slots__ = ("_base", "_data")

    def __init__(self, base: BaseIndex, data: FamilyData) -> None:
        self._base = base
        self._data = data

    @property
    def id(self) -> FamilyId:
        return self._data.id

    @property
    def name(self) -> str:
        return self._data.name

    def fonts(self) -> Iterator[FontEntry]:
        for font_id in self._data.fonts:
            data = self._base.font(font_id)
            if data is not None:
                yield FontEntry(self._base, self._data, data)

    def query(self, attributes: Attributes | None = None) -> FontEntry | None:
        """Return the face closest to ``attributes`` (normal when omitted)."""
        requested = attributes or Attributes()
        font_id = best_match(font._selector(requested) for font in self.fonts())
        if font_id is None:
            return None
        data = self._base.font(font_id)
        if data is None:
            return None
        return FontEntry(self._base, self._data, data)

    @property
    def font_count(self) -> int:
        return len(self._data.fonts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FamilyEntry):
            return NotImplemented
        return self._base is other._base and self._data.id == other._data.id

    def __hash__(self) -> int:
        return hash((id(self._base), self._data.id))

    def __repr__(self) -> str:
        return f"FamilyEntry(id={int(self.id)}, name={self.name!r}, fonts={self.font_count})"


__all__ = ["FamilyEntry", "FamilyKey", "FontEntry", "SourceEntry"]
