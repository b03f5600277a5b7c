"""Entity store shared by the static and dynamic indexes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from fontindex.attributes import Attributes, CacheKey
from fontindex.data import FontData, SourceData, SourceKind
from fontindex.exceptions import UnknownSourceError
from fontindex.logging import FontIndexLogger
from fontindex.types import FamilyId, FontId, SourceId


T = TypeVar("T")


def family_key(name: str) -> str:
    """Return the case-insensitive key used by the family name map."""
    return name.lower()


def get_by_id(items: Sequence[T], ident: object) -> T | None:
    """Return ``items[ident]`` or ``None`` for ids this store never issued."""
    value = getattr(ident, "value", None)
    if not isinstance(value, int) or not 0 <= value < len(items):
        return None
    return items[value]


@dataclass(slots=True)
class BaseIndex:
    """Flat source and face storage plus the family name map.

    Storage is append-only so every issued identifier stays valid for the
    lifetime of the store.
    """

    family_map: dict[str, FamilyId] = field(default_factory=dict)
    fonts: list[FontData] = field(default_factory=list)
    sources: list[SourceData] = field(default_factory=list)
    logger: FontIndexLogger = field(default_factory=FontIndexLogger, repr=False)

    def add_source(self, kind: SourceKind) -> SourceId:
        source_id = SourceId(len(self.sources))
        self.sources.append(SourceData(id=source_id, kind=kind))
        return source_id

    def add_font(
        self,
        family: FamilyId,
        source: SourceId,
        *,
        attributes: Attributes | None = None,
        index: int = 0,
        offset: int = 0,
        key: CacheKey | None = None,
    ) -> FontId:
        if self.source(source) is None:
            raise UnknownSourceError(f"Source {source!r} is not registered in this index.")
        if index < 0 or offset < 0:
            raise ValueError("Face index and offset must be non-negative.")
        font_id = FontId(len(self.fonts))
        self.fonts.append(
            FontData(
                id=font_id,
                family=family,
                source=source,
                index=index,
                offset=offset,
                attributes=attributes or Attributes(),
                key=key or CacheKey.new(),
            )
        )
        return font_id

    def map_family(self, name: str, family: FamilyId) -> None:
        """Register ``name`` for ``family``; the last registration wins."""
        key = family_key(name)
        previous = self.family_map.get(key)
        if previous is not None and previous != family:
            self.logger.debug(
                "Family name '%s' now points to %r (was %r).", name, family, previous
            )
        self.family_map[key] = family

    def family_id(self, name: str) -> FamilyId | None:
        if not isinstance(name, str):
            return None
        return self.family_map.get(family_key(name))

    def font(self, font_id: FontId) -> FontData | None:
        return get_by_id(self.fonts, font_id) if isinstance(font_id, FontId) else None

    def source(self, source_id: SourceId) -> SourceData | None:
        return get_by_id(self.sources, source_id) if isinstance(source_id, SourceId) else None


__all__ = ["BaseIndex", "family_key", "get_by_id"]
