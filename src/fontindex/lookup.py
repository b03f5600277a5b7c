"""Lookup surface shared by the static and dynamic indexes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fontindex.attributes import Attributes
from fontindex.base import BaseIndex
from fontindex.data import FamilyData
from fontindex.entries import FamilyEntry, FamilyKey, FontEntry, SourceEntry
from fontindex.types import FamilyId, FontId, GenericFamily, SourceId


class FamilyLookup(ABC):
    """Family, face and query lookups over the private ``_base`` store.

    Subclasses supply family storage through ``_family_data`` and, when they
    maintain one, the generic family table through ``generic_family_id``.
    Every lookup answers ``None`` for unknown names or identifiers.
    """

    _base: BaseIndex

    @abstractmethod
    def _family_data(self, family_id: FamilyId) -> FamilyData | None:
        """Return the record of ``family_id`` or ``None`` when it is unknown."""

    def generic_family_id(self, generic: GenericFamily) -> FamilyId | None:
        return None

    @property
    def font_count(self) -> int:
        return len(self._base.fonts)

    @property
    def source_count(self) -> int:
        return len(self._base.sources)

    def family_id(self, name: str) -> FamilyId | None:
        """Return the family currently registered under ``name``."""
        return self._base.family_id(name)

    def family_by_key(self, key: FamilyKey) -> FamilyEntry | None:
        """Resolve a family from an id, a name or a generic family."""
        if isinstance(key, GenericFamily):
            family_id = self.generic_family_id(key)
            return self.family_by_id(family_id) if family_id is not None else None
        if isinstance(key, FamilyId):
            return self.family_by_id(key)
        if isinstance(key, str):
            return self.family_by_name(key)
        raise TypeError(f"Unsupported family key: {key!r}")

    def family_by_name(self, name: str) -> FamilyEntry | None:
        family_id = self._base.family_id(name)
        if family_id is None:
            return None
        return self.family_by_id(family_id)

    def family_by_id(self, family_id: FamilyId) -> FamilyEntry | None:
        if not isinstance(family_id, FamilyId):
            return None
        data = self._family_data(family_id)
        if data is None:
            return None
        return FamilyEntry(self._base, data)

    def font_by_id(self, font_id: FontId) -> FontEntry | None:
        data = self._base.font(font_id)
        if data is None:
            return None
        family = self._family_data(data.family)
        if family is None:
            return None
        return FontEntry(self._base, family, data)

    def source_by_id(self, source_id: SourceId) -> SourceEntry | None:
        data = self._base.source(source_id)
        if data is None:
            return None
        return SourceEntry(self._base, data)

    def query(
        self, family: FamilyKey, attributes: Attributes | None = None
    ) -> FontEntry | None:
        """Return the face of ``family`` closest to ``attributes``."""
        entry = self.family_by_key(family)
        if entry is None:
            return None
        return entry.query(attributes)


__all__ = ["FamilyLookup"]
