"""Index for fonts registered while the application runs.

Families live in shared :class:`~fontindex.data.FamilyData` handles: a
handle obtained from :meth:`DynamicIndex.family_handle` stays usable for as
long as its holder keeps it, independently of the index. Dynamic indexes do
not derive fallback tables and never resolve generic families; lookups go
through explicit names and identifiers only.

Registration is not synchronised. Callers sharing an index between threads
must serialise writers.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from fontindex.attributes import Attributes, CacheKey
from fontindex.base import BaseIndex, family_key
from fontindex.data import FamilyData, source_kind
from fontindex.enumerator import FontRecord
from fontindex.exceptions import UnknownSourceError
from fontindex.logging import FontIndexLogger
from fontindex.lookup import FamilyLookup
from fontindex.types import FamilyId, SourceId


@dataclass(frozen=True, slots=True)
class FaceSpec:
    """Description of one face handed to :meth:`DynamicIndex.register_family`."""

    source: SourceId
    attributes: Attributes = Attributes()
    index: int = 0
    offset: int = 0
    key: CacheKey | None = None


def _check_family_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("Family names must not be empty.")


def _check_face_position(index: int, offset: int) -> None:
    if index < 0 or offset < 0:
        raise ValueError("Face index and offset must be non-negative.")


class DynamicIndex(FamilyLookup):
    """Incrementally populated index keyed by family name and identifier."""

    def __init__(self, *, logger: FontIndexLogger | None = None) -> None:
        self.logger = logger or FontIndexLogger()
        self._base = BaseIndex(logger=self.logger)
        self._families: list[FamilyData] = []

    @property
    def families(self) -> tuple[FamilyData, ...]:
        return tuple(self._families)

    def register_source(self, source: bytes | str | Path) -> SourceId:
        return self._base.add_source(source_kind(source))

    def register_family(self, name: str, faces: Iterable[FaceSpec]) -> FamilyId:
        """Add a family with ``faces``; the name now resolves to it.

        Every face is validated before anything is stored, so a face that
        references an unknown source leaves the index untouched.
        """
        _check_family_name(name)
        faces = list(faces)
        for face in faces:
            if self._base.source(face.source) is None:
                raise UnknownSourceError(
                    f"Source {face.source!r} is not registered in this index."
                )
            _check_face_position(face.index, face.offset)

        family_id = FamilyId(len(self._families))
        font_ids = tuple(
            self._base.add_font(
                family_id,
                face.source,
                attributes=face.attributes,
                index=face.index,
                offset=face.offset,
                key=face.key,
            )
            for face in faces
        )
        self._families.append(FamilyData(id=family_id, name=name, fonts=font_ids))
        self._base.map_family(name, family_id)
        self.logger.debug("Registered family '%s' with %d faces.", name, len(font_ids))
        return family_id

    def register_records(self, records: Iterable[FontRecord]) -> list[FamilyId]:
        """Register enumerated faces, one family per distinct name.

        Names are grouped case-insensitively and families are created in the
        order their first face appears. Every record is checked before the
        first source is stored, so a rejected record leaves the index untouched.
        """
        grouped: dict[str, tuple[str, list[FontRecord]]] = {}
        for record in records:
            _check_family_name(record.family)
            _check_face_position(record.index, record.offset)
            source_kind(record.source)
            key = family_key(record.family)
            if key not in grouped:
                grouped[key] = (record.family, [])
            grouped[key][1].append(record)

        file_sources: dict[Path, SourceId] = {}
        family_ids = []
        for name, members in grouped.values():
            faces = []
            for record in members:
                if isinstance(record.source, Path):
                    source_id = file_sources.get(record.source)
                    if source_id is None:
                        source_id = self.register_source(record.source)
                        file_sources[record.source] = source_id
                else:
                    source_id = self.register_source(record.source)
                faces.append(
                    FaceSpec(
                        source=source_id,
                        attributes=record.attributes,
                        index=record.index,
                        offset=record.offset,
                    )
                )
            family_ids.append(self.register_family(name, faces))
        return family_ids

    def family_handle(self, family_id: FamilyId) -> FamilyData | None:
        """Return the shared family record behind ``family_id``."""
        if not isinstance(family_id, FamilyId):
            return None
        return self._family_data(family_id)

    def _family_data(self, family_id: FamilyId) -> FamilyData | None:
        if 0 <= family_id.value < len(self._families):
            return self._families[family_id.value]
        return None

    def __repr__(self) -> str:
        return f"DynamicIndex(families={len(self._families)}, fonts={len(self._base.fonts)})"


__all__ = ["DynamicIndex", "FaceSpec"]
