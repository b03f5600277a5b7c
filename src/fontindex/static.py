"""Read-only font index built once from the installed system fonts.

The :class:`StaticIndex` owns the entity store plus three tables derived at
construction time from a :class:`~fontindex.profile.FallbackProfile`:

- ``cjk``: one fallback set per CJK variant, the ``NONE`` slot mirroring
  ``TRADITIONAL``;
- ``script_map``: one fallback set per script with at least one installed
  candidate (Han is served by ``cjk`` instead);
- ``generic``: the first installed candidate of each generic family.

Indexes are assembled through :class:`StaticIndexBuilder`::

    builder = StaticIndexBuilder()
    builder.add_font("Noto Sans", Path("NotoSans-Regular.ttf"))
    index = builder.build(platform="unix")
    index.fallbacks(Script.LATIN)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from fontindex.attributes import Attributes, CacheKey
from fontindex.base import BaseIndex, family_key
from fontindex.data import FamilyData, FileSource, source_kind
from fontindex.entries import FamilyEntry
from fontindex.enumerator import FontRecord, discover_system_fonts
from fontindex.exceptions import FontIndexError, UnknownFamilyError
from fontindex.fallback import Fallbacks
from fontindex.logging import FontIndexLogger
from fontindex.lookup import FamilyLookup
from fontindex.platform import Os
from fontindex.profile import FallbackProfile, profile_for
from fontindex.types import Cjk, FamilyId, FontId, GenericFamily, Script, SourceId


SourceLike = SourceId | bytes | str | Path


class StaticIndexBuilder:
    """Accumulate sources, families and faces before freezing them."""

    def __init__(self, *, logger: FontIndexLogger | None = None) -> None:
        self.logger = logger or FontIndexLogger()
        self._base = BaseIndex(logger=self.logger)
        self._names: list[str] = []
        self._faces: list[list[FontId]] = []
        self._file_sources: dict[Path, SourceId] = {}
        self._built = False

    def _check_open(self) -> None:
        if self._built:
            raise FontIndexError("This builder already produced an index and cannot be reused.")

    @property
    def family_count(self) -> int:
        return len(self._names)

    @property
    def font_count(self) -> int:
        return len(self._base.fonts)

    def add_source(self, source: bytes | str | Path) -> SourceId:
        """Register a font source; file sources are shared per resolved path."""
        self._check_open()
        kind = source_kind(source)
        if isinstance(kind, FileSource):
            existing = self._file_sources.get(kind.path)
            if existing is not None:
                return existing
            source_id = self._base.add_source(kind)
            self._file_sources[kind.path] = source_id
            return source_id
        return self._base.add_source(kind)

    def add_family(self, name: str) -> FamilyId:
        """Create a new family; the name now resolves to it."""
        self._check_open()
        if not name or not name.strip():
            raise ValueError("Family names must not be empty.")
        family_id = FamilyId(len(self._names))
        self._names.append(name)
        self._faces.append([])
        self._base.map_family(name, family_id)
        return family_id

    def _resolve_family(self, family: FamilyId | str) -> FamilyId:
        if isinstance(family, FamilyId):
            if not 0 <= family.value < len(self._names):
                raise UnknownFamilyError(f"Family {family!r} is not registered in this builder.")
            return family
        existing = self._base.family_id(family)
        if existing is not None:
            return existing
        return self.add_family(family)

    def add_font(
        self,
        family: FamilyId | str,
        source: SourceLike,
        *,
        attributes: Attributes | None = None,
        index: int = 0,
        offset: int = 0,
        key: CacheKey | None = None,
    ) -> FontId:
        """Register one face; a family name creates the family on first use."""
        self._check_open()
        family_id = self._resolve_family(family)
        source_id = source if isinstance(source, SourceId) else self.add_source(source)
        font_id = self._base.add_font(
            family_id,
            source_id,
            attributes=attributes,
            index=index,
            offset=offset,
            key=key,
        )
        self._faces[family_id.value].append(font_id)
        return font_id

    def add_records(self, records: Iterable[FontRecord]) -> int:
        """Register enumerated faces and return how many were added."""
        records = list(records)
        with self.logger.progress("Indexing fonts", total=len(records)) as advance:
            for record in records:
                self.add_font(
                    record.family,
                    record.source,
                    attributes=record.attributes,
                    index=record.index,
                    offset=record.offset,
                )
                advance(1)
        return len(records)

    def build(
        self,
        *,
        platform: Os | str | None = None,
        profile: FallbackProfile | None = None,
    ) -> StaticIndex:
        """Freeze the registered entities into a :class:`StaticIndex`."""
        self._check_open()
        self._built = True
        families = [
            FamilyData(id=FamilyId(position), name=name, fonts=tuple(faces))
            for position, (name, faces) in enumerate(zip(self._names, self._faces))
        ]
        if profile is None:
            profile = profile_for(platform)
        self.logger.debug(
            "Freezing %d families and %d faces.", self.family_count, self.font_count
        )
        return StaticIndex(self._base, families, profile=profile, logger=self.logger)


class StaticIndex(FamilyLookup):
    """Immutable index with per-script, per-variant and generic fallback tables."""

    def __init__(
        self,
        base: BaseIndex,
        families: Iterable[FamilyData],
        *,
        profile: FallbackProfile | None = None,
        logger: FontIndexLogger | None = None,
    ) -> None:
        self.logger = logger or base.logger
        self._base = base
        self._families: tuple[FamilyData, ...] = tuple(families)
        for position, family in enumerate(self._families):
            if family.id.value != position:
                raise FontIndexError(
                    f"Family '{family.name}' has id {family.id.value} at position {position}."
                )
        profile = profile if profile is not None else profile_for()

        self._cjk = self._setup_cjk(profile)
        self._script_map: dict[Script, Fallbacks] = {}
        for script, names in profile.scripts.items():
            self._map_script(script, names)
        self._generic = tuple(
            self.find_family(profile.generic.get(generic, ())) for generic in GenericFamily
        )
        self.logger.debug(
            "Static index ready: %d families, %d faces, %d scripts with fallbacks.",
            len(self._families),
            len(self._base.fonts),
            len(self._script_map),
        )

    def _setup_cjk(self, profile: FallbackProfile) -> tuple[Fallbacks, ...]:
        slots = {variant: self.find_fallbacks(profile.cjk.get(variant, ())) for variant in Cjk}
        slots[Cjk.NONE] = slots[Cjk.TRADITIONAL].copy()
        return tuple(slots[variant].freeze() for variant in Cjk)

    def _map_script(self, script: Script, names: Iterable[str]) -> None:
        if script is Script.HAN:
            self.logger.debug("Ignoring script entry for Han; CJK variants cover it.")
            return
        fallbacks = self.find_fallbacks(names)
        if fallbacks:
            self._script_map[script] = fallbacks.freeze()

    @property
    def families(self) -> tuple[FamilyData, ...]:
        return self._families

    @property
    def script_map(self) -> Mapping[Script, Fallbacks]:
        return MappingProxyType(self._script_map)

    @property
    def cjk(self) -> tuple[Fallbacks, ...]:
        return self._cjk

    @property
    def generic(self) -> tuple[FamilyId | None, ...]:
        return self._generic

    def find_family(self, names: Iterable[str]) -> FamilyId | None:
        """Return the first of ``names`` present in the index."""
        for name in names:
            family_id = self._base.family_map.get(family_key(name))
            if family_id is not None:
                return family_id
        return None

    def find_fallbacks(self, names: Iterable[str]) -> Fallbacks:
        """Collect the installed families among ``names``, in order.

        Missing names are skipped; collection stops at the first family the
        set refuses (already present, or capacity reached).
        """
        fallbacks = Fallbacks()
        for name in names:
            family_id = self._base.family_map.get(family_key(name))
            if family_id is None:
                continue
            if not fallbacks.push(family_id):
                break
        return fallbacks

    def fallbacks(self, script: Script, cjk: Cjk = Cjk.NONE) -> tuple[FamilyId, ...]:
        """Return the ordered fallback families for ``script``."""
        if script == Script.HAN:
            try:
                variant = Cjk(cjk)
            except (TypeError, ValueError):
                return ()
            return self._cjk[variant].get()
        entry = self._script_map.get(script)
        return entry.get() if entry is not None else ()

    def generic_family_id(self, generic: GenericFamily) -> FamilyId | None:
        if not isinstance(generic, GenericFamily):
            return None
        return self._generic[generic]

    def emoji_family(self) -> FamilyEntry | None:
        return self.family_by_key(GenericFamily.EMOJI)

    def _family_data(self, family_id: FamilyId) -> FamilyData | None:
        if 0 <= family_id.value < len(self._families):
            return self._families[family_id.value]
        return None

    def __repr__(self) -> str:
        return f"StaticIndex(families={len(self._families)}, fonts={len(self._base.fonts)})"

    @classmethod
    def from_records(
        cls,
        records: Iterable[FontRecord],
        *,
        platform: Os | str | None = None,
        profile: FallbackProfile | None = None,
        logger: FontIndexLogger | None = None,
    ) -> StaticIndex:
        builder = StaticIndexBuilder(logger=logger)
        builder.add_records(records)
        return builder.build(platform=platform, profile=profile)

    @classmethod
    def from_system(
        cls,
        platform: Os | str | None = None,
        *,
        profile: FallbackProfile | None = None,
        font_dirs: Iterable[Path] | None = None,
        logger: FontIndexLogger | None = None,
    ) -> StaticIndex:
        """Enumerate the installed fonts and index them."""
        logger = logger or FontIndexLogger()
        resolved = Os.parse(platform) if platform is not None else None
        records = discover_system_fonts(resolved, font_dirs=font_dirs, logger=logger)
        return cls.from_records(records, platform=resolved, profile=profile, logger=logger)


__all__ = ["StaticIndex", "StaticIndexBuilder"]
