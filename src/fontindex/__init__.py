"""Primary public API for fontindex.

Two indexes share the same entity store and lookup surface:

- :class:`StaticIndex` is built once from the installed fonts and carries
  the per-script, per-CJK-variant and generic fallback tables;
- :class:`DynamicIndex` accepts families registered at runtime and resolves
  them by name or identifier only.
"""

from __future__ import annotations

from fontindex.attributes import Attributes, CacheKey, RequestedAttributes, Style
from fontindex.data import FamilyData, FileSource, MemorySource
from fontindex.dynamic import DynamicIndex, FaceSpec
from fontindex.entries import FamilyEntry, FamilyKey, FontEntry, SourceEntry
from fontindex.enumerator import FontRecord, discover_system_fonts
from fontindex.exceptions import (
    FontIndexError,
    ProfileError,
    UnknownFamilyError,
    UnknownSourceError,
)
from fontindex.fallback import MAX_FALLBACKS, Fallbacks
from fontindex.logging import FontIndexLogger
from fontindex.platform import Os, current_os
from fontindex.profile import FallbackProfile, load_profile, profile_for
from fontindex.static import StaticIndex, StaticIndexBuilder
from fontindex.types import Cjk, FamilyId, FontId, GenericFamily, Script, SourceId
from fontindex.version import get_version


__version__ = get_version()

__all__ = [
    "MAX_FALLBACKS",
    "Attributes",
    "CacheKey",
    "Cjk",
    "DynamicIndex",
    "FaceSpec",
    "FallbackProfile",
    "Fallbacks",
    "FamilyData",
    "FamilyEntry",
    "FamilyId",
    "FamilyKey",
    "FileSource",
    "FontEntry",
    "FontId",
    "FontIndexError",
    "FontIndexLogger",
    "FontRecord",
    "GenericFamily",
    "MemorySource",
    "Os",
    "ProfileError",
    "RequestedAttributes",
    "Script",
    "SourceEntry",
    "SourceId",
    "StaticIndex",
    "StaticIndexBuilder",
    "Style",
    "UnknownFamilyError",
    "UnknownSourceError",
    "current_os",
    "discover_system_fonts",
    "load_profile",
    "profile_for",
]
