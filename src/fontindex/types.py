"""Identifiers and enumerations shared by the font indexes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass(frozen=True, slots=True, order=True)
class _Identifier:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{type(self).__name__} cannot be negative: {self.value}")

    def to_int(self) -> int:
        return self.value

    @classmethod
    def from_int(cls, value: int):
        return cls(int(value))

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


@dataclass(frozen=True, slots=True, order=True, repr=False)
class FamilyId(_Identifier):
    """Dense identifier of a font family inside one index."""


@dataclass(frozen=True, slots=True, order=True, repr=False)
class FontId(_Identifier):
    """Dense identifier of a font face inside one index."""


@dataclass(frozen=True, slots=True, order=True, repr=False)
class SourceId(_Identifier):
    """Dense identifier of a font source inside one index."""


def _token(value: str) -> str:
    return value.strip().replace("-", "_").replace(" ", "_").upper()


class Script(str, Enum):
    """Unicode scripts, valued by their ISO 15924 tag."""

    COMMON = "Zyyy"
    INHERITED = "Zinh"
    UNKNOWN = "Zzzz"
    ARABIC = "Arab"
    ARMENIAN = "Armn"
    BENGALI = "Beng"
    BOPOMOFO = "Bopo"
    BRAHMI = "Brah"
    BRAILLE = "Brai"
    BUGINESE = "Bugi"
    CANADIAN_ABORIGINAL = "Cans"
    CARIAN = "Cari"
    CYRILLIC = "Cyrl"
    DEVANAGARI = "Deva"
    ETHIOPIC = "Ethi"
    GEORGIAN = "Geor"
    GREEK = "Grek"
    GUJARATI = "Gujr"
    GURMUKHI = "Guru"
    HAN = "Hani"
    HANGUL = "Hang"
    HEBREW = "Hebr"
    HIRAGANA = "Hira"
    KANNADA = "Knda"
    KATAKANA = "Kana"
    KHAROSHTHI = "Khar"
    KHMER = "Khmr"
    LAO = "Laoo"
    LATIN = "Latn"
    LISU = "Lisu"
    MALAYALAM = "Mlym"
    MONGOLIAN = "Mong"
    MYANMAR = "Mymr"
    ORIYA = "Orya"
    SINHALA = "Sinh"
    SYRIAC = "Syrc"
    TAMIL = "Taml"
    TELUGU = "Telu"
    THAANA = "Thaa"
    THAI = "Thai"
    TIBETAN = "Tibt"
    VAI = "Vaii"
    YI = "Yiii"

    @classmethod
    def parse(cls, value: Script | str) -> Script:
        """Resolve a member, an ISO 15924 tag or a member name."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if member.value.casefold() == text.casefold():
                return member
        try:
            return cls[_token(text)]
        except KeyError:
            raise ValueError(f"Unknown script: {value!r}") from None


class Cjk(IntEnum):
    """CJK locale variant used to disambiguate Han fallbacks."""

    SIMPLIFIED = 0
    TRADITIONAL = 1
    JAPANESE = 2
    KOREAN = 3
    NONE = 4

    @classmethod
    def parse(cls, value: Cjk | str) -> Cjk:
        if isinstance(value, cls):
            return value
        try:
            return cls[_token(str(value))]
        except KeyError:
            raise ValueError(f"Unknown CJK variant: {value!r}") from None

    @classmethod
    def from_language(cls, tag: str | None) -> Cjk:
        """Map a BCP 47 language tag onto a CJK variant."""
        if not tag:
            return cls.NONE
        parts = [part.casefold() for part in tag.replace("_", "-").split("-") if part]
        if not parts:
            return cls.NONE
        language, subtags = parts[0], set(parts[1:])
        if language == "ja":
            return cls.JAPANESE
        if language == "ko":
            return cls.KOREAN
        if language == "zh":
            if "hans" in subtags or subtags & {"cn", "sg"}:
                return cls.SIMPLIFIED
            if "hant" in subtags or subtags & {"tw", "hk", "mo"}:
                return cls.TRADITIONAL
        return cls.NONE


class GenericFamily(IntEnum):
    """CSS generic font families."""

    SERIF = 0
    SANS_SERIF = 1
    MONOSPACE = 2
    CURSIVE = 3
    FANTASY = 4
    SYSTEM_UI = 5
    UI_SERIF = 6
    UI_SANS_SERIF = 7
    UI_MONOSPACE = 8
    UI_ROUNDED = 9
    EMOJI = 10
    MATH = 11
    FANGSONG = 12

    @classmethod
    def parse(cls, value: GenericFamily | str) -> GenericFamily:
        if isinstance(value, cls):
            return value
        try:
            return cls[_token(str(value))]
        except KeyError:
            raise ValueError(f"Unknown generic family: {value!r}") from None

    @property
    def css_name(self) -> str:
        return self.name.lower().replace("_", "-")


__all__ = [
    "Cjk",
    "FamilyId",
    "FontId",
    "GenericFamily",
    "Script",
    "SourceId",
]
