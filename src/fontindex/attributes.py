"""Face attributes and opaque cache keys.

Attribute values come from whatever inspected the font (fontconfig, a font
parser, the caller). The index only stores them and compares them when a
family is asked for its closest face.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import itertools
import re


NORMAL_STRETCH = 100.0
NORMAL_WEIGHT = 400

_WEIGHT_NAMES = {
    "thin": 100,
    "hairline": 100,
    "extralight": 200,
    "ultralight": 200,
    "light": 300,
    "semilight": 350,
    "book": 400,
    "normal": 400,
    "regular": 400,
    "roman": 400,
    "medium": 500,
    "semibold": 600,
    "demibold": 600,
    "bold": 700,
    "extrabold": 800,
    "ultrabold": 800,
    "black": 900,
    "heavy": 900,
}

_STRETCH_NAMES = {
    "ultracondensed": 50.0,
    "extracondensed": 62.5,
    "condensed": 75.0,
    "semicondensed": 87.5,
    "narrow": 75.0,
    "semiexpanded": 112.5,
    "expanded": 125.0,
    "wide": 125.0,
    "extraexpanded": 150.0,
    "ultraexpanded": 200.0,
}

# Split CamelCase stems ("SemiBoldItalic") and separators into tokens.
_TOKEN_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")


class Style(str, Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


def _tokens(value: str) -> list[str]:
    return [token.casefold() for token in _TOKEN_RE.findall(value)]


def _joined_matches(tokens: list[str], table: dict[str, float]) -> list[float]:
    """Match single tokens and adjacent pairs ("semi" + "bold")."""
    hits: list[float] = []
    skip = False
    for idx, token in enumerate(tokens):
        if skip:
            skip = False
            continue
        if idx + 1 < len(tokens):
            pair = token + tokens[idx + 1]
            if pair in table:
                hits.append(table[pair])
                skip = True
                continue
        if token in table:
            hits.append(table[token])
    return hits


@dataclass(frozen=True, slots=True)
class Attributes:
    """Stretch, weight and style of a face (or of a request)."""

    stretch: float = NORMAL_STRETCH
    weight: int = NORMAL_WEIGHT
    style: Style = Style.NORMAL

    def __post_init__(self) -> None:
        if not 50.0 <= float(self.stretch) <= 200.0:
            raise ValueError(f"Stretch must be within 50..200%, got {self.stretch}")
        if not 1 <= int(self.weight) <= 1000:
            raise ValueError(f"Weight must be within 1..1000, got {self.weight}")
        if not isinstance(self.style, Style):
            object.__setattr__(self, "style", Style(str(self.style).lower()))

    @classmethod
    def parse(cls, style_name: str | None) -> Attributes:
        """Guess attributes from a style name or a file stem."""
        tokens = _tokens(style_name or "")
        weights = _joined_matches(tokens, {k: float(v) for k, v in _WEIGHT_NAMES.items()})
        stretches = _joined_matches(tokens, _STRETCH_NAMES)
        style = Style.NORMAL
        if "italic" in tokens:
            style = Style.ITALIC
        elif "oblique" in tokens or "slanted" in tokens:
            style = Style.OBLIQUE
        # "Bold Regular" is bold: any explicit weight beats the regular token.
        explicit = [weight for weight in weights if weight != NORMAL_WEIGHT]
        return cls(
            stretch=stretches[-1] if stretches else NORMAL_STRETCH,
            weight=int(explicit[-1]) if explicit else NORMAL_WEIGHT,
            style=style,
        )

    @classmethod
    def from_fontconfig(
        cls, weight: float | None, width: float | None, slant: float | None
    ) -> Attributes:
        """Convert fontconfig's numeric weight/width/slant scales."""
        return cls(
            stretch=min(max(float(width), 50.0), 200.0) if width else NORMAL_STRETCH,
            weight=_fontconfig_weight(weight),
            style=_fontconfig_slant(slant),
        )

    @property
    def is_bold(self) -> bool:
        return self.weight >= 600

    @property
    def is_italic(self) -> bool:
        return self.style is not Style.NORMAL

    def describe(self) -> str:
        parts = [f"weight={self.weight}"]
        if self.stretch != NORMAL_STRETCH:
            parts.append(f"stretch={self.stretch:g}%")
        parts.append(self.style.value)
        return " ".join(parts)


RequestedAttributes = Attributes


def _fontconfig_weight(value: float | None) -> int:
    # fontconfig: 0 thin, 40 extralight, 50 light, 80 regular, 100 medium,
    # 180 semibold, 200 bold, 205 extrabold, 210 black.
    if value is None:
        return NORMAL_WEIGHT
    if value <= 0:
        return 100
    if value <= 40:
        return 200
    if value <= 50:
        return 300
    if value < 80:
        return 350
    if value <= 80:
        return 400
    if value <= 100:
        return 500
    if value <= 180:
        return 600
    if value <= 200:
        return 700
    if value <= 205:
        return 800
    return 900


def _fontconfig_slant(value: float | None) -> Style:
    if not value:
        return Style.NORMAL
    if value >= 110:
        return Style.OBLIQUE
    return Style.ITALIC


_KEY_COUNTER = itertools.count(1)


@dataclass(frozen=True, slots=True)
class CacheKey:
    """Process-unique key handed to rasterisation caches."""

    value: int

    @classmethod
    def new(cls) -> CacheKey:
        return cls(next(_KEY_COUNTER))


__all__ = [
    "NORMAL_STRETCH",
    "NORMAL_WEIGHT",
    "Attributes",
    "CacheKey",
    "RequestedAttributes",
    "Style",
]
