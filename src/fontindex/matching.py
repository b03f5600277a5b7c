"""Closest-face selection following the CSS font matching procedure."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from fontindex.attributes import NORMAL_STRETCH, Attributes, RequestedAttributes, Style


T = TypeVar("T")

Selector = tuple[T, Attributes, RequestedAttributes]

_STYLE_ORDER = {
    Style.ITALIC: (Style.ITALIC, Style.OBLIQUE, Style.NORMAL),
    Style.OBLIQUE: (Style.OBLIQUE, Style.ITALIC, Style.NORMAL),
    Style.NORMAL: (Style.NORMAL, Style.OBLIQUE, Style.ITALIC),
}


def _pick_stretch(requested: float, available: set[float]) -> float:
    if requested in available:
        return requested
    narrower = sorted((value for value in available if value < requested), reverse=True)
    wider = sorted(value for value in available if value > requested)
    ordered = narrower + wider if requested <= NORMAL_STRETCH else wider + narrower
    return ordered[0]


def _pick_style(requested: Style, available: set[Style]) -> Style:
    for style in _STYLE_ORDER[requested]:
        if style in available:
            return style
    raise ValueError("no styles to choose from")


def _pick_weight(requested: int, available: set[int]) -> int:
    if requested in available:
        return requested
    below = sorted((value for value in available if value < requested), reverse=True)
    above = sorted(value for value in available if value > requested)
    if 400 <= requested <= 500:
        up_to_500 = [value for value in above if value <= 500]
        beyond = [value for value in above if value > 500]
        ordered = up_to_500 + below + beyond
    elif requested < 400:
        ordered = below + above
    else:
        ordered = above + below
    return ordered[0]


def best_match(selectors: Iterable[Selector[T]]) -> T | None:
    """Return the id of the face closest to the requested attributes.

    Each selector is an ``(id, inherent, requested)`` triple. Candidates are
    narrowed by stretch, then style, then weight; among equivalent faces the
    first one in iteration order wins.
    """
    candidates = list(selectors)
    if not candidates:
        return None
    requested = candidates[0][2]

    stretch = _pick_stretch(
        float(requested.stretch), {float(attrs.stretch) for _, attrs, _ in candidates}
    )
    candidates = [item for item in candidates if float(item[1].stretch) == stretch]

    style = _pick_style(requested.style, {attrs.style for _, attrs, _ in candidates})
    candidates = [item for item in candidates if item[1].style is style]

    weight = _pick_weight(int(requested.weight), {int(attrs.weight) for _, attrs, _ in candidates})
    for face_id, attrs, _ in candidates:
        if int(attrs.weight) == weight:
            return face_id
    return None


__all__ = ["Selector", "best_match"]
