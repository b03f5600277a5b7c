"""Per-platform priority lists of candidate family names.

Names are matched case-insensitively against the installed families; a
candidate that is not installed is skipped. Windows and macOS carry their
own script tables, every other platform uses the Noto-based one.
"""

from __future__ import annotations

from typing import Any

from fontindex.platform import Os
from fontindex.types import Cjk, GenericFamily as G, Script as S


_WINDOWS_FALLBACKS: dict[str, Any] = {
    "cjk": {
        Cjk.SIMPLIFIED: ["microsoft yahei", "simsun", "simsun-extb"],
        Cjk.TRADITIONAL: ["microsoft jhenghei", "pmingliu", "pmingliu-extb"],
        Cjk.JAPANESE: ["meiryo", "yu gothic", "microsoft yahei", "simsun", "simsun-extb"],
        Cjk.KOREAN: ["malgun gothic", "gulim", "microsoft yahei", "simsun", "simsun-extb"],
    },
    "scripts": {
        S.LATIN: ["times new roman"],
        S.ARABIC: ["tahoma", "segoe ui"],
        S.ARMENIAN: ["segoe ui", "sylfaen"],
        S.BENGALI: ["nirmala ui", "vrinda"],
        S.BRAHMI: ["segoe ui historic"],
        S.BRAILLE: ["segoe ui symbol"],
        S.BUGINESE: ["leelawadee ui"],
        S.CANADIAN_ABORIGINAL: ["gadugi", "euphemia"],
        S.CARIAN: ["segoe ui historic"],
        S.DEVANAGARI: ["nirmala ui", "mangal"],
        S.HEBREW: ["david", "segoe ui", "calibri"],
        S.HANGUL: ["malgun gothic", "gulim"],
        S.MYANMAR: ["myanmar text"],
        S.MALAYALAM: ["nirmala ui", "kartika"],
        S.HAN: ["microsoft yahei", "simsun", "simsun-extb"],
        S.HIRAGANA: ["meiryo", "yu gothic", "ms pgothic", "microsoft yahei"],
        S.KATAKANA: ["meiryo", "yu gothic", "ms pgothic", "microsoft yahei"],
        S.KHAROSHTHI: ["segoe ui historic"],
        S.KHMER: ["leelawadee ui", "khmer ui", "khmer os", "moolboran", "daunpenh"],
        S.LAO: [
            "leelawadee ui",
            "lao ui",
            "dokchampa",
            "saysettha ot",
            "phetsarath ot",
            "code2000",
        ],
        S.LISU: ["segoe ui"],
        S.SYRIAC: ["estrangelo edessa", "estrangelo nisibin", "code2000"],
        S.THAI: ["tahoma", "leelawadee ui", "leelawadee"],
        S.TIBETAN: ["microsoft himalaya", "jomolhari", "tibetan machine uni"],
        S.VAI: ["ebrima"],
        S.YI: ["microsoft yi baiti", "nuosu sil", "code2000"],
    },
}

_MACOS_FALLBACKS: dict[str, Any] = {
    "cjk": {
        Cjk.SIMPLIFIED: ["pingfang sc"],
        Cjk.TRADITIONAL: ["pingfang tc"],
        Cjk.JAPANESE: ["hiragino kaku gothic pron w3"],
        Cjk.KOREAN: ["apple sd gothic neo"],
    },
    "scripts": {
        S.LATIN: ["times", "times new roman"],
        S.ARABIC: ["geeza pro"],
        S.DEVANAGARI: [
            "itf devanagari",
            "kohinoor devanagari",
            "devanagari sangam mn",
            "devanagari mt",
        ],
        S.BENGALI: [],
        S.MYANMAR: ["noto sans myanmar", "myanmar mn"],
        S.MALAYALAM: ["malayalam mn"],
        S.HEBREW: ["lucida grande", "arial hebrew"],
    },
}

_NOTO_FALLBACKS: dict[str, Any] = {
    "cjk": {
        Cjk.SIMPLIFIED: ["noto sans cjk sc", "noto serif cjk sc"],
        Cjk.TRADITIONAL: ["noto sans cjk tc", "noto serif cjk tc"],
        Cjk.JAPANESE: ["noto sans cjk jp", "noto serif cjk jp"],
        Cjk.KOREAN: ["noto sans cjk kr", "noto serif cjk kr"],
    },
    "scripts": {
        S.HIRAGANA: ["noto sans cjk jp"],
        S.KATAKANA: ["noto sans cjk jp"],
        S.LATIN: ["liberation sans", "dejavu sans", "ubuntu", "source sans pro"],
        S.ARABIC: ["noto sans arabic"],
        S.HEBREW: ["noto sans hebrew", "noto serif hebrew"],
        S.BENGALI: ["noto sans bengali", "noto serif bengali"],
        S.DEVANAGARI: ["noto sans devanagari", "noto serif devanagari"],
        S.MALAYALAM: ["noto sans malayalam", "noto serif malayalam"],
        S.MYANMAR: ["noto sans myanmar", "noto serif myanmar"],
    },
}

_GENERIC: dict[Os, dict[G, list[str]]] = {
    Os.WINDOWS: {
        G.SANS_SERIF: ["arial"],
        G.SERIF: ["times new roman"],
        G.MONOSPACE: ["courier new"],
        G.FANTASY: ["impact"],
        G.CURSIVE: ["comic sans ms"],
        G.SYSTEM_UI: ["segoe ui"],
        G.EMOJI: ["segoe ui emoji"],
    },
    Os.MACOS: {
        G.SANS_SERIF: ["helvetica"],
        G.SERIF: ["times"],
        G.MONOSPACE: ["courier"],
        G.FANTASY: ["papyrus"],
        G.CURSIVE: ["apple chancery"],
        G.SYSTEM_UI: ["system font", "helvetica"],
        G.EMOJI: ["apple color emoji"],
    },
    Os.IOS: {
        G.SANS_SERIF: ["helvetica"],
        G.SERIF: ["times new roman"],
        G.MONOSPACE: ["courier"],
        G.FANTASY: ["papyrus"],
        G.CURSIVE: ["snell roundhand"],
        G.SYSTEM_UI: ["system font", "helvetica"],
        G.EMOJI: ["apple color emoji"],
    },
    Os.ANDROID: {
        G.SANS_SERIF: ["roboto"],
        G.SERIF: ["noto serif", "droid serif"],
        G.MONOSPACE: ["droid sans mono"],
        G.FANTASY: ["noto serif"],
        G.CURSIVE: ["dancing script"],
        G.SYSTEM_UI: ["roboto"],
        G.EMOJI: ["noto color emoji"],
    },
    Os.UNIX: {
        G.SANS_SERIF: ["liberation sans", "dejavu sans"],
        G.SERIF: ["liberation serif", "dejavu serif", "noto serif", "times new roman"],
        G.MONOSPACE: ["dejavu sans mono"],
        G.FANTASY: ["liberation serif", "dejavu serif"],
        G.CURSIVE: ["liberation serif", "dejavu serif"],
        G.SYSTEM_UI: ["liberation sans", "dejavu sans"],
        G.EMOJI: ["noto color emoji", "emoji one"],
    },
}
_GENERIC[Os.OTHER] = _GENERIC[Os.UNIX]


def defaults_for(platform: Os) -> dict[str, Any]:
    """Return the raw ``cjk``/``scripts``/``generic`` tables for ``platform``."""
    if platform is Os.WINDOWS:
        fallbacks = _WINDOWS_FALLBACKS
    elif platform is Os.MACOS:
        fallbacks = _MACOS_FALLBACKS
    else:
        fallbacks = _NOTO_FALLBACKS
    return {
        "cjk": {key: list(names) for key, names in fallbacks["cjk"].items()},
        "scripts": {key: list(names) for key, names in fallbacks["scripts"].items()},
        "generic": {key: list(names) for key, names in _GENERIC[platform].items()},
    }


__all__ = ["defaults_for"]
