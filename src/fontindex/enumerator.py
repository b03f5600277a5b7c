"""Discover installed fonts as ``(family, attributes, source)`` records.

Nothing here opens a font file: fontconfig already knows family and style,
and plain directory scans guess both from the file name.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import os
from pathlib import Path
import re
import shutil
import subprocess

from fontindex.attributes import Attributes
from fontindex.logging import FontIndexLogger
from fontindex.platform import Os, current_os


SKIP_FONTCONFIG_ENV = "FONTINDEX_SKIP_FONTCONFIG"
FONT_SUFFIXES = {".otf", ".ttf", ".ttc", ".otc"}

_FC_FORMAT = "%{file}|%{index}|%{family}|%{style}|%{weight}|%{width}|%{slant}\n"

# Style words stripped from file stems to recover the family name.
_STYLE_WORDS = re.compile(
    r"[-_ ]?(?:(?:extra|ultra|semi|demi)?(?:bold|light|condensed|expanded)|thin|hairline|"
    r"regular|book|normal|roman|medium|black|heavy|italic|oblique|narrow|wide)$",
    re.IGNORECASE,
)


@dataclass(frozen=True, slots=True)
class FontRecord:
    """One enumerated face, ready to be registered in an index."""

    family: str
    attributes: Attributes
    source: Path | bytes
    index: int = 0
    offset: int = 0


def _first(values: str) -> str:
    for value in values.split(","):
        value = value.strip()
        if value:
            return value
    return ""


def _number(value: str) -> float | None:
    value = _first(value)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_fc_list(output: str) -> list[FontRecord]:
    """Convert ``fc-list`` output produced with the enumerator's format."""
    records: list[FontRecord] = []
    for line in output.splitlines():
        parts = line.split("|")
        if len(parts) != 7:
            continue
        file_part, index_part, families, styles, weight, width, slant = parts
        if not file_part:
            continue
        raw_index = int(_number(index_part) or 0)
        # Named instances of variable fonts share the face; keep the default one.
        if raw_index >> 16:
            continue
        family = _first(families)
        if not family:
            continue
        attributes = Attributes.from_fontconfig(_number(weight), _number(width), _number(slant))
        if _number(weight) is None and styles:
            attributes = Attributes.parse(_first(styles))
        records.append(
            FontRecord(
                family=family,
                attributes=attributes,
                source=Path(file_part),
                index=raw_index & 0xFFFF,
            )
        )
    return records


def enumerate_fontconfig(*, logger: FontIndexLogger | None = None) -> list[FontRecord]:
    """List installed faces through ``fc-list``; empty when unavailable."""
    logger = logger or FontIndexLogger()
    if os.environ.get(SKIP_FONTCONFIG_ENV) or shutil.which("fc-list") is None:
        return []
    try:
        proc = subprocess.run(
            ["fc-list", "-f", _FC_FORMAT],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        logger.warning("fc-list failed, falling back to font directories: %s", exc)
        return []
    records = parse_fc_list(proc.stdout)
    logger.debug("fontconfig reported %d faces.", len(records))
    return records


def family_from_stem(stem: str) -> str:
    """Strip style suffixes from a file stem (``Roboto-BoldItalic`` -> ``Roboto``)."""
    family = stem
    while True:
        trimmed = _STYLE_WORDS.sub("", family)
        if trimmed == family or not trimmed:
            break
        family = trimmed
    family = family.strip("-_ ")
    return family.replace("_", " ") or stem


def enumerate_directories(
    paths: Iterable[Path], *, logger: FontIndexLogger | None = None
) -> list[FontRecord]:
    """Walk ``paths`` for font files and guess their family and attributes."""
    logger = logger or FontIndexLogger()
    records: list[FontRecord] = []
    seen: set[Path] = set()
    scanned = 0
    for root in paths:
        root = Path(root).expanduser()
        if not root.is_dir():
            logger.debug("Skipping missing font directory %s", root)
            continue
        scanned += 1
        for file_path in sorted(root.rglob("*")):
            if file_path.suffix.lower() not in FONT_SUFFIXES or not file_path.is_file():
                continue
            resolved = file_path.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            stem = file_path.stem
            style = stem.split("-", 1)[1] if "-" in stem else stem
            records.append(
                FontRecord(
                    family=family_from_stem(stem),
                    attributes=Attributes.parse(style),
                    source=resolved,
                )
            )
    logger.debug("Found %d font files in %d directories.", len(records), scanned)
    return records


def system_font_dirs(platform: Os | None = None) -> list[Path]:
    """Return the conventional font directories of ``platform``."""
    platform = platform or current_os()
    home = Path.home()
    if platform is Os.WINDOWS:
        windir = Path(os.environ.get("WINDIR", r"C:\Windows"))
        local = os.environ.get("LOCALAPPDATA")
        dirs = [windir / "Fonts"]
        if local:
            dirs.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
        return dirs
    if platform is Os.MACOS:
        return [
            Path("/System/Library/Fonts"),
            Path("/Library/Fonts"),
            home / "Library" / "Fonts",
        ]
    if platform is Os.IOS:
        return [Path("/System/Library/Fonts")]
    if platform is Os.ANDROID:
        return [Path("/system/fonts"), Path("/product/fonts")]
    return [
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        home / ".local" / "share" / "fonts",
        home / ".fonts",
    ]


def discover_system_fonts(
    platform: Os | None = None,
    *,
    font_dirs: Iterable[Path] | None = None,
    logger: FontIndexLogger | None = None,
) -> list[FontRecord]:
    """Enumerate fonts from explicit directories, fontconfig or the platform dirs."""
    logger = logger or FontIndexLogger()
    if font_dirs is not None:
        return enumerate_directories(font_dirs, logger=logger)
    platform = platform or current_os()
    if platform in {Os.UNIX, Os.OTHER}:
        records = enumerate_fontconfig(logger=logger)
        if records:
            return records
    return enumerate_directories(system_font_dirs(platform), logger=logger)


__all__ = [
    "FONT_SUFFIXES",
    "SKIP_FONTCONFIG_ENV",
    "FontRecord",
    "discover_system_fonts",
    "enumerate_directories",
    "enumerate_fontconfig",
    "family_from_stem",
    "parse_fc_list",
    "system_font_dirs",
]
