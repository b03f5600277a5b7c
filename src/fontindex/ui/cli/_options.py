"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INDEX_PANEL = "Index"
QUERY_PANEL = "Query"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

PlatformOption = Annotated[
    str | None,
    typer.Option(
        "--platform",
        help="Target platform whose fallback tables are used (windows, macos, ios, android, unix).",
        envvar="FONTINDEX_PLATFORM",
        rich_help_panel=INDEX_PANEL,
    ),
]

ProfileOption = Annotated[
    Path | None,
    typer.Option(
        "--profile",
        help="YAML fallback profile merged onto the platform defaults.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INDEX_PANEL,
    ),
]

FontDirOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--font-dir",
        help="Index the fonts found in this directory instead of the system fonts (repeatable).",
        file_okay=False,
        dir_okay=True,
        resolve_path=True,
        rich_help_panel=INDEX_PANEL,
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Emit machine-readable JSON instead of a table.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

ScriptArgument = Annotated[
    str,
    typer.Argument(
        metavar="SCRIPT",
        help="Script name or ISO 15924 tag (e.g. 'latin', 'Cyrl', 'han').",
    ),
]

CjkOption = Annotated[
    str | None,
    typer.Option(
        "--cjk",
        help="CJK variant used for Han (simplified, traditional, japanese, korean, none).",
        rich_help_panel=QUERY_PANEL,
    ),
]

LangOption = Annotated[
    str | None,
    typer.Option(
        "--lang",
        help="BCP 47 language tag used to pick the CJK variant (e.g. 'zh-Hans', 'ja').",
        rich_help_panel=QUERY_PANEL,
    ),
]

FamilyArgument = Annotated[
    str,
    typer.Argument(
        metavar="FAMILY",
        help="Family name, or a generic family such as 'sans-serif' or 'emoji'.",
    ),
]

WeightOption = Annotated[
    int,
    typer.Option(
        "--weight",
        min=1,
        max=1000,
        help="Requested weight (1-1000).",
        rich_help_panel=QUERY_PANEL,
    ),
]

StretchOption = Annotated[
    float,
    typer.Option(
        "--stretch",
        min=50.0,
        max=200.0,
        help="Requested stretch as a percentage of the normal width (50-200).",
        rich_help_panel=QUERY_PANEL,
    ),
]

StyleOption = Annotated[
    str,
    typer.Option(
        "--style",
        help="Requested style (normal, italic, oblique).",
        rich_help_panel=QUERY_PANEL,
    ),
]


__all__ = [
    "CjkOption",
    "DebugOption",
    "FamilyArgument",
    "FontDirOption",
    "JsonOption",
    "LangOption",
    "PlatformOption",
    "ProfileOption",
    "ScriptArgument",
    "StretchOption",
    "StyleOption",
    "VerboseOption",
    "WeightOption",
]
