"""CLI command printing the fallback chain of a script."""

from __future__ import annotations

from rich import box
from rich.table import Table
import typer

from fontindex.types import Cjk, Script

from .._options import CjkOption, LangOption, ScriptArgument
from ..state import emit_error, get_cli_state
from ..utils import family_label, load_index


def _resolve_variant(cjk: str | None, lang: str | None) -> Cjk:
    if cjk is not None and lang is not None:
        raise typer.BadParameter("Use either --cjk or --lang, not both.")
    if lang is not None:
        return Cjk.from_language(lang)
    if cjk is None:
        return Cjk.NONE
    try:
        return Cjk.parse(cjk)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--cjk") from exc


def fallbacks(
    script: ScriptArgument,
    cjk: CjkOption = None,
    lang: LangOption = None,
) -> None:
    """Print the ordered fallback families for SCRIPT."""
    try:
        resolved = Script.parse(script)
    except ValueError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    variant = _resolve_variant(cjk, lang)

    state = get_cli_state()
    index = load_index(state)
    chain = index.fallbacks(resolved, variant)

    title = f"Fallbacks for {resolved.name.replace('_', ' ').title()} ({resolved.value})"
    if resolved == Script.HAN:
        title += f", {variant.name.lower()}"
    table = Table(title=title, box=box.SQUARE, show_edge=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Family", style="magenta")
    if not chain:
        table.add_row("-", "No installed fallback")
    for position, family_id in enumerate(chain, start=1):
        table.add_row(str(position), family_label(index, family_id))

    state.console.print(table)


__all__ = ["fallbacks"]
