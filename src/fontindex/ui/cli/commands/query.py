"""CLI command selecting the closest face of a family."""

from __future__ import annotations

from rich import box
from rich.table import Table
import typer

from fontindex.attributes import NORMAL_STRETCH, NORMAL_WEIGHT, Attributes, Style
from fontindex.entries import FamilyKey
from fontindex.lookup import FamilyLookup
from fontindex.types import GenericFamily

from .._options import FamilyArgument, StretchOption, StyleOption, WeightOption
from ..state import emit_error, get_cli_state
from ..utils import load_index


def _family_key(index: FamilyLookup, family: str) -> FamilyKey:
    """Prefer an installed family of that name, then a CSS generic family."""
    if index.family_id(family) is not None:
        return family
    try:
        return GenericFamily.parse(family)
    except ValueError:
        return family


def query(
    family: FamilyArgument,
    weight: WeightOption = NORMAL_WEIGHT,
    stretch: StretchOption = NORMAL_STRETCH,
    style: StyleOption = Style.NORMAL.value,
) -> None:
    """Show the face of FAMILY closest to the requested attributes."""
    try:
        requested = Attributes(stretch=stretch, weight=weight, style=Style(style.lower()))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    state = get_cli_state()
    index = load_index(state)
    entry = index.query(_family_key(index, family), requested)
    if entry is None:
        emit_error(f"No face found for family '{family}'.")
        raise typer.Exit(code=1)

    source = entry.source
    if source.path is not None:
        location = str(source.path)
    else:
        location = f"<memory, {len(source.data or b'')} bytes>"
    table = Table(
        title=f"Best match for {family}",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
        show_header=False,
    )
    table.add_column("Field", style="magenta")
    table.add_column("Value")
    table.add_row("Family", entry.family_name)
    table.add_row("Attributes", entry.attributes.describe())
    table.add_row("Source", location)
    table.add_row("Index", str(entry.index))
    table.add_row("Offset", str(entry.offset))

    state.console.print(table)


__all__ = ["query"]
