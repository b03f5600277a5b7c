"""CLI commands listing indexed families and generic family resolutions."""

from __future__ import annotations

import json

from rich import box
from rich.table import Table
import typer

from fontindex.types import GenericFamily

from .._options import JsonOption
from ..state import get_cli_state
from ..utils import family_label, load_index


def families(json_output: JsonOption = False) -> None:
    """List indexed families with their face counts."""
    state = get_cli_state()
    index = load_index(state)

    if json_output:
        payload = [
            {"id": int(family.id), "name": family.name, "faces": len(family.fonts)}
            for family in index.families
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(
        title="Indexed Families",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Id", justify="right")
    table.add_column("Family", style="magenta")
    table.add_column("Faces", justify="right", style="green")

    if not index.families:
        table.add_row("-", "No fonts found", "0")
    for family in sorted(index.families, key=lambda item: item.name.casefold()):
        table.add_row(str(int(family.id)), family.name, str(len(family.fonts)))

    state.console.print(table)


def generic() -> None:
    """Show the family each generic family resolves to."""
    state = get_cli_state()
    index = load_index(state)

    table = Table(
        title="Generic Families",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("Generic", style="magenta")
    table.add_column("Family", style="green")
    for category in GenericFamily:
        table.add_row(category.css_name, family_label(index, index.generic_family_id(category)))

    state.console.print(table)


__all__ = ["families", "generic"]
