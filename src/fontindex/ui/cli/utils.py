"""Auxiliary helpers used by CLI commands."""

from __future__ import annotations

import typer

from fontindex.exceptions import FontIndexError, exception_hint
from fontindex.logging import FontIndexLogger
from fontindex.profile import load_profile
from fontindex.static import StaticIndex
from fontindex.types import FamilyId

from .state import CLIState, debug_enabled, emit_error


def load_index(state: CLIState) -> StaticIndex:
    """Build the static index described by the global options, once per invocation."""
    if state.index is not None:
        return state.index

    logger = FontIndexLogger(verbose=state.verbosity >= 1)
    try:
        profile = load_profile(state.profile_path) if state.profile_path else None
        state.index = StaticIndex.from_system(
            state.platform,
            profile=profile,
            font_dirs=state.font_dirs or None,
            logger=logger,
        )
    except (FontIndexError, ValueError) as exc:
        if debug_enabled():
            raise
        message = str(exc)
        hint = exception_hint(exc)
        if hint and hint != message:
            message = f"{message} ({hint})"
        emit_error(message, exception=exc)
        raise typer.Exit(code=1) from exc
    return state.index


def family_label(index: StaticIndex, family_id: FamilyId | None) -> str:
    """Return the display name of ``family_id`` or a placeholder."""
    if family_id is None:
        return "-"
    entry = index.family_by_id(family_id)
    return entry.name if entry is not None else "-"


__all__ = ["family_label", "load_index"]
