"""Typer application wiring for the fontindex CLI."""

from __future__ import annotations

import typer

from fontindex.ui.cli.commands import fallbacks, families, generic, query

from ._options import DebugOption, FontDirOption, PlatformOption, ProfileOption, VerboseOption
from .state import debug_enabled, emit_error, get_cli_state, set_cli_state


app = typer.Typer(
    help="Inspect the installed fonts and their fallback chains.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


@app.callback()
def configure(
    ctx: typer.Context,
    platform: PlatformOption = None,
    profile: ProfileOption = None,
    font_dir: FontDirOption = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Select the fonts and fallback tables used by every command."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    state.platform = platform
    state.profile_path = profile
    state.font_dirs = list(font_dir) if font_dir else None
    state.index = None


app.command()(families)
app.command()(fallbacks)
app.command()(generic)
app.command()(query)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
