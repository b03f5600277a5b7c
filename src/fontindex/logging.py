"""Small logging helpers that integrate with the fontindex CLI."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
import typer


def _resolve_state() -> object | None:
    from fontindex.ui.cli.state import get_cli_state

    try:
        return get_cli_state(create=False)
    except RuntimeError:
        return None


@dataclass(slots=True)
class FontIndexLogger:
    """Light wrapper around the CLI state, printing plainly outside the CLI."""

    verbose: bool = False
    _state: object | None = None

    def __post_init__(self) -> None:
        self._state = _resolve_state()
        if self._state is not None and getattr(self._state, "verbosity", 0) >= 1:
            self.verbose = True

    def _render_message(self, message: str, args: tuple[Any, ...]) -> str:
        if args:
            try:
                message = message % args
            except (TypeError, ValueError):
                message = " ".join([message, *(str(arg) for arg in args)])
        return message

    def info(self, message: str, *args: Any) -> None:
        message = self._render_message(message, args)
        if self._state is not None:
            self._state.console.log(message)
            return
        typer.echo(message)

    def warning(self, message: str, *args: Any) -> None:
        message = self._render_message(message, args)
        if self._state is not None:
            from fontindex.ui.cli.state import emit_warning

            emit_warning(message)
            return
        typer.secho(message, fg="yellow", err=True)

    def notice(self, message: str, *args: Any) -> None:
        """Alias for info to mirror the CLI vocabulary."""
        self.info(message, *args)

    def debug(self, message: str, *args: Any) -> None:
        """Emit a debug/verbose message when verbose mode is enabled."""
        if not self.verbose:
            return
        self.info(message, *args)

    @contextmanager
    def progress(self, task: str, total: int | None = None) -> Iterator[Callable[[int], None]]:
        """Yield a progress updater backed by a Rich progress bar."""
        console = self._state.console if self._state is not None else Console(stderr=True)
        with Progress(
            SpinnerColumn(),
            TextColumn(f"[bold cyan]{task}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}" if total else "{task.completed}"),
            TimeElapsedColumn(),
            console=console,
            transient=not self.verbose,
            disable=not self.verbose,
        ) as progress:
            task_id = progress.add_task(task, total=total)

            def _advance(step: int = 1) -> None:
                progress.update(task_id, advance=step)

            yield _advance


__all__ = ["FontIndexLogger"]
