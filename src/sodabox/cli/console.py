"""Stderr console with optional Rich support.

Only diagnostics go through here.  Payloads (keys, ciphertext,
plaintext) are written to stdout by :mod:`sodabox.cli.streams` and
must never pass through Rich, which would wrap and style them.

Rich is imported lazily so bootstrap paths (``--help``, ``--version``)
and the plain fallback keep working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from sodabox.exceptions import EnvironmentError, SodaError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def escape(text: str) -> str:
    """Escape Rich markup in user-derived *text*; identity without Rich."""
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object, plain: str | None = None) -> None:
        """Render with Rich when available, else plain stderr print.

        *plain* replaces *objects* in the fallback path so callers can
        supply a markup-free rendering.
        """
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            if plain is not None:
                print(plain, file=sys.stderr)
            else:
                print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------

def _cause_chain(exc: BaseException) -> list[str]:
    """Messages of every explicitly chained cause below *exc*."""
    messages: list[str] = []
    cause = exc.__cause__
    while cause is not None:
        text = str(cause) or type(cause).__name__
        messages.append(text)
        cause = cause.__cause__
    return messages


def print_error(exc: SodaError) -> None:
    """Render *exc*, its cause chain and its hint to stderr."""
    message = str(exc)
    console.print(
        f"[bold red]Error:[/bold red] {escape(message)}",
        plain=f"Error: {message}",
    )
    for cause in _cause_chain(exc):
        console.print(
            f"[dim]Caused by:[/dim] {escape(cause)}",
            plain=f"Caused by: {cause}",
        )
    if exc.hint:
        console.print(
            f"[yellow]Hint:[/yellow] {escape(exc.hint)}",
            plain=f"Hint: {exc.hint}",
        )
