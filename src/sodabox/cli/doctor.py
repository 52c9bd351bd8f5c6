"""``sodabox doctor`` — environment diagnostics command.

Gathers system information and renders a table summarising whether
the runtime can generate keys and seal/open messages.  Rendered with
Rich when available, plain text otherwise; both on stderr.

This module lives in the CLI layer — it may import from ``infra``
and ``core``.  No business logic resides here.
"""

from __future__ import annotations

import platform
import sys

from sodabox.cli import exit_codes
from sodabox.cli.console import console
from sodabox.exceptions import SodaError
from sodabox.infra.nacl_provider import NaclSealedBoxProvider, nacl_version
from sodabox.version import VERSION_SHA

_SELF_TEST_MESSAGE: bytes = b"sodabox doctor self-test"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _sodabox_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the sodabox version row."""
    return "sodabox", VERSION_SHA, "[green]OK[/green]"


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _pynacl_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the PyNaCl row."""
    version = nacl_version()
    if version is None:
        return "PyNaCl", "NOT INSTALLED", "[red]FAIL[/red]"
    return "PyNaCl", version, "[green]OK[/green]"


def _sealed_box_check() -> tuple[str, str, str]:
    """Generate a throwaway pair and round-trip a message through libsodium."""
    provider = NaclSealedBoxProvider()
    try:
        public, private = provider.generate_keypair()
        opened = provider.open(private, provider.seal(public, _SELF_TEST_MESSAGE))
    except SodaError as exc:
        return "sealed box", str(exc), "[red]FAIL[/red]"
    if opened != _SELF_TEST_MESSAGE:
        return "sealed box", "round-trip mismatch", "[red]FAIL[/red]"
    return "sealed box", "seal/open round-trip", "[green]OK[/green]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nsodabox doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when all checks pass,
        :data:`exit_codes.GENERAL_ERROR` if any check fails.
    """
    checks = [
        _sodabox_version_check(),
        _python_version_check(),
        _pynacl_version_check(),
        _sealed_box_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="sodabox doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)
        console.print()
        console.print(table)
        console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]", plain="Some checks failed.")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]", plain="All checks passed.")
    return exit_codes.SUCCESS
