"""CLI application entry point and command routing for sodabox.

This module is the **sole error boundary** for the entire application.
It catches :class:`~sodabox.exceptions.SodaError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  services and the infrastructure provider.
* Key arguments are parsed by argparse ``type=`` callables, so a bad
  key is a usage error reported before stdin is touched.
* Payloads go to stdout as plain text/bytes; diagnostics go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys

from sodabox.cli import exit_codes
from sodabox.cli.console import console, escape, print_error
from sodabox.core.key_codec import format_private, format_public, parse_private, parse_public
from sodabox.core.models import PrivateKey, PublicKey
from sodabox.core.protocols import SealedBoxProvider
from sodabox.exceptions import FormatError, SodaError
from sodabox.version import VERSION_SHA

PUBLIC_LABEL: str = "Public key (send to others for encrypting):"
PRIVATE_LABEL: str = "Private key (keep for yourself for decrypting):"


# ---------------------------------------------------------------------------
# Argument types
# ---------------------------------------------------------------------------

def _format_error_message(exc: FormatError) -> str:
    """Join a key parse error and its hint into one argparse message."""
    if exc.hint:
        return f"{exc} {exc.hint}"
    return str(exc)


def public_key_arg(text: str) -> PublicKey:
    """argparse ``type=`` callable for ``sodapub…`` arguments."""
    try:
        return parse_public(text)
    except FormatError as exc:
        raise argparse.ArgumentTypeError(_format_error_message(exc)) from exc


def private_key_arg(text: str) -> PrivateKey:
    """argparse ``type=`` callable for ``sodapriv…`` arguments."""
    try:
        return parse_private(text)
    except FormatError as exc:
        raise argparse.ArgumentTypeError(_format_error_message(exc)) from exc


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``sodabox generate``
    * ``sodabox encrypt <public> [value]``
    * ``sodabox decrypt <private> [value]``
    * ``sodabox doctor``
    * ``sodabox --version``
    """
    parser = argparse.ArgumentParser(
        prog="sodabox",
        description="Anonymous-sender public-key encryption (libsodium sealed boxes).",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {VERSION_SHA}",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    subparsers.add_parser("generate", help="Generate a new keypair.")

    encrypt = subparsers.add_parser(
        "encrypt",
        help="Encrypt a message for the given public key.",
    )
    encrypt.add_argument(
        "public",
        type=public_key_arg,
        help="Public key. Only the owner of the corresponding private key can decrypt.",
    )
    encrypt.add_argument(
        "value",
        nargs="?",
        default=None,
        help="Value. If omitted, read from stdin.",
    )

    decrypt = subparsers.add_parser(
        "decrypt",
        help="Decrypt a message using the given private key.",
    )
    decrypt.add_argument(
        "private",
        type=private_key_arg,
        help="Private key.",
    )
    decrypt.add_argument(
        "value",
        nargs="?",
        default=None,
        help="Encrypted message. If omitted, read from stdin.",
    )

    subparsers.add_parser("doctor", help="Check the runtime environment.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _make_provider() -> SealedBoxProvider:
    from sodabox.infra.nacl_provider import NaclSealedBoxProvider

    return NaclSealedBoxProvider()


def _handle_generate() -> int:
    """Print a fresh keypair, public key first."""
    from sodabox.core.keygen import KeypairService

    pair = KeypairService(_make_provider()).generate()
    print(f"{PUBLIC_LABEL} {format_public(pair.public)}")
    print(f"{PRIVATE_LABEL} {format_private(pair.private)}")
    return exit_codes.SUCCESS


def _handle_encrypt(public: PublicKey, value: str | None) -> int:
    """Encrypt *value* (or all of stdin, as bytes) and print base64."""
    from sodabox.cli.streams import read_stdin_bytes
    from sodabox.core.sealed_box import SealedBoxService

    # fsencode recovers the exact argv bytes, undecodable ones included.
    plaintext = read_stdin_bytes() if value is None else os.fsencode(value)
    ciphertext = SealedBoxService(_make_provider()).encrypt(public, plaintext)
    print(ciphertext)
    return exit_codes.SUCCESS


def _handle_decrypt(private: PrivateKey, value: str | None) -> int:
    """Decrypt *value* (or all of stdin, as text) and write raw bytes."""
    from sodabox.cli.streams import read_stdin_text, write_stdout_bytes
    from sodabox.core.sealed_box import SealedBoxService

    ciphertext = read_stdin_text() if value is None else value
    plaintext = SealedBoxService(_make_provider()).decrypt(private, ciphertext)
    write_stdout_bytes(plaintext)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from sodabox.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the sodabox CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "generate":
        return _handle_generate()
    if args.command == "encrypt":
        return _handle_encrypt(args.public, args.value)
    if args.command == "decrypt":
        return _handle_decrypt(args.private, args.value)
    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush stays quiet."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):  # stdout without a real descriptor
        pass


def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except SodaError as exc:
        print_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(exit_codes.BROKEN_PIPE)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]", plain="\nAborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}",
            plain=(
                "Unexpected error. Please report this issue.\n"
                f"  {type(exc).__name__}: {exc}"
            ),
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
