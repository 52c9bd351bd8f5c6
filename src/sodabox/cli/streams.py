"""Standard stream helpers for payload input and output.

Encrypt and decrypt deliberately read stdin differently: plaintext may
be arbitrary binary and is read as bytes, while ciphertext is base64
and is read as text.  Both read to end-of-stream.
"""

from __future__ import annotations

import sys

from sodabox.exceptions import InvalidBase64Error


def read_stdin_bytes() -> bytes:
    """Read all of stdin as raw bytes."""
    return sys.stdin.buffer.read()


def read_stdin_text() -> str:
    """Read all of stdin as text.

    Raises
    ------
    InvalidBase64Error
        When stdin cannot be decoded as text; base64 is always ASCII.
    """
    try:
        return sys.stdin.read()
    except UnicodeDecodeError as exc:
        raise InvalidBase64Error("Invalid base64 input.") from exc


def write_stdout_bytes(data: bytes) -> None:
    """Write *data* to stdout unmodified, with nothing appended."""
    sys.stdout.flush()
    out = sys.stdout.buffer
    out.write(data)
    out.flush()
