"""Domain models for sodabox.

All models are **frozen** dataclasses — immutable value objects that
carry raw key bytes and nothing else.  A key can only exist with the
exact byte length the sealed-box primitive (Curve25519) requires; any
other length is rejected at construction time.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from sodabox.exceptions import InvalidLengthError

PUBLIC_KEY_SIZE: int = 32
"""Raw length of a Curve25519 public key (``crypto_box_PUBLICKEYBYTES``)."""

PRIVATE_KEY_SIZE: int = 32
"""Raw length of a Curve25519 private key (``crypto_box_SECRETKEYBYTES``)."""

SEAL_OVERHEAD: int = 48
"""Bytes a sealed box adds to the plaintext (``crypto_box_SEALBYTES``)."""


def _check_length(kind: str, raw: bytes, expected: int) -> None:
    if len(raw) != expected:
        raise InvalidLengthError(
            f"Invalid {kind} key: expected {expected} bytes, got {len(raw)}.",
        )


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PublicKey:
    """A recipient's public key.  Safe to copy and display."""

    raw: bytes
    """Exactly :data:`PUBLIC_KEY_SIZE` bytes."""

    def __post_init__(self) -> None:
        _check_length("public", self.raw, PUBLIC_KEY_SIZE)


@dataclass(frozen=True, slots=True)
class PrivateKey:
    """A private key.

    The raw bytes are excluded from ``repr`` so the key never ends up
    in a traceback or debug print by accident.
    """

    raw: bytes = field(repr=False)
    """Exactly :data:`PRIVATE_KEY_SIZE` bytes."""

    def __post_init__(self) -> None:
        _check_length("private", self.raw, PRIVATE_KEY_SIZE)


# ---------------------------------------------------------------------------
# Pair
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class KeyPair:
    """A matching public/private key pair.

    Unpacks like a 2-tuple: ``public, private = pair``.
    """

    public: PublicKey
    private: PrivateKey

    def __iter__(self) -> Iterator[PublicKey | PrivateKey]:
        yield self.public
        yield self.private
