"""Protocols (interfaces) consumed by the core layer.

These define the contract the cryptographic backend must satisfy.
Core code depends ONLY on this protocol — never on PyNaCl directly —
so the codec and services stay pure and testable with fakes.
"""

from __future__ import annotations

from typing import Protocol


class SealedBoxProvider(Protocol):
    """Contract for sealed-box backends.

    All keys cross this boundary as raw bytes of the lengths defined in
    :mod:`sodabox.core.models`.  Implementations must map every
    backend-specific exception to a
    :class:`~sodabox.exceptions.SodaError` subclass.
    """

    def generate_keypair(self) -> tuple[bytes, bytes]:
        """Return fresh ``(public, private)`` raw key bytes.

        Randomness must come from a cryptographically secure source.
        """
        ...  # pragma: no cover

    def seal(self, public_key: bytes, plaintext: bytes) -> bytes:
        """Seal *plaintext* for the holder of *public_key*.

        Returns ``SEAL_OVERHEAD + len(plaintext)`` bytes.
        """
        ...  # pragma: no cover

    def open(self, private_key: bytes, ciphertext: bytes) -> bytes:
        """Open a sealed box with *private_key* and its derived public key.

        Raises
        ------
        DecryptionFailedError
            For every failure — wrong key, tampering, truncation alike.
        """
        ...  # pragma: no cover
