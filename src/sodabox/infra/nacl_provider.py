"""PyNaCl backed implementation of :class:`~sodabox.core.protocols.SealedBoxProvider`.

This module is the **only** place in the codebase that imports ``nacl``.
All PyNaCl exceptions are caught here and re-raised as typed
:class:`~sodabox.exceptions.SodaError` subclasses — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

from types import ModuleType

from sodabox.exceptions import DecryptionFailedError, EnvironmentError


def _load_nacl_public() -> ModuleType:
    """Return the ``nacl.public`` module or raise ``EnvironmentError``."""
    try:
        import nacl.public
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "PyNaCl is not installed. Install with: pip install pynacl",
        ) from exc
    return nacl.public


def nacl_version() -> str | None:
    """Return the installed PyNaCl version, or ``None`` when missing."""
    try:
        import nacl
    except ModuleNotFoundError:
        return None
    return getattr(nacl, "__version__", "unknown")


class NaclSealedBoxProvider:
    """Concrete :class:`SealedBoxProvider` backed by libsodium via PyNaCl.

    Usage::

        provider = NaclSealedBoxProvider()
        public, private = provider.generate_keypair()
        box = provider.seal(public, b"hello")
        provider.open(private, box)  # b"hello"

    Satisfies the protocol structurally — no explicit inheritance.
    """

    def generate_keypair(self) -> tuple[bytes, bytes]:
        """Generate a Curve25519 pair from libsodium's ``randombytes``."""
        public_mod = _load_nacl_public()
        private = public_mod.PrivateKey.generate()
        return bytes(private.public_key), bytes(private)

    def seal(self, public_key: bytes, plaintext: bytes) -> bytes:
        """Anonymous-sender seal of *plaintext* for *public_key*."""
        public_mod = _load_nacl_public()
        box = public_mod.SealedBox(public_mod.PublicKey(public_key))
        return bytes(box.encrypt(plaintext))

    def open(self, private_key: bytes, ciphertext: bytes) -> bytes:
        """Open *ciphertext*; the public half is derived from *private_key*.

        Raises
        ------
        DecryptionFailedError
            For any libsodium failure.  Its message is intentionally the
            same whatever the cause.
        """
        public_mod = _load_nacl_public()
        import nacl.exceptions

        box = public_mod.SealedBox(public_mod.PrivateKey(private_key))
        try:
            return bytes(box.decrypt(ciphertext))
        except nacl.exceptions.CryptoError as exc:
            raise DecryptionFailedError(
                "Could not decrypt data.",
                hint="The message was not sealed for this key, or it was altered.",
            ) from exc
