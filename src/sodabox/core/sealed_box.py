"""Core sealed-box service — encrypt to base64 text, decrypt from it.

The actual seal/open is delegated to a
:class:`~sodabox.core.protocols.SealedBoxProvider` injected at
construction time.  This service owns:

* The base64 transport encoding of ciphertext (standard alphabet).
* Ensuring only :class:`~sodabox.exceptions.SodaError` subclasses
  escape.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* No PyNaCl import.
"""

from __future__ import annotations

import base64

from sodabox.core.models import PrivateKey, PublicKey
from sodabox.core.protocols import SealedBoxProvider
from sodabox.exceptions import (
    CryptoError,
    DecryptionFailedError,
    InvalidBase64Error,
    SodaError,
)


class SealedBoxService:
    """Stateless service for anonymous-sender encryption.

    Parameters
    ----------
    provider:
        Any object satisfying the :class:`SealedBoxProvider` protocol.
    """

    def __init__(self, provider: SealedBoxProvider) -> None:
        self._provider: SealedBoxProvider = provider

    # ------------------------------------------------------------------
    # Transport encoding (pure)
    # ------------------------------------------------------------------

    @staticmethod
    def encode_ciphertext(raw: bytes) -> str:
        """Return the standard base64 text of raw sealed-box output."""
        return base64.b64encode(raw).decode("ascii")

    @staticmethod
    def decode_ciphertext(text: str) -> bytes:
        """Decode base64 ciphertext text.

        Surrounding whitespace (e.g. the newline ``encrypt`` prints) is
        ignored; any other character outside the standard alphabet is an
        error rather than being silently skipped.

        Raises
        ------
        InvalidBase64Error
            When *text* is not valid standard base64.
        """
        try:
            return base64.b64decode(text.strip(), validate=True)
        except ValueError as exc:  # binascii.Error and non-ASCII input
            raise InvalidBase64Error("Invalid base64 input.") from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def encrypt(self, public_key: PublicKey, plaintext: bytes) -> str:
        """Seal *plaintext* for *public_key* and return base64 text.

        Works for any plaintext, including ``b""``.
        """
        try:
            sealed = self._provider.seal(public_key.raw, plaintext)
        except SodaError:
            raise
        except Exception as exc:
            raise CryptoError(f"Unexpected encryption error: {exc}") from exc
        return self.encode_ciphertext(sealed)

    def decrypt(self, private_key: PrivateKey, ciphertext: str) -> bytes:
        """Decode and open *ciphertext* with *private_key*.

        Raises
        ------
        InvalidBase64Error
            When *ciphertext* is not valid base64.
        DecryptionFailedError
            When the box cannot be opened with this key, for any reason.
        """
        sealed = self.decode_ciphertext(ciphertext)
        try:
            return self._provider.open(private_key.raw, sealed)
        except SodaError:
            raise
        except Exception as exc:
            raise DecryptionFailedError("Could not decrypt data.") from exc
