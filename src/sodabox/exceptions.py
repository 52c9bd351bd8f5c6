"""Custom exception hierarchy for sodabox.

Every error condition a user can trigger maps to a subclass of
:class:`SodaError`.  Raw PyNaCl / ``binascii`` exceptions must NEVER
propagate beyond the layer that produced them — they are caught and
re-raised as a typed subclass defined here, chained with ``from`` so
the CLI boundary can render the cause chain.

Hierarchy
---------
SodaError
├── FormatError
│   ├── WrongPrefixError
│   ├── NotHexError
│   └── InvalidLengthError
├── TransportError
│   └── InvalidBase64Error
├── CryptoError
│   └── DecryptionFailedError
└── EnvironmentError
"""

from __future__ import annotations


class SodaError(Exception):
    """Base exception for all sodabox errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Key text --------------------------------------------------------------

class FormatError(SodaError):
    """Raised when key text cannot be parsed into a key."""


class WrongPrefixError(FormatError):
    """Raised when key text lacks the prefix for the expected key kind."""


class NotHexError(FormatError):
    """Raised when the key body is not valid hexadecimal."""


class InvalidLengthError(FormatError):
    """Raised when decoded key bytes have the wrong length."""


# --- Ciphertext transport --------------------------------------------------

class TransportError(SodaError):
    """Raised when ciphertext text cannot be turned back into bytes."""


class InvalidBase64Error(TransportError):
    """Raised when ciphertext text is not valid standard base64."""


# --- Cryptography ----------------------------------------------------------

class CryptoError(SodaError):
    """Raised when the sealed-box primitive fails."""


class DecryptionFailedError(CryptoError):
    """Raised when a ciphertext cannot be opened.

    Deliberately covers every cause (wrong key, tampering, truncation):
    the primitive does not tell them apart and neither do we.
    """


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SodaError):
    """Raised when a required runtime dependency is not available."""
