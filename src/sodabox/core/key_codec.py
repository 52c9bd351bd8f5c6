"""Key text codec — ``EncodedKeyText`` to keys and back.

Format::

    sodapub<64 lowercase hex digits>    public key
    sodapriv<64 lowercase hex digits>   private key

Parsing runs three stages in order and fails at the first one that
does not hold:

1. prefix       → :class:`~sodabox.exceptions.WrongPrefixError`
2. hex body     → :class:`~sodabox.exceptions.NotHexError`
3. byte length  → :class:`~sodabox.exceptions.InvalidLengthError`

Upper-case hex digits are accepted on input; output is always lower
case, so ``format(parse(text))`` normalises and ``parse(format(key))``
is the identity.
"""

from __future__ import annotations

import binascii

from sodabox.core.models import PrivateKey, PublicKey
from sodabox.exceptions import NotHexError, WrongPrefixError

PUBLIC_PREFIX: str = "sodapub"
PRIVATE_PREFIX: str = "sodapriv"


# ---------------------------------------------------------------------------
# Shared stages
# ---------------------------------------------------------------------------

def _strip_prefix(text: str, prefix: str, kind: str) -> str:
    if not text.startswith(prefix):
        raise WrongPrefixError(
            f"Not a soda {kind} key.",
            hint=f"{kind.capitalize()} keys start with '{prefix}'.",
        )
    return text[len(prefix):]


def _decode_hex(body: str) -> bytes:
    """Strict hex decode: no whitespace, no separators, even length."""
    try:
        return binascii.unhexlify(body)
    except ValueError as exc:  # binascii.Error and non-ASCII input
        raise NotHexError("Not hex encoded.") from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_public(text: str) -> PublicKey:
    """Parse ``sodapub…`` text into a :class:`PublicKey`.

    Raises
    ------
    WrongPrefixError
        When *text* does not start with ``sodapub``.
    NotHexError
        When the remainder is not valid hexadecimal.
    InvalidLengthError
        When the decoded key is not exactly 32 bytes.
    """
    body = _strip_prefix(text, PUBLIC_PREFIX, "public")
    return PublicKey(_decode_hex(body))


def parse_private(text: str) -> PrivateKey:
    """Parse ``sodapriv…`` text into a :class:`PrivateKey`.

    Same stages and errors as :func:`parse_public`.
    """
    body = _strip_prefix(text, PRIVATE_PREFIX, "private")
    return PrivateKey(_decode_hex(body))


def format_public(key: PublicKey) -> str:
    """Return the canonical ``sodapub…`` text for *key*."""
    return PUBLIC_PREFIX + key.raw.hex()


def format_private(key: PrivateKey) -> str:
    """Return the canonical ``sodapriv…`` text for *key*."""
    return PRIVATE_PREFIX + key.raw.hex()
