"""Core / service layer — key codec and sealed-box orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``; no PyNaCl import.
* All functions must be fully typed and deterministic (key generation
  excepted, whose randomness comes from the provider).
"""

from sodabox.core.key_codec import format_private, format_public, parse_private, parse_public
from sodabox.core.keygen import KeypairService
from sodabox.core.models import KeyPair, PrivateKey, PublicKey
from sodabox.core.protocols import SealedBoxProvider
from sodabox.core.sealed_box import SealedBoxService

__all__: list[str] = [
    "KeyPair",
    "KeypairService",
    "PrivateKey",
    "PublicKey",
    "SealedBoxProvider",
    "SealedBoxService",
    "format_private",
    "format_public",
    "parse_private",
    "parse_public",
]
