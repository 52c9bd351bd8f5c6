"""Keypair generation service."""

from __future__ import annotations

from sodabox.core.models import KeyPair, PrivateKey, PublicKey
from sodabox.core.protocols import SealedBoxProvider


class KeypairService:
    """Produces fresh key pairs from the provider's secure RNG.

    There is no recoverable failure path: a provider that cannot reach
    a secure random source is a fatal condition and its exception is
    left to the CLI boundary.
    """

    def __init__(self, provider: SealedBoxProvider) -> None:
        self._provider: SealedBoxProvider = provider

    def generate(self) -> KeyPair:
        public_raw, private_raw = self._provider.generate_keypair()
        return KeyPair(public=PublicKey(public_raw), private=PrivateKey(private_raw))
