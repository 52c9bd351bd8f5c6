"""Tests for the sealed-box service (core/sealed_box.py) and keygen.

Real PyNaCl backs the round-trip and tamper properties; a mocked
provider checks that only SodaError subclasses escape the service.

Coverage:
* Encrypt/decrypt round-trip across many fresh pairs.
* Empty plaintext round-trips to ``b""``.
* Ciphertext length is overhead + plaintext length.
* Cross-key decryption and any single-byte flip fail opaquely.
* Malformed base64 is a transport error, not a crypto error.
* Provider exception mapping.
"""

from __future__ import annotations

import base64
from unittest.mock import MagicMock

import pytest

from sodabox.core.keygen import KeypairService
from sodabox.core.models import SEAL_OVERHEAD, KeyPair, PrivateKey, PublicKey
from sodabox.core.sealed_box import SealedBoxService
from sodabox.exceptions import (
    CryptoError,
    DecryptionFailedError,
    InvalidBase64Error,
    InvalidLengthError,
)

MESSAGE = b"this is my message"


# ---------------------------------------------------------------------------
# Key generation
# ---------------------------------------------------------------------------

class TestKeypairService:
    def test_generates_valid_pair(self, keygen: KeypairService) -> None:
        pair = keygen.generate()
        assert isinstance(pair, KeyPair)
        assert len(pair.public.raw) == 32
        assert len(pair.private.raw) == 32

    def test_pairs_are_fresh(self, keygen: KeypairService) -> None:
        privates = {keygen.generate().private.raw for _ in range(20)}
        assert len(privates) == 20

    def test_uses_provider_bytes(self) -> None:
        provider = MagicMock()
        provider.generate_keypair.return_value = (b"\x01" * 32, b"\x02" * 32)
        pair = KeypairService(provider).generate()
        assert pair.public == PublicKey(b"\x01" * 32)
        assert pair.private == PrivateKey(b"\x02" * 32)

    def test_bad_provider_length_is_rejected(self) -> None:
        provider = MagicMock()
        provider.generate_keypair.return_value = (b"\x01" * 31, b"\x02" * 32)
        with pytest.raises(InvalidLengthError):
            KeypairService(provider).generate()


# ---------------------------------------------------------------------------
# Round-trip
# ---------------------------------------------------------------------------

class TestRoundTrip:
    def test_many_pairs(self, keygen: KeypairService, service: SealedBoxService) -> None:
        for _ in range(100):
            public, private = keygen.generate()
            ciphertext = service.encrypt(public, MESSAGE)
            assert service.decrypt(private, ciphertext) == MESSAGE

    def test_empty_plaintext(self, pair: KeyPair, service: SealedBoxService) -> None:
        ciphertext = service.encrypt(pair.public, b"")
        assert service.decrypt(pair.private, ciphertext) == b""

    def test_binary_plaintext(self, pair: KeyPair, service: SealedBoxService) -> None:
        plaintext = bytes(range(256)) * 4
        ciphertext = service.encrypt(pair.public, plaintext)
        assert service.decrypt(pair.private, ciphertext) == plaintext

    def test_ciphertext_length(self, pair: KeyPair, service: SealedBoxService) -> None:
        raw = base64.b64decode(service.encrypt(pair.public, MESSAGE))
        assert len(raw) == SEAL_OVERHEAD + len(MESSAGE)

    def test_encryption_is_randomised(self, pair: KeyPair, service: SealedBoxService) -> None:
        assert service.encrypt(pair.public, MESSAGE) != service.encrypt(pair.public, MESSAGE)

    def test_trailing_newline_is_ignored(self, pair: KeyPair, service: SealedBoxService) -> None:
        ciphertext = service.encrypt(pair.public, MESSAGE) + "\n"
        assert service.decrypt(pair.private, ciphertext) == MESSAGE


# ---------------------------------------------------------------------------
# Failure
# ---------------------------------------------------------------------------

class TestDecryptionFailure:
    def test_cross_key(self, keygen: KeypairService, service: SealedBoxService) -> None:
        alice = keygen.generate()
        bob = keygen.generate()
        ciphertext = service.encrypt(alice.public, MESSAGE)
        with pytest.raises(DecryptionFailedError, match="Could not decrypt data"):
            service.decrypt(bob.private, ciphertext)

    def test_every_single_byte_flip_fails(
        self, pair: KeyPair, service: SealedBoxService
    ) -> None:
        raw = bytearray(base64.b64decode(service.encrypt(pair.public, MESSAGE)))
        for index in range(len(raw)):
            tampered = bytearray(raw)
            tampered[index] ^= 0x01
            text = base64.b64encode(bytes(tampered)).decode("ascii")
            with pytest.raises(DecryptionFailedError):
                service.decrypt(pair.private, text)

    def test_every_base64_character_swap_fails(
        self, pair: KeyPair, service: SealedBoxService
    ) -> None:
        text = service.encrypt(pair.public, MESSAGE)
        # 66 raw bytes encode without padding, so every character carries data.
        assert "=" not in text
        for index, char in enumerate(text):
            replacement = "B" if char == "A" else "A"
            tampered = text[:index] + replacement + text[index + 1:]
            with pytest.raises((DecryptionFailedError, InvalidBase64Error)):
                service.decrypt(pair.private, tampered)

    def test_truncated(self, pair: KeyPair, service: SealedBoxService) -> None:
        raw = base64.b64decode(service.encrypt(pair.public, MESSAGE))
        truncated = base64.b64encode(raw[:SEAL_OVERHEAD - 1]).decode("ascii")
        with pytest.raises(DecryptionFailedError):
            service.decrypt(pair.private, truncated)

    def test_empty_ciphertext(self, pair: KeyPair, service: SealedBoxService) -> None:
        with pytest.raises(DecryptionFailedError):
            service.decrypt(pair.private, "")

    def test_is_crypto_error(self, keygen: KeypairService, service: SealedBoxService) -> None:
        ciphertext = service.encrypt(keygen.generate().public, MESSAGE)
        with pytest.raises(CryptoError):
            service.decrypt(keygen.generate().private, ciphertext)


class TestInvalidBase64:
    @pytest.mark.parametrize(
        "text",
        ["not base64!", "abc", "YWJj ZGVm", "YWJj\x00", "¿¿¿¿"],
    )
    def test_rejected(self, pair: KeyPair, service: SealedBoxService, text: str) -> None:
        with pytest.raises(InvalidBase64Error, match="Invalid base64 input"):
            service.decrypt(pair.private, text)

    def test_cause_is_chained(self, pair: KeyPair, service: SealedBoxService) -> None:
        with pytest.raises(InvalidBase64Error) as exc_info:
            service.decrypt(pair.private, "abc")
        assert isinstance(exc_info.value.__cause__, ValueError)


# ---------------------------------------------------------------------------
# Provider exception mapping
# ---------------------------------------------------------------------------

class TestProviderMapping:
    def test_encrypt_wraps_unexpected(self) -> None:
        provider = MagicMock()
        provider.seal.side_effect = RuntimeError("boom")
        with pytest.raises(CryptoError, match="boom") as exc_info:
            SealedBoxService(provider).encrypt(PublicKey(b"\x00" * 32), MESSAGE)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_decrypt_wraps_unexpected(self) -> None:
        provider = MagicMock()
        provider.open.side_effect = RuntimeError("boom")
        with pytest.raises(DecryptionFailedError):
            SealedBoxService(provider).decrypt(PrivateKey(b"\x00" * 32), "AAAA")

    def test_decrypt_passes_soda_error_through(self) -> None:
        original = DecryptionFailedError("Could not decrypt data.", hint="h")
        provider = MagicMock()
        provider.open.side_effect = original
        with pytest.raises(DecryptionFailedError) as exc_info:
            SealedBoxService(provider).decrypt(PrivateKey(b"\x00" * 32), "AAAA")
        assert exc_info.value is original

    def test_encrypt_passes_raw_key_bytes(self) -> None:
        provider = MagicMock()
        provider.seal.return_value = b"sealed"
        result = SealedBoxService(provider).encrypt(PublicKey(b"\x05" * 32), MESSAGE)
        provider.seal.assert_called_once_with(b"\x05" * 32, MESSAGE)
        assert result == base64.b64encode(b"sealed").decode("ascii")
