"""Shared pytest fixtures and configuration for the sodabox test suite.

Guidelines
----------
* No network access in any test.
* Crypto properties run against real PyNaCl; provider failures are
  simulated with mocks at the protocol boundary.
* Core tests must be pure — no side effects.
* Stdin is replaced per test; nothing reads the real terminal.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Callable

import pytest

from sodabox.core.keygen import KeypairService
from sodabox.core.models import KeyPair
from sodabox.core.sealed_box import SealedBoxService
from sodabox.infra.nacl_provider import NaclSealedBoxProvider


@pytest.fixture
def provider() -> NaclSealedBoxProvider:
    return NaclSealedBoxProvider()


@pytest.fixture
def keygen(provider: NaclSealedBoxProvider) -> KeypairService:
    return KeypairService(provider)


@pytest.fixture
def service(provider: NaclSealedBoxProvider) -> SealedBoxService:
    return SealedBoxService(provider)


@pytest.fixture
def pair(keygen: KeypairService) -> KeyPair:
    return keygen.generate()


@pytest.fixture
def set_stdin(monkeypatch: pytest.MonkeyPatch) -> Callable[[bytes], None]:
    """Replace ``sys.stdin`` with a stream yielding the given bytes."""

    def _set(data: bytes) -> None:
        stream = io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", stream)

    return _set
