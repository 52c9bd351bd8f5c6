"""Infrastructure layer — external system integration.

This layer wraps all interaction with PyNaCl / libsodium.  Every raw
third-party exception must be caught here and re-raised as a
:class:`~sodabox.exceptions.SodaError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from sodabox.infra.nacl_provider import NaclSealedBoxProvider, nacl_version

__all__: list[str] = [
    "NaclSealedBoxProvider",
    "nacl_version",
]
