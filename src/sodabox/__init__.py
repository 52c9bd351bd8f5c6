"""sodabox — anonymous-sender public-key encryption from the command line.

Keys travel as prefixed hex text, ciphertext as base64; the sealed-box
primitive itself comes from libsodium via PyNaCl.
"""

from sodabox.version import __version__

__all__: list[str] = ["__version__"]
