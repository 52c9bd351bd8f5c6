"""Version information for sodabox.

Both values are fixed at build time and read-only afterwards.
:data:`VERSION_SHA` is derived once at import and is what ``--version``
and ``doctor`` display.
"""

from __future__ import annotations

__version__: str = "1.0.0"

__git_sha__: str | None = None
"""Source revision stamped into release builds; ``None`` for checkouts."""


def describe_version(version: str, git_sha: str | None) -> str:
    """Return the human-readable version, with the revision when known."""
    if not git_sha:
        return version
    return f"{version} (Git SHA1 {git_sha})"


VERSION_SHA: str = describe_version(__version__, __git_sha__)
