"""Allow ``python -m sodabox`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m sodabox`` behaves identically to the ``sodabox`` console
script.
"""

from __future__ import annotations

from sodabox.cli.app import cli

if __name__ == "__main__":
    cli()
