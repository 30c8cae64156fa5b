"""Allow ``python -m vetkit`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m vetkit`` behaves identically to the ``vetkit``
console script.
"""

from __future__ import annotations

from vetkit.cli.app import cli

if __name__ == "__main__":
    cli()
