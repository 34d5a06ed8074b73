"""Allow ``python -m numconv`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m numconv`` behaves identically to the ``numconv`` console
script.
"""

from __future__ import annotations

from numconv.cli.app import cli

if __name__ == "__main__":
    cli()
