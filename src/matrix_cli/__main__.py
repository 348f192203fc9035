"""Allow ``python -m matrix_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m matrix_cli`` behaves identically to the ``matrix`` console
script.
"""

from __future__ import annotations

from matrix_cli.cli.app import cli

if __name__ == "__main__":
    cli()
