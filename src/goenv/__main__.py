"""Allow ``python -m goenv`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m goenv`` behaves identically to the ``goenv`` console script.
"""

from __future__ import annotations

from goenv.cli.app import cli

if __name__ == "__main__":
    cli()
