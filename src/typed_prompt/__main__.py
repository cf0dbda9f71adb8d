"""Allow ``python -m typed_prompt`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m typed_prompt`` behaves identically to the
``typed-prompt`` console script.
"""

from __future__ import annotations

from typed_prompt.cli.app import cli

if __name__ == "__main__":
    cli()
