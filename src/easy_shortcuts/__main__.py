"""Allow ``python -m easy_shortcuts`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m easy_shortcuts`` behaves like the ``easy-shortcuts`` script.
"""

from __future__ import annotations

from easy_shortcuts.cli.app import cli

if __name__ == "__main__":
    cli()
