"""Exit-code constants shared by the fail-fast boundary and the CLI.

Every way the process can end maps to one of these values, so scripts
calling an easy-shortcuts program can rely on them.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Normal completion."""

GENERAL_ERROR: int = 1
"""A fail-fast helper quit, or a ShortcutsError reached the CLI boundary."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
