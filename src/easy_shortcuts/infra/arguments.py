"""Positional command-line argument lookup."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from easy_shortcuts.exceptions import MissingArgumentError


def argn(index: int, argv: Sequence[str] | None = None) -> str | None:
    """Return ``argv[index]`` or ``None`` when there are too few arguments.

    *argv* defaults to ``sys.argv``, so index ``0`` is the program name.
    """
    args = sys.argv if argv is None else argv
    if 0 <= index < len(args):
        return args[index]
    return None


def require_arg(index: int, message: str, argv: Sequence[str] | None = None) -> str:
    """Return ``argv[index]`` or raise :class:`MissingArgumentError`."""
    value = argn(index, argv)
    if value is None:
        raise MissingArgumentError(f"no argument {index}: {message}")
    return value
