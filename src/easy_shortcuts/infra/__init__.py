"""Infrastructure layer — filesystem, process and argv access.

Every raw ``OSError`` is caught here and re-raised as a
:class:`~easy_shortcuts.exceptions.ShortcutsError` subclass carrying the
operation and path in its message.

Rules
-----
* No imports from ``cli``.
* No process termination and no user-facing output.
"""

from easy_shortcuts.infra.arguments import argn, require_arg
from easy_shortcuts.infra.directory import (
    DirIter,
    FileNameIter,
    is_dir,
    is_file,
    metadata,
)
from easy_shortcuts.infra.files import create_file, open_file, read_text, write_text
from easy_shortcuts.infra.lines import LineIter
from easy_shortcuts.infra.shell import run_shell

__all__: list[str] = [
    "DirIter",
    "FileNameIter",
    "LineIter",
    "argn",
    "create_file",
    "is_dir",
    "is_file",
    "metadata",
    "open_file",
    "read_text",
    "require_arg",
    "run_shell",
    "write_text",
]
