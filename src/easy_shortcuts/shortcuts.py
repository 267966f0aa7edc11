"""Fail-fast shortcuts for quick scripts.

Every helper here either returns a usable value or quits through the
active :class:`~easy_shortcuts.cli.failfast.FailFast` policy; none of
them hands an error back to the caller::

    import easy_shortcuts as es

    path = es.argn_or(1, "notes.txt")
    es.lines(es.open(path)).take(3).print("\\n")

For the same operations with typed exceptions instead of quitting, use
:mod:`easy_shortcuts.infra` directly.
"""

from __future__ import annotations

import sys
from typing import IO

from easy_shortcuts.cli.failfast import fail, guard
from easy_shortcuts.infra import arguments
from easy_shortcuts.infra import files as file_ops
from easy_shortcuts.infra.directory import DirIter, FileNameIter
from easy_shortcuts.infra.files import PathLike
from easy_shortcuts.infra.lines import LineIter
from easy_shortcuts.infra.shell import run_shell


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------

def argn_or(index: int, default: str) -> str:
    """The *index*-th command-line argument, or *default*."""
    value = arguments.argn(index)
    return default if value is None else value


def argn_err(index: int, message: str) -> str:
    """The *index*-th command-line argument, or quit with *message*."""
    with guard():
        return arguments.require_arg(index, message)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def open(path: PathLike, *, binary: bool = False) -> IO:  # noqa: A001
    """Open *path* for reading, quitting on any error."""
    with guard():
        return file_ops.open_file(path, binary=binary)


def create(path: PathLike) -> IO[str]:
    """Create *path* for writing, quitting if that is not possible."""
    with guard():
        return file_ops.create_file(path)


def read_to_string(path: PathLike) -> str:
    """Return the contents of *path*, quitting on any error."""
    with guard():
        return file_ops.read_text(path)


def write_all(path: PathLike, text: str) -> None:
    """Write *text* to a new file at *path*, quitting on any error."""
    with guard():
        file_ops.write_text(path, text)


# ---------------------------------------------------------------------------
# Processes
# ---------------------------------------------------------------------------

def shell(command: str) -> str:
    """Run *command* with ``sh -c``; return stdout and stderr combined."""
    with guard():
        return run_shell(command)


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------

def lines(source: IO | PathLike | None = None) -> LineIter:
    """Iterate over the lines of *source*, quitting on a read error.

    *source* may be an open stream (closed when the lines run out), a
    ``str``, ``bytes`` or path-like path (opened with :func:`open`), or
    ``None`` for stdin, which is left open.
    """
    if source is None:
        return LineIter(sys.stdin, fail, close=False)
    if isinstance(source, (str, bytes)) or hasattr(source, "__fspath__"):
        return LineIter(open(source), fail)  # type: ignore[arg-type]
    return LineIter(source, fail)  # type: ignore[arg-type]


def paths(directory: PathLike) -> DirIter:
    """Iterate over ``(path, metadata)`` pairs in *directory*.

    Quits if the directory cannot be listed or an entry cannot be read.
    """
    with guard():
        return DirIter(directory, fail)


def files(directory: PathLike) -> FileNameIter:
    """Iterate over the entry names in *directory*, quitting on error."""
    with guard():
        return FileNameIter(directory, fail)
