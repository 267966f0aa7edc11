"""Infrastructure: whole-file access with typed errors.

Each function wraps one or two standard-library calls and converts any
``OSError`` into a :class:`~easy_shortcuts.exceptions.FileAccessError`
subclass whose message names the operation and the path::

    open 'notes.txt' No such file or directory

Rules
-----
* No process termination — callers decide via the fail-fast boundary.
* No user-facing output.
"""

from __future__ import annotations

import logging
import os
from typing import IO, Union

from easy_shortcuts.core.outcome import describe_error
from easy_shortcuts.exceptions import FileAccessError, ReadError, WriteError

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, "os.PathLike[str]"]


def _context(operation: str, path: PathLike, exc: BaseException) -> str:
    return f"{operation} {os.fsdecode(path)!r} {describe_error(exc)}"


def open_file(path: PathLike, *, binary: bool = False) -> IO:
    """Open *path* for reading.

    Text mode uses UTF-8; ``binary=True`` returns a byte stream.

    Raises
    ------
    FileAccessError
        When the file cannot be opened.
    """
    logger.debug("open %s", os.fspath(path))
    try:
        if binary:
            return open(path, "rb")
        return open(path, encoding="utf-8")
    except OSError as exc:
        raise FileAccessError(_context("open", path, exc)) from exc


def create_file(path: PathLike) -> IO[str]:
    """Create (or truncate) *path* for writing text.

    Raises
    ------
    FileAccessError
        When the file cannot be created.
    """
    logger.debug("create %s", os.fspath(path))
    try:
        return open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise FileAccessError(_context("create", path, exc)) from exc


def read_text(path: PathLike) -> str:
    """Return the full UTF-8 contents of *path*.

    Raises
    ------
    FileAccessError
        When the file cannot be opened.
    ReadError
        When reading or decoding fails.
    """
    with open_file(path) as handle:
        try:
            return handle.read()
        except (OSError, UnicodeError) as exc:
            raise ReadError(_context("read", path, exc)) from exc


def write_text(path: PathLike, text: str) -> None:
    """Write *text* to a new file at *path*, replacing any existing file.

    Raises
    ------
    FileAccessError
        When the file cannot be created.
    WriteError
        When writing fails.
    """
    handle = create_file(path)
    try:
        with handle:
            handle.write(text)
    except OSError as exc:
        raise WriteError(_context("write", path, exc)) from exc
