"""Infrastructure: directory listing and metadata queries.

:class:`DirIter` yields :class:`~easy_shortcuts.core.models.PathEntry`
pairs and :class:`FileNameIter` yields bare entry names, both in the
order ``os.scandir`` reports them.  A directory that cannot be opened
raises :class:`~easy_shortcuts.exceptions.DirectoryError` from the
constructor; failures while iterating go to the failure handler.

:func:`is_dir` and :func:`is_file` are the one place where a failure is
absorbed: a lookup that failed simply answers ``False``.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path
from typing import Union

from easy_shortcuts.core.fallible import FailureHandler, FallibleIterator
from easy_shortcuts.core.models import PathEntry
from easy_shortcuts.core.outcome import Outcome, capture, describe_error
from easy_shortcuts.exceptions import DirectoryError, MetadataError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _open_scandir(directory: PathLike) -> Iterator[os.DirEntry[str]]:
    logger.debug("scandir %s", os.fspath(directory))
    try:
        return os.scandir(directory)
    except OSError as exc:
        raise DirectoryError(f"{os.fspath(directory)!r} {describe_error(exc)}") from exc


class _ScandirIter(FallibleIterator):
    """Shared scandir ownership for the two directory sequences."""

    def __init__(self, directory: PathLike, on_failure: FailureHandler) -> None:
        super().__init__(on_failure)
        self._directory: str = os.fspath(directory)
        self._scandir = _open_scandir(directory)

    def _next_entry(self) -> os.DirEntry:
        try:
            return next(self._scandir)
        except OSError as exc:
            raise DirectoryError(f"{self._directory!r} {describe_error(exc)}") from exc

    def release(self) -> None:
        self._scandir.close()


class DirIter(_ScandirIter):
    """``(path, metadata)`` for every entry of a directory."""

    def advance(self) -> PathEntry:
        entry = self._next_entry()
        try:
            meta = entry.stat(follow_symlinks=False)
        except OSError as exc:
            raise MetadataError(
                f"metadata {entry.path!r} {describe_error(exc)}",
            ) from exc
        return PathEntry(path=Path(entry.path), metadata=meta)


class FileNameIter(_ScandirIter):
    """Entry names of a directory."""

    def advance(self) -> str:
        return self._next_entry().name


# ---------------------------------------------------------------------------
# Metadata lookups and absorbing predicates
# ---------------------------------------------------------------------------

def metadata(path: PathLike) -> Outcome[os.stat_result]:
    """Look up metadata for *path* without raising."""
    return capture(os.stat, path)


def is_dir(lookup: Outcome[os.stat_result]) -> bool:
    """Is the looked-up entry a directory?  A failed lookup answers ``False``."""
    if not lookup.is_ok:
        return False
    return stat.S_ISDIR(lookup.value.st_mode)  # type: ignore[union-attr]


def is_file(lookup: Outcome[os.stat_result]) -> bool:
    """Is the looked-up entry a regular file?  A failed lookup answers ``False``."""
    if not lookup.is_ok:
        return False
    return stat.S_ISREG(lookup.value.st_mode)  # type: ignore[union-attr]
