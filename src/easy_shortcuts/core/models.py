"""Domain models for easy-shortcuts.

Models are **frozen** dataclasses — immutable value objects produced
once per directory entry and owned by the consumer for one loop
iteration.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class PathEntry:
    """A directory entry paired with its metadata.

    Unpacks like a tuple, so ``for path, meta in paths(".")`` works.
    """

    path: Path
    """Full path of the entry (directory joined with the entry name)."""

    metadata: os.stat_result
    """Result of ``lstat`` on the entry; a symlink describes the link itself."""

    def __iter__(self) -> Iterator[object]:
        yield self.path
        yield self.metadata

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.metadata.st_mode)

    @property
    def is_file(self) -> bool:
        return stat.S_ISREG(self.metadata.st_mode)

    @property
    def size(self) -> int:
        """Size in bytes."""
        return self.metadata.st_size
