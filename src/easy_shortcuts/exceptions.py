"""Custom exception hierarchy for easy-shortcuts.

Every failure raised by the infrastructure layer inherits from
:class:`ShortcutsError`.  Raw ``OSError`` instances are caught at the
infra boundary and re-raised as a typed subclass whose message already
carries the context (``open 'notes.txt' No such file or directory``), so
the fail-fast boundary can print it verbatim.

Hierarchy
---------
ShortcutsError
├── MissingArgumentError
├── FileAccessError
│   ├── ReadError
│   └── WriteError
├── DirectoryError
├── MetadataError
├── ShellCommandError
├── EnvironmentError
└── FatalError
"""

from __future__ import annotations


class ShortcutsError(Exception):
    """Base exception for all easy-shortcuts errors.

    The message is the complete, user-facing context line; the fail-fast
    boundary prefixes it with ``"<program> error: "`` and nothing else.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Arguments -------------------------------------------------------------

class MissingArgumentError(ShortcutsError):
    """Raised when a required positional argument was not supplied."""


# --- Files -----------------------------------------------------------------

class FileAccessError(ShortcutsError):
    """Raised when a file cannot be opened or created."""


class ReadError(FileAccessError):
    """Raised when reading from an open file or stream fails."""


class WriteError(FileAccessError):
    """Raised when writing to a file fails."""


# --- Directories -----------------------------------------------------------

class DirectoryError(ShortcutsError):
    """Raised when a directory cannot be listed."""


class MetadataError(ShortcutsError):
    """Raised when metadata for a directory entry cannot be fetched."""


# --- Shell -----------------------------------------------------------------

class ShellCommandError(ShortcutsError):
    """Raised when a shell command cannot be run or its output decoded."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ShortcutsError):
    """Raised when a required runtime dependency is not available."""


# --- Fail-fast -------------------------------------------------------------

class FatalError(ShortcutsError):
    """Raised by the fail-fast boundary instead of exiting.

    Only used when quitting has been switched off (``EASY_DONT_QUIT_PANIC``
    or ``FailFastConfig(raise_instead=True)``).  The message is the full
    ``"<program> error: ..."`` line.
    """
