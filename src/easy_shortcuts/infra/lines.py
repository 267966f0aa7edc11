"""Infrastructure: line-by-line reading of any readable stream.

:class:`LineIter` turns a text or binary stream into a lazy sequence of
``str`` lines.  Read and decode failures are wrapped as
:class:`~easy_shortcuts.exceptions.ReadError` and handed to the failure
handler by :class:`~easy_shortcuts.core.fallible.FallibleIterator`.
"""

from __future__ import annotations

import logging
from typing import IO, AnyStr

from easy_shortcuts.core.fallible import FailureHandler, FallibleIterator
from easy_shortcuts.core.outcome import describe_error
from easy_shortcuts.exceptions import ReadError

logger = logging.getLogger(__name__)


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class LineIter(FallibleIterator[str]):
    """Lines of *source* without their ``\\n`` / ``\\r\\n`` terminator.

    Parameters
    ----------
    source:
        An open text or binary stream.  Binary lines are decoded as UTF-8.
    on_failure:
        Handler receiving the :class:`ReadError` when a read fails.
    close:
        Close *source* once the sequence is exhausted or has failed.
        Pass ``False`` for streams the caller keeps using, e.g. stdin.
    """

    def __init__(
        self,
        source: IO[AnyStr],
        on_failure: FailureHandler,
        *,
        close: bool = True,
    ) -> None:
        super().__init__(on_failure)
        self._source: IO[AnyStr] = source
        self._close: bool = close
        self._name: str = str(getattr(source, "name", "<stream>"))

    def advance(self) -> str:
        try:
            raw = self._source.readline()
            line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        except (OSError, UnicodeError, ValueError) as exc:
            raise ReadError(f"read {self._name!r} {describe_error(exc)}") from exc
        if not line:
            raise StopIteration
        return _strip_newline(line)

    def release(self) -> None:
        if self._close:
            logger.debug("closing %s", self._name)
            self._source.close()
