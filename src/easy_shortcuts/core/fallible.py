"""Lazy sequences whose production step can fail.

:class:`FallibleIterator` is a small state machine:

* ``READY`` — :meth:`advance` is attempted on every ``next()``.
* ``EXHAUSTED`` — the source ended naturally; further ``next()`` calls
  keep raising ``StopIteration``.
* ``FAILED`` — :meth:`advance` raised.  The resource is released and the
  injected failure handler is invoked immediately.  The fail-fast
  handler never returns, so consumers only ever see good elements; an
  embedding that installs a returning handler sees the sequence end.

Subclasses implement :meth:`advance` and, when they own a resource,
:meth:`release`.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import TypeVar

from easy_shortcuts.core.sequence import Seq
from easy_shortcuts.exceptions import FatalError, ShortcutsError

logger = logging.getLogger(__name__)

T = TypeVar("T")

FailureHandler = Callable[[Exception], object]
"""Receives the error that stopped a sequence.  Usually does not return."""

FALLIBLE_ERRORS: tuple[type[Exception], ...] = (OSError, UnicodeError, ShortcutsError)
"""Errors treated as a failed advance; anything else is a programming bug."""


class State(enum.Enum):
    READY = "ready"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class FallibleIterator(Seq[T]):
    """Single-pass sequence routing per-step failures to *on_failure*."""

    def __init__(self, on_failure: FailureHandler) -> None:
        super().__init__()
        self._on_failure: FailureHandler = on_failure
        self._state: State = State.READY

    @property
    def state(self) -> State:
        return self._state

    def advance(self) -> T:
        """Produce the next element or raise ``StopIteration`` at the end."""
        raise NotImplementedError

    def release(self) -> None:
        """Free the underlying resource.  Called once, on leaving ``READY``."""

    def __next__(self) -> T:
        if self._state is not State.READY:
            raise StopIteration
        try:
            return self.advance()
        except FatalError:
            raise
        except StopIteration:
            self._state = State.EXHAUSTED
            self.release()
            raise
        except FALLIBLE_ERRORS as exc:
            self._state = State.FAILED
            logger.debug("%s failed: %r", type(self).__name__, exc)
            self.release()
            self._on_failure(exc)
            raise StopIteration from exc
