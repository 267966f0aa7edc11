"""Operation outcomes — the success-or-failure result of one fallible action.

An outcome is either :class:`Ok` carrying a value or :class:`Err`
carrying the exception that explains the failure.  Outcomes are never
stored; they are handed straight to the fail-fast boundary or to one of
the absorbing predicates (:func:`~easy_shortcuts.infra.directory.is_dir`).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def value_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome."""

    error: Exception

    @property
    def is_ok(self) -> bool:
        return False

    def value_or(self, default: T) -> T:
        return default

    def describe(self) -> str:
        """Human-readable description of the wrapped error."""
        return describe_error(self.error)


Outcome = Union[Ok[T], Err]


def capture(
    func: Callable[..., T],
    *args: object,
    catch: tuple[type[Exception], ...] = (OSError,),
) -> Outcome[T]:
    """Call ``func(*args)`` and wrap the result or a *catch*-listed error."""
    try:
        return Ok(func(*args))
    except catch as exc:
        return Err(exc)


def describe_error(exc: BaseException) -> str:
    """Return the message an operator should see for *exc*.

    ``OSError`` carries the platform description in ``strerror``
    (``"No such file or directory"``); its ``str()`` adds the errno and
    filename, which the callers already put in their context.
    """
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    text = str(exc)
    return text if text else type(exc).__name__
