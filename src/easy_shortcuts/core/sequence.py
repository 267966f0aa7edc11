"""Convenience consumers and adapters for any iterable.

Two spellings are offered for every operation:

* free functions (``join(items, ",")``) that accept any iterable, and
* the chainable :class:`Seq` wrapper (``Seq(items).map(str.upper).join(",")``)
  which is also the base class of the fail-fast line and directory
  iterators, so ``lines(open(path)).take(3).print("\\n")`` reads left to
  right.

None of these operations fail on their own: anything upstream that could
fail has already been resolved by the fail-fast boundary.
"""

from __future__ import annotations

import io
import itertools
import sys
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, Generic, TextIO, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------

def _write_all(
    items: Iterable[object],
    delim: str,
    render: Callable[[object], str],
    out: TextIO | None,
) -> None:
    stream = out if out is not None else sys.stdout
    first = True
    for item in items:
        if not first:
            stream.write(delim)
        stream.write(render(item))
        first = False
    stream.flush()


def print_items(items: Iterable[object], delim: str, out: TextIO | None = None) -> None:
    """Write each element's ``str`` form to *out* (stdout), separated by *delim*.

    No delimiter follows the last element.
    """
    _write_all(items, delim, str, out)


def debug_items(items: Iterable[object], delim: str, out: TextIO | None = None) -> None:
    """Like :func:`print_items` but writes each element's ``repr``."""
    _write_all(items, delim, repr, out)


# ---------------------------------------------------------------------------
# String building
# ---------------------------------------------------------------------------

def join(items: Iterable[str], delim: str) -> str:
    """Concatenate *items* with *delim* between consecutive elements.

    Elements are streamed into the buffer one at a time; no list of the
    inputs is built first.
    """
    buffer = io.StringIO()
    first = True
    for item in items:
        if not first:
            buffer.write(delim)
        buffer.write(item)
        first = False
    return buffer.getvalue()


def prepend(items: Iterable[str], prefix: str) -> str:
    """Concatenate *items*, writing *prefix* before every element."""
    buffer = io.StringIO()
    for item in items:
        buffer.write(prefix)
        buffer.write(item)
    return buffer.getvalue()


def append(items: Iterable[str], func: Callable[[str], str]) -> str:
    """Concatenate ``func(item)`` for every element."""
    buffer = io.StringIO()
    for item in items:
        buffer.write(func(item))
    return buffer.getvalue()


# ---------------------------------------------------------------------------
# Materializing
# ---------------------------------------------------------------------------

def to_vec(items: Iterable[T]) -> list[T]:
    """Collect *items* into a list, preserving order."""
    return list(items)


def to_map(pairs: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Collect ``(key, value)`` pairs into a dict; the last duplicate wins."""
    return {key: value for key, value in pairs}


# ---------------------------------------------------------------------------
# Chainable wrapper
# ---------------------------------------------------------------------------

class Seq(Generic[T]):
    """Single-pass, lazy wrapper adding the helpers above as methods."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: Iterator[T] = iter(items)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return next(self._items)

    # -- lazy adapters ------------------------------------------------------

    def map(self, func: Callable[[T], U]) -> Seq[U]:
        return Seq(map(func, self))

    def filter(self, predicate: Callable[[T], Any]) -> Seq[T]:
        return Seq(filter(predicate, self))

    def filter_map(self, func: Callable[[T], U | None]) -> Seq[U]:
        """Apply *func* and drop the ``None`` results."""
        return Seq(result for result in map(func, self) if result is not None)

    def take(self, count: int) -> Seq[T]:
        return Seq(itertools.islice(self, count))

    def skip(self, count: int) -> Seq[T]:
        return Seq(itertools.islice(self, count, None))

    # -- consumers ----------------------------------------------------------

    def print(self, delim: str, out: TextIO | None = None) -> None:
        print_items(self, delim, out)

    def debug(self, delim: str, out: TextIO | None = None) -> None:
        debug_items(self, delim, out)

    def join(self, delim: str) -> str:
        return join(self, delim)  # type: ignore[arg-type]

    def prepend(self, prefix: str) -> str:
        return prepend(self, prefix)  # type: ignore[arg-type]

    def append(self, func: Callable[[str], str]) -> str:
        return append(self, func)  # type: ignore[arg-type]

    def to_vec(self) -> list[T]:
        return to_vec(self)

    def to_map(self) -> dict[Any, Any]:
        return to_map(self)  # type: ignore[arg-type]
