"""Pure string helpers built around a single delimiter.

The typical pipeline reads ``key = value`` lines::

    pairs = (trim_pair(split_at_delim(line, "=")) for line in lines)
    config = to_map(p for p in pairs if p is not None)

Lines without the delimiter yield ``None`` and are dropped by the filter.
"""

from __future__ import annotations


def _check_delim(delim: str) -> None:
    if not delim:
        raise ValueError("delimiter must not be empty")


def split_at_delim(text: str, delim: str) -> tuple[str, str] | None:
    """Split *text* around the first *delim*, or return ``None``.

    The delimiter itself belongs to neither half.
    """
    _check_delim(delim)
    before, found, after = text.partition(delim)
    if not found:
        return None
    return before, after


def split_at_delim_right(text: str, delim: str) -> tuple[str, str] | None:
    """Like :func:`split_at_delim` but searches from the right."""
    _check_delim(delim)
    before, found, after = text.rpartition(delim)
    if not found:
        return None
    return before, after


def trim_pair(pair: tuple[str, str] | None) -> tuple[str, str] | None:
    """Strip surrounding whitespace from both halves; ``None`` passes through."""
    if pair is None:
        return None
    left, right = pair
    return left.strip(), right.strip()


def is_whitespace(text: str) -> bool:
    """Return ``True`` if *text* is empty or holds only whitespace."""
    return not text or text.isspace()
