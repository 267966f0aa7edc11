"""Core layer — pure transformations over strings and sequences.

Rules
-----
* No filesystem, process or network access.
* No process termination; failures are handed to an injected handler.
* No imports from ``cli`` or ``infra``.
"""

from easy_shortcuts.core.fallible import FallibleIterator, State
from easy_shortcuts.core.models import PathEntry
from easy_shortcuts.core.outcome import Err, Ok, Outcome, capture, describe_error
from easy_shortcuts.core.sequence import (
    Seq,
    append,
    debug_items,
    join,
    prepend,
    print_items,
    to_map,
    to_vec,
)
from easy_shortcuts.core.strings import (
    is_whitespace,
    split_at_delim,
    split_at_delim_right,
    trim_pair,
)

__all__: list[str] = [
    "Err",
    "FallibleIterator",
    "Ok",
    "Outcome",
    "PathEntry",
    "Seq",
    "State",
    "append",
    "capture",
    "debug_items",
    "describe_error",
    "is_whitespace",
    "join",
    "prepend",
    "print_items",
    "split_at_delim",
    "split_at_delim_right",
    "to_map",
    "to_vec",
    "trim_pair",
]
