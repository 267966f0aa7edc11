"""easy-shortcuts — fail-hard-and-early helpers for small command-line programs.

Programs that interoperate with other system commands should quit early
with a clear message and a non-zero exit code.  This package bundles the
shortcuts for that style: argument and file helpers that quit instead of
raising, line and directory iterators that do the same, and a handful of
sequence and string conveniences.
"""

import logging

from easy_shortcuts.cli.failfast import (
    FailFast,
    FailFastConfig,
    get_policy,
    guard,
    or_die,
    quit,
    quit_err,
    set_policy,
    unwrap,
)
from easy_shortcuts.core import (
    Err,
    Ok,
    PathEntry,
    Seq,
    append,
    capture,
    debug_items,
    is_whitespace,
    join,
    prepend,
    print_items,
    split_at_delim,
    split_at_delim_right,
    to_map,
    to_vec,
    trim_pair,
)
from easy_shortcuts.infra.directory import is_dir, is_file, metadata
from easy_shortcuts.shortcuts import (
    argn_err,
    argn_or,
    create,
    files,
    lines,
    open,
    paths,
    read_to_string,
    shell,
    write_all,
)
from easy_shortcuts.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "Err",
    "FailFast",
    "FailFastConfig",
    "Ok",
    "PathEntry",
    "Seq",
    "__version__",
    "append",
    "argn_err",
    "argn_or",
    "capture",
    "create",
    "debug_items",
    "files",
    "get_policy",
    "guard",
    "is_dir",
    "is_file",
    "is_whitespace",
    "join",
    "lines",
    "metadata",
    "open",
    "or_die",
    "paths",
    "prepend",
    "print_items",
    "quit",
    "quit_err",
    "read_to_string",
    "set_policy",
    "shell",
    "split_at_delim",
    "split_at_delim_right",
    "to_map",
    "to_vec",
    "trim_pair",
    "unwrap",
    "write_all",
]
