"""``easy-shortcuts`` command-line program and outer error boundary.

A few small tools written with the shortcuts themselves; they double as
working examples of the fail-fast style:

* ``easy-shortcuts head FILE [-n N]`` — first lines of a file (or ``-``
  for stdin).
* ``easy-shortcuts paths DIR`` — name and size of each regular file.
* ``easy-shortcuts kv FILE`` — parse ``key = value`` lines, skipping
  comments and lines without the delimiter.

Failures inside a command quit through the fail-fast policy.  :func:`cli`
is the last line of defence for anything that escapes it.
"""

from __future__ import annotations

import argparse
import sys

from easy_shortcuts.cli import exit_codes
from easy_shortcuts.cli.console import console
from easy_shortcuts.cli.failfast import FailFast, FailFastConfig, set_policy
from easy_shortcuts.cli.log_setup import configure_logging
from easy_shortcuts.core.sequence import print_items
from easy_shortcuts.core.strings import split_at_delim, trim_pair
from easy_shortcuts.exceptions import ShortcutsError
from easy_shortcuts.version import __version__

PROG: str = "easy-shortcuts"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Fail-fast file and directory shortcuts.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details to stderr.",
    )
    commands = parser.add_subparsers(dest="command")

    head = commands.add_parser("head", help="Print the first lines of a file.")
    head.add_argument("file", help="File to read, or '-' for stdin.")
    head.add_argument("-n", "--lines", type=int, default=3, dest="count")

    paths = commands.add_parser("paths", help="List regular files with their sizes.")
    paths.add_argument("directory")

    kv = commands.add_parser("kv", help="Parse 'key = value' lines.")
    kv.add_argument("file")
    kv.add_argument("--delim", default="=")
    kv.add_argument("--comment", default="#")
    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _handle_head(path: str, count: int) -> int:
    from easy_shortcuts.shortcuts import lines

    selected = lines(None if path == "-" else path).take(count).to_vec()
    if selected:
        print_items(selected, "\n")
        sys.stdout.write("\n")
    return exit_codes.SUCCESS


def _handle_paths(directory: str) -> int:
    from easy_shortcuts.shortcuts import paths

    entries = paths(directory).filter(lambda entry: entry.is_file).to_vec()
    for entry in sorted(entries, key=lambda e: e.name):
        sys.stdout.write(f"{entry.name} {entry.size}\n")
    return exit_codes.SUCCESS


def read_key_values(path: str, delim: str = "=", comment: str = "#") -> dict[str, str]:
    """Read ``key <delim> value`` lines from *path* into a dict.

    Comment lines and lines without *delim* are skipped; later keys win.
    """
    from easy_shortcuts.shortcuts import lines

    return (
        lines(path)
        .filter(lambda line: not line.lstrip().startswith(comment))
        .filter_map(lambda line: trim_pair(split_at_delim(line, delim)))
        .to_map()
    )


def _handle_kv(path: str, delim: str, comment: str) -> int:
    pairs = read_key_values(path, delim, comment)
    for key in sorted(pairs):
        sys.stdout.write(f"{key}={pairs[key]}\n")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the easy-shortcuts CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)
    previous = set_policy(FailFast(FailFastConfig.from_environment(argv=[PROG])))
    try:
        if args.command == "head":
            return _handle_head(args.file, args.count)
        if args.command == "paths":
            return _handle_paths(args.directory)
        return _handle_kv(args.file, args.delim, args.comment)
    finally:
        set_policy(previous)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except ShortcutsError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
