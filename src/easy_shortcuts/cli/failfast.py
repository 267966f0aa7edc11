"""Fail-fast boundary: print one diagnostic line and exit.

Small programs that cooperate with other system commands should stop
early with a non-zero exit code and a readable message rather than a
stack trace.  Everything that terminates the process goes through the
active :class:`FailFast` policy::

    <program> error: <context> <description>

The policy is pluggable.  Library code and tests can install one that
raises :class:`~easy_shortcuts.exceptions.FatalError` instead of
exiting, either with :func:`set_policy` or by exporting
``EASY_DONT_QUIT_PANIC`` before the program starts.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from pathlib import PurePath
from typing import NoReturn, TypeVar

from easy_shortcuts.cli import exit_codes
from easy_shortcuts.cli.console import console
from easy_shortcuts.core.fallible import FALLIBLE_ERRORS
from easy_shortcuts.core.outcome import Err, Ok, describe_error
from easy_shortcuts.exceptions import FatalError

logger = logging.getLogger(__name__)

T = TypeVar("T")

PANIC_ENV_VAR: str = "EASY_DONT_QUIT_PANIC"
"""When set (to anything), the default policy raises instead of exiting."""


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FailFastConfig:
    """How the boundary reports and terminates."""

    program: str
    """Diagnostic prefix, normally the program name."""

    exit_code: int = exit_codes.GENERAL_ERROR
    """Status passed to ``sys.exit``; never zero."""

    raise_instead: bool = False
    """Raise :class:`FatalError` rather than printing and exiting."""

    def __post_init__(self) -> None:
        if self.exit_code == exit_codes.SUCCESS:
            raise ValueError("fail-fast exit code must be non-zero")

    @classmethod
    def from_environment(
        cls,
        argv: Sequence[str] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> FailFastConfig:
        """Build a config from ``argv[0]`` and ``EASY_DONT_QUIT_PANIC``."""
        args = sys.argv if argv is None else argv
        env = os.environ if environ is None else environ
        program = PurePath(args[0]).name if args and args[0] else ""
        return cls(program=program, raise_instead=PANIC_ENV_VAR in env)


# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------

class FailFast:
    """Turns failures into a diagnostic line and process termination.

    Parameters
    ----------
    config:
        Reporting options.  When ``None``, built from the environment.
    """

    def __init__(self, config: FailFastConfig | None = None) -> None:
        self.config: FailFastConfig = (
            config if config is not None else FailFastConfig.from_environment()
        )

    def format(self, message: str) -> str:
        return f"{self.config.program} error: {message}"

    def quit(self, message: str) -> NoReturn:
        """Report *message* and terminate.  Never returns."""
        text = self.format(message)
        logger.debug("quitting: %s", text)
        if self.config.raise_instead:
            raise FatalError(text)
        console.line(text)
        sys.exit(self.config.exit_code)

    def quit_err(self, exc: BaseException) -> NoReturn:
        """Quit with the error's own description."""
        self.quit(describe_error(exc))

    def or_die(self, value: T | Ok[T] | Err | None, message: str) -> T:
        """Return the usable value or quit with *message*.

        ``None`` quits with *message* alone; ``Err`` quits with *message*
        followed by the error description.
        """
        if value is None:
            self.quit(message)
        if isinstance(value, Err):
            self.quit(f"{message} {value.describe()}")
        if isinstance(value, Ok):
            return value.value
        return value

    def unwrap(self, outcome: Ok[T] | Err) -> T:
        """Return the ``Ok`` value or quit with the error description."""
        if isinstance(outcome, Err):
            self.quit_err(outcome.error)
        return outcome.value

    @contextlib.contextmanager
    def guard(self, context: str | None = None) -> Iterator[None]:
        """Quit if the block raises an I/O or easy-shortcuts error.

        With *context*, the line reads ``<context> <description>``.
        """
        try:
            yield
        except FatalError:
            raise
        except FALLIBLE_ERRORS as exc:
            description = describe_error(exc)
            self.quit(f"{context} {description}" if context else description)

    def __call__(self, exc: Exception) -> NoReturn:
        """Failure-handler form used by fallible sequences."""
        self.quit_err(exc)


# ---------------------------------------------------------------------------
# Active policy
# ---------------------------------------------------------------------------

_policy: FailFast | None = None


def get_policy() -> FailFast:
    """Return the active policy, creating the default one on first use."""
    global _policy
    if _policy is None:
        _policy = FailFast()
    return _policy


def set_policy(policy: FailFast | None) -> FailFast | None:
    """Install *policy* (``None`` restores the lazy default); return the old one."""
    global _policy
    previous = _policy
    _policy = policy
    return previous


def quit(message: str) -> NoReturn:
    """Quit this program with *message* and a non-zero exit code."""
    get_policy().quit(message)


def quit_err(exc: BaseException) -> NoReturn:
    get_policy().quit_err(exc)


def or_die(value: T | Ok[T] | Err | None, message: str) -> T:
    """Perl-style ``or die``: see :meth:`FailFast.or_die`."""
    return get_policy().or_die(value, message)


def unwrap(outcome: Ok[T] | Err) -> T:
    return get_policy().unwrap(outcome)


def guard(context: str | None = None) -> contextlib.AbstractContextManager[None]:
    """Context manager form of the boundary: see :meth:`FailFast.guard`."""
    return get_policy().guard(context)


def fail(exc: Exception) -> NoReturn:
    """Failure handler bound to whichever policy is active when it fires."""
    get_policy()(exc)
