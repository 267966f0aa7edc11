"""Infrastructure: run a shell command and capture its output.

Standard error is merged into standard output so the caller gets one
string, with trailing newlines removed.  A non-zero exit status is not
an error here; only failing to start the shell or to decode its output
is.
"""

from __future__ import annotations

import logging
import subprocess

from easy_shortcuts.core.outcome import describe_error
from easy_shortcuts.exceptions import ShellCommandError

logger = logging.getLogger(__name__)


def run_shell(command: str, *, shell: str = "sh") -> str:
    """Run *command* through ``sh -c`` and return its combined output.

    Raises
    ------
    ShellCommandError
        When the shell cannot be executed or emits non-UTF-8 output.
    """
    logger.debug("shell: %s", command)
    try:
        completed = subprocess.run(
            [shell, "-c", command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        raise ShellCommandError(
            f"cannot run {shell!r} {describe_error(exc)}",
        ) from exc

    logger.debug("shell exited with status %d", completed.returncode)
    try:
        output = completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ShellCommandError(
            f"output of {command!r} is not valid UTF-8",
        ) from exc
    return output.rstrip("\n")
