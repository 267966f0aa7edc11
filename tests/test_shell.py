"""Tests for shell command capture (infra/shell.py and ``es.shell``).

Real commands are limited to POSIX ``sh`` builtins; failure paths mock
:func:`subprocess.run`.
"""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

import easy_shortcuts as es
from easy_shortcuts.cli.failfast import FailFast
from easy_shortcuts.exceptions import FatalError, ShellCommandError
from easy_shortcuts.infra.shell import run_shell


class TestRunShell:
    def test_captures_stdout_without_trailing_newlines(self) -> None:
        assert run_shell("echo hello; echo; echo") == "hello"

    def test_stderr_is_folded_in(self) -> None:
        assert run_shell("echo oops 1>&2") == "oops"

    def test_non_zero_status_is_not_an_error(self) -> None:
        assert run_shell("echo partial; exit 3") == "partial"

    @patch("easy_shortcuts.infra.shell.subprocess.run")
    def test_missing_shell(self, mock_run: object) -> None:
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory")  # type: ignore[union-attr]
        with pytest.raises(ShellCommandError, match="cannot run 'sh'"):
            run_shell("true")

    @patch("easy_shortcuts.infra.shell.subprocess.run")
    def test_undecodable_output(self, mock_run: object) -> None:
        mock_run.return_value = subprocess.CompletedProcess(  # type: ignore[union-attr]
            args=["sh"], returncode=0, stdout=b"\xff\xfe",
        )
        with pytest.raises(ShellCommandError, match="not valid UTF-8"):
            run_shell("cat blob")


class TestShellShortcut:
    def test_returns_output(self) -> None:
        assert es.shell("printf 'a\\nb\\n'") == "a\nb"

    @patch("easy_shortcuts.infra.shell.subprocess.run")
    def test_failure_quits(self, mock_run: object, raising_policy: FailFast) -> None:
        mock_run.side_effect = PermissionError(13, "Permission denied")  # type: ignore[union-attr]
        with pytest.raises(FatalError, match="^tool error: cannot run 'sh' Permission denied$"):
            es.shell("true")
