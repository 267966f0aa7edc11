"""Tests for operation outcomes (core/outcome.py)."""

from __future__ import annotations

import errno
import os

import pytest

from easy_shortcuts.core.outcome import Err, Ok, capture, describe_error


class TestOk:
    def test_holds_value(self) -> None:
        outcome = Ok(42)
        assert outcome.is_ok is True
        assert outcome.value == 42
        assert outcome.value_or(0) == 42

    def test_frozen(self) -> None:
        outcome = Ok(1)
        with pytest.raises(AttributeError):
            outcome.value = 2  # type: ignore[misc]


class TestErr:
    def test_holds_error(self) -> None:
        error = ValueError("bad")
        outcome = Err(error)
        assert outcome.is_ok is False
        assert outcome.error is error
        assert outcome.value_or("fallback") == "fallback"

    def test_describe(self) -> None:
        assert Err(ValueError("bad input")).describe() == "bad input"


class TestCapture:
    def test_success(self) -> None:
        assert capture(len, "abc") == Ok(3)

    def test_os_error_captured(self, tmp_path: object) -> None:
        outcome = capture(os.stat, os.path.join(str(tmp_path), "missing"))
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, FileNotFoundError)

    def test_other_errors_propagate(self) -> None:
        with pytest.raises(ZeroDivisionError):
            capture(lambda: 1 / 0)

    def test_custom_catch(self) -> None:
        outcome = capture(int, "x", catch=(ValueError,))
        assert isinstance(outcome, Err)


class TestDescribeError:
    def test_os_error_uses_strerror(self) -> None:
        exc = FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), "x.txt")
        assert describe_error(exc) == os.strerror(errno.ENOENT)

    def test_plain_exception_uses_str(self) -> None:
        assert describe_error(RuntimeError("went wrong")) == "went wrong"

    def test_empty_message_falls_back_to_type_name(self) -> None:
        assert describe_error(KeyError()) == "KeyError"
