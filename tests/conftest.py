"""Shared pytest fixtures and configuration for the easy-shortcuts test suite.

Guidelines
----------
* Filesystem tests use ``tmp_path`` only.
* Every test starts with the lazy default fail-fast policy.
* Tests must not depend on the environment of the developer's shell.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from easy_shortcuts.cli.failfast import FailFast, FailFastConfig, PANIC_ENV_VAR, set_policy


@pytest.fixture(autouse=True)
def _reset_policy(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv(PANIC_ENV_VAR, raising=False)
    set_policy(None)
    yield
    set_policy(None)


@pytest.fixture
def exiting_policy() -> FailFast:
    """Install a policy that prints and exits with a fixed program name."""
    policy = FailFast(FailFastConfig(program="tool"))
    set_policy(policy)
    return policy


@pytest.fixture
def raising_policy() -> FailFast:
    """Install a policy that raises ``FatalError`` instead of exiting."""
    policy = FailFast(FailFastConfig(program="tool", raise_instead=True))
    set_policy(policy)
    return policy


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("easy_shortcuts")
    for handler in [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
