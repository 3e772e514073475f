# tests/conftest.py
"""Shared test setup for project."""

from collections.abc import Generator

import pytest

import oxify.logs as mod_logs
from tests.utils import DEFAULT_TEST_LOG_LEVEL
from tests.utils.log_fixtures import recording_logger


# Re-exported so pytest can discover it.
__all__ = [
    "recording_logger",
]


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset the app logger level before and after each test.

    The app logger is a module-level singleton; CLI tests change its
    level via --log-level / -q / -v.
    """
    logger = mod_logs.getAppLogger()
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    yield
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host env vars from leaking into config resolution."""
    for name in (
        "OXIFY_DISABLE_BUILD_TIMESTAMP",
        "DISABLE_BUILD_TIMESTAMP",
        "OXIFY_LOG_LEVEL",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
