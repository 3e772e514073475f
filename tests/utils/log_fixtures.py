# tests/utils/log_fixtures.py
"""Reusable logger fixtures."""

from unittest.mock import MagicMock

import pytest

import oxify.logs as mod_logs

from .patch_everywhere import patch_everywhere


@pytest.fixture
def recording_logger(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace getAppLogger() everywhere with a call-recording stand-in.

    Lets tests assert on which messages were logged at which level
    without depending on handler or stream setup.
    """
    recorder = MagicMock(spec=mod_logs.AppLogger)
    patch_everywhere(monkeypatch, mod_logs, "getAppLogger", lambda: recorder)
    return recorder
