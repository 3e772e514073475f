# tests/90_integration/test_version.py
"""Tests for the --version flag."""

import re

import pytest

import oxify.cli as mod_cli
import oxify.meta as mod_meta


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    """Should print version and commit info without positionals."""
    code = mod_cli.main(["--version"])
    out = capsys.readouterr().out.lower()

    assert code == 0
    assert mod_meta.PROGRAM_DISPLAY.lower() in out
    assert re.search(r"\d+\.\d+\.\d+", out)
