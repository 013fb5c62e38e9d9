# topmark:header:start
#
#   project      : SdUnit
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""CLI smoke tests: help output, global options and logging setup."""

from __future__ import annotations

import logging

import pytest

from sdunit.config.logging import LOG_LEVEL_ENV
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import parametrize


def test_no_subcommand_prints_hint_and_help() -> None:
    """Invoking the group alone prints a hint followed by the help text."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "Hint: use 'sdunit render DESCRIPTION'" in result.output
    for command in ("render", "parse", "check", "version"):
        assert command in result.output


@parametrize("command", ["render", "parse", "check", "version"])
def test_subcommand_help(command: str) -> None:
    """Every subcommand answers ``-h``."""
    result = run_cli([command, "-h"])

    assert_SUCCESS(result)
    assert "Usage:" in result.output


def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    """``-v`` together with ``-q`` is a usage error (64)."""
    result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """``SDUNIT_LOG_LEVEL`` configures the root logger for the run."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert logging.getLogger().level == logging.DEBUG
