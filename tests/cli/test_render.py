# topmark:header:start
#
#   project      : SdUnit
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""CLI tests for `sdunit render`."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_DATA_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_cli_in,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_render_toml_to_stdout(data_dir: Path) -> None:
    """A TOML description renders to the reference unit file."""
    expected: str = (data_dir / "example-agent.service").read_text(encoding="utf-8")
    result = run_cli(["render", str(data_dir / "example-agent.toml")])

    assert_SUCCESS(result)
    assert result.output == expected


def test_render_json_to_file(tmp_path: Path, data_dir: Path) -> None:
    """``-o`` writes the unit file (with a final newline) instead of printing it."""
    shutil.copy(data_dir / "example-agent.json", tmp_path / "agent.json")
    result = run_cli_in(tmp_path, ["render", "agent.json", "-o", "agent.service"])

    assert_SUCCESS(result)
    assert result.output == ""
    assert (tmp_path / "agent.service").read_text(encoding="utf-8") == (
        data_dir / "example-agent.service"
    ).read_text(encoding="utf-8")


def test_render_from_stdin_defaults_to_toml() -> None:
    """``-`` reads a TOML description from STDIN."""
    description: str = (
        '[Unit]\nDescription = "stdin"\n[Service]\nExecStart = "/bin/true"\n[Install]\n'
    )
    result = run_cli(["render", "-"], input_text=description)

    assert_SUCCESS(result)
    assert result.output == (
        "[Unit]\nDescription = stdin\n\n[Service]\nExecStart = /bin/true\n\n[Install]\n"
    )


def test_render_from_stdin_as_json() -> None:
    """``--from json`` selects the JSON reader for STDIN."""
    description: str = '{"Unit": {}, "Service": {"ExecStart": "/bin/true"}, "Install": {}}'
    result = run_cli(["render", "-", "--from", "JSON"], input_text=description)

    assert_SUCCESS(result)
    assert "ExecStart = /bin/true" in result.output


def test_render_unknown_suffix_is_usage_error(tmp_path: Path) -> None:
    """A description without a known suffix needs ``--from``."""
    (tmp_path / "agent.yaml").write_text("Unit: {}\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "agent.yaml"])

    assert_USAGE_ERROR(result)
    assert "--from" in result.output


def test_render_missing_file(tmp_path: Path) -> None:
    """A missing description exits with FILE_NOT_FOUND (66)."""
    result = run_cli_in(tmp_path, ["render", "nope.toml"])

    assert_FILE_NOT_FOUND(result)
    assert "nope.toml: file not found" in result.output


def test_render_invalid_description_is_data_error(tmp_path: Path) -> None:
    """A description missing a mandatory section exits with DATA_ERROR (65)."""
    (tmp_path / "broken.toml").write_text('[Unit]\nDescription = "x"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["render", "broken.toml"])

    assert_DATA_ERROR(result)
    assert "missing required [Service] section" in result.output


def test_render_strict_rejects_unknown_directive(tmp_path: Path) -> None:
    """``--strict`` turns an unmodeled directive into a data error."""
    (tmp_path / "agent.toml").write_text(
        '[Unit]\n[Service]\nExecStart = "/bin/true"\nExecPaths = "/usr"\n[Install]\n',
        encoding="utf-8",
    )
    assert_SUCCESS(run_cli_in(tmp_path, ["render", "agent.toml"]))

    result = run_cli_in(tmp_path, ["render", "--strict", "agent.toml"])
    assert_DATA_ERROR(result)
    assert "ExecPaths" in result.output
