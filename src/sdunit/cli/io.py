# topmark:header:start
#
#   project      : SdUnit
#   file         : io.py
#   file_relpath : src/sdunit/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Input/output plumbing shared by CLI commands.

A path argument of ``-`` reads from STDIN (or writes to STDOUT). OS and decoding
errors are mapped to CLI errors with the matching exit code.
"""

from __future__ import annotations

from pathlib import Path

import click

from sdunit.cli.errors import cli_error_from
from sdunit.config.logging import get_logger
from sdunit.constants import STDIO_SENTINEL

logger = get_logger(__name__)


def read_input_text(source: str) -> str:
    """Return the text of ``source`` (a path, or ``-`` for STDIN).

    Raises:
        SdUnitCliError: If the file cannot be read or decoded.
    """
    try:
        if source == STDIO_SENTINEL:
            return click.get_text_stream("stdin").read()
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        logger.debug("Cannot read %s: %s", source, exc)
        raise cli_error_from(exc, source) from exc


def write_output_text(target: str | None, text: str) -> bool:
    """Write ``text`` to ``target``; returns False (nothing written) for STDOUT targets.

    ``None`` and ``-`` both mean STDOUT; the caller prints via its console.

    Raises:
        SdUnitCliError: If the file cannot be written.
    """
    if target is None or target == STDIO_SENTINEL:
        return False
    try:
        Path(target).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise cli_error_from(exc, target) from exc
    logger.info("Wrote %s", target)
    return True
