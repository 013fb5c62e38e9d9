# topmark:header:start
#
#   project      : SdUnit
#   file         : errors.py
#   file_relpath : src/sdunit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""Exceptions for the SdUnit CLI.

Usage:
    Commands raise these exceptions (usually via `cli_error_from`) to signal
    errors with standardized messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from sdunit.cli.exit_codes import ExitCode
from sdunit.core.errors import SdUnitError


class SdUnitCliError(click.ClickException):
    """Base class for all SdUnit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SdUnitUsageError(SdUnitCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SdUnitDataError(SdUnitCliError):
    """Error for unit files or descriptions that cannot be decoded or encoded."""

    exit_code = ExitCode.DATA_ERROR


class SdUnitFileNotFoundError(SdUnitCliError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SdUnitPermissionDeniedError(SdUnitCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class SdUnitIOError(SdUnitCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


def cli_error_from(exc: Exception, source: str) -> SdUnitCliError:
    """Map a library or OS exception to the matching CLI error.

    Args:
        exc (Exception): The exception raised while handling ``source``.
        source (str): The file (or ``-``) being processed, used as message prefix.

    Returns:
        SdUnitCliError: The error to raise from the command.
    """
    message: str = f"{source}: {exc}"
    if isinstance(exc, (SdUnitError, UnicodeError)):
        return SdUnitDataError(message)
    if isinstance(exc, FileNotFoundError):
        return SdUnitFileNotFoundError(f"{source}: file not found")
    if isinstance(exc, PermissionError):
        return SdUnitPermissionDeniedError(f"{source}: permission denied")
    if isinstance(exc, OSError):
        return SdUnitIOError(message)
    return SdUnitCliError(message)
