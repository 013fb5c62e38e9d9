# topmark:header:start
#
#   project      : SdUnit
#   file         : check.py
#   file_relpath : src/sdunit/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""SdUnit `check` command.

Decodes each given unit file and reports whether it has the mandatory
sections and well-formed entries. Exits with ``FAILURE`` if any file fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sdunit.cli.errors import SdUnitCliError, cli_error_from
from sdunit.cli.exit_codes import ExitCode
from sdunit.cli.io import read_input_text
from sdunit.cli.options import strict_option
from sdunit.config.logging import get_logger
from sdunit.core.errors import SdUnitError
from sdunit.model.daemon import Daemon

if TYPE_CHECKING:
    from sdunit.cli.console import ConsoleLike

logger = get_logger(__name__)


@click.command(
    name="check",
    help="Check that unit files decode (mandatory sections present, entries well-formed).",
)
@click.argument("unit_files", metavar="UNIT...", nargs=-1, required=True, type=str)
@strict_option
def check_command(
    *,
    unit_files: tuple[str, ...],
    strict: bool,
) -> None:
    """Check one or more unit files.

    Args:
        unit_files (tuple[str, ...]): Paths to unit files (``-`` reads STDIN).
        strict (bool): Reject directives outside the supported set.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    failed: int = 0
    for source in unit_files:
        try:
            daemon: Daemon = Daemon.from_text(read_input_text(source), strict=strict)
        except SdUnitError as exc:
            failed += 1
            console.error(f"✗ {cli_error_from(exc, source).format_message()}")
            continue
        except SdUnitCliError as exc:
            failed += 1
            console.error(f"✗ {exc.format_message()}")
            continue

        if vlevel >= 0:
            console.print(f"{console.styled('✓', fg='green')} {source}")
        if vlevel > 0:
            sections: str = ", ".join(record.SECTION for record in daemon.sections())
            console.print(f"    sections: {sections}")

    logger.info("Checked %d file(s), %d failed", len(unit_files), failed)
    if failed:
        ctx.exit(ExitCode.FAILURE)
