# topmark:header:start
#
#   project      : SdUnit
#   file         : render.py
#   file_relpath : src/sdunit/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""SdUnit `render` command.

Reads a TOML or JSON description and prints (or writes) the unit file.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from sdunit.cli.cli_types import EnumChoiceParam
from sdunit.cli.errors import SdUnitUsageError, cli_error_from
from sdunit.cli.io import read_input_text, write_output_text
from sdunit.cli.options import strict_option
from sdunit.config.logging import get_logger
from sdunit.constants import STDIO_SENTINEL
from sdunit.core.errors import SdUnitError
from sdunit.io.description import DescriptionFormat, format_for_path, loads_description

if TYPE_CHECKING:
    from sdunit.cli.console import ConsoleLike
    from sdunit.model.daemon import Daemon

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render a TOML/JSON description (or '-' for STDIN) as a unit file.",
)
@click.argument("description", metavar="DESCRIPTION", type=str)
@click.option(
    "-o",
    "--output",
    "output",
    type=str,
    default=None,
    help="Write the unit file to this path instead of STDOUT.",
)
@click.option(
    "--from",
    "input_format",
    type=EnumChoiceParam(DescriptionFormat),
    default=None,
    help="Description format; inferred from the file suffix unless reading STDIN (default: toml).",
)
@strict_option
def render_command(
    *,
    description: str,
    output: str | None,
    input_format: DescriptionFormat | None,
    strict: bool,
) -> None:
    """Render a description as a unit file.

    Args:
        description (str): Path to a ``.toml``/``.json`` description, or ``-``.
        output (str | None): Output path; STDOUT when None or ``-``.
        input_format (DescriptionFormat | None): Explicit description format.
        strict (bool): Reject directives outside the supported set.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    fmt: DescriptionFormat
    if input_format is not None:
        fmt = input_format
    elif description == STDIO_SENTINEL:
        fmt = DescriptionFormat.TOML
    else:
        try:
            fmt = format_for_path(Path(description))
        except SdUnitError as exc:
            raise SdUnitUsageError(f"{description}: {exc} (or pass --from)") from exc

    text: str = read_input_text(description)
    try:
        daemon: Daemon = loads_description(text, fmt, strict=strict)
        unit_text: str = daemon.to_text()
    except SdUnitError as exc:
        raise cli_error_from(exc, description) from exc

    logger.debug("Rendered %s (%d section(s))", description, len(daemon.sections()))
    if not write_output_text(output, f"{unit_text}\n"):
        console.print(unit_text)
