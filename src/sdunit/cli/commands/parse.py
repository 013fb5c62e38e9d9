# topmark:header:start
#
#   project      : SdUnit
#   file         : parse.py
#   file_relpath : src/sdunit/cli/commands/parse.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""SdUnit `parse` command.

Parses a unit file and prints its description as TOML (default) or JSON.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sdunit.cli.cli_types import EnumChoiceParam
from sdunit.cli.errors import cli_error_from
from sdunit.cli.io import read_input_text, write_output_text
from sdunit.cli.options import strict_option
from sdunit.core.errors import SdUnitError
from sdunit.io.description import DescriptionFormat, dumps_description
from sdunit.model.daemon import Daemon

if TYPE_CHECKING:
    from sdunit.cli.console import ConsoleLike


@click.command(
    name="parse",
    help="Parse a unit file (or '-' for STDIN) and print it as a TOML/JSON description.",
)
@click.argument("unit_file", metavar="UNIT", type=str)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(DescriptionFormat),
    default=DescriptionFormat.TOML,
    show_default="toml",
    help=f"Output format ({', '.join(v.value for v in DescriptionFormat)}).",
)
@click.option(
    "-o",
    "--output",
    "output",
    type=str,
    default=None,
    help="Write the description to this path instead of STDOUT.",
)
@strict_option
def parse_command(
    *,
    unit_file: str,
    output_format: DescriptionFormat,
    output: str | None,
    strict: bool,
) -> None:
    """Parse a unit file into a description.

    Args:
        unit_file (str): Path to the unit file, or ``-``.
        output_format (DescriptionFormat): Description format to emit.
        output (str | None): Output path; STDOUT when None or ``-``.
        strict (bool): Reject directives outside the supported set.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    text: str = read_input_text(unit_file)
    try:
        daemon: Daemon = Daemon.from_text(text, strict=strict)
    except SdUnitError as exc:
        raise cli_error_from(exc, unit_file) from exc

    rendered: str = dumps_description(daemon, output_format)
    if not write_output_text(output, rendered):
        console.print(rendered, nl=False)
