# topmark:header:start
#
#   project      : SdUnit
#   file         : version.py
#   file_relpath : src/sdunit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""SdUnit `version` command.

Prints the current SdUnit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from sdunit.constants import SDUNIT_VERSION

if TYPE_CHECKING:
    from sdunit.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of SdUnit.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of SdUnit.

    Args:
        as_json (bool): Emit ``{"version": ...}`` instead of plain text.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]

    if as_json:
        console.print(json.dumps({"version": SDUNIT_VERSION}))
    else:
        console.print(console.styled(SDUNIT_VERSION, bold=True))
