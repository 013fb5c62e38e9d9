# topmark:header:start
#
#   project      : SdUnit
#   file         : main.py
#   file_relpath : src/sdunit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 SdUnit contributors
#
# topmark:header:end

"""SdUnit command-line interface.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Subcommands read their console and verbosity from the shared context.
- Library errors are mapped onto ``click.ClickException`` subclasses carrying
  sysexits-style exit codes (see `sdunit.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sdunit.cli.commands.check import check_command
from sdunit.cli.commands.parse import parse_command
from sdunit.cli.commands.render import render_command
from sdunit.cli.commands.version import version_command
from sdunit.cli.console import ClickConsole
from sdunit.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from sdunit.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from sdunit.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags (0..2).
        quiet (int): Count of ``-q`` flags (0..2).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SdUnit CLI: render and parse systemd unit files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the SdUnit CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'sdunit render DESCRIPTION' to produce a unit file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(parse_command)

cli.add_command(check_command)

if __name__ == "__main__":
    cli()
