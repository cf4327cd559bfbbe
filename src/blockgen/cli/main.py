# topmark:header:start
#
#   project      : BlockGen
#   file         : main.py
#   file_relpath : src/blockgen/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Click CLI for BlockGen.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into ``ctx.obj``.
- Subcommands read the shared console and verbosity from ``ctx.obj``.
- Internal logging is configured from ``BLOCKGEN_LOG_LEVEL``, independent of ``-v``.
"""

from __future__ import annotations

import click

from blockgen.cli.commands.dump_config import dump_config_command
from blockgen.cli.commands.render import render_command
from blockgen.cli.commands.version import version_command
from blockgen.cli.console import ClickConsole
from blockgen.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from blockgen.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else color_mode
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="BlockGen CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the BlockGen CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'blockgen render SCRIPT' to generate a program.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
