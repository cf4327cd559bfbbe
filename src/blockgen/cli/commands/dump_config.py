# topmark:header:start
#
#   project      : BlockGen
#   file         : dump_config.py
#   file_relpath : src/blockgen/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""BlockGen `dump-config` command.

Prints the effective emitter configuration (defaults merged with discovered
and explicit config files) as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from blockgen.cli.cmd_common import get_effective_verbosity, resolve_config
from blockgen.cli.options import common_config_options
from blockgen.config.io import to_toml

if TYPE_CHECKING:
    from pathlib import Path

    from blockgen.cli.console import ClickConsole
    from blockgen.config.model import EmitterConfig


@click.command(
    name="dump-config",
    help="Dump the effective configuration as TOML.",
)
@common_config_options
def dump_config_command(
    *,
    config_files: tuple[Path, ...] = (),
    no_config: bool = False,
) -> None:
    """Dump the effective configuration.

    Args:
        config_files (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: EmitterConfig = resolve_config(config_files, no_config=no_config)

    if get_effective_verbosity(ctx) > 0:
        sources: str = ", ".join(str(p) for p in config.config_files) or "<defaults>"
        console.print(f"# Config sources: {sources}")
    console.print(to_toml(config.to_toml_dict()), nl=False)
