# topmark:header:start
#
#   project      : BlockGen
#   file         : version.py
#   file_relpath : src/blockgen/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""BlockGen `version` command.

Prints the current BlockGen version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from blockgen.cli.cli_types import EnumChoiceParam, OutputFormat
from blockgen.cli.cmd_common import get_effective_verbosity
from blockgen.constants import BLOCKGEN_VERSION

if TYPE_CHECKING:
    from blockgen.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of BlockGen.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of BlockGen.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": BLOCKGEN_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("BlockGen version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(BLOCKGEN_VERSION, bold=True)}")
    else:
        console.print(console.styled(BLOCKGEN_VERSION, bold=True))
