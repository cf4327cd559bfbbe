# topmark:header:start
#
#   project      : BlockGen
#   file         : render.py
#   file_relpath : src/blockgen/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""BlockGen `render` command.

Replays a TOML directive script onto a fresh builder and prints (or writes)
the generated program. Use ``-`` to read the script from STDIN.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from blockgen.cli.cli_types import EnumChoiceParam, OutputFormat
from blockgen.cli.cmd_common import get_effective_verbosity, resolve_config
from blockgen.cli.errors import BlockgenFileNotFoundError, BlockgenIOError, to_cli_error
from blockgen.cli.options import common_config_options
from blockgen.config.logging import get_logger
from blockgen.core.errors import BlockgenError
from blockgen.script import load_script, run_script

if TYPE_CHECKING:
    from blockgen.cli.console import ClickConsole
    from blockgen.config.logging import BlockgenLogger
    from blockgen.config.model import EmitterConfig
    from blockgen.php.builder import CodeBuilder
    from blockgen.script import Script

logger: BlockgenLogger = get_logger(__name__)


def _read_script_text(script: Path) -> tuple[str, str]:
    """Return ``(text, source_name)`` for a script path or ``-`` (STDIN)."""
    if str(script) == "-":
        return click.get_text_stream("stdin").read(), "<stdin>"
    if not script.exists():
        raise BlockgenFileNotFoundError(f"Script not found: {script}")
    try:
        return script.read_text(encoding="utf-8"), str(script)
    except OSError as exc:
        raise BlockgenIOError(f"Cannot read {script}: {exc}") from exc


@click.command(
    name="render",
    help="Render a TOML directive script to source text.",
)
@click.argument(
    "script",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the program to this file instead of STDOUT.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@common_config_options
def render_command(
    *,
    script: Path,
    output: Path | None = None,
    output_format: OutputFormat | None = None,
    config_files: tuple[Path, ...] = (),
    no_config: bool = False,
) -> None:
    """Render a directive script.

    Args:
        script (Path): Directive script path, or ``-`` for STDIN.
        output (Path | None): Destination file; STDOUT when omitted.
        output_format (OutputFormat | None): Plain program text (default) or JSON.
        config_files (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

    config: EmitterConfig = resolve_config(config_files, no_config=no_config)
    text, source = _read_script_text(script)

    try:
        parsed: Script = load_script(text, source=source)
        builder: CodeBuilder = run_script(parsed, config=config)
    except BlockgenError as exc:
        logger.error("Rendering %s failed: %s", source, exc)
        raise to_cli_error(exc) from exc

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        rendered: str = json.dumps({"lines": builder.dump(as_lines=True)}, indent=2) + "\n"
    else:
        rendered = builder.dump()

    if output is None:
        console.print(rendered, nl=False)
        return

    try:
        output.write_text(rendered, encoding="utf-8")
    except OSError as exc:
        raise BlockgenIOError(f"Cannot write {output}: {exc}") from exc
    if vlevel > 0:
        line_count: int = len(builder.dump(as_lines=True))
        console.print(f"Wrote {line_count} line(s) to {output}")
