# topmark:header:start
#
#   project      : BlockGen
#   file         : cmd_common.py
#   file_relpath : src/blockgen/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Helpers shared by BlockGen subcommands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from blockgen.cli.errors import to_cli_error
from blockgen.config.logging import get_logger
from blockgen.config.model import EmitterConfig, MutableEmitterConfig
from blockgen.core.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    import click

    from blockgen.config.logging import BlockgenLogger

logger: BlockgenLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 when unset)."""
    obj = ctx.obj or {}
    return int(obj.get("verbosity_level", 0))


def resolve_config(config_files: Sequence[Path], *, no_config: bool) -> EmitterConfig:
    """Build the effective emitter config for a command.

    Args:
        config_files (Sequence[Path]): Explicit ``--config`` files, applied last.
        no_config (bool): Skip discovery of config files around the working directory.

    Returns:
        EmitterConfig: The frozen, validated configuration.

    Raises:
        BlockgenConfigError: If a config file is unreadable or invalid.
    """
    try:
        draft: MutableEmitterConfig = MutableEmitterConfig.load_merged(
            extra_config_files=config_files,
            discover=not no_config,
        )
        return draft.freeze()
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        raise to_cli_error(exc) from exc
