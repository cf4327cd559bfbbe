# topmark:header:start
#
#   project      : BlockGen
#   file         : errors.py
#   file_relpath : src/blockgen/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Exceptions for the BlockGen CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`blockgen.core.errors`) are
    translated with `to_cli_error`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from blockgen.cli.exit_codes import ExitCode
from blockgen.core.errors import (
    BlockgenError,
    ConfigurationError,
    ContractViolationError,
    ScriptError,
)


class BlockgenCliError(click.ClickException):
    """Base class for all BlockGen CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click’s default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class BlockgenUsageError(BlockgenCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BlockgenScriptError(BlockgenCliError):
    """Error for malformed directive scripts."""

    exit_code = ExitCode.DATA_ERROR


class BlockgenFileNotFoundError(BlockgenCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BlockgenContractError(BlockgenCliError):
    """Error when directives break an emitter contract (e.g., unbalanced blocks)."""

    exit_code = ExitCode.CONTRACT_ERROR


class BlockgenIOError(BlockgenCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class BlockgenConfigError(BlockgenCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


def to_cli_error(exc: BlockgenError) -> BlockgenCliError:
    """Translate a library error into the matching CLI error.

    Args:
        exc (BlockgenError): The error raised by the emitter, config or script layer.

    Returns:
        BlockgenCliError: The CLI error carrying the matching exit code.
    """
    message: str = str(exc)
    if isinstance(exc, ScriptError):
        return BlockgenScriptError(message)
    if isinstance(exc, ConfigurationError):
        return BlockgenConfigError(message)
    if isinstance(exc, ContractViolationError):
        return BlockgenContractError(message)
    return BlockgenCliError(message)
