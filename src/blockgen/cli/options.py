# topmark:header:start
#
#   project      : BlockGen
#   file         : options.py
#   file_relpath : src/blockgen/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Common CLI option utilities for BlockGen.

This module centralizes reusable options (verbosity, color, config files) and
their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from blockgen.cli.errors import BlockgenUsageError

P = ParamSpec("P")
R = TypeVar("R")


class ColorMode(Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: Positive for verbose output, negative for quiet, 0 by default.

    Raises:
        BlockgenUsageError: If both flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BlockgenUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        3. **Auto**: whether stdout is a TTY.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force: str | None = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return stdout_isatty


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value) if value else None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` (repeatable) and ``--no-config`` options to a command."""
    f = click.option(
        "--config",
        "config_files",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Extra config file (blockgen.toml or pyproject.toml); may be repeated.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover blockgen.toml / pyproject.toml from the working directory.",
    )(f)
    return f
