# topmark:header:start
#
#   project      : BlockGen
#   file         : __init__.py
#   file_relpath : src/blockgen/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""BlockGen CLI package.

This package groups all Click command definitions and supporting utilities
for the BlockGen command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        blockgen = "blockgen.cli.main:cli"

All subcommands live in ``blockgen.cli.commands``.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
