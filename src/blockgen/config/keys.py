# topmark:header:start
#
#   project      : BlockGen
#   file         : keys.py
#   file_relpath : src/blockgen/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Canonical TOML section and key names for BlockGen configuration.

Keys defined here are the external configuration API (``blockgen.toml`` and
``[tool.blockgen]`` in ``pyproject.toml``). Renaming or removing a key is a
breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by BlockGen configuration."""

    # [emitter]
    SECTION_EMITTER: Final[str] = "emitter"

    KEY_INDENT_WIDTH: Final[str] = "indent_width"
    KEY_TERMINATOR: Final[str] = "terminator"
    KEY_INITIAL_DEPTH: Final[str] = "initial_depth"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_START_MARKER: Final[str] = "start_marker"

    # [php]
    SECTION_PHP: Final[str] = "php"

    KEY_DEFAULT_VISIBILITY: Final[str] = "default_visibility"
