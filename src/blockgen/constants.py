# topmark:header:start
#
#   project      : BlockGen
#   file         : constants.py
#   file_relpath : src/blockgen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""BlockGen Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BLOCKGEN_VERSION: str = get_version("blockgen")

# Config file names looked up during discovery:
BLOCKGEN_TOML_NAME: str = "blockgen.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "blockgen"

# Emitter defaults
DEFAULT_INDENT_WIDTH: int = 4
DEFAULT_TERMINATOR: str = ";"
DEFAULT_START_MARKER: str = "<?php"
DEFAULT_VISIBILITY: str = "public"

# Documentation block layout
DOC_OPEN_MARKER: str = "/**"
DOC_LINE_PREFIX: str = " * "
DOC_CLOSE_MARKER: str = " */"
