# topmark:header:start
#
#   project      : BlockGen
#   file         : io.py
#   file_relpath : src/blockgen/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""TOML I/O helpers for BlockGen configuration and directive scripts.

Parsing and rendering are done with `tomlkit`; parsed documents are returned
as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from blockgen.config.keys import Toml
from blockgen.config.logging import get_logger
from blockgen.constants import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_START_MARKER,
    DEFAULT_TERMINATOR,
    DEFAULT_VISIBILITY,
)
from blockgen.core.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from blockgen.config.logging import BlockgenLogger

TomlTable: TypeAlias = dict[str, Any]

logger: BlockgenLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return BlockGen's runtime defaults as a TOML-compatible dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_EMITTER: {
            Toml.KEY_INDENT_WIDTH: DEFAULT_INDENT_WIDTH,
            Toml.KEY_TERMINATOR: DEFAULT_TERMINATOR,
            Toml.KEY_INITIAL_DEPTH: 0,
        },
        Toml.SECTION_OUTPUT: {
            Toml.KEY_START_MARKER: DEFAULT_START_MARKER,
        },
        Toml.SECTION_PHP: {
            Toml.KEY_DEFAULT_VISIBILITY: DEFAULT_VISIBILITY,
        },
    }


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse a TOML document into a plain dict.

    Args:
        text (str): The TOML document.
        source (str): Human-readable origin used in error messages.

    Returns:
        TomlTable: The parsed top-level table.

    Raises:
        ConfigurationError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigurationError(f"Error decoding TOML from {source}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``blockgen.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigurationError(f"Cannot read {path}: {e}") from e
    return parse_toml_text(text, source=str(path))


def to_toml(data: TomlTable) -> str:
    """Render a TOML-compatible dict as TOML text.

    ``None`` values are dropped since TOML has no null.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    for section, values in data.items():
        if isinstance(values, dict):
            table = tomlkit.table()
            for key, value in cast("TomlTable", values).items():
                if value is not None:
                    table.add(key, value)
            doc.add(section, table)
        elif values is not None:
            doc.add(section, values)
    return tomlkit.dumps(doc)


def get_table(data: TomlTable, section: str) -> TomlTable:
    """Return ``data[section]`` as a dict, or an empty dict when absent.

    Raises:
        ConfigurationError: If the section exists but is not a table.
    """
    value: Any = data.get(section, {})
    if not isinstance(value, dict):
        raise ConfigurationError(f"[{section}] must be a table, got {type(value).__name__}")
    return cast("TomlTable", value)
