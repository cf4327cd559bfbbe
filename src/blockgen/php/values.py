# topmark:header:start
#
#   project      : BlockGen
#   file         : values.py
#   file_relpath : src/blockgen/php/values.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Render Python values as PHP literals for constant and variable declarations.

Scalars follow PHP's ``var_export`` spelling (``null``, ``true``, ``'text'``).
Lists, tuples and mappings become multi-line ``array(...)`` literals:

    array(
        'name' => 'Foo',
        'tags' => array(
            0 => 'a',
            1 => 'b',
        ),
    )

Every line after the first is shifted right by ``indent_width * level`` spaces
so the literal lines up with a statement written at depth ``level``. The first
line is left alone because the emitter pads it.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Final

_EMPTY_ARRAY: Final[str] = "array()"


def quote_string(value: str) -> str:
    r"""Return ``value`` as a single-quoted PHP string.

    Backslashes and single quotes are escaped. Newlines cannot appear inside a
    single-quoted literal without breaking re-indentation, so they are spliced
    in as ``"\n"`` concatenations, like ``var_export`` does.
    """
    parts: list[str] = [
        "'" + part.replace("\\", "\\\\").replace("'", "\\'") + "'" for part in value.split("\n")
    ]
    return ' . "\\n" . '.join(parts)


def _export_scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NAN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
        return repr(value)
    if isinstance(value, str):
        return quote_string(value)
    raise TypeError(f"Cannot export value of type {type(value).__name__} as a PHP literal")


def _export_key(key: Any) -> str:
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise TypeError(f"PHP array keys must be int or str, got {type(key).__name__}")
    return str(key) if isinstance(key, int) else quote_string(key)


def _export(value: Any, nest: int, indent_width: int) -> str:
    if isinstance(value, Mapping):
        items: list[tuple[Any, Any]] = list(value.items())
    elif isinstance(value, (list, tuple)):
        items = list(enumerate(value))
    else:
        return _export_scalar(value)

    if not items:
        return _EMPTY_ARRAY

    inner: str = " " * (indent_width * (nest + 1))
    lines: list[str] = ["array("]
    for key, item in items:
        lines.append(f"{inner}{_export_key(key)} => {_export(item, nest + 1, indent_width)},")
    lines.append(" " * (indent_width * nest) + ")")
    return "\n".join(lines)


def export_value(value: Any, *, level: int = 0, indent_width: int = 4) -> str:
    """Render ``value`` as a PHP literal.

    Args:
        value (Any): None, bool, int, float, str, or a list/tuple/mapping of those.
        level (int): Indentation level of the statement receiving the literal.
        indent_width (int): Spaces per indentation level.

    Returns:
        str: The literal; multi-line for non-empty arrays.

    Raises:
        TypeError: For unsupported value or key types.
    """
    text: str = _export(value, 0, indent_width)
    if level > 0 and "\n" in text:
        text = text.replace("\n", "\n" + " " * (indent_width * level))
    return text


def format_value(value: Any, *, level: int = 0, indent_width: int = 4) -> str:
    """Return the right-hand side of a declaration.

    Strings are taken as PHP expressions and passed through verbatim (quote them
    yourself, or use `quote_string`). Any other value is exported with
    `export_value`.
    """
    if isinstance(value, str):
        return value
    return export_value(value, level=level, indent_width=indent_width)
