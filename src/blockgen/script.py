# topmark:header:start
#
#   project      : BlockGen
#   file         : script.py
#   file_relpath : src/blockgen/script.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Directive scripts: TOML documents replayed onto a `CodeBuilder`.

A script is an optional ``[program]`` table and an array of ``[[directive]]``
tables. Each directive names a builder operation in ``op``; its other keys
are passed as keyword arguments:

    [program]
    initial_depth = 0

    [[directive]]
    op = "start_class"
    name = "Foo"

    [[directive]]
    op = "write"
    text = "return 1"

    [[directive]]
    op = "end_class"

TOML has no null: pass ``terminator = ""`` to write a line without terminator.
Every block opened by a script must be closed by the end of the script.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final, cast

from blockgen.config.io import get_table, parse_toml_text
from blockgen.config.logging import get_logger
from blockgen.core.errors import (
    BlockgenError,
    ConfigurationError,
    ScriptError,
    UnbalancedBlockError,
)
from blockgen.php.builder import CodeBuilder

if TYPE_CHECKING:
    from collections.abc import Mapping

    from blockgen.config.io import TomlTable
    from blockgen.config.logging import BlockgenLogger
    from blockgen.config.model import EmitterConfig

logger: BlockgenLogger = get_logger(__name__)

SECTION_PROGRAM: Final[str] = "program"
KEY_INITIAL_DEPTH: Final[str] = "initial_depth"
ARRAY_DIRECTIVE: Final[str] = "directive"
KEY_OP: Final[str] = "op"

#: Operations a script may invoke, mapped to the keyword arguments they accept.
DIRECTIVES: Final[Mapping[str, frozenset[str]]] = {
    "write": frozenset({"text", "terminator"}),
    "open_block": frozenset({"kind"}),
    "close_block": frozenset(),
    "start_class": frozenset({"name", "extends", "implements", "abstract"}),
    "end_class": frozenset(),
    "start_function": frozenset({"name", "params", "visibility"}),
    "end_function": frozenset(),
    "constant": frozenset({"name", "value", "defined"}),
    "variable": frozenset({"name", "value", "context", "visibility"}),
    "include_file": frozenset({"file", "once"}),
    "require_file": frozenset({"file", "once"}),
    "start_if": frozenset({"condition"}),
    "else_if": frozenset({"condition"}),
    "else_branch": frozenset(),
    "end_if": frozenset(),
    "start_doc": frozenset(),
    "end_doc": frozenset(),
    "comment": frozenset({"text"}),
    "blank_line": frozenset({"lines"}),
}

#: Accepted TOML value types per argument; ``value`` takes any literal.
ARGUMENT_TYPES: Final[Mapping[str, tuple[type, ...]]] = {
    "text": (str,),
    "terminator": (str,),
    "kind": (str,),
    "name": (str,),
    "extends": (str,),
    "implements": (str, list),
    "abstract": (bool,),
    "params": (str, list),
    "visibility": (str,),
    "defined": (bool,),
    "context": (str,),
    "file": (str,),
    "once": (bool,),
    "condition": (str,),
    "lines": (int,),
}


@dataclass(frozen=True)
class Directive:
    """One builder call: operation name plus keyword arguments."""

    op: str
    args: Mapping[str, Any] = field(default_factory=lambda: {})


@dataclass(frozen=True)
class Script:
    """A parsed directive script.

    Attributes:
        directives (tuple[Directive, ...]): Calls to replay, in order.
        initial_depth (int | None): Starting depth; None uses the configured value.
    """

    directives: tuple[Directive, ...]
    initial_depth: int | None = None


def _type_names(types: tuple[type, ...]) -> str:
    return " or ".join("array of strings" if t is list else t.__name__ for t in types)


def _check_argument_type(index: int, op: str, key: str, value: Any) -> None:
    expected: tuple[type, ...] | None = ARGUMENT_TYPES.get(key)
    if expected is None:
        return
    # bool is an int subclass; only accept it where bool is expected
    valid: bool = isinstance(value, expected) and (
        not isinstance(value, bool) or bool in expected
    )
    if valid and isinstance(value, list):
        valid = all(isinstance(item, str) for item in cast("list[Any]", value))
    if not valid:
        raise ScriptError(
            f"argument {key!r} of {op!r} must be {_type_names(expected)}, got {value!r}",
            index=index,
        )


def _check_arguments(index: int, op: str, args: Mapping[str, Any]) -> None:
    allowed: frozenset[str] | None = DIRECTIVES.get(op)
    if allowed is None:
        raise ScriptError(f"unknown operation {op!r}", index=index)
    unexpected: list[str] = sorted(set(args) - allowed)
    if unexpected:
        raise ScriptError(
            f"unexpected argument(s) for {op!r}: {', '.join(unexpected)}", index=index
        )
    for key, value in args.items():
        _check_argument_type(index, op, key, value)


def _parse_directive(index: int, raw: Any) -> Directive:
    if not isinstance(raw, dict):
        raise ScriptError("directive must be a table", index=index)
    table: TomlTable = dict(cast("TomlTable", raw))
    op: Any = table.pop(KEY_OP, None)
    if not isinstance(op, str):
        raise ScriptError("missing 'op' key", index=index)
    _check_arguments(index, op, table)
    return Directive(op=op, args=table)


def parse_script(data: TomlTable) -> Script:
    """Build a `Script` from a parsed TOML table.

    Raises:
        ScriptError: If the document does not have the expected shape.
    """
    try:
        program: TomlTable = get_table(data, SECTION_PROGRAM)
    except ConfigurationError as exc:
        raise ScriptError(str(exc)) from exc

    initial_depth: Any = program.get(KEY_INITIAL_DEPTH)
    if initial_depth is not None and (
        isinstance(initial_depth, bool) or not isinstance(initial_depth, int) or initial_depth < 0
    ):
        raise ScriptError(
            f"[program].initial_depth must be a non-negative integer, got {initial_depth!r}"
        )

    raw_directives: Any = data.get(ARRAY_DIRECTIVE, [])
    if not isinstance(raw_directives, list):
        raise ScriptError("'directive' must be an array of tables")

    directives: tuple[Directive, ...] = tuple(
        _parse_directive(i, raw) for i, raw in enumerate(cast("list[Any]", raw_directives))
    )
    return Script(directives=directives, initial_depth=initial_depth)


def load_script(text: str, *, source: str = "<script>") -> Script:
    """Parse directive script text.

    Args:
        text (str): TOML document.
        source (str): Origin used in error messages.

    Returns:
        Script: The parsed script.

    Raises:
        ScriptError: If the text is not valid TOML or is malformed.
    """
    try:
        data: TomlTable = parse_toml_text(text, source=source)
    except ConfigurationError as exc:
        raise ScriptError(str(exc)) from exc
    script: Script = parse_script(data)
    logger.debug("Loaded %d directive(s) from %s", len(script.directives), source)
    return script


def run_script(script: Script, config: EmitterConfig | None = None) -> CodeBuilder:
    """Replay ``script`` onto a fresh `CodeBuilder`.

    Args:
        script (Script): The directives to replay.
        config (EmitterConfig | None): Emitter settings.

    Returns:
        CodeBuilder: The builder, with every block closed.

    Raises:
        ScriptError: If a directive names an unknown operation or its arguments do
            not fit the operation.
        UnbalancedBlockError: If a directive closes a block that is not open, or
            the script ends with blocks still open.
    """
    builder = CodeBuilder(script.initial_depth, config=config)
    for index, directive in enumerate(script.directives):
        logger.trace("directive #%d: %s %s", index, directive.op, dict(directive.args))
        _check_arguments(index, directive.op, directive.args)
        method: Any = getattr(builder, directive.op)
        try:
            method(**directive.args)
        except UnbalancedBlockError:
            logger.error("Unbalanced block at directive #%d (%s)", index, directive.op)
            raise
        except BlockgenError:
            raise
        except (TypeError, ValueError) as exc:
            raise ScriptError(f"{directive.op}: {exc}", index=index) from exc

    if not builder.is_balanced:
        open_blocks: int = builder.depth - builder.initial_depth
        raise UnbalancedBlockError(f"Script ended with {open_blocks} block(s) left open.")
    return builder
