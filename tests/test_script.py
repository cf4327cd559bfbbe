# topmark:header:start
#
#   project      : BlockGen
#   file         : test_script.py
#   file_relpath : tests/test_script.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Tests for directive script parsing and replay."""

from __future__ import annotations

import pytest

from blockgen.config.model import EmitterConfig
from blockgen.core.errors import InvalidIdentifierError, ScriptError, UnbalancedBlockError
from blockgen.php.builder import CodeBuilder
from blockgen.script import DIRECTIVES, Directive, Script, load_script, parse_script, run_script


def test_every_directive_is_a_builder_method() -> None:
    """Each scriptable operation maps to a `CodeBuilder` method."""
    for op in DIRECTIVES:
        assert callable(getattr(CodeBuilder, op, None)), op


def test_load_script_parses_program_and_directives() -> None:
    """The program table and directive array become a `Script`."""
    script: Script = load_script(
        '[program]\ninitial_depth = 2\n\n[[directive]]\nop = "comment"\ntext = "hi"\n'
    )

    assert script.initial_depth == 2
    assert script.directives == (Directive(op="comment", args={"text": "hi"}),)


def test_empty_document_is_an_empty_script() -> None:
    """No directives renders just the start marker."""
    script: Script = load_script("")

    assert script == Script(directives=())
    assert run_script(script).dump(as_lines=True) == ["<?php", ""]


@pytest.mark.parametrize(
    "data,message",
    [
        ({"directive": ["x"]}, "directive #0: directive must be a table"),
        ({"directive": [{"name": "Foo"}]}, "missing 'op' key"),
        ({"directive": [{"op": "write"}, {"op": "jump"}]}, "directive #1: unknown operation"),
        ({"directive": [{"op": "end_class", "name": "Foo"}]}, "unexpected argument"),
        ({"directive": {"op": "write"}}, "must be an array of tables"),
        ({"program": {"initial_depth": -1}}, "non-negative integer"),
        ({"program": {"initial_depth": True}}, "non-negative integer"),
        ({"program": "x"}, "must be a table"),
    ],
)
def test_parse_script_rejects_malformed_documents(data: dict[str, object], message: str) -> None:
    """Shape errors raise ScriptError naming the offending directive."""
    with pytest.raises(ScriptError, match=message):
        parse_script(data)


def test_script_error_records_index() -> None:
    """The directive index is kept on the exception."""
    with pytest.raises(ScriptError) as exc_info:
        parse_script({"directive": [{"op": "write", "text": "a"}, {"op": "nope"}]})

    assert exc_info.value.index == 1


def test_invalid_toml_is_a_script_error() -> None:
    """Decode failures surface as ScriptError."""
    with pytest.raises(ScriptError, match="Error decoding TOML"):
        load_script("[[directive]\n", source="broken.toml")


def test_run_script_replays_builder_calls() -> None:
    """Directives are replayed in order onto a fresh builder."""
    script: Script = load_script(
        """
[[directive]]
op = "start_class"
name = "Foo"
extends = "Base"

[[directive]]
op = "constant"
name = "MAX"
value = 3

[[directive]]
op = "variable"
name = "$tags"
value = ["a"]
visibility = "private"

[[directive]]
op = "write"
text = "// raw"
terminator = ""

[[directive]]
op = "end_class"
"""
    )

    assert run_script(script).lines == [
        "class Foo extends Base",
        "{",
        "    const MAX = 3;",
        "    private $tags = array(\n        0 => 'a',\n    );",
        "    // raw",
        "}",
    ]


def test_run_script_uses_config_and_program_depth() -> None:
    """The program's initial depth overrides the configured one."""
    config = EmitterConfig(indent_width=2, initial_depth=3)
    script = Script(directives=(Directive("write", {"text": "$a = 1"}),), initial_depth=1)

    assert run_script(script, config=config).lines == ["  $a = 1;"]
    assert run_script(Script(directives=script.directives), config=config).lines == [
        "      $a = 1;"
    ]


def test_run_script_unbalanced_close() -> None:
    """A close with no open block propagates UnbalancedBlockError."""
    script = Script(directives=(Directive("end_function"),))

    with pytest.raises(UnbalancedBlockError):
        run_script(script)


def test_run_script_blocks_left_open() -> None:
    """Blocks left open at the end are a contract violation."""
    script = Script(directives=(Directive("open_block"), Directive("open_block", {"kind": "doc"})))

    with pytest.raises(UnbalancedBlockError, match="2 block"):
        run_script(script)


def test_run_script_wraps_argument_errors() -> None:
    """Missing arguments and bad values become ScriptError with the directive index."""
    with pytest.raises(ScriptError, match="directive #0: start_class"):
        run_script(Script(directives=(Directive("start_class"),)))

    with pytest.raises(ScriptError, match="directive #1: open_block"):
        run_script(
            Script(
                directives=(
                    Directive("comment", {"text": "x"}),
                    Directive("open_block", {"kind": "loop"}),
                )
            )
        )


def test_run_script_keeps_contract_errors() -> None:
    """Contract violations from the builder are not rewrapped."""
    script = Script(directives=(Directive("variable", {"name": "bad", "value": 1}),))

    with pytest.raises(InvalidIdentifierError):
        run_script(script)


@pytest.mark.parametrize(
    "op,args,key",
    [
        ("open_block", {"kind": 1}, "kind"),
        ("variable", {"name": 5, "value": 1}, "name"),
        ("start_function", {"name": "f", "visibility": 1}, "visibility"),
        ("start_function", {"name": "f", "params": ["$a", 2]}, "params"),
        ("start_class", {"name": "Foo", "implements": [1]}, "implements"),
        ("start_class", {"name": "Foo", "abstract": "yes"}, "abstract"),
        ("write", {"text": 1}, "text"),
        ("write", {"text": "x", "terminator": False}, "terminator"),
        ("include_file", {"file": "a.php", "once": 1}, "once"),
        ("start_if", {"condition": 1}, "condition"),
        ("blank_line", {"lines": True}, "lines"),
        ("blank_line", {"lines": "2"}, "lines"),
        ("variable", {"name": "$a", "value": 1, "context": 1}, "context"),
    ],
)
def test_wrongly_typed_arguments_are_script_errors(
    op: str, args: dict[str, object], key: str
) -> None:
    """Arguments of the wrong TOML type are rejected with the directive index."""
    data: dict[str, object] = {"directive": [{"op": "comment", "text": "x"}, {"op": op, **args}]}

    with pytest.raises(ScriptError, match=f"directive #1: argument '{key}' of '{op}' must be"):
        parse_script(data)

    # Hand-built scripts go through the same checks on replay.
    script = Script(directives=(Directive("comment", {"text": "x"}), Directive(op, args)))
    with pytest.raises(ScriptError, match=f"directive #1: argument '{key}'"):
        run_script(script)


def test_run_script_rejects_unknown_operation() -> None:
    """Hand-built scripts cannot call builder attributes outside the directive set."""
    with pytest.raises(ScriptError, match="directive #0: unknown operation 'dump'"):
        run_script(Script(directives=(Directive("dump"),)))


def test_correctly_typed_arguments_are_accepted() -> None:
    """Strings, arrays of strings, booleans and integers pass where expected."""
    script: Script = load_script(
        """
[[directive]]
op = "start_class"
name = "Foo"
implements = ["A", "B"]
abstract = true

[[directive]]
op = "start_function"
name = "run"
params = ["$a"]
visibility = "private"

[[directive]]
op = "blank_line"
lines = 1

[[directive]]
op = "end_function"

[[directive]]
op = "end_class"
"""
    )

    assert run_script(script).lines == [
        "abstract class Foo implements A, B",
        "{",
        "    private function run($a)",
        "    {",
        "        ",
        "    }",
        "}",
    ]
