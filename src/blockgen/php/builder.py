# topmark:header:start
#
#   project      : BlockGen
#   file         : builder.py
#   file_relpath : src/blockgen/php/builder.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""PHP convenience layer on top of the block-stack emitter.

Each helper turns one intent ("start a class", "declare a constant") into a
few calls to `Emitter.write`, `Emitter.open_block` and `Emitter.close_block`.

Example:
    ```python
    code = CodeBuilder()
    code.start_class("Foo").start_function("bar").write("return 1")
    code.end_function().end_class()
    print(code.dump())
    ```
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING, Any, Final

from blockgen.config.logging import get_logger
from blockgen.constants import DOC_CLOSE_MARKER, DOC_OPEN_MARKER
from blockgen.core.block import BlockKind
from blockgen.core.emitter import Emitter
from blockgen.core.errors import InvalidIdentifierError, InvalidModifierError
from blockgen.php.values import format_value

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from blockgen.config.logging import BlockgenLogger

logger: BlockgenLogger = get_logger(__name__)

_RE_VARIABLE: Final[re.Pattern[str]] = re.compile(r"^\$[A-Za-z_\x80-\xff][A-Za-z0-9_\x80-\xff]*$")
_RE_CONSTANT: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z_\x80-\xff][A-Za-z0-9_\x80-\xff]*$")
_RE_QUOTED: Final[re.Pattern[str]] = re.compile(r"['\"]")


class Visibility(str, Enum):
    """Member visibility keywords."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @classmethod
    def coerce(cls, value: Visibility | str) -> Visibility:
        """Return the member for ``value``.

        Raises:
            InvalidModifierError: If ``value`` is not a visibility keyword.
        """
        if isinstance(value, Visibility):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise InvalidModifierError(
                f"Unsupported visibility {value!r}; expected one of: "
                f"{', '.join(v.value for v in cls)}"
            ) from None


class CodeBuilder(Emitter):
    """Emitter with helpers for PHP classes, functions, conditionals and declarations."""

    # ---- Context ----------------------------------------------------------

    @property
    def in_class(self) -> bool:
        """True when the innermost open block is a class body."""
        return self.current_kind is BlockKind.CLASS

    def _member_prefix(self, visibility: Visibility | str | None) -> str:
        """Return ``"<visibility> "`` inside a class body, else the empty string."""
        if not self.in_class:
            return ""
        resolved: Visibility = Visibility.coerce(visibility or self.config.default_visibility)
        return f"{resolved.value} "

    # ---- Classes and functions ---------------------------------------------

    def start_class(
        self,
        name: str,
        extends: str | None = None,
        implements: str | Sequence[str] | None = None,
        abstract: bool = False,
    ) -> CodeBuilder:
        """Write a class header and open its body.

        Args:
            name (str): The class name.
            extends (str | None): Parent class.
            implements (str | Sequence[str] | None): Interface name(s).
            abstract (bool): Declare the class abstract.

        Returns:
            CodeBuilder: ``self``, for chaining.
        """
        header: str = f"class {name}"
        if abstract:
            header = f"abstract {header}"
        if extends is not None:
            header += f" extends {extends}"
        if implements:
            if not isinstance(implements, str):
                implements = ", ".join(implements)
            header += f" implements {implements}"
        self.write(header)
        self.write("{")
        self.open_block(BlockKind.CLASS)
        return self

    def end_class(self) -> CodeBuilder:
        """Close the class body and write its closing brace."""
        self.close_block()
        self.write("}", None)
        return self

    def start_function(
        self,
        name: str,
        params: str | Sequence[str] | None = None,
        visibility: Visibility | str | None = None,
    ) -> CodeBuilder:
        """Write a function header and open its body.

        Inside a class body the header is prefixed with ``visibility`` (the
        configured default, ``public``, when omitted). Outside a class the
        visibility is ignored.

        Args:
            name (str): The function name.
            params (str | Sequence[str] | None): Parameter list, verbatim or as items.
            visibility (Visibility | str | None): Member visibility.

        Returns:
            CodeBuilder: ``self``, for chaining.

        Raises:
            InvalidModifierError: If ``visibility`` is not a visibility keyword.
        """
        if params is None:
            params = ""
        elif not isinstance(params, str):
            params = ", ".join(params)
        self.write(f"{self._member_prefix(visibility)}function {name}({params})")
        self.write("{")
        self.open_block(BlockKind.FUNCTION)
        return self

    def end_function(self) -> CodeBuilder:
        """Close the function body and write its closing brace."""
        self.close_block()
        self.write("}", None)
        return self

    @contextmanager
    def class_body(
        self,
        name: str,
        extends: str | None = None,
        implements: str | Sequence[str] | None = None,
        abstract: bool = False,
    ) -> Iterator[CodeBuilder]:
        """Context manager pairing `start_class` with `end_class`."""
        self.start_class(name, extends=extends, implements=implements, abstract=abstract)
        yield self
        self.end_class()

    @contextmanager
    def function_body(
        self,
        name: str,
        params: str | Sequence[str] | None = None,
        visibility: Visibility | str | None = None,
    ) -> Iterator[CodeBuilder]:
        """Context manager pairing `start_function` with `end_function`."""
        self.start_function(name, params=params, visibility=visibility)
        yield self
        self.end_function()

    # ---- Declarations -------------------------------------------------------

    def constant(self, name: str, value: Any, defined: bool = False) -> CodeBuilder:
        """Declare a class constant, or a global one via ``define()``.

        Args:
            name (str): The constant name.
            value (Any): A PHP expression (str) or a Python value to export.
            defined (bool): Outside a class, guard with ``defined('NAME') ||``.

        Returns:
            CodeBuilder: ``self``, for chaining.

        Raises:
            InvalidIdentifierError: If ``name`` is not a valid constant name.
        """
        if not _RE_CONSTANT.match(name):
            logger.error("Invalid constant name: %r", name)
            raise InvalidIdentifierError(f"Invalid constant name {name!r}")

        rendered: str = format_value(value, level=self.depth, indent_width=self.config.indent_width)
        if self.in_class:
            code: str = f"const {name} = {rendered}"
        else:
            code = f"define('{name}', {rendered})"
            if defined:
                code = f"defined('{name}') || {code}"
        self.write(code)
        return self

    def variable(
        self,
        name: str,
        value: Any,
        context: str | None = None,
        visibility: Visibility | str | None = None,
    ) -> CodeBuilder:
        """Declare a variable, or a property inside a class body.

        Args:
            name (str): Variable name, including the leading ``$``.
            value (Any): A PHP expression (str) or a Python value to export.
            context (str | None): Object the variable belongs to, e.g. ``$this``;
                the ``$`` sigil is replaced with ``<context>->``.
            visibility (Visibility | str | None): Property visibility inside a class.

        Returns:
            CodeBuilder: ``self``, for chaining.

        Raises:
            InvalidIdentifierError: If ``name`` does not start with ``$`` followed by
                a valid identifier.
            InvalidModifierError: If ``visibility`` is not a visibility keyword.
        """
        if not name.startswith("$"):
            logger.error("Variable name without $ sign: %r", name)
            raise InvalidIdentifierError(f"Variable name must start with $ sign: {name!r}")
        if not _RE_VARIABLE.match(name):
            logger.error("Invalid variable name: %r", name)
            raise InvalidIdentifierError(f"Invalid variable name {name!r}")

        target: str = name
        if context is not None:
            target = f"{context}->{name[1:]}"
        target = self._member_prefix(visibility) + target

        rendered: str = format_value(value, level=self.depth, indent_width=self.config.indent_width)
        self.write(f"{target} = {rendered}")
        return self

    def include_file(self, file: str, once: bool = True) -> CodeBuilder:
        """Write an ``include``/``include_once`` statement."""
        return self._load_statement("include_once" if once else "include", file)

    def require_file(self, file: str, once: bool = True) -> CodeBuilder:
        """Write a ``require``/``require_once`` statement."""
        return self._load_statement("require_once" if once else "require", file)

    def _load_statement(self, keyword: str, file: str) -> CodeBuilder:
        # Already-quoted paths and expressions are used as-is
        if _RE_QUOTED.search(file):
            self.write(f"{keyword} {file}")
        else:
            self.write(f"{keyword} '{file}'")
        return self

    # ---- Conditionals ---------------------------------------------------------

    def start_if(self, condition: str) -> CodeBuilder:
        """Write ``if (condition) {`` and open the branch body."""
        self.write(f"if ({condition}) {{", None)
        self.open_block()
        return self

    def else_if(self, condition: str) -> CodeBuilder:
        """Close the current branch and open an ``elseif`` branch."""
        self.close_block()
        self.write(f"}} elseif ({condition}) {{", None)
        self.open_block()
        return self

    def else_branch(self) -> CodeBuilder:
        """Close the current branch and open the ``else`` branch."""
        self.close_block()
        self.write("} else {", None)
        self.open_block()
        return self

    def end_if(self) -> CodeBuilder:
        """Close the last branch and write the closing brace."""
        self.close_block()
        self.write("}", None)
        return self

    # ---- Comments and layout ---------------------------------------------------

    def start_doc(self) -> CodeBuilder:
        """Write ``/**`` and open a documentation block."""
        self.write(DOC_OPEN_MARKER)
        self.open_block(BlockKind.DOC)
        return self

    def end_doc(self) -> CodeBuilder:
        """Close the documentation block and write `` */``."""
        self.close_block()
        self.write(DOC_CLOSE_MARKER)
        return self

    @contextmanager
    def doc_block(self) -> Iterator[CodeBuilder]:
        """Context manager pairing `start_doc` with `end_doc`."""
        self.start_doc()
        yield self
        self.end_doc()

    def comment(self, text: str) -> CodeBuilder:
        """Write a ``//`` line comment."""
        self.write(f"// {text}")
        return self

    def blank_line(self, lines: int = 1) -> CodeBuilder:
        """Write ``lines`` empty lines."""
        for _ in range(lines):
            self.write("", None)
        return self
