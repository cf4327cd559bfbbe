# topmark:header:start
#
#   project      : BlockGen
#   file         : emitter.py
#   file_relpath : src/blockgen/core/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Block-stack engine that assembles indented, terminated, nested source text.

The `Emitter` owns:
    - a stack of open `Block` buffers (innermost last),
    - the current indentation depth (one level per open block, on top of an
      optional initial depth), and
    - the top-level sequence of finished lines.

Exactly one *sink* receives writes at any time: the innermost open block, or
the top-level sequence when no block is open. Closing a block folds its lines
into the new sink, after the lines already there.

Layout example (depth 0 → 2 → 0):

    class Foo
    {
        public function bar()
        {
            return 1;
        }
    }

Notes:
    An `Emitter` is mutable state scoped to one generation session and is not
    safe for concurrent use. Build one instance per thread and merge the
    results afterwards.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Literal, overload

from blockgen.config.logging import get_logger
from blockgen.config.model import EmitterConfig
from blockgen.constants import DOC_LINE_PREFIX
from blockgen.core.block import Block, BlockKind
from blockgen.core.errors import UnbalancedBlockError
from blockgen.core.terminators import resolve_terminator

if TYPE_CHECKING:
    from collections.abc import Iterator

    from blockgen.config.logging import BlockgenLogger

logger: BlockgenLogger = get_logger(__name__)

# Sentinel for "use the configured terminator".
_DEFAULT: Literal["<default>"] = "<default>"


class Emitter:
    """Stateful writer tracking nesting depth and per-block line buffers.

    Args:
        initial_depth (int | None): Starting indentation without an open block, useful
            when the output is embedded inside caller-managed structure. Defaults to
            the configured ``initial_depth`` (0 unless configured otherwise).
        config (EmitterConfig | None): Formatting settings. Defaults to
            `EmitterConfig.defaults()`.

    Raises:
        ValueError: If ``initial_depth`` is negative.
    """

    _config: EmitterConfig
    _initial_depth: int
    _depth: int
    _stack: list[Block]
    _top: list[str]

    def __init__(
        self,
        initial_depth: int | None = None,
        *,
        config: EmitterConfig | None = None,
    ) -> None:
        self._config = config if config is not None else EmitterConfig.defaults()
        if initial_depth is None:
            initial_depth = self._config.initial_depth
        if initial_depth < 0:
            raise ValueError(f"initial_depth must be >= 0 (got {initial_depth})")
        self._initial_depth = initial_depth
        self._depth = initial_depth
        self._stack = []
        self._top = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(depth={self._depth}, open_blocks={len(self._stack)}, "
            f"lines={len(self._top)})"
        )

    # ---- State accessors -----------------------------------------------------

    @property
    def config(self) -> EmitterConfig:
        """The formatting settings used by this emitter."""
        return self._config

    @property
    def depth(self) -> int:
        """Current indentation level."""
        return self._depth

    @property
    def initial_depth(self) -> int:
        """Indentation level the emitter was created with."""
        return self._initial_depth

    @property
    def is_balanced(self) -> bool:
        """True when every opened block has been closed."""
        return not self._stack

    @property
    def current_kind(self) -> BlockKind | None:
        """Kind of the innermost open block, or None at top level."""
        if not self._stack:
            return None
        return self._stack[-1].kind

    @property
    def lines(self) -> list[str]:
        """A copy of the finished top-level lines (without dump markers)."""
        return list(self._top)

    def _sink(self) -> list[str]:
        if self._stack:
            return self._stack[-1].lines
        return self._top

    # ---- Emission primitives -------------------------------------------------

    def write(self, text: str, terminator: str | None = _DEFAULT) -> Emitter:
        """Append one logical line to the current sink.

        Args:
            text (str): The line content, accepted verbatim.
            terminator (str | None): Statement terminator to append. Defaults to the
                configured terminator (``";"``); None writes no terminator. Comment
                markers, declaration headers and brace lines never get one.

        Returns:
            Emitter: ``self``, for chaining.
        """
        if terminator == _DEFAULT:
            terminator = self._config.terminator
        width: int = self._config.indent_width

        if self.current_kind is BlockKind.DOC:
            # Align under the opening marker, which sits one level up.
            line: str = " " * (width * (self._depth - 1)) + DOC_LINE_PREFIX + text
        else:
            line = " " * (width * self._depth) + text + resolve_terminator(text, terminator)

        self._sink().append(line)
        logger.trace("write depth=%d: %r", self._depth, line)
        return self

    def open_block(self, kind: BlockKind | str | None = None) -> Emitter:
        """Begin a nested scope; later writes target the new block until it is closed.

        Args:
            kind (BlockKind | str | None): Kind of the new block; None opens a plain block.

        Returns:
            Emitter: ``self``, for chaining.
        """
        block = Block(kind)
        self._depth += 1
        self._stack.append(block)
        logger.trace("open %s block (depth=%d)", block.kind.value, self._depth)
        return self

    def close_block(self) -> Emitter:
        """End the innermost scope and fold its lines into the parent sink.

        The closed block's lines are appended after the lines already held by the
        parent block (or the top-level sequence). The block itself is discarded.

        Returns:
            Emitter: ``self``, for chaining.

        Raises:
            UnbalancedBlockError: If no block is open. No state is modified.
        """
        if not self._stack:
            logger.error("close_block() called with no open block (depth=%d)", self._depth)
            raise UnbalancedBlockError("Cannot close a block: no block is open.")

        closed: Block = self._stack.pop()
        self._depth -= 1
        self._sink().extend(closed.lines)
        logger.trace(
            "close %s block (%d line(s), depth=%d)", closed.kind.value, len(closed), self._depth
        )
        return self

    @contextmanager
    def scope(self, kind: BlockKind | str | None = None) -> Iterator[Emitter]:
        """Open a block for the duration of a ``with`` statement.

        Args:
            kind (BlockKind | str | None): Kind of the block to open.

        Yields:
            Emitter: ``self``.
        """
        self.open_block(kind)
        yield self
        self.close_block()

    # ---- Output --------------------------------------------------------------

    @overload
    def dump(self, as_lines: Literal[True]) -> list[str]: ...

    @overload
    def dump(self, as_lines: Literal[False] = False) -> str: ...

    def dump(self, as_lines: bool = False) -> list[str] | str:
        """Render the program: start marker, top-level lines, trailing blank line.

        This is a read-only projection and may be called any number of times.
        Lines buffered in blocks that are still open are not included.

        Args:
            as_lines (bool): Return the list of lines instead of a newline-joined string.

        Returns:
            list[str] | str: The rendered program.
        """
        if self._stack:
            logger.warning(
                "dump() with %d open block(s); their lines are not included", len(self._stack)
            )
        rendered: list[str] = [self._config.start_marker, *self._top, ""]
        logger.debug("dump: %d line(s)", len(rendered))
        if as_lines:
            return rendered
        return "\n".join(rendered)
