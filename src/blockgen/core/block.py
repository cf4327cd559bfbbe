# topmark:header:start
#
#   project      : BlockGen
#   file         : block.py
#   file_relpath : src/blockgen/core/block.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Line buffer for one nesting level.

A `Block` holds the finished lines written while it is the innermost open
scope, plus a `BlockKind` tag selecting kind-specific formatting in the
emitter. Blocks are passive containers and never fail.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class BlockKind(str, Enum):
    """Kinds of blocks known to the emitter.

    Attributes:
        PLAIN: Untagged block (conditional bodies, generic scopes).
        CLASS: Body of a class declaration.
        FUNCTION: Body of a function or method declaration.
        DOC: Documentation comment body; lines get the `` * `` continuation prefix.
    """

    PLAIN = "plain"
    CLASS = "class"
    FUNCTION = "function"
    DOC = "doc"

    @classmethod
    def coerce(cls, value: BlockKind | str | None) -> BlockKind:
        """Return the `BlockKind` for an enum member, its string value, or ``None``.

        Args:
            value (BlockKind | str | None): The kind to coerce. ``None`` maps to `PLAIN`.

        Returns:
            BlockKind: The matching member.

        Raises:
            ValueError: If ``value`` is a string naming no known kind.
        """
        if value is None:
            return cls.PLAIN
        if isinstance(value, BlockKind):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown block kind {value!r}; expected one of: "
                f"{', '.join(k.value for k in cls)}"
            ) from None


class Block:
    """Ordered, append-only buffer of finished lines."""

    __slots__ = ("kind", "lines")

    kind: BlockKind
    lines: list[str]

    def __init__(self, kind: BlockKind | str | None = None) -> None:
        self.kind = BlockKind.coerce(kind)
        self.lines = []

    def __repr__(self) -> str:
        return f"Block(kind={self.kind.value!r}, lines={len(self.lines)})"

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def append(self, line: str) -> Block:
        """Add ``line`` to the end of the buffer."""
        self.lines.append(line)
        return self

    def extend(self, lines: Iterable[str]) -> Block:
        """Add ``lines`` to the end of the buffer, preserving their order."""
        self.lines.extend(lines)
        return self

    def set_kind(self, kind: BlockKind | str | None) -> Block:
        """Set the block kind (``None`` resets it to `BlockKind.PLAIN`)."""
        self.kind = BlockKind.coerce(kind)
        return self

    def get_kind(self) -> BlockKind:
        """Return the block kind."""
        return self.kind
