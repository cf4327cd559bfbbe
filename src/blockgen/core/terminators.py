# topmark:header:start
#
#   project      : BlockGen
#   file         : terminators.py
#   file_relpath : src/blockgen/core/terminators.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Lexical rules deciding when a written line must not get a statement terminator.

Structural lines (comments, declaration headers, braces) never take a
terminator, while ordinary statements get one by default. The rules are plain
prefix/suffix checks evaluated top to bottom; the emitted text is never parsed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

# Optional modifiers followed by the `class` or `function` keyword.
_RE_DECLARATION: Final[re.Pattern[str]] = re.compile(
    r"^(?:(?:abstract|final|public|protected|private|static)\s+)*(?:class|function)\b"
)


@dataclass(frozen=True)
class SuppressionRule:
    """A named predicate over a raw line of text.

    Attributes:
        name (str): Short rule identifier, used in trace logs.
        matches (Callable[[str], bool]): Returns True when the terminator must be dropped.
    """

    name: str
    matches: Callable[[str], bool]


SUPPRESSION_RULES: Final[Sequence[SuppressionRule]] = (
    SuppressionRule("line-comment", lambda text: text.strip().startswith("//")),
    SuppressionRule("block-comment-open", lambda text: text.strip().startswith("/*")),
    SuppressionRule("block-comment-close", lambda text: text.strip().startswith("*/")),
    SuppressionRule("declaration", lambda text: _RE_DECLARATION.match(text.strip()) is not None),
    SuppressionRule("open-brace", lambda text: text.strip().startswith("{")),
    SuppressionRule("close-brace", lambda text: text.rstrip().endswith("}")),
)


def find_suppression_rule(text: str) -> SuppressionRule | None:
    """Return the first rule that suppresses the terminator for ``text``, if any.

    Args:
        text (str): The raw line as passed to `Emitter.write`.

    Returns:
        SuppressionRule | None: The first matching rule, or None when the line
            is an ordinary statement.
    """
    for rule in SUPPRESSION_RULES:
        if rule.matches(text):
            return rule
    return None


def resolve_terminator(text: str, terminator: str | None) -> str:
    """Return the terminator to append to ``text``.

    Args:
        text (str): The raw line.
        terminator (str | None): The requested terminator; None means no terminator.

    Returns:
        str: ``terminator`` unless a suppression rule matches, else the empty string.
    """
    if not terminator:
        return ""
    if find_suppression_rule(text) is not None:
        return ""
    return terminator
