# topmark:header:start
#
#   project      : BlockGen
#   file         : strategies_blockgen.py
#   file_relpath : tests/strategies_blockgen.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating emitter directive sequences.

A sequence is a list of ``(action, argument)`` pairs where ``action`` is one of
``"write"``, ``"open"`` or ``"close"``. Generated sequences are always
balanced: closes never outnumber opens at any prefix, and every opened block is
closed at the end.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

Action = Literal["write", "open", "close"]
Step = tuple[Action, str]

# Statement texts that no suppression rule matches.
s_statement: st.SearchStrategy[str] = st.builds(
    lambda name, value: f"${name} = {value}",
    st.from_regex(r"[a-z][a-z0-9_]{0,8}", fullmatch=True),
    st.integers(min_value=0, max_value=10_000),
)

s_kind: st.SearchStrategy[str] = st.sampled_from(["plain", "class", "function"])


@st.composite
def s_balanced_steps(draw: Draw, max_steps: int = 40) -> list[Step]:
    """Draw a balanced sequence of write/open/close steps."""
    raw: list[str] = draw(
        st.lists(st.sampled_from(["write", "open", "close"]), max_size=max_steps)
    )
    steps: list[Step] = []
    depth: int = 0
    for action in raw:
        if action == "write":
            steps.append(("write", draw(s_statement)))
        elif action == "open":
            steps.append(("open", draw(s_kind)))
            depth += 1
        elif depth > 0:
            steps.append(("close", ""))
            depth -= 1
    steps.extend(("close", "") for _ in range(depth))
    return steps
