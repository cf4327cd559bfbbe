# topmark:header:start
#
#   project      : BlockGen
#   file         : __init__.py
#   file_relpath : src/blockgen/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""BlockGen package.

BlockGen assembles correctly indented, terminated and nested source text from
a sequence of structural directives (open a class, open a function, write a
statement, open a documentation block). It exposes a small typed API and a
CLI that replays TOML directive scripts.
"""

from __future__ import annotations

from blockgen.config.model import EmitterConfig, MutableEmitterConfig
from blockgen.core.block import Block, BlockKind
from blockgen.core.emitter import Emitter
from blockgen.core.errors import (
    BlockgenError,
    ConfigurationError,
    ContractViolationError,
    InvalidIdentifierError,
    InvalidModifierError,
    ScriptError,
    UnbalancedBlockError,
)
from blockgen.php.builder import CodeBuilder, Visibility

__all__: list[str] = [
    "Block",
    "BlockKind",
    "BlockgenError",
    "CodeBuilder",
    "ConfigurationError",
    "ContractViolationError",
    "Emitter",
    "EmitterConfig",
    "InvalidIdentifierError",
    "InvalidModifierError",
    "MutableEmitterConfig",
    "ScriptError",
    "UnbalancedBlockError",
    "Visibility",
]
