# topmark:header:start
#
#   project      : BlockGen
#   file         : errors.py
#   file_relpath : src/blockgen/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Exceptions raised by the BlockGen emitter and its helpers.

Usage:
    Contract violations are raised synchronously at the call that breaks the
    contract. Callers must not keep issuing directives after one is raised:
    the buffered output is considered discarded.

Hierarchy:
    - `BlockgenError`
        - `ContractViolationError`
            - `UnbalancedBlockError`
            - `InvalidIdentifierError`
            - `InvalidModifierError`
        - `ConfigurationError`
        - `ScriptError`
"""

from __future__ import annotations


class BlockgenError(Exception):
    """Base class for all BlockGen errors."""


class ContractViolationError(BlockgenError):
    """The caller broke an emitter contract."""


class UnbalancedBlockError(ContractViolationError):
    """A block was closed while none was open, or blocks were left open."""


class InvalidIdentifierError(ContractViolationError, ValueError):
    """A declared name does not follow its naming convention."""


class InvalidModifierError(ContractViolationError, ValueError):
    """An unsupported visibility or modifier keyword was requested."""


class ConfigurationError(BlockgenError):
    """Configuration values are missing, malformed or out of range."""


class ScriptError(BlockgenError):
    """A directive script is malformed.

    Attributes:
        index (int | None): Zero-based index of the offending directive, or ``None``
            when the error concerns the script as a whole.
    """

    index: int | None

    def __init__(self, message: str, *, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"directive #{index}: {message}"
        super().__init__(message)
