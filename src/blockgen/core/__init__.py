# topmark:header:start
#
#   project      : BlockGen
#   file         : __init__.py
#   file_relpath : src/blockgen/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Core, UI-agnostic primitives of BlockGen.

Included modules:

- ``block``
  The `Block` line buffer and the `BlockKind` tags.

- ``terminators``
  Ordered lexical rules that drop the statement terminator on structural lines.

- ``emitter``
  The block-stack engine: ``write``, ``open_block``, ``close_block`` and ``dump``.

- ``errors``
  The exception hierarchy shared by every layer.

Design goals:

- Keep this package free of CLI dependencies and side effects.
- Every operation is a pure in-memory buffer mutation or read.
"""

from __future__ import annotations
