# topmark:header:start
#
#   project      : BlockGen
#   file         : __init__.py
#   file_relpath : src/blockgen/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Configuration handling for BlockGen.

Emitter settings are read from ``blockgen.toml`` or the ``[tool.blockgen]``
table of ``pyproject.toml`` (parsed with `tomlkit`), merged over the runtime
defaults, and frozen into an immutable `EmitterConfig`.
"""

from __future__ import annotations

from blockgen.config.io import load_defaults_dict, load_toml_dict, to_toml
from blockgen.config.model import EmitterConfig, MutableEmitterConfig

__all__: list[str] = [
    "EmitterConfig",
    "MutableEmitterConfig",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
