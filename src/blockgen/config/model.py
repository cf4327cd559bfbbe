# topmark:header:start
#
#   project      : BlockGen
#   file         : model.py
#   file_relpath : src/blockgen/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `EmitterConfig`: an immutable snapshot consumed by `blockgen.core.emitter.Emitter`.
    - `MutableEmitterConfig`: a mutable builder used while loading and merging
      config sources; it can be frozen into `EmitterConfig` and thawed back.

Precedence (lowest to highest):
    1. runtime defaults (`blockgen.config.io.load_defaults_dict`),
    2. discovered files, root-most first so the nearest file wins,
    3. explicitly passed config files, in the given order.

A ``pyproject.toml`` only contributes its ``[tool.blockgen]`` table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from blockgen.config.io import get_table, load_defaults_dict, load_toml_dict
from blockgen.config.keys import Toml
from blockgen.config.logging import get_logger
from blockgen.constants import (
    BLOCKGEN_TOML_NAME,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_START_MARKER,
    DEFAULT_TERMINATOR,
    DEFAULT_VISIBILITY,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)
from blockgen.core.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from blockgen.config.io import TomlTable
    from blockgen.config.logging import BlockgenLogger

logger: BlockgenLogger = get_logger(__name__)

VISIBILITIES: tuple[str, ...] = ("public", "protected", "private")


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class EmitterConfig:
    """Immutable formatting settings for an emitter.

    Attributes:
        indent_width (int): Spaces per nesting level.
        terminator (str): Default statement terminator appended by ``write``.
        initial_depth (int): Default starting indentation of new emitters.
        start_marker (str): First line of every dumped program.
        default_visibility (str): Visibility applied to class members when none is given.
        config_files (tuple[Path, ...]): Files that contributed to this config.
    """

    indent_width: int = DEFAULT_INDENT_WIDTH
    terminator: str = DEFAULT_TERMINATOR
    initial_depth: int = 0
    start_marker: str = DEFAULT_START_MARKER
    default_visibility: str = DEFAULT_VISIBILITY
    config_files: tuple[Path, ...] = ()

    @classmethod
    def defaults(cls) -> EmitterConfig:
        """Return the runtime default configuration."""
        return cls()

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict."""
        return {
            Toml.SECTION_EMITTER: {
                Toml.KEY_INDENT_WIDTH: self.indent_width,
                Toml.KEY_TERMINATOR: self.terminator,
                Toml.KEY_INITIAL_DEPTH: self.initial_depth,
            },
            Toml.SECTION_OUTPUT: {
                Toml.KEY_START_MARKER: self.start_marker,
            },
            Toml.SECTION_PHP: {
                Toml.KEY_DEFAULT_VISIBILITY: self.default_visibility,
            },
        }

    def thaw(self) -> MutableEmitterConfig:
        """Return a mutable copy of this frozen config."""
        return MutableEmitterConfig(
            indent_width=self.indent_width,
            terminator=self.terminator,
            initial_depth=self.initial_depth,
            start_marker=self.start_marker,
            default_visibility=self.default_visibility,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableEmitterConfig:
    """Mutable configuration used while loading and merging sources.

    Unset fields (``None``) inherit from lower-precedence layers during
    `merge_with` and fall back to the runtime defaults in `freeze`.
    """

    indent_width: int | None = None
    terminator: str | None = None
    initial_depth: int | None = None
    start_marker: str | None = None
    default_visibility: str | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> EmitterConfig:
        """Validate and freeze this builder into an immutable `EmitterConfig`.

        Raises:
            ConfigurationError: If a value is out of range.
        """
        indent_width: int = DEFAULT_INDENT_WIDTH if self.indent_width is None else self.indent_width
        initial_depth: int = 0 if self.initial_depth is None else self.initial_depth
        visibility: str = self.default_visibility or DEFAULT_VISIBILITY

        if indent_width < 1:
            raise ConfigurationError(f"indent_width must be >= 1 (got {indent_width})")
        if initial_depth < 0:
            raise ConfigurationError(f"initial_depth must be >= 0 (got {initial_depth})")
        if visibility not in VISIBILITIES:
            raise ConfigurationError(
                f"default_visibility must be one of {', '.join(VISIBILITIES)} (got {visibility!r})"
            )

        return EmitterConfig(
            indent_width=indent_width,
            terminator=DEFAULT_TERMINATOR if self.terminator is None else self.terminator,
            initial_depth=initial_depth,
            start_marker=DEFAULT_START_MARKER if self.start_marker is None else self.start_marker,
            default_visibility=visibility,
            config_files=tuple(self.config_files),
        )

    def merge_with(self, other: MutableEmitterConfig) -> MutableEmitterConfig:
        """Return a new builder where values set in ``other`` override this one.

        Args:
            other (MutableEmitterConfig): The higher-precedence layer.

        Returns:
            MutableEmitterConfig: The merged builder.
        """

        def pick(mine: Any, theirs: Any) -> Any:
            return mine if theirs is None else theirs

        return MutableEmitterConfig(
            indent_width=pick(self.indent_width, other.indent_width),
            terminator=pick(self.terminator, other.terminator),
            initial_depth=pick(self.initial_depth, other.initial_depth),
            start_marker=pick(self.start_marker, other.start_marker),
            default_visibility=pick(self.default_visibility, other.default_visibility),
            config_files=[*self.config_files, *other.config_files],
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableEmitterConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> MutableEmitterConfig:
        """Build a config layer from a parsed TOML table.

        Args:
            data (TomlTable): The top-level table (already unwrapped from
                ``[tool.blockgen]`` for pyproject files).
            config_file (Path | None): Source file, recorded for provenance.

        Returns:
            MutableEmitterConfig: The parsed layer; absent keys stay unset.

        Raises:
            ConfigurationError: If a value has the wrong type.
        """
        emitter: TomlTable = get_table(data, Toml.SECTION_EMITTER)
        output: TomlTable = get_table(data, Toml.SECTION_OUTPUT)
        php: TomlTable = get_table(data, Toml.SECTION_PHP)

        draft = cls(
            indent_width=_get_int(emitter, Toml.KEY_INDENT_WIDTH, Toml.SECTION_EMITTER),
            terminator=_get_str(emitter, Toml.KEY_TERMINATOR, Toml.SECTION_EMITTER),
            initial_depth=_get_int(emitter, Toml.KEY_INITIAL_DEPTH, Toml.SECTION_EMITTER),
            start_marker=_get_str(output, Toml.KEY_START_MARKER, Toml.SECTION_OUTPUT),
            default_visibility=_get_str(php, Toml.KEY_DEFAULT_VISIBILITY, Toml.SECTION_PHP),
        )
        if config_file is not None:
            draft.config_files = [config_file]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableEmitterConfig | None:
        """Load a config layer from ``blockgen.toml`` or ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableEmitterConfig | None: The parsed layer, or None for a
                ``pyproject.toml`` without a ``[tool.blockgen]`` table.
        """
        logger.debug("Loading config layer from %s", path)
        data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool: TomlTable = get_table(data, "tool")
            section: Any = tool.get(PYPROJECT_TOOL_SECTION)
            if not isinstance(section, dict):
                logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = section

        return cls.from_toml_dict(data, config_file=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return candidate config files from ``start`` upward, root-most first.

        In each directory ``pyproject.toml`` is listed before ``blockgen.toml`` so
        the dedicated file wins when both exist.
        """
        found: list[Path] = []
        for directory in [start, *start.parents]:
            for name in (BLOCKGEN_TOML_NAME, PYPROJECT_TOML_NAME):
                candidate: Path = directory / name
                if candidate.is_file():
                    found.append(candidate)
        found.reverse()
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        discover: bool = True,
    ) -> MutableEmitterConfig:
        """Merge defaults, discovered files and explicit files into one builder.

        Args:
            start (Path | None): Directory to start discovery from (defaults to CWD).
            extra_config_files (Iterable[Path]): Explicit files, applied last.
            discover (bool): Whether to look for config files around ``start``.

        Returns:
            MutableEmitterConfig: The merged builder.
        """
        merged: MutableEmitterConfig = cls.from_defaults()
        paths: list[Path] = []
        if discover:
            paths.extend(cls.discover_local_config_files(start or Path.cwd()))
        paths.extend(extra_config_files)

        for path in paths:
            layer: MutableEmitterConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        logger.debug("Merged config from %d file(s): %s", len(merged.config_files), merged)
        return merged


def _get_int(table: TomlTable, key: str, section: str) -> int | None:
    value: Any = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"[{section}].{key} must be an integer, got {value!r}")
    return value


def _get_str(table: TomlTable, key: str, section: str) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"[{section}].{key} must be a string, got {value!r}")
    return value
