# topmark:header:start
#
#   project      : BlockGen
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 BlockGen contributors
#
# topmark:header:end

"""Tests for `EmitterConfig` / `MutableEmitterConfig`: parsing, merging and discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from blockgen.config.io import load_defaults_dict
from blockgen.config.model import EmitterConfig, MutableEmitterConfig
from blockgen.core.errors import ConfigurationError


def test_defaults_roundtrip_through_toml_dict() -> None:
    """Defaults parse back into the same frozen config."""
    frozen: EmitterConfig = MutableEmitterConfig.from_defaults().freeze()

    assert frozen == EmitterConfig.defaults()
    assert frozen.to_toml_dict() == load_defaults_dict()


def test_thaw_then_freeze_is_identity() -> None:
    """Thawing and refreezing a config preserves all values."""
    config = EmitterConfig(indent_width=2, terminator="", start_marker="<?hh")

    assert config.thaw().freeze() == config


def test_empty_layer_freezes_to_defaults() -> None:
    """Unset values fall back to the runtime defaults."""
    assert MutableEmitterConfig().freeze() == EmitterConfig.defaults()


def test_merge_prefers_values_set_in_other() -> None:
    """Set values in the higher layer win; unset ones inherit."""
    base = MutableEmitterConfig(indent_width=2, terminator=",")
    top = MutableEmitterConfig(indent_width=8, config_files=[Path("top.toml")])

    merged: MutableEmitterConfig = base.merge_with(top)

    assert merged.indent_width == 8
    assert merged.terminator == ","
    assert merged.config_files == [Path("top.toml")]


def test_empty_terminator_is_a_set_value() -> None:
    """An empty terminator overrides the default instead of being treated as unset."""
    layer = MutableEmitterConfig.from_toml_dict({"emitter": {"terminator": ""}})

    assert MutableEmitterConfig.from_defaults().merge_with(layer).freeze().terminator == ""


@pytest.mark.parametrize(
    "data,message",
    [
        ({"emitter": {"indent_width": "4"}}, "must be an integer"),
        ({"emitter": {"initial_depth": True}}, "must be an integer"),
        ({"output": {"start_marker": 1}}, "must be a string"),
        ({"emitter": 3}, "must be a table"),
    ],
)
def test_from_toml_dict_rejects_wrong_types(data: dict[str, object], message: str) -> None:
    """Wrongly typed values raise ConfigurationError."""
    with pytest.raises(ConfigurationError, match=message):
        MutableEmitterConfig.from_toml_dict(data)


@pytest.mark.parametrize(
    "draft,message",
    [
        (MutableEmitterConfig(indent_width=0), "indent_width"),
        (MutableEmitterConfig(initial_depth=-1), "initial_depth"),
        (MutableEmitterConfig(default_visibility="friend"), "default_visibility"),
    ],
)
def test_freeze_validates_ranges(draft: MutableEmitterConfig, message: str) -> None:
    """Out-of-range values are rejected when freezing."""
    with pytest.raises(ConfigurationError, match=message):
        draft.freeze()


def test_pyproject_without_tool_table_is_ignored(tmp_path: Path) -> None:
    """A pyproject.toml without [tool.blockgen] contributes nothing."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")

    assert MutableEmitterConfig.from_toml_file(path) is None


def test_pyproject_tool_table_is_read(tmp_path: Path) -> None:
    """[tool.blockgen] is unwrapped and its source recorded."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text("[tool.blockgen.emitter]\nindent_width = 2\n", encoding="utf-8")

    layer = MutableEmitterConfig.from_toml_file(path)

    assert layer is not None
    assert layer.indent_width == 2
    assert layer.config_files == [path]


def test_unreadable_or_invalid_file(tmp_path: Path) -> None:
    """Missing files and invalid TOML raise ConfigurationError."""
    with pytest.raises(ConfigurationError, match="Cannot read"):
        MutableEmitterConfig.from_toml_file(tmp_path / "nope.toml")

    bad: Path = tmp_path / "blockgen.toml"
    bad.write_text("[emitter\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Error decoding TOML"):
        MutableEmitterConfig.from_toml_file(bad)


def test_discovery_orders_root_most_first(tmp_path: Path) -> None:
    """Parents come before children; blockgen.toml after pyproject.toml in a directory."""
    child: Path = tmp_path / "a" / "b"
    child.mkdir(parents=True)
    (tmp_path / "blockgen.toml").write_text("", encoding="utf-8")
    (child / "pyproject.toml").write_text("", encoding="utf-8")
    (child / "blockgen.toml").write_text("", encoding="utf-8")

    found: list[Path] = MutableEmitterConfig.discover_local_config_files(child)
    ours: list[Path] = [p for p in found if tmp_path in p.parents]

    assert ours == [
        tmp_path / "blockgen.toml",
        child / "pyproject.toml",
        child / "blockgen.toml",
    ]


def test_load_merged_nearest_file_wins(tmp_path: Path) -> None:
    """The config nearest to the start directory has the final say."""
    child: Path = tmp_path / "sub"
    child.mkdir()
    (tmp_path / "blockgen.toml").write_text(
        '[emitter]\nindent_width = 2\nterminator = ","\n', encoding="utf-8"
    )
    (child / "blockgen.toml").write_text("[emitter]\nindent_width = 3\n", encoding="utf-8")

    config: EmitterConfig = MutableEmitterConfig.load_merged(start=child).freeze()

    assert config.indent_width == 3
    assert config.terminator == ","
    assert child / "blockgen.toml" in config.config_files


def test_load_merged_without_discovery(tmp_path: Path) -> None:
    """With discovery off only explicit files are applied."""
    (tmp_path / "blockgen.toml").write_text("[emitter]\nindent_width = 2\n", encoding="utf-8")
    extra: Path = tmp_path / "extra.toml"
    extra.write_text('[output]\nstart_marker = "<?hh"\n', encoding="utf-8")

    config: EmitterConfig = MutableEmitterConfig.load_merged(
        start=tmp_path, extra_config_files=[extra], discover=False
    ).freeze()

    assert config.indent_width == 4
    assert config.start_marker == "<?hh"
    assert config.config_files == (extra,)
