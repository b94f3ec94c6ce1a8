# topmark:header:start
#
#   project      : SchemaMap
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: defaults, merging, TOML loading and export."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from schemamap.config.model import MappingConfig, MixedSingletonPolicy, MutableMappingConfig
from schemamap.constants import DEFAULT_REF_PREFIX
from schemamap.diagnostic.model import DiagnosticCode

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """A bare builder freezes to the built-in defaults."""
    cfg: MappingConfig = MutableMappingConfig().freeze()

    assert cfg == MappingConfig()
    assert cfg.ref_prefix == DEFAULT_REF_PREFIX
    assert cfg.closed_records is True
    assert cfg.include_descriptions is True
    assert cfg.unescape_identifiers is True
    assert cfg.mixed_singleton_unions is MixedSingletonPolicy.COMPOSE


def test_thaw_freeze_roundtrip() -> None:
    """Thawing and freezing a snapshot preserves it."""
    cfg = MappingConfig(ref_prefix="#/defs/", closed_records=False)

    assert cfg.thaw().freeze() == cfg


def test_merge_with_overrides_only_set_values() -> None:
    """Unset values on the overlay inherit from the base."""
    base = MutableMappingConfig(ref_prefix="a/", closed_records=False)
    overlay = MutableMappingConfig(closed_records=True, include_descriptions=False)

    merged: MappingConfig = base.merge_with(overlay).freeze()

    assert merged.ref_prefix == "a/"
    assert merged.closed_records is True
    assert merged.include_descriptions is False


def test_from_toml_dict() -> None:
    """Valid keys under ``[mapping]`` are applied."""
    data: dict[str, Any] = {
        "mapping": {
            "ref_prefix": "#/definitions/",
            "unescape_identifiers": False,
            "mixed_singleton_unions": "Reject",
        }
    }

    cfg: MappingConfig = MutableMappingConfig.from_toml_dict(data).freeze()

    assert cfg.ref_prefix == "#/definitions/"
    assert cfg.unescape_identifiers is False
    assert cfg.mixed_singleton_unions is MixedSingletonPolicy.REJECT
    assert cfg.diagnostics == ()


def test_invalid_values_are_reported_and_ignored() -> None:
    """Ill-typed and unknown values fall back to defaults with a warning each."""
    data: dict[str, Any] = {
        "mapping": {
            "closed_records": 1,
            "ref_prefix": 42,
            "mixed_singleton_unions": "coerce",
        }
    }

    cfg: MappingConfig = MutableMappingConfig.from_toml_dict(data).freeze()

    assert cfg.closed_records is True
    assert cfg.ref_prefix == DEFAULT_REF_PREFIX
    assert cfg.mixed_singleton_unions is MixedSingletonPolicy.COMPOSE
    codes = [d.code for d in cfg.diagnostics]
    assert codes == [DiagnosticCode.INVALID_CONFIG_VALUE] * 3
    assert {d.location for d in cfg.diagnostics} == {
        "mapping.closed_records",
        "mapping.ref_prefix",
        "mapping.mixed_singleton_unions",
    }


def test_from_schemamap_toml(tmp_path: Path) -> None:
    """A standalone ``schemamap.toml`` is read from its top level."""
    path: Path = tmp_path / "schemamap.toml"
    path.write_text('[mapping]\nref_prefix = "#/x/"\n', encoding="utf-8")

    loaded = MutableMappingConfig.from_toml_file(path)

    assert loaded is not None
    cfg: MappingConfig = loaded.freeze()
    assert cfg.ref_prefix == "#/x/"
    assert cfg.config_files == (path,)


def test_pyproject_without_section_yields_none(tmp_path: Path) -> None:
    """A ``pyproject.toml`` lacking ``[tool.schemamap]`` contributes nothing."""
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert MutableMappingConfig.from_toml_file(path) is None


def test_unparsable_file_yields_empty_config(tmp_path: Path) -> None:
    """Broken TOML is logged and yields no overrides."""
    path: Path = tmp_path / "schemamap.toml"
    path.write_text("[mapping\nref_prefix = ", encoding="utf-8")

    loaded = MutableMappingConfig.from_toml_file(path)

    assert loaded is not None
    assert loaded.freeze().ref_prefix == DEFAULT_REF_PREFIX


def test_discover_prefers_schemamap_toml(tmp_path: Path) -> None:
    """``schemamap.toml`` overrides ``[tool.schemamap]`` in ``pyproject.toml``."""
    (tmp_path / "pyproject.toml").write_text(
        "[tool.schemamap.mapping]\n"
        'ref_prefix = "#/from-pyproject/"\n'
        "closed_records = false\n",
        encoding="utf-8",
    )
    (tmp_path / "schemamap.toml").write_text(
        '[mapping]\nref_prefix = "#/from-schemamap/"\n', encoding="utf-8"
    )

    cfg: MappingConfig = MutableMappingConfig.discover(tmp_path).freeze()

    assert cfg.ref_prefix == "#/from-schemamap/"
    assert cfg.closed_records is False
    assert [p.name for p in cfg.config_files] == ["pyproject.toml", "schemamap.toml"]


def test_discover_empty_directory(tmp_path: Path) -> None:
    """No configuration file means defaults."""
    assert MutableMappingConfig.discover(tmp_path).freeze() == MappingConfig()


def test_to_toml_roundtrip() -> None:
    """Exported TOML loads back into the same settings."""
    cfg = MappingConfig(
        ref_prefix="#/defs/", mixed_singleton_unions=MixedSingletonPolicy.REJECT
    )

    parsed: Any = tomlkit.parse(cfg.to_toml()).unwrap()
    reloaded: MappingConfig = MutableMappingConfig.from_toml_dict(parsed).freeze()

    assert reloaded == cfg
