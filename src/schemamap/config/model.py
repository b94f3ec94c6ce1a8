# topmark:header:start
#
#   project      : SchemaMap
#   file         : model.py
#   file_relpath : src/schemamap/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for the mapping engine.

This module defines:
    - `MappingConfig`: an immutable snapshot read by the engine and builders.
    - `MutableMappingConfig`: a mutable builder used while loading and merging
      TOML sources; it can be frozen into `MappingConfig` and thawed back.

Unset (``None``) values on the builder mean "inherit": `merge_with` only
overrides fields the other builder actually sets, and `freeze` fills the
remaining gaps with the built-in defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from schemamap.config.io import (
    extract_schemamap_table,
    get_bool_value_or_none_checked,
    get_enum_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_toml_dict,
    to_toml,
)
from schemamap.config.keys import Toml
from schemamap.config.logging import get_logger
from schemamap.constants import DEFAULT_REF_PREFIX, PYPROJECT_TOML_NAME, SCHEMAMAP_TOML_NAME
from schemamap.diagnostic.model import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from schemamap.config.io import TomlTable
    from schemamap.config.logging import SchemamapLogger

logger: SchemamapLogger = get_logger(__name__)


class MixedSingletonPolicy(str, Enum):
    """How to treat a union of singletons that are not all string literals."""

    COMPOSE = "compose"
    REJECT = "reject"


@dataclass(frozen=True, slots=True)
class MappingConfig:
    """Immutable runtime configuration for a mapping run.

    Attributes:
        ref_prefix (str): Prefix prepended to component names in ``$ref`` pointers.
        closed_records (bool): Emit ``additionalProperties: false`` for records
            without a rest field.
        include_descriptions (bool): Copy type and field descriptions onto schemas.
        unescape_identifiers (bool): Strip quoting/escapes from field names.
        mixed_singleton_unions (MixedSingletonPolicy): Handling of singleton
            unions that cannot collapse to a string enum.
        config_files (tuple[Path, ...]): TOML sources merged into this snapshot.
        diagnostics (tuple[Diagnostic, ...]): Problems found while loading.
    """

    ref_prefix: str = DEFAULT_REF_PREFIX
    closed_records: bool = True
    include_descriptions: bool = True
    unescape_identifiers: bool = True
    mixed_singleton_unions: MixedSingletonPolicy = MixedSingletonPolicy.COMPOSE
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def thaw(self) -> MutableMappingConfig:
        """Return a mutable copy of this snapshot."""
        return MutableMappingConfig(
            ref_prefix=self.ref_prefix,
            closed_records=self.closed_records,
            include_descriptions=self.include_descriptions,
            unescape_identifiers=self.unescape_identifiers,
            mixed_singleton_unions=self.mixed_singleton_unions,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-serializable dict."""
        return {
            Toml.SECTION_MAPPING: {
                Toml.KEY_REF_PREFIX: self.ref_prefix,
                Toml.KEY_CLOSED_RECORDS: self.closed_records,
                Toml.KEY_INCLUDE_DESCRIPTIONS: self.include_descriptions,
                Toml.KEY_UNESCAPE_IDENTIFIERS: self.unescape_identifiers,
                Toml.KEY_MIXED_SINGLETON_UNIONS: self.mixed_singleton_unions.value,
            }
        }

    def to_toml(self) -> str:
        """Render this configuration as TOML text."""
        return to_toml(self.to_toml_dict())


@dataclass
class MutableMappingConfig:
    """Mutable configuration builder used while loading and merging sources."""

    ref_prefix: str | None = None
    closed_records: bool | None = None
    include_descriptions: bool | None = None
    unescape_identifiers: bool | None = None
    mixed_singleton_unions: MixedSingletonPolicy | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def freeze(self) -> MappingConfig:
        """Freeze this builder into an immutable `MappingConfig`."""
        defaults = MappingConfig()
        return MappingConfig(
            ref_prefix=self.ref_prefix if self.ref_prefix is not None else defaults.ref_prefix,
            closed_records=(
                self.closed_records if self.closed_records is not None else defaults.closed_records
            ),
            include_descriptions=(
                self.include_descriptions
                if self.include_descriptions is not None
                else defaults.include_descriptions
            ),
            unescape_identifiers=(
                self.unescape_identifiers
                if self.unescape_identifiers is not None
                else defaults.unescape_identifiers
            ),
            mixed_singleton_unions=(
                self.mixed_singleton_unions
                if self.mixed_singleton_unions is not None
                else defaults.mixed_singleton_unions
            ),
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    def merge_with(self, other: MutableMappingConfig) -> MutableMappingConfig:
        """Overlay the values set on ``other`` onto this builder, in place.

        Args:
            other: Higher-precedence builder.

        Returns:
            This builder, for chaining.
        """
        if other.ref_prefix is not None:
            self.ref_prefix = other.ref_prefix
        if other.closed_records is not None:
            self.closed_records = other.closed_records
        if other.include_descriptions is not None:
            self.include_descriptions = other.include_descriptions
        if other.unescape_identifiers is not None:
            self.unescape_identifiers = other.unescape_identifiers
        if other.mixed_singleton_unions is not None:
            self.mixed_singleton_unions = other.mixed_singleton_unions
        self.config_files.extend(other.config_files)
        self.diagnostics.items.extend(other.diagnostics)
        return self

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableMappingConfig:
        """Build a config from a SchemaMap TOML table.

        Ill-typed values are skipped and reported in ``diagnostics``.

        Args:
            data: The SchemaMap table (already extracted from ``pyproject.toml``).
            config_file: Source path, recorded for provenance.

        Returns:
            The populated builder.
        """
        draft = cls()
        if config_file is not None:
            draft.config_files.append(config_file)

        mapping_tbl: TomlTable = get_table_value(data, Toml.SECTION_MAPPING)
        where: str = Toml.SECTION_MAPPING
        diags: DiagnosticLog = draft.diagnostics

        draft.ref_prefix = get_string_value_or_none_checked(
            mapping_tbl, Toml.KEY_REF_PREFIX, where=where, diagnostics=diags
        )
        draft.closed_records = get_bool_value_or_none_checked(
            mapping_tbl, Toml.KEY_CLOSED_RECORDS, where=where, diagnostics=diags
        )
        draft.include_descriptions = get_bool_value_or_none_checked(
            mapping_tbl, Toml.KEY_INCLUDE_DESCRIPTIONS, where=where, diagnostics=diags
        )
        draft.unescape_identifiers = get_bool_value_or_none_checked(
            mapping_tbl, Toml.KEY_UNESCAPE_IDENTIFIERS, where=where, diagnostics=diags
        )
        draft.mixed_singleton_unions = get_enum_value_or_none_checked(
            mapping_tbl,
            Toml.KEY_MIXED_SINGLETON_UNIONS,
            MixedSingletonPolicy,
            where=where,
            diagnostics=diags,
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableMappingConfig | None:
        """Load configuration from ``schemamap.toml`` or ``pyproject.toml``.

        Args:
            path: Path to the TOML file.

        Returns:
            The builder, or None when a ``pyproject.toml`` has no
            ``[tool.schemamap]`` section.
        """
        data: TomlTable = load_toml_dict(path)
        table: TomlTable | None = extract_schemamap_table(data, path)
        if table is None:
            logger.debug("No SchemaMap section in %s", path)
            return None
        logger.debug("Loaded SchemaMap configuration from %s", path)
        return cls.from_toml_dict(table, config_file=path)

    @classmethod
    def discover(cls, root: Path) -> MutableMappingConfig:
        """Merge the configuration files found in ``root``.

        ``pyproject.toml`` is applied first and ``schemamap.toml`` last, so the
        dedicated file wins when both set the same key.

        Args:
            root: Directory to search.

        Returns:
            The merged builder (empty when no file is present).
        """
        merged = cls()
        for name in (PYPROJECT_TOML_NAME, SCHEMAMAP_TOML_NAME):
            candidate: Path = root / name
            if not candidate.is_file():
                continue
            loaded: MutableMappingConfig | None = cls.from_toml_file(candidate)
            if loaded is not None:
                merged.merge_with(loaded)
        return merged
