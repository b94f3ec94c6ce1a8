# topmark:header:start
#
#   project      : SchemaMap
#   file         : keys.py
#   file_relpath : src/schemamap/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for SchemaMap configuration.

These constants are the external configuration schema as it appears in
``schemamap.toml`` and in ``[tool.schemamap]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by SchemaMap configuration."""

    # [mapping]
    SECTION_MAPPING: Final[str] = "mapping"

    KEY_REF_PREFIX: Final[str] = "ref_prefix"
    KEY_CLOSED_RECORDS: Final[str] = "closed_records"
    KEY_INCLUDE_DESCRIPTIONS: Final[str] = "include_descriptions"
    KEY_UNESCAPE_IDENTIFIERS: Final[str] = "unescape_identifiers"
    KEY_MIXED_SINGLETON_UNIONS: Final[str] = "mixed_singleton_unions"
