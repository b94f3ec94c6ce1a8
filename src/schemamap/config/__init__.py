# topmark:header:start
#
#   project      : SchemaMap
#   file         : __init__.py
#   file_relpath : src/schemamap/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for SchemaMap.

Modules:
    - `schemamap.config.logging`: TRACE-capable logger and colored formatter.
    - `schemamap.config.keys`: canonical TOML section and key names.
    - `schemamap.config.io`: tomlkit-based loading and typed value getters.
    - `schemamap.config.model`: `MappingConfig` and its mutable builder.

Nothing is re-exported here: `schemamap.config.logging` is imported by almost
every module, so this package must stay free of heavier imports.
"""

from __future__ import annotations
