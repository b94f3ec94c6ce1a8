# topmark:header:start
#
#   project      : SchemaMap
#   file         : constants.py
#   file_relpath : src/schemamap/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMap Constants."""

from __future__ import annotations

from typing import Final

# Name of the environment variable consulted by `setup_logging()`.
LOG_LEVEL_ENV_VAR: Final[str] = "SCHEMAMAP_LOG_LEVEL"

# Config discovery
SCHEMAMAP_TOML_NAME: Final[str] = "schemamap.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "tool.schemamap"

# Prefix used when rendering `ReferenceSchema` nodes as `$ref` pointers.
DEFAULT_REF_PREFIX: Final[str] = "#/components/schemas/"
