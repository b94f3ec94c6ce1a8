# topmark:header:start
#
#   project      : SchemaMap
#   file         : __init__.py
#   file_relpath : src/schemamap/diagnostic/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable payloads for diagnostics.

Typed payload schemas live in `schemamap.diagnostic.machine.schemas`.
"""

from __future__ import annotations

from schemamap.diagnostic.machine.schemas import (
    MachineDiagnosticCounts,
    MachineDiagnosticEntry,
    build_diagnostic_entries,
)

__all__ = [
    "MachineDiagnosticCounts",
    "MachineDiagnosticEntry",
    "build_diagnostic_entries",
]
