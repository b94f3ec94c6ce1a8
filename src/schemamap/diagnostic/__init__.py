# topmark:header:start
#
#   project      : SchemaMap
#   file         : __init__.py
#   file_relpath : src/schemamap/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Diagnostics are immutable `Diagnostic` instances carrying a stable
      `DiagnosticCode`, a `DiagnosticLevel`, a message and a location hint.
    - During a mapping run they accumulate in a mutable `DiagnosticLog`.
    - Mapping results expose them as an immutable `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from schemamap.diagnostic.model import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)
from schemamap.diagnostic.types import DiagnosticsLike

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "DiagnosticsLike",
    "FrozenDiagnosticLog",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]
