# topmark:header:start
#
#   project      : SchemaMap
#   file         : types.py
#   file_relpath : src/schemamap/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural typing helpers for diagnostic containers.

`DiagnosticsLike` lets renderers accept either the mutable `DiagnosticLog`
used during a run or the `FrozenDiagnosticLog` attached to a result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from schemamap.diagnostic.model import Diagnostic, DiagnosticStats


class DiagnosticsLike(Protocol):
    """Structural interface for objects that carry diagnostics."""

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        ...

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        ...

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        ...
