# topmark:header:start
#
#   project      : SchemaMap
#   file         : schemas.py
#   file_relpath : src/schemamap/diagnostic/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed payload schemas for machine-readable diagnostics.

These JSON-friendly dataclasses are what `MappingResult.to_dict()` embeds next
to the rendered component schemas:

- `MachineDiagnosticEntry` represents a single diagnostic.
- `MachineDiagnosticCounts` represents aggregated per-level counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from schemamap.diagnostic.model import DiagnosticStats, compute_diagnostic_stats

if TYPE_CHECKING:
    from collections.abc import Iterable

    from schemamap.diagnostic.model import Diagnostic
    from schemamap.diagnostic.types import DiagnosticsLike


@dataclass(slots=True)
class MachineDiagnosticEntry:
    """Machine-readable diagnostic entry.

    Attributes:
        code: Stable diagnostic code (e.g. ``"default-value-unresolvable"``).
        level: Severity level string (``"info"``, ``"warning"``, ``"error"``).
        message: Human-readable diagnostic message.
        location: Optional type/field hint.
    """

    code: str
    level: str
    message: str
    location: str | None = None

    @classmethod
    def from_diagnostic(cls, d: Diagnostic) -> MachineDiagnosticEntry:
        """Create a machine-readable entry from an internal diagnostic.

        Args:
            d: Internal diagnostic instance.

        Returns:
            The corresponding `MachineDiagnosticEntry`.
        """
        return cls(code=d.code.value, level=d.level.value, message=d.message, location=d.location)

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly dict; ``location`` is omitted when unset."""
        out: dict[str, str] = {
            "code": self.code,
            "level": self.level,
            "message": self.message,
        }
        if self.location is not None:
            out["location"] = self.location
        return out


@dataclass(slots=True)
class MachineDiagnosticCounts:
    """Aggregated per-level counts for machine output."""

    info: int
    warning: int
    error: int

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> MachineDiagnosticCounts:
        """Compute per-level counts from internal diagnostics.

        Args:
            diagnostics: Internal diagnostics to aggregate.

        Returns:
            A `MachineDiagnosticCounts` instance with per-level totals.
        """
        stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
        return cls(info=stats.n_info, warning=stats.n_warning, error=stats.n_error)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly dict of the per-level counts."""
        return {
            "info": self.info,
            "warning": self.warning,
            "error": self.error,
        }


def build_diagnostic_entries(diagnostics: DiagnosticsLike) -> list[MachineDiagnosticEntry]:
    """Convert a diagnostic container into machine entries, preserving order."""
    return [MachineDiagnosticEntry.from_diagnostic(d) for d in diagnostics]
