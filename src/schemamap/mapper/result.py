# topmark:header:start
#
#   project      : SchemaMap
#   file         : result.py
#   file_relpath : src/schemamap/mapper/result.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Outcome of a mapping run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from schemamap.constants import DEFAULT_REF_PREFIX
from schemamap.diagnostic.machine.schemas import (
    MachineDiagnosticCounts,
    build_diagnostic_entries,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from schemamap.diagnostic.model import FrozenDiagnosticLog
    from schemamap.schema.nodes import SchemaNode


@dataclass(frozen=True)
class MappingResult:
    """Finalized components plus the diagnostics recorded while building them.

    Attributes:
        components: Component name to schema, in first-request order. Every
            reference reachable from a component names another component.
        diagnostics: Immutable snapshot of the run's diagnostics.
        ref_prefix: Prefix used when rendering ``$ref`` values.
    """

    components: Mapping[str, SchemaNode]
    diagnostics: FrozenDiagnosticLog
    ref_prefix: str = DEFAULT_REF_PREFIX

    def to_schemas_dict(self) -> dict[str, dict[str, Any]]:
        """Render the components as an OpenAPI ``components.schemas`` mapping."""
        return {
            name: node.to_dict(ref_prefix=self.ref_prefix)
            for name, node in self.components.items()
        }

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly payload with schemas and diagnostics."""
        return {
            "schemas": self.to_schemas_dict(),
            "diagnostics": [e.to_dict() for e in build_diagnostic_entries(self.diagnostics)],
            "diagnostic_counts": MachineDiagnosticCounts.from_iterable(self.diagnostics).to_dict(),
        }
