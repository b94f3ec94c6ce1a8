# topmark:header:start
#
#   project      : SchemaMap
#   file         : errors.py
#   file_relpath : src/schemamap/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised for contract violations.

Recoverable mapping gaps are diagnostics, not exceptions. The classes here
signal inputs that no well-behaved type resolver produces: an unbound
reference, an inclusion that is not a record, a descriptor of an unknown
class, or a finished run that still has dangling references.
"""

from __future__ import annotations


class MappingContractError(TypeError):
    """A type descriptor or cache operation violates the engine's input contract."""


class DanglingReferenceError(MappingContractError):
    """Finalization found references to names without a component.

    Attributes:
        names: The unresolved component names, sorted.
    """

    def __init__(self, names: list[str]) -> None:
        self.names: list[str] = sorted(names)
        super().__init__(f"Unresolved schema references: {', '.join(self.names)}")
