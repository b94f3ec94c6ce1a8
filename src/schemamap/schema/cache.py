# topmark:header:start
#
#   project      : SchemaMap
#   file         : cache.py
#   file_relpath : src/schemamap/schema/cache.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Component cache: canonical type name to materialized schema.

The cache deduplicates named types and breaks reference cycles with a
two-phase protocol:

1. `reserve(name)` the first time a named type is requested. From then on the
   name counts as known, so a recursive request for it yields a reference
   instead of re-entering the builder.
2. `fill(name, node)` exactly once, when the builder has finished. A filled
   entry is never replaced.

`release(name)` undoes a reservation whose type turned out to have no schema
and remembers the name, so later requests can skip it (`is_released`).
`finalize()` checks that no reservation is left open and that every reference
reachable from a filled entry names a filled entry.

A cache belongs to one mapping run on one thread; it is not meant to be shared.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from schemamap.config.logging import get_logger
from schemamap.errors import DanglingReferenceError, MappingContractError
from schemamap.schema.nodes import iter_references

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from schemamap.config.logging import SchemamapLogger
    from schemamap.schema.nodes import SchemaNode

logger: SchemamapLogger = get_logger(__name__)


class ComponentCache:
    """Reserve-then-fill mapping from component name to `SchemaNode`."""

    def __init__(self) -> None:
        # None marks a reservation that has not been filled yet.
        self._entries: dict[str, SchemaNode | None] = {}
        self._released: set[str] = set()

    def __contains__(self, name: object) -> bool:
        """Return True if ``name`` is reserved or filled."""
        return name in self._entries

    def __len__(self) -> int:
        """Return the number of known names, reserved ones included."""
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        """Iterate over known names in first-request order."""
        return iter(self._entries)

    def is_reserved(self, name: str) -> bool:
        """Return True if ``name`` is reserved but not filled yet."""
        return name in self._entries and self._entries[name] is None

    def is_filled(self, name: str) -> bool:
        """Return True if ``name`` has a materialized schema."""
        return self._entries.get(name) is not None

    def is_released(self, name: str) -> bool:
        """Return True if ``name`` was reserved and then released."""
        return name in self._released

    def get(self, name: str) -> SchemaNode | None:
        """Return the schema filled under ``name``, or None."""
        return self._entries.get(name)

    def reserve(self, name: str) -> None:
        """Reserve ``name`` before its schema is built.

        Raises:
            MappingContractError: If ``name`` is already known.
        """
        if name in self._entries:
            raise MappingContractError(f"Component '{name}' is already reserved")
        self._entries[name] = None
        logger.debug("Reserved component %s", name)

    def fill(self, name: str, node: SchemaNode) -> None:
        """Store the schema built for a reserved ``name``.

        Raises:
            MappingContractError: If ``name`` was not reserved or is already filled.
        """
        if name not in self._entries:
            raise MappingContractError(f"Component '{name}' was filled without a reservation")
        if self._entries[name] is not None:
            raise MappingContractError(f"Component '{name}' is already filled")
        self._entries[name] = node
        logger.debug("Filled component %s", name)

    def release(self, name: str) -> None:
        """Drop an open reservation.

        Raises:
            MappingContractError: If ``name`` is not an open reservation.
        """
        if not self.is_reserved(name):
            raise MappingContractError(f"Component '{name}' is not an open reservation")
        del self._entries[name]
        self._released.add(name)
        logger.debug("Released component %s", name)

    def dangling_references(self) -> list[str]:
        """Return referenced names that have no filled entry, in first-seen order."""
        dangling: list[str] = []
        for node in self._entries.values():
            if node is None:
                continue
            for ref in iter_references(node):
                if not self.is_filled(ref.name) and ref.name not in dangling:
                    dangling.append(ref.name)
        return dangling

    def finalize(self) -> Mapping[str, SchemaNode]:
        """Return a read-only view of the filled components.

        Raises:
            DanglingReferenceError: If a reservation is still open or a reference
                names a type without a component.
        """
        unresolved: list[str] = [n for n, node in self._entries.items() if node is None]
        unresolved.extend(n for n in self.dangling_references() if n not in unresolved)
        if unresolved:
            raise DanglingReferenceError(unresolved)
        filled: dict[str, SchemaNode] = {
            name: node for name, node in self._entries.items() if node is not None
        }
        return MappingProxyType(filled)
