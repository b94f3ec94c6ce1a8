# topmark:header:start
#
#   project      : SchemaMap
#   file         : unions.py
#   file_relpath : src/schemamap/mapper/unions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Union types to enum, nullable or composed schemas.

Rules, in order:

1. A nil member makes the result nullable and is otherwise dropped.
2. If every remaining member is a string singleton, the union collapses to a
   `StringEnumSchema` of the unquoted literals.
3. Otherwise each member is mapped; members without a schema are skipped.
   No member left yields None. A single member is returned as is, except a
   bare reference, which is wrapped in a one-member ``allOf`` so it can carry
   ``nullable`` and a description. Several members become a ``oneOf``.

Singleton unions with non-string literals never collapse to an enum. They are
reported as ``unsupported-singleton-union`` and, depending on the
``mixed_singleton_unions`` setting, either fall through to rule 3
(``compose``) or map to nothing (``reject``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from schemamap.config.logging import get_logger
from schemamap.config.model import MixedSingletonPolicy
from schemamap.diagnostic.model import DiagnosticCode
from schemamap.schema.nodes import (
    ComposedSchema,
    CompositionKind,
    ReferenceSchema,
    StringEnumSchema,
    annotate,
)
from schemamap.types.classifier import has_nilable_member, is_nil, is_singleton_union

if TYPE_CHECKING:
    from schemamap.config.logging import SchemamapLogger
    from schemamap.mapper.engine import MappingEngine
    from schemamap.schema.nodes import SchemaNode
    from schemamap.types.descriptors import Singleton, TypeDescriptor, Union

logger: SchemamapLogger = get_logger(__name__)


class UnionSchemaBuilder:
    """Build schemas for `Union` descriptors."""

    def __init__(self, engine: MappingEngine) -> None:
        self._engine: MappingEngine = engine

    def build_union(self, union: Union, type_name: str | None = None) -> SchemaNode | None:
        """Map ``union``; return None when no member has a schema.

        Args:
            union: The union descriptor.
            type_name: Component name when the union is a named type (used in diagnostics).

        Returns:
            The union's schema, or None.
        """
        nullable: bool = has_nilable_member(union)
        members: list[TypeDescriptor] = [m for m in union.members if not is_nil(m)]
        if not members:
            logger.debug("Union %s has only nil members", type_name or "<inline>")
            return None

        if is_singleton_union(union):
            singletons: list[Singleton] = cast("list[Singleton]", members)
            if all(s.is_string for s in singletons):
                return StringEnumSchema(
                    values=tuple(s.unquoted for s in singletons), nullable=nullable
                )
            if not self._accept_mixed_singletons(singletons, type_name):
                return None

        nodes: list[SchemaNode] = []
        for member in members:
            node: SchemaNode | None = self._engine.map_type(member)
            if node is None:
                self._engine.diagnostics.add_warning(
                    DiagnosticCode.UNREPRESENTABLE_UNION_MEMBER,
                    f"Union member {member!r} has no schema representation and is skipped",
                    location=type_name,
                )
                continue
            nodes.append(node)

        if not nodes:
            return None

        result: SchemaNode
        if len(nodes) == 1:
            result = nodes[0]
            if isinstance(result, ReferenceSchema):
                result = ComposedSchema(kind=CompositionKind.ALL_OF, members=(result,))
        else:
            result = ComposedSchema(kind=CompositionKind.ONE_OF, members=tuple(nodes))
        return annotate(result, nullable=nullable)

    def _accept_mixed_singletons(self, singletons: list[Singleton], type_name: str | None) -> bool:
        """Report a non-string singleton union and return whether to compose it anyway."""
        literals: str = " | ".join(s.literal for s in singletons)
        if self._engine.config.mixed_singleton_unions is MixedSingletonPolicy.REJECT:
            self._engine.diagnostics.add_warning(
                DiagnosticCode.UNSUPPORTED_SINGLETON_UNION,
                f"Singleton union {literals} has non-string literals and is not mapped",
                location=type_name,
            )
            return False
        self._engine.diagnostics.add_info(
            DiagnosticCode.UNSUPPORTED_SINGLETON_UNION,
            f"Singleton union {literals} has non-string literals; mapped as oneOf",
            location=type_name,
        )
        return True
