# topmark:header:start
#
#   project      : SchemaMap
#   file         : records.py
#   file_relpath : src/schemamap/mapper/records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record types to object schemas.

A record maps to an `ObjectSchema` holding its own properties, required names
and additional-properties policy. When it includes parent records, the result
is an ``allOf`` of references to the parents followed by that object.

Inherited fields are not repeated: every field the record shares unchanged
with a parent is left to the parent's component. A field the record
re-declares with a different descriptor stays local and is mapped once, from
the local declaration.

Required fields are those that are neither optional nor defaulted. Default
expressions come from the `DefaultValueResolver` collaborator; a default that
cannot be resolved is reported as ``default-value-unresolvable`` and the field
is kept without a ``default`` annotation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from schemamap.config.logging import get_logger
from schemamap.diagnostic.model import DiagnosticCode
from schemamap.errors import MappingContractError
from schemamap.schema.nodes import (
    ComposedSchema,
    CompositionKind,
    ObjectSchema,
    ReferenceSchema,
    annotate,
)
from schemamap.types.classifier import is_open_marker, is_record_reference, resolve_reference
from schemamap.utils.identifiers import unescape_identifier

if TYPE_CHECKING:
    from schemamap.config.logging import SchemamapLogger
    from schemamap.mapper.engine import MappingEngine
    from schemamap.schema.nodes import SchemaNode
    from schemamap.types.descriptors import FieldDescriptor, Record, TypeDescriptor

logger: SchemamapLogger = get_logger(__name__)


class RecordSchemaBuilder:
    """Build object schemas for `Record` descriptors."""

    def __init__(self, engine: MappingEngine) -> None:
        self._engine: MappingEngine = engine

    def build_record(self, record: Record, record_name: str | None) -> SchemaNode:
        """Map ``record`` to an object schema or an ``allOf`` composition.

        Args:
            record: The record descriptor.
            record_name: Component name of the record, or None for an inline record.

        Returns:
            The record's schema.
        """
        working: dict[str, FieldDescriptor] = dict(record.fields)
        bases: list[SchemaNode] = self._map_inclusions(record, working)

        required: list[str] = []
        properties: dict[str, SchemaNode] = self._map_fields(working, required, record_name)

        obj = ObjectSchema(
            properties=properties,
            required=tuple(required),
            additional_properties=self._additional_properties(record.rest),
        )
        logger.trace(
            "Record %s: %d properties, %d required, %d bases",
            record_name or "<inline>",
            len(properties),
            len(required),
            len(bases),
        )
        if bases:
            return ComposedSchema(kind=CompositionKind.ALL_OF, members=(*bases, obj))
        return obj

    def _map_inclusions(
        self, record: Record, working: dict[str, FieldDescriptor]
    ) -> list[SchemaNode]:
        """Map included records to references and drop their unchanged fields from ``working``.

        Raises:
            MappingContractError: If an inclusion does not name a record.
        """
        bases: list[SchemaNode] = []
        for inclusion in record.inclusions:
            if not is_record_reference(inclusion):
                raise MappingContractError(
                    f"Included type {inclusion!r} does not reference a record type"
                )
            self._engine.map_type(inclusion)
            bases.append(ReferenceSchema(name=inclusion.name))

            parent: Record = cast("Record", resolve_reference(inclusion))
            for name, parent_field in parent.fields.items():
                if working.get(name) == parent_field:
                    del working[name]
        return bases

    def _map_fields(
        self,
        fields: dict[str, FieldDescriptor],
        required: list[str],
        record_name: str | None,
    ) -> dict[str, SchemaNode]:
        config = self._engine.config
        properties: dict[str, SchemaNode] = {}
        # Property name -> raw field name that claimed it first.
        claimed: dict[str, str] = {}
        for raw_name, field_desc in fields.items():
            name: str = unescape_identifier(raw_name) if config.unescape_identifiers else raw_name
            location: str = f"{record_name}.{name}" if record_name else name

            if name in claimed:
                self._engine.diagnostics.add_warning(
                    DiagnosticCode.DUPLICATE_PROPERTY,
                    f"Fields '{claimed[name]}' and '{raw_name}' both map to property "
                    f"'{name}'; '{raw_name}' is dropped",
                    location=location,
                )
                continue
            claimed[name] = raw_name

            node: SchemaNode | None = self._engine.map_type(field_desc.type)
            if node is None:
                self._engine.diagnostics.add_warning(
                    DiagnosticCode.UNREPRESENTABLE_FIELD,
                    f"Field '{name}' has no schema representation and is omitted",
                    location=location,
                )
                continue

            if not field_desc.optional and not field_desc.has_default:
                required.append(name)

            default: str | None = None
            if field_desc.has_default:
                default = self._resolve_default(record_name, raw_name, location)

            description: str | None = field_desc.description if config.include_descriptions else None
            properties[name] = annotate(node, description=description, default=default)
        return properties

    def _resolve_default(
        self, record_name: str | None, field_name: str, location: str
    ) -> str | None:
        text: str | None = None
        if record_name is not None:
            text = self._engine.default_resolver.resolve_default(record_name, field_name.strip())
        if text is None:
            self._engine.diagnostics.add_warning(
                DiagnosticCode.DEFAULT_VALUE_UNRESOLVABLE,
                f"Default value of field '{location}' could not be resolved",
                location=location,
            )
        return text

    def _additional_properties(self, rest: TypeDescriptor | None) -> bool | SchemaNode | None:
        """Return the additional-properties policy for a rest type.

        No rest type closes the object (unless ``closed_records`` is off), an
        "any" rest type leaves it open without a schema, and any other rest type
        becomes the additional-properties schema.
        """
        if rest is None:
            return False if self._engine.config.closed_records else None
        if is_open_marker(rest):
            return None
        return self._engine.map_type(rest)
