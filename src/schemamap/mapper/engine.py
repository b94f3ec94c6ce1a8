# topmark:header:start
#
#   project      : SchemaMap
#   file         : engine.py
#   file_relpath : src/schemamap/mapper/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mapping engine: dispatch type descriptors to schema builders.

`MappingEngine.map_type` is the single entry point builders recurse through:

- An inline descriptor is classified and handed to the matching builder; the
  result is returned without touching the component cache.
- A named descriptor (`TypeReference`) is looked up in the cache first. A known
  name, filled or merely reserved, yields a `ReferenceSchema` straight away,
  which is what makes cyclic type graphs terminate. An unknown name is
  reserved, built from its target, filled, and returned as a reference.

A named type without a schema is released and remembered, so later requests
return None without rebuilding it. Each named type is therefore built at most
once per engine, and recursion depth is bounded by the nesting depth of the
type graph. Enumeration definitions are recognized explicitly
(`is_enum_definition`) after aliases are resolved, so an alias of an enum
becomes a reference rather than a copy.

Typical usage:

    engine = MappingEngine(config, default_resolver=resolver)
    result = engine.map_components([pet_ref, owner_ref])
    for diagnostic in result.diagnostics:
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemamap.config.logging import get_logger
from schemamap.config.model import MappingConfig
from schemamap.diagnostic.model import DiagnosticCode
from schemamap.errors import MappingContractError
from schemamap.mapper.context import MappingContext
from schemamap.mapper.defaults import NullDefaultResolver
from schemamap.mapper.enums import EnumSchemaBuilder
from schemamap.mapper.records import RecordSchemaBuilder
from schemamap.mapper.result import MappingResult
from schemamap.mapper.scalars import scalar_schema, singleton_schema
from schemamap.mapper.unions import UnionSchemaBuilder
from schemamap.schema.nodes import ArraySchema, ReferenceSchema, ScalarSchema, annotate
from schemamap.types.classifier import (
    TypeKind,
    classify,
    is_enum_definition,
    resolve_reference,
)
from schemamap.types.descriptors import (
    Array,
    Enum,
    Primitive,
    Record,
    Singleton,
    TypeReference,
    Union,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from schemamap.config.logging import SchemamapLogger
    from schemamap.diagnostic.model import DiagnosticLog
    from schemamap.mapper.defaults import DefaultValueResolver
    from schemamap.schema.cache import ComponentCache
    from schemamap.schema.nodes import SchemaNode
    from schemamap.types.descriptors import TypeDescriptor

logger: SchemamapLogger = get_logger(__name__)


class MappingEngine:
    """Orchestrate one mapping run over a type graph.

    The engine owns the `MappingContext` (config, component cache, diagnostics,
    default resolver). It is single-threaded; independent type graphs processed
    concurrently each need their own engine.
    """

    def __init__(
        self,
        config: MappingConfig | None = None,
        *,
        default_resolver: DefaultValueResolver | None = None,
    ) -> None:
        self.context: MappingContext = MappingContext(
            config=config if config is not None else MappingConfig(),
            default_resolver=(
                default_resolver if default_resolver is not None else NullDefaultResolver()
            ),
        )
        self._records = RecordSchemaBuilder(self)
        self._unions = UnionSchemaBuilder(self)
        self._enums = EnumSchemaBuilder()

    @property
    def config(self) -> MappingConfig:
        """Configuration of this run."""
        return self.context.config

    @property
    def cache(self) -> ComponentCache:
        """Component cache of this run."""
        return self.context.cache

    @property
    def diagnostics(self) -> DiagnosticLog:
        """Diagnostics recorded so far."""
        return self.context.diagnostics

    @property
    def default_resolver(self) -> DefaultValueResolver:
        """Collaborator resolving field default expressions."""
        return self.context.default_resolver

    def map_type(self, descriptor: TypeDescriptor) -> SchemaNode | None:
        """Map a descriptor to a schema.

        Args:
            descriptor: Inline or named type descriptor.

        Returns:
            A `ReferenceSchema` for a named type, the built schema for an inline
            type, or None when the type has no schema representation.

        Raises:
            MappingContractError: On malformed descriptors (unknown class,
                unbound reference, non-record inclusion).
        """
        kind: TypeKind = classify(descriptor)
        logger.trace("map_type: %s %r", kind.value, descriptor)
        if kind is TypeKind.TYPE_REFERENCE:
            assert isinstance(descriptor, TypeReference)
            return self._map_named(descriptor)
        return self._build(descriptor, kind, None)

    def map_components(self, types: Iterable[TypeReference]) -> MappingResult:
        """Map every named type and return the finalized components.

        Types already mapped by this engine are not rebuilt.

        Args:
            types: Named types to include; types they reach are included too.

        Returns:
            The finalized components and the diagnostics recorded so far.

        Raises:
            MappingContractError: If an entry is not a `TypeReference`.
            DanglingReferenceError: If finalization finds unresolved references.
        """
        for t in types:
            if not isinstance(t, TypeReference):
                raise MappingContractError(f"Components must be named types, got {t!r}")
            self.map_type(t)
        components = self.cache.finalize()
        logger.info(
            "Mapped %d components with %d diagnostics", len(components), len(self.diagnostics)
        )
        return MappingResult(
            components=components,
            diagnostics=self.diagnostics.freeze(),
            ref_prefix=self.config.ref_prefix,
        )

    def _map_named(self, reference: TypeReference) -> ReferenceSchema | None:
        name: str = reference.name
        if name in self.cache:
            logger.trace("Component %s already known", name)
            return ReferenceSchema(name=name)
        if self.cache.is_released(name):
            logger.trace("Component %s has no schema", name)
            return None

        target: TypeDescriptor = resolve_reference(reference)
        self.cache.reserve(name)
        node: SchemaNode | None = self._build(target, classify(target), name)
        if node is None:
            self.cache.release(name)
            self.diagnostics.add_warning(
                DiagnosticCode.UNREPRESENTABLE_TYPE,
                f"Type '{name}' has no schema representation; no component is emitted",
                location=name,
            )
            return None

        if self.config.include_descriptions:
            node = annotate(node, description=reference.description)
        self.cache.fill(name, node)
        return ReferenceSchema(name=name)

    def _build(
        self, descriptor: TypeDescriptor, kind: TypeKind, type_name: str | None
    ) -> SchemaNode | None:
        if kind is TypeKind.RECORD:
            assert isinstance(descriptor, Record)
            return self._records.build_record(descriptor, type_name)
        if kind is TypeKind.UNION:
            assert isinstance(descriptor, Union)
            return self._unions.build_union(descriptor, type_name)
        if kind is TypeKind.TYPE_REFERENCE:
            # Alias of another named type.
            assert isinstance(descriptor, TypeReference)
            return self._map_named(descriptor)
        if is_enum_definition(descriptor):
            assert isinstance(descriptor, Enum)
            return self._enums.build_enum(descriptor)
        if kind is TypeKind.SINGLETON:
            assert isinstance(descriptor, Singleton)
            return singleton_schema(descriptor)
        if kind is TypeKind.PRIMITIVE:
            assert isinstance(descriptor, Primitive)
            return scalar_schema(descriptor.kind)
        if kind is TypeKind.ARRAY:
            assert isinstance(descriptor, Array)
            items: SchemaNode | None = self.map_type(descriptor.element)
            return ArraySchema(items=items if items is not None else ScalarSchema())
        return None
