# topmark:header:start
#
#   project      : SchemaMap
#   file         : __init__.py
#   file_relpath : src/schemamap/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SchemaMap: map resolved type descriptors to OpenAPI 3.0 component schemas.

A host program resolves its types into `schemamap.types` descriptors and hands
the named ones to a `MappingEngine`. The engine produces one component schema
per named type reachable from the input, cross-linked with ``$ref`` pointers,
plus a log of the constructs it could not represent.

Example:
    ```python
    from schemamap import map_types
    from schemamap.types import FieldDescriptor, Primitive, PrimitiveKind, Record, TypeReference

    pet = TypeReference("Pet").bind(
        Record(fields={"name": FieldDescriptor(Primitive(PrimitiveKind.STRING))})
    )
    result = map_types([pet])
    result.to_dict()["schemas"]["Pet"]
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemamap.mapper.engine import MappingEngine

if TYPE_CHECKING:
    from collections.abc import Iterable

    from schemamap.config.model import MappingConfig
    from schemamap.mapper.defaults import DefaultValueResolver
    from schemamap.mapper.result import MappingResult
    from schemamap.types.descriptors import TypeReference


def map_types(
    types: Iterable[TypeReference],
    *,
    config: MappingConfig | None = None,
    default_resolver: DefaultValueResolver | None = None,
) -> MappingResult:
    """Map named types to components with a fresh `MappingEngine`.

    Args:
        types: Named types to map.
        config: Mapping configuration; defaults to `MappingConfig()`.
        default_resolver: Resolver for field default expressions.

    Returns:
        The finalized components and diagnostics.
    """
    engine = MappingEngine(config, default_resolver=default_resolver)
    return engine.map_components(types)


__all__ = ["MappingEngine", "map_types"]
