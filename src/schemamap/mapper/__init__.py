# topmark:header:start
#
#   project      : SchemaMap
#   file         : __init__.py
#   file_relpath : src/schemamap/mapper/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mapping engine and schema builders.

`MappingEngine` drives a mapping run. Record, union and enum builders produce
the schemas for their descriptor kinds and recurse through the engine, which
owns the component cache and the diagnostics log.
"""

from __future__ import annotations

from schemamap.errors import DanglingReferenceError, MappingContractError
from schemamap.mapper.context import MappingContext
from schemamap.mapper.defaults import (
    DeclarationDefaultResolver,
    DefaultValueResolver,
    FieldDeclaration,
    MappingDefaultResolver,
    NullDefaultResolver,
    RecordDeclaration,
)
from schemamap.mapper.engine import MappingEngine
from schemamap.mapper.enums import EnumSchemaBuilder
from schemamap.mapper.records import RecordSchemaBuilder
from schemamap.mapper.result import MappingResult
from schemamap.mapper.scalars import scalar_schema, singleton_schema
from schemamap.mapper.unions import UnionSchemaBuilder

__all__ = [
    "DanglingReferenceError",
    "DeclarationDefaultResolver",
    "DefaultValueResolver",
    "EnumSchemaBuilder",
    "FieldDeclaration",
    "MappingContext",
    "MappingContractError",
    "MappingDefaultResolver",
    "MappingEngine",
    "MappingResult",
    "NullDefaultResolver",
    "RecordDeclaration",
    "RecordSchemaBuilder",
    "UnionSchemaBuilder",
    "scalar_schema",
    "singleton_schema",
]
