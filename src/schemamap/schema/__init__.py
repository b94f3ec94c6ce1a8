# topmark:header:start
#
#   project      : SchemaMap
#   file         : __init__.py
#   file_relpath : src/schemamap/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema document model and the component cache."""

from __future__ import annotations

from schemamap.schema.cache import ComponentCache
from schemamap.schema.nodes import (
    ArraySchema,
    ComposedSchema,
    CompositionKind,
    ObjectSchema,
    ReferenceSchema,
    ScalarSchema,
    SchemaNode,
    StringEnumSchema,
    annotate,
    iter_references,
)

__all__ = [
    "ArraySchema",
    "ComponentCache",
    "ComposedSchema",
    "CompositionKind",
    "ObjectSchema",
    "ReferenceSchema",
    "ScalarSchema",
    "SchemaNode",
    "StringEnumSchema",
    "annotate",
    "iter_references",
]
