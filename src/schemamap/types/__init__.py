# topmark:header:start
#
#   project      : SchemaMap
#   file         : __init__.py
#   file_relpath : src/schemamap/types/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type descriptors and their structural classification."""

from __future__ import annotations

from schemamap.types.classifier import (
    TypeKind,
    classify,
    has_nilable_member,
    is_enum_definition,
    is_nil,
    is_open_marker,
    is_record_reference,
    is_singleton_union,
    resolve_reference,
)
from schemamap.types.descriptors import (
    Array,
    Enum,
    EnumMember,
    FieldDescriptor,
    Nil,
    Primitive,
    PrimitiveKind,
    Record,
    Singleton,
    TypeDescriptor,
    TypeReference,
    Union,
    union_of,
)

__all__ = [
    "Array",
    "Enum",
    "EnumMember",
    "FieldDescriptor",
    "Nil",
    "Primitive",
    "PrimitiveKind",
    "Record",
    "Singleton",
    "TypeDescriptor",
    "TypeKind",
    "TypeReference",
    "Union",
    "classify",
    "has_nilable_member",
    "is_enum_definition",
    "is_nil",
    "is_open_marker",
    "is_record_reference",
    "is_singleton_union",
    "resolve_reference",
    "union_of",
]
