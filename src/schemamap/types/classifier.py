# topmark:header:start
#
#   project      : SchemaMap
#   file         : classifier.py
#   file_relpath : src/schemamap/types/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural classification of type descriptors.

Everything here is pure: the functions inspect a descriptor and never follow
more than one reference level, so they are safe on cyclic graphs.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from schemamap.errors import MappingContractError
from schemamap.types.descriptors import (
    Array,
    Nil,
    Primitive,
    Record,
    Singleton,
    TypeReference,
    Union,
)
from schemamap.types.descriptors import Enum as EnumType

if TYPE_CHECKING:
    from schemamap.types.descriptors import TypeDescriptor


class TypeKind(Enum):
    """Structural kind of a type descriptor."""

    PRIMITIVE = "primitive"
    ARRAY = "array"
    RECORD = "record"
    UNION = "union"
    ENUM = "enum"
    SINGLETON = "singleton"
    TYPE_REFERENCE = "type-reference"
    NIL = "nil"


_KIND_BY_CLASS: dict[type, TypeKind] = {
    Primitive: TypeKind.PRIMITIVE,
    Array: TypeKind.ARRAY,
    Record: TypeKind.RECORD,
    Union: TypeKind.UNION,
    EnumType: TypeKind.ENUM,
    Singleton: TypeKind.SINGLETON,
    TypeReference: TypeKind.TYPE_REFERENCE,
    Nil: TypeKind.NIL,
}


def classify(descriptor: TypeDescriptor) -> TypeKind:
    """Return the structural kind of ``descriptor``.

    Raises:
        MappingContractError: If ``descriptor`` is not one of the known classes.
    """
    kind: TypeKind | None = _KIND_BY_CLASS.get(type(descriptor))
    if kind is None:
        raise MappingContractError(f"Unsupported type descriptor: {descriptor!r}")
    return kind


def resolve_reference(reference: TypeReference) -> TypeDescriptor:
    """Return the descriptor a reference points at.

    Raises:
        MappingContractError: If the reference was never bound.
    """
    if reference.target is None:
        raise MappingContractError(f"Type reference '{reference.name}' is not bound to a type")
    return reference.target


def is_nil(descriptor: TypeDescriptor) -> bool:
    """Return True for the nil type."""
    return isinstance(descriptor, Nil)


def is_open_marker(descriptor: TypeDescriptor) -> bool:
    """Return True if ``descriptor`` admits any value (``anydata``, ``json``, ``any``).

    As a record's rest type this marks an open object without an explicit
    additional-properties schema.
    """
    return isinstance(descriptor, Primitive) and descriptor.kind.is_any


def is_enum_definition(descriptor: TypeDescriptor) -> bool:
    """Return True if ``descriptor`` is, or directly names, an enumeration definition.

    A union of string singletons renders the same way but is a different shape
    and is not an enum definition.
    """
    if isinstance(descriptor, TypeReference):
        return isinstance(descriptor.target, EnumType)
    return isinstance(descriptor, EnumType)


def has_nilable_member(descriptor: TypeDescriptor) -> bool:
    """Return True if ``descriptor`` is a union (possibly behind a reference) with a nil member."""
    if isinstance(descriptor, TypeReference):
        target: TypeDescriptor | None = descriptor.target
        return isinstance(target, Union) and any(is_nil(m) for m in target.members)
    if isinstance(descriptor, Union):
        return any(is_nil(m) for m in descriptor.members)
    return False


def is_singleton_union(union: Union) -> bool:
    """Return True if every non-nil member is a singleton and at least one exists."""
    non_nil: list[TypeDescriptor] = [m for m in union.members if not is_nil(m)]
    return bool(non_nil) and all(isinstance(m, Singleton) for m in non_nil)


def is_record_reference(descriptor: TypeDescriptor) -> bool:
    """Return True for a `TypeReference` whose target is a `Record`."""
    return isinstance(descriptor, TypeReference) and isinstance(descriptor.target, Record)
