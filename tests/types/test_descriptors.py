# topmark:header:start
#
#   project      : SchemaMap
#   file         : test_descriptors.py
#   file_relpath : tests/types/test_descriptors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for descriptor value semantics and `union_of`."""

from __future__ import annotations

from schemamap.types.descriptors import (
    Nil,
    PrimitiveKind,
    Record,
    Singleton,
    TypeReference,
    Union,
    union_of,
)
from tests.conftest import INT, STRING, field, named, record


def test_references_compare_by_name() -> None:
    """References are equal when their names are, whatever their targets."""
    a1 = named("A", INT)
    a2 = named("A", STRING)

    assert a1 == a2
    assert hash(a1) == hash(a2)
    assert a1 != TypeReference("B")
    assert repr(a1) == "TypeReference('A')"


def test_self_referencing_records_compare_finitely() -> None:
    """Equality on cyclic graphs stops at references."""
    node = TypeReference("Node")
    node.bind(record(next=field(node)))
    twin = TypeReference("Node")
    twin.bind(record(next=field(twin)))

    assert node.target == twin.target


def test_unquoted_singleton_text() -> None:
    """Quotes are only stripped from string literals."""
    assert Singleton(' "A" ', PrimitiveKind.STRING).unquoted == "A"
    assert Singleton("42", PrimitiveKind.INT).unquoted == "42"


def test_union_of_empty_and_single() -> None:
    """No member gives None; one distinct member is returned as is."""
    assert union_of([]) is None
    assert union_of([INT]) == INT
    assert union_of([INT, INT]) == INT


def test_union_of_flattens_and_dedups() -> None:
    """Nested unions are flattened and the first occurrence of a member kept."""
    result = union_of([INT, Union((STRING, Nil())), STRING, Nil()])

    assert result == Union((INT, STRING, Nil()))


def test_union_of_records() -> None:
    """Structurally equal records count as one member."""
    pet = named("Pet", Record())

    assert union_of([pet, TypeReference("Pet"), record()]) == Union((pet, Record()))
