# topmark:header:start
#
#   project      : SchemaMap
#   file         : test_records.py
#   file_relpath : tests/mapper/test_records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for record mapping: requiredness, inclusions, rest fields and defaults."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from schemamap import map_types
from schemamap.diagnostic.model import DiagnosticCode
from schemamap.errors import MappingContractError
from schemamap.mapper.defaults import MappingDefaultResolver
from schemamap.mapper.engine import MappingEngine
from schemamap.schema.nodes import (
    ComposedSchema,
    CompositionKind,
    ObjectSchema,
    ReferenceSchema,
    ScalarSchema,
)
from schemamap.types.descriptors import Nil, Union
from tests.conftest import ANYDATA, INT, STRING, field, make_config, named, record

if TYPE_CHECKING:
    from schemamap.mapper.result import MappingResult
    from schemamap.schema.nodes import SchemaNode
    from schemamap.types.descriptors import TypeReference


def _object(node: SchemaNode | None) -> ObjectSchema:
    assert isinstance(node, ObjectSchema), node
    return node


def test_required_set_excludes_optional_and_defaulted_fields() -> None:
    """``{x: required, y: optional, z: has-default}`` requires exactly ``x``."""
    rec = record(x=field(INT), y=field(INT, optional=True), z=field(INT, has_default=True))

    obj: ObjectSchema = _object(MappingEngine().map_type(rec))

    assert obj.required == ("x",)
    assert list(obj.properties) == ["x", "y", "z"]


def test_inclusion_precedence_keeps_local_redeclaration() -> None:
    """A locally re-declared field is mapped from the local declaration only."""
    base: TypeReference = named("Base", record(id=field(STRING), created=field(STRING)))
    derived: TypeReference = named(
        "Derived",
        record(base, id=field(INT), created=field(STRING), extra=field(STRING)),
    )

    result: MappingResult = map_types([derived])

    schema = result.components["Derived"]
    assert isinstance(schema, ComposedSchema)
    assert schema.kind is CompositionKind.ALL_OF
    assert schema.members[0] == ReferenceSchema("Base")
    own: ObjectSchema = _object(schema.members[1])
    assert list(own.properties) == ["id", "extra"]
    assert own.properties["id"] == ScalarSchema(type="integer", format="int64")
    assert own.required == ("id", "extra")
    assert "Base" in result.components


def test_multiple_inclusions_keep_declaration_order() -> None:
    """Base references follow the inclusion order and precede the local object."""
    first: TypeReference = named("First", record(a=field(INT)))
    second: TypeReference = named("Second", record(b=field(INT)))
    both = record(first, second, a=field(INT), b=field(INT))

    node: SchemaNode | None = MappingEngine().map_type(both)

    assert isinstance(node, ComposedSchema)
    assert node.members[:2] == (ReferenceSchema("First"), ReferenceSchema("Second"))
    assert _object(node.members[2]).properties == {}


def test_inclusion_of_non_record_raises() -> None:
    """An inclusion must name a record type."""
    not_a_record: TypeReference = named("Alias", STRING)

    with pytest.raises(MappingContractError, match="does not reference a record"):
        MappingEngine().map_type(record(not_a_record, x=field(INT)))


def test_record_without_rest_is_closed() -> None:
    """No rest field means ``additionalProperties: false``."""
    obj: ObjectSchema = _object(MappingEngine().map_type(record(x=field(INT))))

    assert obj.additional_properties is False
    assert obj.to_dict()["additionalProperties"] is False


def test_closed_records_can_be_disabled() -> None:
    """With ``closed_records = false`` the keyword is left out."""
    engine = MappingEngine(make_config(closed_records=False))

    obj: ObjectSchema = _object(engine.map_type(record(x=field(INT))))

    assert obj.additional_properties is None
    assert "additionalProperties" not in obj.to_dict()


def test_any_rest_field_leaves_object_open() -> None:
    """A rest field of an "any" type leaves the object open without a schema."""
    obj: ObjectSchema = _object(MappingEngine().map_type(record(rest=ANYDATA, x=field(INT))))

    assert obj.additional_properties is None


def test_typed_rest_field_becomes_additional_properties_schema() -> None:
    """A typed rest field maps to the additional-properties schema."""
    obj: ObjectSchema = _object(MappingEngine().map_type(record(rest=STRING)))

    assert obj.additional_properties == ScalarSchema(type="string")
    assert obj.to_dict()["additionalProperties"] == {"type": "string"}


def test_named_rest_type_is_referenced() -> None:
    """A named rest type is mapped as a component and referenced."""
    pet: TypeReference = named("Pet", record())
    pets: TypeReference = named("Pets", record(rest=pet))

    result: MappingResult = map_types([pets])

    obj: ObjectSchema = _object(result.components["Pets"])
    assert obj.additional_properties == ReferenceSchema("Pet")
    assert obj.to_dict()["additionalProperties"] == {"$ref": "#/components/schemas/Pet"}


def test_unresolvable_default_yields_one_diagnostic_and_keeps_field() -> None:
    """A claimed default that cannot be resolved is reported once; the field stays."""
    pet: TypeReference = named("Pet", record(age=field(INT, has_default=True)))

    result: MappingResult = map_types([pet])

    diags = result.diagnostics.with_code(DiagnosticCode.DEFAULT_VALUE_UNRESOLVABLE)
    assert len(diags) == 1
    assert len(result.diagnostics) == 1
    obj: ObjectSchema = _object(result.components["Pet"])
    assert obj.properties["age"] == ScalarSchema(type="integer", format="int64")
    assert obj.properties["age"].default is None  # type: ignore[union-attr]


def test_resolved_default_is_annotated() -> None:
    """A resolved default expression is attached to the property schema."""
    pet: TypeReference = named("Pet", record(age=field(INT, has_default=True)))
    resolver = MappingDefaultResolver({"Pet": {"age": "1"}})

    result: MappingResult = map_types([pet], default_resolver=resolver)

    obj: ObjectSchema = _object(result.components["Pet"])
    assert obj.properties["age"] == ScalarSchema(type="integer", format="int64", default="1")
    assert len(result.diagnostics) == 0


def test_default_on_named_field_type_wraps_reference() -> None:
    """A default on a field whose type is named wraps the reference."""
    color: TypeReference = named("Color", record())
    pet: TypeReference = named("Pet", record(color=field(color, has_default=True)))
    resolver = MappingDefaultResolver({"Pet": {"color": "DEFAULT_COLOR"}})

    result: MappingResult = map_types([pet], default_resolver=resolver)

    prop = _object(result.components["Pet"]).properties["color"]
    assert isinstance(prop, ComposedSchema)
    assert prop.members == (ReferenceSchema("Color"),)
    assert prop.default == "DEFAULT_COLOR"


def test_default_in_inline_record_is_unresolvable() -> None:
    """Inline records have no name to look defaults up by."""
    engine = MappingEngine(default_resolver=MappingDefaultResolver({"": {"x": "1"}}))

    engine.map_type(record(x=field(INT, has_default=True)))

    diags = engine.diagnostics.with_code(DiagnosticCode.DEFAULT_VALUE_UNRESOLVABLE)
    assert [d.location for d in diags] == ["x"]


def test_field_description_is_applied() -> None:
    """Field descriptions land on the property schema."""
    obj: ObjectSchema = _object(
        MappingEngine().map_type(record(name=field(STRING, description="The name.")))
    )

    assert obj.properties["name"] == ScalarSchema(type="string", description="The name.")


def test_field_names_are_unescaped() -> None:
    """Quoted and escaped field names become plain property names."""
    rec = record(**{"'type": field(STRING), "first\\-name": field(STRING)})

    obj: ObjectSchema = _object(MappingEngine().map_type(rec))

    assert list(obj.properties) == ["type", "first-name"]
    assert obj.required == ("type", "first-name")


def test_field_names_kept_verbatim_when_unescaping_disabled() -> None:
    """``unescape_identifiers = false`` keeps names as written."""
    engine = MappingEngine(make_config(unescape_identifiers=False))

    obj: ObjectSchema = _object(engine.map_type(record(**{"'type": field(STRING)})))

    assert list(obj.properties) == ["'type"]


def test_colliding_field_names_keep_first_and_warn() -> None:
    """Two fields that unescape to the same name keep the first mapping and report the second."""
    tag: TypeReference = named("Tag", record(**{"'type": field(STRING), "type": field(INT)}))

    result: MappingResult = map_types([tag])

    obj: ObjectSchema = _object(result.components["Tag"])
    assert obj.properties == {"type": ScalarSchema(type="string")}
    assert obj.required == ("type",)
    diags = result.diagnostics.with_code(DiagnosticCode.DUPLICATE_PROPERTY)
    assert len(diags) == 1
    assert "'type'" in diags[0].message
    assert "''type'" in diags[0].message
    assert diags[0].location == "Tag.type"


def test_unrepresentable_field_is_omitted() -> None:
    """A field without a schema is dropped from properties and required, with a warning."""
    pet: TypeReference = named("Pet", record(ghost=field(Union((Nil(),))), name=field(STRING)))

    result: MappingResult = map_types([pet])

    obj: ObjectSchema = _object(result.components["Pet"])
    assert list(obj.properties) == ["name"]
    assert obj.required == ("name",)
    diags = result.diagnostics.with_code(DiagnosticCode.UNREPRESENTABLE_FIELD)
    assert [d.location for d in diags] == ["Pet.ghost"]


def test_object_render() -> None:
    """Object schemas render properties, required names and the closed policy."""
    rec = record(id=field(INT), note=field(STRING, optional=True))

    assert _object(MappingEngine().map_type(rec)).to_dict() == {
        "type": "object",
        "properties": {
            "id": {"type": "integer", "format": "int64"},
            "note": {"type": "string"},
        },
        "required": ["id"],
        "additionalProperties": False,
    }
