# topmark:header:start
#
#   project      : SchemaMap
#   file         : nodes.py
#   file_relpath : src/schemamap/schema/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema nodes produced by the mapping engine.

The node set is closed:

- `ObjectSchema`: properties, required names and the additional-properties policy.
- `ComposedSchema`: an ``allOf`` or ``oneOf`` composition of member schemas.
- `StringEnumSchema`: a string restricted to a list of values.
- `ReferenceSchema`: a pointer to a named component.
- `ScalarSchema`: a scalar ``type``/``format`` pair, possibly restricted by ``enum``.
- `ArraySchema`: a list of ``items``.

Nodes are immutable. Annotations (description, default, nullable) are applied
by copy through `annotate`. A `ReferenceSchema` carries no annotations at all:
in OpenAPI 3.0 keywords next to ``$ref`` are ignored, so `annotate` wraps a
reference in a single-member ``allOf`` first.

Every node renders to a plain mapping with ``to_dict()``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Union

from schemamap.constants import DEFAULT_REF_PREFIX


class CompositionKind(Enum):
    """Composition keyword of a `ComposedSchema`."""

    ALL_OF = "allOf"
    ONE_OF = "oneOf"


@dataclass(frozen=True)
class _AnnotatedSchema:
    """Annotations shared by every node except `ReferenceSchema`."""

    description: str | None = field(default=None, kw_only=True)
    default: str | None = field(default=None, kw_only=True)
    nullable: bool = field(default=False, kw_only=True)

    def _annotations(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.description is not None:
            out["description"] = self.description
        if self.default is not None:
            out["default"] = self.default
        if self.nullable:
            out["nullable"] = True
        return out


@dataclass(frozen=True)
class ReferenceSchema:
    """A ``$ref`` to the component named ``name``."""

    name: str

    def to_dict(self, *, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
        """Render as ``{"$ref": ...}``."""
        return {"$ref": f"{ref_prefix}{self.name}"}


@dataclass(frozen=True)
class ScalarSchema(_AnnotatedSchema):
    """A scalar schema; ``type=None`` admits any value."""

    type: str | None = None
    format: str | None = None
    enum: tuple[object, ...] = ()

    def to_dict(self, *, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
        """Render as an OpenAPI scalar schema."""
        out: dict[str, Any] = {}
        if self.type is not None:
            out["type"] = self.type
        if self.format is not None:
            out["format"] = self.format
        if self.enum:
            out["enum"] = list(self.enum)
        out.update(self._annotations())
        return out


@dataclass(frozen=True)
class StringEnumSchema(_AnnotatedSchema):
    """A string schema restricted to ``values`` (in declaration order)."""

    values: tuple[str, ...] = ()

    def to_dict(self, *, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
        """Render as ``{"type": "string", "enum": [...]}``."""
        out: dict[str, Any] = {"type": "string", "enum": list(self.values)}
        out.update(self._annotations())
        return out


@dataclass(frozen=True)
class ArraySchema(_AnnotatedSchema):
    """A list schema."""

    items: SchemaNode = field(default_factory=ScalarSchema)

    def to_dict(self, *, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
        """Render as ``{"type": "array", "items": ...}``."""
        out: dict[str, Any] = {
            "type": "array",
            "items": self.items.to_dict(ref_prefix=ref_prefix),
        }
        out.update(self._annotations())
        return out


@dataclass(frozen=True)
class ObjectSchema(_AnnotatedSchema):
    """An object schema.

    Attributes:
        properties: Property schemas in declaration order.
        required: Names of required properties; always a subset of ``properties``.
        additional_properties: ``False`` for a closed object, a schema for typed
            additional properties, or None to leave the keyword out (open object).
    """

    properties: Mapping[str, SchemaNode] = field(default_factory=lambda: {})
    required: tuple[str, ...] = ()
    additional_properties: bool | SchemaNode | None = None

    def __post_init__(self) -> None:
        """Check that every required name is a declared property.

        Raises:
            ValueError: If ``required`` names an undeclared property.
        """
        missing: list[str] = [name for name in self.required if name not in self.properties]
        if missing:
            raise ValueError(f"Required fields are not declared properties: {', '.join(missing)}")

    def to_dict(self, *, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
        """Render as an OpenAPI object schema."""
        out: dict[str, Any] = {"type": "object"}
        if self.properties:
            out["properties"] = {
                name: node.to_dict(ref_prefix=ref_prefix) for name, node in self.properties.items()
            }
        if self.required:
            out["required"] = list(self.required)
        if isinstance(self.additional_properties, bool):
            out["additionalProperties"] = self.additional_properties
        elif self.additional_properties is not None:
            out["additionalProperties"] = self.additional_properties.to_dict(ref_prefix=ref_prefix)
        out.update(self._annotations())
        return out


@dataclass(frozen=True)
class ComposedSchema(_AnnotatedSchema):
    """An ``allOf``/``oneOf`` composition; ``members`` is never empty."""

    kind: CompositionKind = CompositionKind.ALL_OF
    members: tuple[SchemaNode, ...] = ()

    def __post_init__(self) -> None:
        """Reject empty compositions.

        Raises:
            ValueError: If ``members`` is empty.
        """
        if not self.members:
            raise ValueError(f"{self.kind.value} composition requires at least one member")

    def to_dict(self, *, ref_prefix: str = DEFAULT_REF_PREFIX) -> dict[str, Any]:
        """Render as ``{"allOf": [...]}`` or ``{"oneOf": [...]}``."""
        out: dict[str, Any] = {
            self.kind.value: [m.to_dict(ref_prefix=ref_prefix) for m in self.members]
        }
        out.update(self._annotations())
        return out


SchemaNode = Union[
    ObjectSchema, ComposedSchema, StringEnumSchema, ReferenceSchema, ScalarSchema, ArraySchema
]


def annotate(
    node: SchemaNode,
    *,
    description: str | None = None,
    default: str | None = None,
    nullable: bool = False,
) -> SchemaNode:
    """Return ``node`` with the given annotations applied.

    Annotations that are unset leave the node's existing values alone. A
    `ReferenceSchema` is first wrapped in a single-member ``allOf``.

    Args:
        node: Schema to annotate.
        description: Description text.
        default: Default value expression.
        nullable: Mark the schema as accepting null.

    Returns:
        The annotated schema (``node`` itself when nothing is set).
    """
    if description is None and default is None and not nullable:
        return node
    target: _AnnotatedSchema
    if isinstance(node, ReferenceSchema):
        target = ComposedSchema(kind=CompositionKind.ALL_OF, members=(node,))
    else:
        target = node
    changes: dict[str, Any] = {}
    if description is not None:
        changes["description"] = description
    if default is not None:
        changes["default"] = default
    if nullable:
        changes["nullable"] = True
    return replace(target, **changes)  # pyright: ignore[reportReturnType]


def iter_references(node: SchemaNode) -> Iterator[ReferenceSchema]:
    """Yield every `ReferenceSchema` nested in ``node``, depth first."""
    if isinstance(node, ReferenceSchema):
        yield node
    elif isinstance(node, ComposedSchema):
        for member in node.members:
            yield from iter_references(member)
    elif isinstance(node, ArraySchema):
        yield from iter_references(node.items)
    elif isinstance(node, ObjectSchema):
        for prop in node.properties.values():
            yield from iter_references(prop)
        if node.additional_properties is not None and not isinstance(
            node.additional_properties, bool
        ):
            yield from iter_references(node.additional_properties)
