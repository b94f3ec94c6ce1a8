# topmark:header:start
#
#   project      : SchemaMap
#   file         : descriptors.py
#   file_relpath : src/schemamap/types/descriptors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved type descriptors consumed by the mapping engine.

A type resolver (outside this package) walks the host program's semantic model
and hands the engine a graph of these descriptors. The set of descriptor
classes is closed:

- `Primitive`: a built-in scalar or "any" type.
- `Array`: a homogeneous list of an element type.
- `Record`: named fields, included parent records, optional rest type.
- `Union`: an ordered list of member types.
- `Enum`: an enumeration definition with named constants.
- `Singleton`: a type whose only value is one literal.
- `TypeReference`: a named type; the only way to introduce sharing and cycles.
- `Nil`: the unit/nil type, used to make unions optional.

All descriptors are frozen except `TypeReference`, whose target is bound after
construction so that a graph can refer back to itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum as _Enum
from typing import TYPE_CHECKING, Union as _Union

from schemamap.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from schemamap.config.logging import SchemamapLogger

logger: SchemamapLogger = get_logger(__name__)


class PrimitiveKind(str, _Enum):
    """Built-in scalar kinds understood by the scalar mapping table."""

    STRING = "string"
    INT = "int"
    FLOAT = "float"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    BYTE = "byte"
    ANYDATA = "anydata"
    JSON = "json"
    ANY = "any"

    @property
    def is_any(self) -> bool:
        """Return True for the unconstrained kinds (``anydata``, ``json``, ``any``)."""
        return self in (PrimitiveKind.ANYDATA, PrimitiveKind.JSON, PrimitiveKind.ANY)


@dataclass(frozen=True)
class Primitive:
    """A built-in scalar type."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class Nil:
    """The nil/unit type."""


@dataclass(frozen=True)
class Singleton:
    """A literal type such as ``"A"`` or ``42``.

    Attributes:
        literal: The literal exactly as written in source (string literals keep
            their surrounding double quotes).
        base: Kind of the literal's original type.
    """

    literal: str
    base: PrimitiveKind

    @property
    def is_string(self) -> bool:
        """Return True if this is a string literal."""
        return self.base is PrimitiveKind.STRING

    @property
    def unquoted(self) -> str:
        """Return the literal text without its surrounding quotes (string literals only)."""
        text: str = self.literal.strip()
        if self.is_string and len(text) >= 2 and text[0] == text[-1] == '"':
            return text[1:-1]
        return text


@dataclass(frozen=True)
class EnumMember:
    """A named enumeration constant and its value."""

    name: str
    value: object


@dataclass(frozen=True)
class Enum:
    """An enumeration type definition."""

    members: tuple[EnumMember, ...]


@dataclass(frozen=True)
class Array:
    """A list whose items all share ``element``'s type."""

    element: TypeDescriptor


@dataclass(frozen=True)
class FieldDescriptor:
    """A record field as seen by the type checker.

    Attributes:
        type: The field's type.
        optional: Declared optional (``x?``).
        has_default: Declared with a default value expression.
        description: Documentation attached to the field, if any.
    """

    type: TypeDescriptor
    optional: bool = False
    has_default: bool = False
    description: str | None = None


@dataclass(frozen=True)
class Record:
    """A structural record type.

    Attributes:
        fields: Effective fields in declaration order, inherited ones included.
        inclusions: Included/extended parent types, in declaration order. Each
            must be a `TypeReference` resolving to a `Record`.
        rest: Type of additional properties; None means the record is closed.
    """

    fields: Mapping[str, FieldDescriptor] = field(default_factory=lambda: {})
    inclusions: tuple[TypeReference, ...] = ()
    rest: TypeDescriptor | None = None


@dataclass(frozen=True)
class Union:
    """A union of member types, in declaration order."""

    members: tuple[TypeDescriptor, ...]


@dataclass(eq=False)
class TypeReference:
    """A named type.

    The target is bound after construction (`bind`) so that descriptors can
    refer to themselves. References compare and hash by ``name`` only, which
    keeps equality checks finite on cyclic graphs.

    Attributes:
        name: Canonical component name.
        target: The referenced descriptor, once bound.
        description: Documentation attached to the type definition, if any.
    """

    name: str
    target: TypeDescriptor | None = None
    description: str | None = None

    def bind(self, target: TypeDescriptor) -> TypeReference:
        """Bind the referenced descriptor and return ``self``."""
        self.target = target
        return self

    def __eq__(self, other: object) -> bool:
        """Compare by canonical name."""
        if not isinstance(other, TypeReference):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        """Hash by canonical name."""
        return hash(("TypeReference", self.name))

    def __repr__(self) -> str:
        """Return a short representation that does not walk the target."""
        return f"TypeReference({self.name!r})"


TypeDescriptor = _Union[Primitive, Array, Record, Union, Enum, Singleton, TypeReference, Nil]


def union_of(types: Iterable[TypeDescriptor]) -> TypeDescriptor | None:
    """Combine several types into one union descriptor.

    Nested unions are flattened and duplicate members dropped, keeping the
    first occurrence. Hosts use this to turn a set of alternatives (for
    example every type a function may return) into one mappable type.

    Args:
        types: Candidate member types.

    Returns:
        None for an empty input, the sole member for a single distinct type,
        otherwise a `Union` of the distinct members.
    """
    members: list[TypeDescriptor] = []

    def _add(candidate: TypeDescriptor) -> None:
        if isinstance(candidate, Union):
            for nested in candidate.members:
                _add(nested)
        elif candidate not in members:
            members.append(candidate)

    for t in types:
        _add(t)

    if not members:
        return None
    if len(members) == 1:
        return members[0]
    logger.trace("union_of built a %d-member union", len(members))
    return Union(members=tuple(members))
