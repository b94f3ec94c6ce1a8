# topmark:header:start
#
#   project      : SchemaMap
#   file         : defaults.py
#   file_relpath : src/schemamap/mapper/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default-value resolution for record fields.

Type descriptors only say *whether* a field has a default. The expression
itself lives in the declaration, so the record builder asks an injected
`DefaultValueResolver` for it. Three implementations ship with SchemaMap:

- `DeclarationDefaultResolver` walks lightweight declaration nodes
  (`RecordDeclaration` / `FieldDeclaration`) supplied by the host parser.
- `MappingDefaultResolver` answers from a static ``{record: {field: text}}`` table.
- `NullDefaultResolver` never resolves anything.

Returning None is normal when a field has no syntactic default. When the
descriptor claims a default and the resolver still returns None, the record
builder records a ``default-value-unresolvable`` diagnostic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from schemamap.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from schemamap.config.logging import SchemamapLogger

logger: SchemamapLogger = get_logger(__name__)


class DefaultValueResolver(Protocol):
    """Look up the textual default expression of a record field."""

    def resolve_default(self, record_name: str, field_name: str) -> str | None:
        """Return the default expression of ``record_name.field_name``, or None."""
        ...


class NullDefaultResolver:
    """Resolver for hosts without access to declarations."""

    def resolve_default(self, record_name: str, field_name: str) -> str | None:
        """Always return None."""
        return None


class MappingDefaultResolver:
    """Resolve defaults from a static nested mapping."""

    def __init__(self, defaults: Mapping[str, Mapping[str, str]]) -> None:
        self._defaults: dict[str, dict[str, str]] = {
            record: dict(fields) for record, fields in defaults.items()
        }

    def resolve_default(self, record_name: str, field_name: str) -> str | None:
        """Return the configured expression, or None."""
        return self._defaults.get(record_name, {}).get(field_name)


@dataclass(frozen=True)
class FieldDeclaration:
    """A field as written in a record declaration.

    Attributes:
        name: Field name as written (may be quoted or padded).
        default_expression: Source text of the default value, if declared.
    """

    name: str
    default_expression: str | None = None


@dataclass(frozen=True)
class RecordDeclaration:
    """A named record type definition as written in source."""

    name: str
    fields: tuple[FieldDeclaration, ...] = ()


class DeclarationDefaultResolver:
    """Resolve defaults by walking record declarations.

    The declaration is looked up by record name; among its fields that carry a
    default expression, the first whose trimmed name equals ``field_name``
    provides the (trimmed) expression text.
    """

    def __init__(self, declarations: Iterable[RecordDeclaration]) -> None:
        self._by_name: dict[str, RecordDeclaration] = {}
        for decl in declarations:
            self._by_name.setdefault(decl.name.strip(), decl)

    def resolve_default(self, record_name: str, field_name: str) -> str | None:
        """Return the default expression declared for the field, or None."""
        decl: RecordDeclaration | None = self._by_name.get(record_name.strip())
        if decl is None:
            logger.debug("No declaration found for record %s", record_name)
            return None
        wanted: str = field_name.strip()
        for fdecl in decl.fields:
            if fdecl.default_expression is None:
                continue
            if fdecl.name.strip() == wanted:
                return fdecl.default_expression.strip()
        return None
