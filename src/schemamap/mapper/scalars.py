# topmark:header:start
#
#   project      : SchemaMap
#   file         : scalars.py
#   file_relpath : src/schemamap/mapper/scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar mapping table for primitive and singleton types."""

from __future__ import annotations

import math
from typing import Final

from schemamap.schema.nodes import ScalarSchema, StringEnumSchema
from schemamap.types.descriptors import PrimitiveKind, Singleton

# (type, format) per primitive kind; ``None`` type admits any value.
_SCALARS: Final[dict[PrimitiveKind, tuple[str | None, str | None]]] = {
    PrimitiveKind.STRING: ("string", None),
    PrimitiveKind.INT: ("integer", "int64"),
    PrimitiveKind.FLOAT: ("number", "float"),
    PrimitiveKind.DECIMAL: ("number", "double"),
    PrimitiveKind.BOOLEAN: ("boolean", None),
    PrimitiveKind.BYTE: ("string", "byte"),
    PrimitiveKind.ANYDATA: (None, None),
    PrimitiveKind.JSON: (None, None),
    PrimitiveKind.ANY: (None, None),
}


def scalar_schema(kind: PrimitiveKind) -> ScalarSchema:
    """Return the scalar schema for a primitive kind."""
    type_, format_ = _SCALARS[kind]
    return ScalarSchema(type=type_, format=format_)


def literal_value(singleton: Singleton) -> object:
    """Convert a non-string singleton's literal text to a JSON-compatible value.

    Text that does not parse as its declared kind, or parses to a non-finite
    number (``NaN``, ``Infinity``), is returned unchanged.
    """
    text: str = singleton.literal.strip()
    try:
        if singleton.base is PrimitiveKind.INT:
            return int(text)
        if singleton.base in (PrimitiveKind.FLOAT, PrimitiveKind.DECIMAL):
            # Strip type suffixes such as ``1.5d`` / ``2f``.
            number: float = float(text.rstrip("dDfF"))
            return number if math.isfinite(number) else text
    except ValueError:
        return text
    if singleton.base is PrimitiveKind.BOOLEAN and text in ("true", "false"):
        return text == "true"
    return text


def singleton_schema(singleton: Singleton) -> ScalarSchema | StringEnumSchema:
    """Map a single literal type.

    A string literal becomes a one-value string enum; any other literal becomes
    its base scalar restricted to that value.
    """
    if singleton.is_string:
        return StringEnumSchema(values=(singleton.unquoted,))
    base: ScalarSchema = scalar_schema(singleton.base)
    return ScalarSchema(type=base.type, format=base.format, enum=(literal_value(singleton),))
