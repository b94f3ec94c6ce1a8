# topmark:header:start
#
#   project      : SchemaMap
#   file         : enums.py
#   file_relpath : src/schemamap/mapper/enums.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enumeration definitions to string enum schemas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from schemamap.config.logging import get_logger
from schemamap.schema.nodes import StringEnumSchema

if TYPE_CHECKING:
    from schemamap.config.logging import SchemamapLogger
    from schemamap.types.descriptors import Enum

logger: SchemamapLogger = get_logger(__name__)


class EnumSchemaBuilder:
    """Map an `Enum` definition to a `StringEnumSchema`."""

    def build_enum(self, enum_def: Enum) -> StringEnumSchema:
        """Return a string enum of the constants' values, in declaration order."""
        values: tuple[str, ...] = tuple(str(member.value) for member in enum_def.members)
        logger.trace("Enum mapped to %d values", len(values))
        return StringEnumSchema(values=values)
