# topmark:header:start
#
#   project      : SchemaMap
#   file         : context.py
#   file_relpath : src/schemamap/mapper/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-run state shared by the engine and its builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from schemamap.config.model import MappingConfig
from schemamap.diagnostic.model import DiagnosticLog
from schemamap.mapper.defaults import NullDefaultResolver
from schemamap.schema.cache import ComponentCache

if TYPE_CHECKING:
    from schemamap.mapper.defaults import DefaultValueResolver


@dataclass
class MappingContext:
    """Invocation context of one mapping run.

    Attributes:
        config: Frozen configuration of the run.
        cache: Component cache; owned by the engine, read by builders.
        diagnostics: Diagnostics recorded so far.
        default_resolver: Collaborator resolving field default expressions.
    """

    config: MappingConfig = field(default_factory=MappingConfig)
    cache: ComponentCache = field(default_factory=ComponentCache)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    default_resolver: DefaultValueResolver = field(default_factory=NullDefaultResolver)
