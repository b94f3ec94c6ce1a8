# topmark:header:start
#
#   project      : SchemaMap
#   file         : model.py
#   file_relpath : src/schemamap/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types for SchemaMap.

Mapping gaps that the engine can recover from (an unresolved default value, a
union member without a schema, ...) are never raised. They are recorded as
`Diagnostic` entries in the `DiagnosticLog` owned by the mapping context, and
callers drain the log once the run has completed.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * DiagnosticCode: stable identifiers for every recoverable condition.
    * Diagnostic: immutable structured diagnostic (code, level, message, location).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable per-run collection.
    * FrozenDiagnosticLog: immutable snapshot returned with mapping results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from schemamap.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from schemamap.config.logging import SchemamapLogger


logger: SchemamapLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for this level.

        Intended for human-readable output only.

        Returns:
            Callable[[str], str]: The color function.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


class DiagnosticCode(Enum):
    """Stable codes for recoverable mapping and configuration conditions.

    The enum value is the public, machine-readable code.
    """

    DEFAULT_VALUE_UNRESOLVABLE = "default-value-unresolvable"
    UNREPRESENTABLE_UNION_MEMBER = "unrepresentable-union-member"
    UNREPRESENTABLE_FIELD = "unrepresentable-field"
    UNREPRESENTABLE_TYPE = "unrepresentable-type"
    UNSUPPORTED_SINGLETON_UNION = "unsupported-singleton-union"
    DUPLICATE_PROPERTY = "duplicate-property"
    INVALID_CONFIG_VALUE = "invalid-config-value"

    @property
    def summary(self) -> str:
        """Return a one-line, human-readable description of the condition."""
        return _CODE_SUMMARIES[self]


_CODE_SUMMARIES: dict[DiagnosticCode, str] = {
    DiagnosticCode.DEFAULT_VALUE_UNRESOLVABLE: (
        "Field declares a default value but its expression could not be resolved"
    ),
    DiagnosticCode.UNREPRESENTABLE_UNION_MEMBER: "Union member has no schema representation",
    DiagnosticCode.UNREPRESENTABLE_FIELD: "Record field type has no schema representation",
    DiagnosticCode.UNREPRESENTABLE_TYPE: "Named type has no schema representation",
    DiagnosticCode.UNSUPPORTED_SINGLETON_UNION: (
        "Union of singletons contains non-string literals and cannot collapse to an enum"
    ),
    DiagnosticCode.DUPLICATE_PROPERTY: (
        "Two record fields map to the same property name; the later one is dropped"
    ),
    DiagnosticCode.INVALID_CONFIG_VALUE: "Configuration value has an unexpected type",
}


@dataclass(frozen=True)
class Diagnostic:
    """Structured, immutable diagnostic.

    Attributes:
        code: Stable condition identifier.
        level: Severity.
        message: Human-readable message.
        location: Optional hint naming the type and/or field concerned
            (e.g. ``"Pet.age"``).
    """

    code: DiagnosticCode
    level: DiagnosticLevel
    message: str
    location: str | None = None


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of the diagnostics emitted during one run."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from existing diagnostics.

        Args:
            diagnostics: Diagnostics to copy (e.g. from a frozen snapshot).

        Returns:
            A new DiagnosticLog.
        """
        return cls(items=list(diagnostics))

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def add(
        self,
        code: DiagnosticCode,
        level: DiagnosticLevel,
        message: str | None = None,
        *,
        location: str | None = None,
    ) -> Diagnostic:
        """Record a diagnostic and return it.

        Args:
            code: Condition identifier.
            level: Severity.
            message: Message text; defaults to the code's summary.
            location: Optional type/field hint.

        Returns:
            The recorded diagnostic.
        """
        diagnostic = Diagnostic(
            code=code,
            level=level,
            message=message if message is not None else code.summary,
            location=location,
        )
        self.items.append(diagnostic)
        logger.debug(
            "Recorded [%s] %s at %s: %s",
            level.value,
            code.value,
            location or "<unknown>",
            diagnostic.message,
        )
        return diagnostic

    def add_info(
        self, code: DiagnosticCode, message: str | None = None, *, location: str | None = None
    ) -> Diagnostic:
        """Record an ``info`` diagnostic."""
        return self.add(code, DiagnosticLevel.INFO, message, location=location)

    def add_warning(
        self, code: DiagnosticCode, message: str | None = None, *, location: str | None = None
    ) -> Diagnostic:
        """Record a ``warning`` diagnostic."""
        return self.add(code, DiagnosticLevel.WARNING, message, location=location)

    def add_error(
        self, code: DiagnosticCode, message: str | None = None, *, location: str | None = None
    ) -> Diagnostic:
        """Record an ``error`` diagnostic."""
        return self.add(code, DiagnosticLevel.ERROR, message, location=location)

    def with_code(self, code: DiagnosticCode) -> list[Diagnostic]:
        """Return the diagnostics carrying ``code``, in insertion order."""
        return [d for d in self.items if d.code is code]

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return diagnostics_counts_to_dict(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over the diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable counterpart to `DiagnosticLog`."""

    items: tuple[Diagnostic, ...]

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of contained diagnostics."""
        return len(self.items)

    def with_code(self, code: DiagnosticCode) -> tuple[Diagnostic, ...]:
        """Return the diagnostics carrying ``code``, in insertion order."""
        return tuple(d for d in self.items if d.code is code)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts."""
        return compute_diagnostic_stats(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return diagnostics_counts_to_dict(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for an iterable of diagnostics.

    Args:
        diagnostics: The diagnostics to count.

    Returns:
        Per-level counts.
    """
    levels: list[DiagnosticLevel] = [d.level for d in diagnostics]
    return DiagnosticStats(
        n_info=levels.count(DiagnosticLevel.INFO),
        n_warning=levels.count(DiagnosticLevel.WARNING),
        n_error=levels.count(DiagnosticLevel.ERROR),
    )


def diagnostics_counts_to_dict(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by severity for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        "info": stats.n_info,
        "warning": stats.n_warning,
        "error": stats.n_error,
    }
