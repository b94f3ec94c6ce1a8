# topmark:header:start
#
#   project      : SchemaMap
#   file         : test_diagnostic_log.py
#   file_relpath : tests/diagnostic/test_diagnostic_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for diagnostic logs, statistics and machine payloads."""

from __future__ import annotations

import dataclasses

import pytest

from schemamap.diagnostic.machine.schemas import (
    MachineDiagnosticCounts,
    MachineDiagnosticEntry,
    build_diagnostic_entries,
)
from schemamap.diagnostic.model import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticLevel,
    DiagnosticLog,
    FrozenDiagnosticLog,
)


def _log() -> DiagnosticLog:
    log = DiagnosticLog()
    log.add_info(DiagnosticCode.UNSUPPORTED_SINGLETON_UNION, location="U")
    log.add_warning(DiagnosticCode.DEFAULT_VALUE_UNRESOLVABLE, "no default", location="R.f")
    log.add_warning(DiagnosticCode.UNREPRESENTABLE_FIELD)
    return log


def test_add_uses_code_summary_by_default() -> None:
    """Without a message the code's summary is used."""
    d: Diagnostic = DiagnosticLog().add(DiagnosticCode.UNREPRESENTABLE_TYPE, DiagnosticLevel.ERROR)

    assert d.message == DiagnosticCode.UNREPRESENTABLE_TYPE.summary
    assert d.location is None


def test_stats_and_flags() -> None:
    """Counts are aggregated per level."""
    log: DiagnosticLog = _log()

    stats = log.stats()
    assert (stats.n_info, stats.n_warning, stats.n_error, stats.total) == (1, 2, 0, 3)
    assert log.has_warning()
    assert not log.has_error()
    assert log.to_dict() == {"info": 1, "warning": 2, "error": 0}


def test_with_code_preserves_order() -> None:
    """Filtering by code keeps insertion order."""
    log: DiagnosticLog = _log()
    log.add_warning(DiagnosticCode.DEFAULT_VALUE_UNRESOLVABLE, "again")

    messages = [d.message for d in log.with_code(DiagnosticCode.DEFAULT_VALUE_UNRESOLVABLE)]
    assert messages == ["no default", "again"]


def test_freeze_is_a_snapshot() -> None:
    """A frozen log does not see later additions."""
    log: DiagnosticLog = _log()
    frozen: FrozenDiagnosticLog = log.freeze()
    log.add_error(DiagnosticCode.UNREPRESENTABLE_TYPE)

    assert len(frozen) == 3
    assert len(log) == 4
    with pytest.raises(dataclasses.FrozenInstanceError):
        frozen.items = ()  # type: ignore[misc]
    assert DiagnosticLog.from_iterable(frozen).items == list(frozen)


def test_machine_entries() -> None:
    """Machine entries carry stable string codes and omit unset locations."""
    entries: list[MachineDiagnosticEntry] = build_diagnostic_entries(_log())

    assert entries[1].to_dict() == {
        "code": "default-value-unresolvable",
        "level": "warning",
        "message": "no default",
        "location": "R.f",
    }
    assert "location" not in entries[2].to_dict()
    assert MachineDiagnosticCounts.from_iterable(_log()).to_dict() == {
        "info": 1,
        "warning": 2,
        "error": 0,
    }


def test_levels_have_colors() -> None:
    """Every level renders through a color function."""
    for level in DiagnosticLevel:
        assert "x" in level.color("x")
