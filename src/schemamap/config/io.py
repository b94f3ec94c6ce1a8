# topmark:header:start
#
#   project      : SchemaMap
#   file         : io.py
#   file_relpath : src/schemamap/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for SchemaMap configuration.

Parsing and rendering use `tomlkit`. Loaders return plain ``dict`` structures
so the config model never depends on tomlkit container types.

`get_table_value` returns an empty table for missing or ill-typed sections and
only logs at debug level. The *checked* getters return ``None`` for missing or
ill-typed values and record an ``invalid-config-value`` warning in a
`DiagnosticLog` when a value is present but has the wrong type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from schemamap.config.logging import get_logger
from schemamap.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from schemamap.diagnostic.model import DiagnosticCode

if TYPE_CHECKING:
    from enum import Enum
    from pathlib import Path

    from schemamap.config.logging import SchemamapLogger
    from schemamap.diagnostic.model import DiagnosticLog

logger: SchemamapLogger = get_logger(__name__)

TomlTable = dict[str, Any]

E = TypeVar("E", bound="Enum")


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content, or an empty dict when the file cannot be read
        or parsed (the error is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_schemamap_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the SchemaMap table of a parsed TOML document.

    ``pyproject.toml`` keeps the settings under ``[tool.schemamap]``; any other
    file is a standalone ``schemamap.toml`` whose top level is the table.

    Args:
        data: Parsed TOML document.
        path: Path the document was read from.

    Returns:
        The SchemaMap table, or None when a ``pyproject.toml`` has no such section.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    table: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(table, dict):
            return None
        table = cast("TomlTable", table).get(part)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table stored at ``key``, or an empty dict."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.debug("Expected table for key %s, got %r; using {}", key, value)
    return {}


def _record_type_mismatch(
    expected: str,
    value: object,
    *,
    where: str,
    key: str,
    diagnostics: DiagnosticLog,
) -> None:
    loc: str = f"{where}.{key}"
    logger.warning("Expected %s in %s, got %s: %r", expected, loc, type(value).__name__, value)
    diagnostics.add_warning(
        DiagnosticCode.INVALID_CONFIG_VALUE,
        f"Expected {expected} in {loc}, got {type(value).__name__}: {value}",
        location=loc,
    )


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean, warning when present but not a `bool`.

    Integers are rejected rather than coerced.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    _record_type_mismatch("boolean", value, where=where, key=key, diagnostics=diagnostics)
    return None


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string, warning when present but not a `str`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _record_type_mismatch("string", value, where=where, key=key, diagnostics=diagnostics)
    return None


def get_enum_value_or_none_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> E | None:
    """Return the enum member whose value matches the (case-insensitive) string at ``key``.

    Args:
        table: Table to query.
        key: Key to extract.
        enum_cls: Enum class whose members carry string values.
        where: Dotted section path used in diagnostics.
        diagnostics: Log receiving a warning for unknown or ill-typed values.

    Returns:
        The matching member, or None when missing or invalid.
    """
    raw: str | None = get_string_value_or_none_checked(
        table, key, where=where, diagnostics=diagnostics
    )
    if raw is None:
        return None
    wanted: str = raw.strip().lower()
    for member in enum_cls:
        if str(member.value).lower() == wanted:
            return member
    choices: str = ", ".join(str(m.value) for m in enum_cls)
    loc: str = f"{where}.{key}"
    logger.warning("Unknown value %r in %s (valid: %s)", raw, loc, choices)
    diagnostics.add_warning(
        DiagnosticCode.INVALID_CONFIG_VALUE,
        f"Unknown value '{raw}' in {loc}; valid choices: {choices}",
        location=loc,
    )
    return None


def to_toml(data: TomlTable) -> str:
    """Render a plain dict as TOML text, dropping ``None`` values."""

    def _strip_none(obj: Any) -> Any:
        if isinstance(obj, dict):
            return {
                k: _strip_none(v) for k, v in cast("TomlTable", obj).items() if v is not None
            }
        return obj

    return tomlkit.dumps(_strip_none(data))
