# topmark:header:start
#
#   project      : SchemaMap
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the SchemaMap test suite.

Sets up TRACE logging for test runs and provides small builders for type
descriptors and configurations.

Notes:
    Tests should respect the immutable/mutable configuration split: build a
    `schemamap.config.model.MutableMappingConfig`, then `freeze()` it into a
    `MappingConfig` for the engine. Do **not** mutate a frozen config; call
    `thaw()`, edit, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from schemamap.config import logging
from schemamap.config.model import MappingConfig, MutableMappingConfig
from schemamap.constants import LOG_LEVEL_ENV_VAR
from schemamap.types.descriptors import (
    FieldDescriptor,
    Primitive,
    PrimitiveKind,
    Record,
    Singleton,
    TypeDescriptor,
    TypeReference,
)

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_schemamap_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Descriptor builders ------------------------------------------------------

STRING = Primitive(PrimitiveKind.STRING)
INT = Primitive(PrimitiveKind.INT)
BOOLEAN = Primitive(PrimitiveKind.BOOLEAN)
ANYDATA = Primitive(PrimitiveKind.ANYDATA)


def field(
    t: TypeDescriptor,
    *,
    optional: bool = False,
    has_default: bool = False,
    description: str | None = None,
) -> FieldDescriptor:
    """Return a `FieldDescriptor` (keyword-only flags for readability)."""
    return FieldDescriptor(t, optional=optional, has_default=has_default, description=description)


def named(name: str, target: TypeDescriptor, *, description: str | None = None) -> TypeReference:
    """Return a `TypeReference` bound to ``target``."""
    return TypeReference(name, description=description).bind(target)


def record(
    *inclusions: TypeReference, rest: TypeDescriptor | None = None, **fields: FieldDescriptor
) -> Record:
    """Return a `Record` with fields given as keyword arguments (declaration order)."""
    return Record(fields=fields, inclusions=inclusions, rest=rest)


def string_literal(text: str) -> Singleton:
    """Return a string singleton for ``text`` (quotes added)."""
    return Singleton(f'"{text}"', PrimitiveKind.STRING)


def make_config(**overrides: Any) -> MappingConfig:
    """Return a frozen `MappingConfig` built from defaults and overrides.

    Args:
        **overrides (Any): Field values applied to the mutable builder before freezing.

    Returns:
        MappingConfig: An immutable configuration snapshot.
    """
    m = MutableMappingConfig()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
