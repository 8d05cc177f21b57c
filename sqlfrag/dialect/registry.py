"""Dialect registry (Open/Closed Principle).

``DialectFactory`` maps backend names to :class:`~sqlfrag.dialect.base.SqlDialect`
classes.  Register a dialect once; configuration then selects it by name.
Dialects are stateless, so the factory hands out one shared instance per
backend.

Usage::

    from sqlfrag.dialect.registry import DialectFactory

    @DialectFactory.register("db2")
    class Db2Dialect(SqlDialect):
        ...

    dialect = DialectFactory.get("db2")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

import structlog

from sqlfrag.dialect.base import SqlDialect
from sqlfrag.errors import UnknownDialectError

logger = structlog.get_logger(__name__)


class DialectFactory:
    """Registry mapping dialect target names to :class:`SqlDialect` classes."""

    _dialects: ClassVar[dict[str, type[SqlDialect]]] = {}
    _instances: ClassVar[dict[str, SqlDialect]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SqlDialect]], type[SqlDialect]]:
        """Decorator that registers a dialect class under ``name``.

        Args:
            name: The dialect target name (e.g. ``"oracle"``).

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[SqlDialect]) -> type[SqlDialect]:
            cls.register_class(name, dialect_cls)
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, dialect_cls: type[SqlDialect]) -> None:
        """Register a dialect class without using the decorator form.

        Re-registering a name replaces both the class and its cached instance.
        """
        cls._dialects[name] = dialect_cls
        cls._instances.pop(name, None)
        logger.debug("dialect_registered", target=name, dialect=dialect_cls.__name__)

    @classmethod
    def create(cls, name: str) -> SqlDialect:
        """Instantiate a new dialect registered for ``name``.

        Raises:
            UnknownDialectError: If no dialect is registered for ``name``.
        """
        dialect_cls = cls._dialects.get(name)
        if dialect_cls is None:
            raise UnknownDialectError(name, cls.registered_targets())
        return dialect_cls()

    @classmethod
    def get(cls, name: str) -> SqlDialect:
        """Return the shared dialect instance for ``name``, creating it once."""
        dialect = cls._instances.get(name)
        if dialect is None:
            dialect = cls._instances[name] = cls.create(name)
            logger.debug("dialect_created", target=name)
        return dialect

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect target names."""
        return sorted(cls._dialects)
