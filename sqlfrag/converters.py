"""Utilities for choosing a dialect from external sources.

SQLAlchemy converter
--------------------
:func:`dialect_from_sqlalchemy` maps an engine or database URL to the
matching :class:`~sqlfrag.dialect.base.SqlDialect`, so applications that
already configure SQLAlchemy need no separate backend setting.

Install the optional dependency before using this module::

    pip install "sqlfrag[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from sqlfrag.converters import dialect_from_sqlalchemy

    engine = create_engine("sqlite:///mydb.db")
    dialect = dialect_from_sqlalchemy(engine)   # SQLiteDialect()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from sqlfrag.dialect.base import SqlDialect
from sqlfrag.dialect.registry import DialectFactory
from sqlfrag.errors import UnknownDialectError

if TYPE_CHECKING:
    from sqlalchemy import URL, Engine

logger = structlog.get_logger(__name__)

#: SQLAlchemy backend name → registered dialect target.
SQLALCHEMY_BACKENDS: dict[str, str] = {
    "mssql": "sqlserver",
    "oracle": "oracle",
    "mysql": "mysql",
    "mariadb": "mysql",
    "sqlite": "sqlite",
    "postgresql": "postgres",
}


def dialect_from_sqlalchemy(engine_or_url: Engine | URL | str) -> SqlDialect:
    """Return the dialect matching a SQLAlchemy engine, URL or URL string.

    Only the backend part of the URL is used (``postgresql+psycopg`` maps
    like ``postgresql``); nothing connects to the database.

    Args:
        engine_or_url: A :class:`sqlalchemy.engine.Engine`, a
            :class:`sqlalchemy.engine.URL` or a URL string.

    Returns:
        The shared dialect instance for the backend.

    Raises:
        UnknownDialectError: If the backend has no sqlfrag dialect.
    """
    from sqlalchemy.engine import make_url

    url = getattr(engine_or_url, "url", engine_or_url)
    backend = make_url(url).get_backend_name()
    target = SQLALCHEMY_BACKENDS.get(backend)
    if target is None:
        raise UnknownDialectError(backend, sorted(SQLALCHEMY_BACKENDS))
    logger.debug("dialect_resolved", backend=backend, target=target)
    return DialectFactory.get(target)
