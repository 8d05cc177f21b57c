"""Backend dialects: placeholder syntax, quoting, scalar functions and paging."""

from sqlfrag.dialect.base import CompiledSQL, DatePart, SqlDialect
from sqlfrag.dialect.mysql import MySQLDialect
from sqlfrag.dialect.oracle import OracleDialect
from sqlfrag.dialect.paging import (
    ROW_NUMBER_COLUMN,
    LimitOffsetPager,
    OffsetFetchPager,
    Pager,
    RownumPager,
    RowNumberPager,
)
from sqlfrag.dialect.postgres import PostgresDialect
from sqlfrag.dialect.registry import DialectFactory
from sqlfrag.dialect.sqlite import SQLiteDialect
from sqlfrag.dialect.sqlserver import SqlServerDialect
from sqlfrag.dialect.sqlserverce import SqlServerCeDialect

__all__ = [
    "CompiledSQL",
    "DatePart",
    "SqlDialect",
    "DialectFactory",
    "Pager",
    "LimitOffsetPager",
    "OffsetFetchPager",
    "RowNumberPager",
    "RownumPager",
    "ROW_NUMBER_COLUMN",
    "MySQLDialect",
    "OracleDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "SqlServerDialect",
    "SqlServerCeDialect",
]
