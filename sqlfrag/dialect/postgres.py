"""PostgreSQL dialect."""

from __future__ import annotations

from sqlfrag.dialect.base import DatePart, SqlDialect
from sqlfrag.dialect.paging import LimitOffsetPager


class PostgresDialect(SqlDialect):
    """PostgreSQL syntax.

    Parameter style: ``%(name)s`` – compatible with ``psycopg2`` and
    ``psycopg`` named-parameter execution.
    """

    name = "postgres"
    DATE_PARTS = (
        "year",
        "quarter",
        "month",
        "week",
        "doy",
        "day",
        "dow",
        "hour",
        "minute",
        "second",
    )
    pager = LimitOffsetPager()

    def param_placeholder(self, name: str) -> str:
        return f"%({name})s"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace('"', '""')
        return f'"{escaped}"'

    def null_coalesce(self, expr: str, fallback: str) -> str:
        return f"COALESCE({expr}, {fallback})"

    def length_function(self, expr: str) -> str:
        return f"CHAR_LENGTH({expr})"

    def substring_function(self, expr: str, start: str, length: str) -> str:
        return f"SUBSTRING({expr} FROM {start} FOR {length})"

    def now_function(self) -> str:
        return "NOW()"

    def date_part_function(self, expr: str, part: DatePart | int) -> str:
        # TEXT columns holding ISO timestamps have no DATE_PART overload.
        return f"DATE_PART('{self.date_part_keyword(part)}', {expr}::TIMESTAMP)"

    def identity_expression(self) -> str:
        return "LASTVAL()"
