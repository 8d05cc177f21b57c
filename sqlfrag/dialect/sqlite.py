"""SQLite dialect."""

from __future__ import annotations

from sqlfrag.dialect.base import DatePart, SqlDialect
from sqlfrag.dialect.paging import LimitOffsetPager


class SQLiteDialect(SqlDialect):
    """SQLite syntax.

    Parameter style: ``:name`` – the named style of the standard
    :mod:`sqlite3` driver.  Date parts use ``strftime`` format codes cast
    to integers; SQLite has no quarter code, so quarters are derived from
    the month.
    """

    name = "sqlite"
    DATE_PARTS = ("%Y", "%m", "%m", "%W", "%j", "%d", "%w", "%H", "%M", "%S")
    pager = LimitOffsetPager()

    def param_placeholder(self, name: str) -> str:
        return f":{name}"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace('"', '""')
        return f'"{escaped}"'

    def null_coalesce(self, expr: str, fallback: str) -> str:
        return f"IFNULL({expr}, {fallback})"

    def length_function(self, expr: str) -> str:
        return f"LENGTH({expr})"

    def substring_function(self, expr: str, start: str, length: str) -> str:
        return f"SUBSTR({expr}, {start}, {length})"

    def now_function(self) -> str:
        return "CURRENT_TIMESTAMP"

    def date_part_function(self, expr: str, part: DatePart | int) -> str:
        extracted = f"CAST(strftime('{self.date_part_keyword(part)}', {expr}) AS INTEGER)"
        if DatePart(part) is DatePart.QUARTER:
            return f"(({extracted} + 2) / 3)"
        return extracted

    def identity_expression(self) -> str:
        return "last_insert_rowid()"
