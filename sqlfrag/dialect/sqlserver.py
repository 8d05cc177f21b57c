"""Microsoft SQL Server dialect."""

from __future__ import annotations

from sqlfrag.dialect.base import DatePart, SqlDialect
from sqlfrag.dialect.paging import RowNumberPager


class SqlServerDialect(SqlDialect):
    """T-SQL syntax for SQL Server 2005 and later.

    Parameter style: ``@name``, as accepted by ``pyodbc``/``pymssql``
    wrappers that bind named parameters.  Pages are cut with
    ``ROW_NUMBER() OVER (...)``.
    """

    name = "sqlserver"
    DATE_PARTS = (
        "year",
        "quarter",
        "month",
        "week",
        "dayofyear",
        "day",
        "weekday",
        "hour",
        "minute",
        "second",
    )
    pager = RowNumberPager()

    def param_placeholder(self, name: str) -> str:
        return f"@{name}"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace("]", "]]")
        return f"[{escaped}]"

    def null_coalesce(self, expr: str, fallback: str) -> str:
        return f"ISNULL({expr}, {fallback})"

    def length_function(self, expr: str) -> str:
        return f"LEN({expr})"

    def substring_function(self, expr: str, start: str, length: str) -> str:
        return f"SUBSTRING({expr}, {start}, {length})"

    def now_function(self) -> str:
        return "GETDATE()"

    def date_part_function(self, expr: str, part: DatePart | int) -> str:
        return f"DATEPART({self.date_part_keyword(part)}, {expr})"

    def identity_expression(self) -> str:
        return "SCOPE_IDENTITY()"
