"""MySQL / MariaDB dialect."""

from __future__ import annotations

from sqlfrag.dialect.base import DatePart, SqlDialect
from sqlfrag.dialect.paging import LimitOffsetPager


class MySQLDialect(SqlDialect):
    """MySQL-flavoured SQL.

    Parameter style: ``%(name)s`` – compatible with ``PyMySQL`` and
    ``mysqlclient`` named-parameter execution.  Identifiers are quoted
    with backticks.
    """

    name = "mysql"
    # Each date part is its own function in MySQL.
    DATE_PARTS = (
        "YEAR",
        "QUARTER",
        "MONTH",
        "WEEK",
        "DAYOFYEAR",
        "DAY",
        "DAYOFWEEK",
        "HOUR",
        "MINUTE",
        "SECOND",
    )
    pager = LimitOffsetPager()

    def param_placeholder(self, name: str) -> str:
        return f"%({name})s"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace("`", "``")
        return f"`{escaped}`"

    def null_coalesce(self, expr: str, fallback: str) -> str:
        return f"IFNULL({expr}, {fallback})"

    def length_function(self, expr: str) -> str:
        return f"CHAR_LENGTH({expr})"

    def substring_function(self, expr: str, start: str, length: str) -> str:
        return f"SUBSTRING({expr}, {start}, {length})"

    def now_function(self) -> str:
        return "NOW()"

    def date_part_function(self, expr: str, part: DatePart | int) -> str:
        return f"{self.date_part_keyword(part)}({expr})"

    def identity_expression(self) -> str:
        return "LAST_INSERT_ID()"
