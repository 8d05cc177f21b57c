"""Oracle dialect."""

from __future__ import annotations

from sqlfrag.dialect.base import DatePart, SqlDialect
from sqlfrag.dialect.paging import RownumPager
from sqlfrag.errors import UnsupportedOperationError


class OracleDialect(SqlDialect):
    """Oracle SQL.

    Parameter style: ``:name`` – the named style of ``oracledb``.  Date
    parts are read through ``TO_CHAR`` format models, so they come back as
    text.  Pages filter on ``ROWNUM``.
    """

    name = "oracle"
    DATE_PARTS = ("yyyy", "q", "mm", "ww", "ddd", "dd", "d", "hh24", "mi", "ss")
    pager = RownumPager()

    def param_placeholder(self, name: str) -> str:
        return f":{name}"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace('"', '""')
        return f'"{escaped}"'

    def null_coalesce(self, expr: str, fallback: str) -> str:
        return f"NVL({expr}, {fallback})"

    def length_function(self, expr: str) -> str:
        return f"LENGTH({expr})"

    def substring_function(self, expr: str, start: str, length: str) -> str:
        return f"SUBSTR({expr}, {start}, {length})"

    def now_function(self) -> str:
        return "SYSDATE"

    def date_part_function(self, expr: str, part: DatePart | int) -> str:
        return f"TO_CHAR({expr}, '{self.date_part_keyword(part)}')"

    def identity_expression(self) -> str:
        raise UnsupportedOperationError(
            self.name,
            "identity lookup",
            "Oracle database does not support identity.",
        )
