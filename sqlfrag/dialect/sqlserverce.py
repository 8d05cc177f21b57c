"""SQL Server Compact Edition dialect."""

from __future__ import annotations

from sqlfrag.dialect.paging import OffsetFetchPager
from sqlfrag.dialect.sqlserver import SqlServerDialect


class SqlServerCeDialect(SqlServerDialect):
    """SQL Server Compact 4.0.

    Shares T-SQL naming and date parts with :class:`SqlServerDialect` but
    lacks ``ISNULL``, ``SCOPE_IDENTITY()`` and ``ROW_NUMBER()``; pages use
    ``TOP`` and ``OFFSET ... FETCH`` instead.
    """

    name = "sqlserverce"
    pager = OffsetFetchPager()

    def null_coalesce(self, expr: str, fallback: str) -> str:
        return f"COALESCE({expr}, {fallback})"

    def identity_expression(self) -> str:
        return "@@IDENTITY"
