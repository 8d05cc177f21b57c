"""Pagination strategies.

Each dialect holds one :class:`Pager`.  Given a base
:class:`~sqlfrag.command.select.SelectQuery`, a zero-based page index and a
page size, the pager returns SQL selecting rows ``index*size+1`` to
``index*size+size`` of the (optionally reversed) ordered result.

Pagers
------
LimitOffsetPager     ``LIMIT n OFFSET m`` (MySQL, SQLite, PostgreSQL)
OffsetFetchPager     ``TOP (n)`` / ``OFFSET m ROWS FETCH NEXT n ROWS ONLY``
                     (SQL Server Compact)
RowNumberPager       subquery numbered with ``ROW_NUMBER() OVER (...)``
                     (SQL Server)
RownumPager          nested subqueries filtered on ``ROWNUM`` (Oracle)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import structlog

from sqlfrag.dialect.base import CompiledSQL
from sqlfrag.errors import PagingError

if TYPE_CHECKING:
    from sqlfrag.command.select import OrderByItem, SelectQuery
    from sqlfrag.dialect.base import SqlDialect

logger = structlog.get_logger(__name__)

#: Column name carrying the synthetic row number in row-numbering pagers.
ROW_NUMBER_COLUMN = "__row_number"


class Pager(ABC):
    """Rewrites a base SELECT into a single page of rows."""

    def paginate(
        self,
        query: SelectQuery,
        dialect: SqlDialect,
        page_index: int,
        page_size: int,
        reverse: bool = False,
    ) -> CompiledSQL:
        """Render the page query.

        Raises:
            PagingError: On a negative index, a non-positive size,
                ``reverse`` without ORDER BY, or conditions built for a
                different dialect.
        """
        if page_index < 0:
            raise PagingError(
                f"Page index must be >= 0, got {page_index}.",
                details={"page_index": page_index},
            )
        if page_size <= 0:
            raise PagingError(
                f"Page size must be > 0, got {page_size}.",
                details={"page_size": page_size},
            )
        _check_dialect(query, dialect)
        ordering = query.ordering(reverse)
        sql = self.render(query, dialect, page_index * page_size, page_size, ordering)
        logger.debug(
            "page_rendered",
            dialect=dialect.dialect_name,
            pager=type(self).__name__,
            page_index=page_index,
            page_size=page_size,
            reverse=reverse,
        )
        return CompiledSQL(sql=sql, params=query.params(), dialect=dialect.dialect_name)

    @abstractmethod
    def render(
        self,
        query: SelectQuery,
        dialect: SqlDialect,
        offset: int,
        limit: int,
        ordering: tuple[OrderByItem, ...],
    ) -> str:
        """Return SQL skipping ``offset`` rows and keeping the next ``limit``."""


def _check_dialect(query: SelectQuery, dialect: SqlDialect) -> None:
    # Placeholders are rendered when the condition is built.
    for cond in (query.where, query.having):
        if cond is None:
            continue
        built_for = cond.command.dialect.dialect_name
        if built_for != dialect.dialect_name:
            raise PagingError(
                f"Query conditions were built for '{built_for}' but are paged "
                f"with '{dialect.dialect_name}'.",
                details={"built_for": built_for, "dialect": dialect.dialect_name},
            )


def _head(query: SelectQuery) -> str:
    return f"{query.select_keyword()} {query.select_list()}"


def _join(*parts: str) -> str:
    return "\n".join(p for p in parts if p)


class LimitOffsetPager(Pager):
    """Native ``LIMIT`` / ``OFFSET`` row limiting."""

    def render(
        self,
        query: SelectQuery,
        dialect: SqlDialect,
        offset: int,
        limit: int,
        ordering: tuple[OrderByItem, ...],
    ) -> str:
        return _join(
            _head(query),
            query.body_sql(),
            query.order_by_sql(ordering),
            f"LIMIT {limit}",
            f"OFFSET {offset}" if offset else "",
        )


class OffsetFetchPager(Pager):
    """``TOP`` for the first page, ``OFFSET ... FETCH`` for the rest.

    ``OFFSET ... FETCH`` is only valid after an ORDER BY, so pages beyond
    the first require one.
    """

    def render(
        self,
        query: SelectQuery,
        dialect: SqlDialect,
        offset: int,
        limit: int,
        ordering: tuple[OrderByItem, ...],
    ) -> str:
        order = query.order_by_sql(ordering)
        if offset == 0:
            return _join(
                f"{query.select_keyword()} TOP ({limit}) {query.select_list()}",
                query.body_sql(),
                order,
            )
        if not order:
            raise PagingError(
                "OFFSET/FETCH paging beyond the first page requires ORDER BY.",
                details={"dialect": dialect.dialect_name, "offset": offset},
            )
        return _join(
            _head(query),
            query.body_sql(),
            order,
            f"OFFSET {offset} ROWS",
            f"FETCH NEXT {limit} ROWS ONLY",
        )


class RowNumberPager(Pager):
    """Numbers rows with ``ROW_NUMBER()`` in a subquery and filters on it.

    Without ORDER BY the numbering follows ``(SELECT 0)``, i.e. the
    backend's natural order.  DISTINCT queries are numbered after
    de-duplication, so their ORDER BY must name output columns.
    """

    def render(
        self,
        query: SelectQuery,
        dialect: SqlDialect,
        offset: int,
        limit: int,
        ordering: tuple[OrderByItem, ...],
    ) -> str:
        row_number = dialect.quote_identifier(ROW_NUMBER_COLUMN)
        over = query.order_by_sql(ordering) or "ORDER BY (SELECT 0)"
        numbering = f"ROW_NUMBER() OVER ({over}) AS {row_number}"
        if query.distinct:
            source = dialect.quote_identifier("__distinct")
            inner = _join(
                f"SELECT {source}.*, {numbering} FROM (",
                _join(_head(query), query.body_sql()),
                f") AS {source}",
            )
        else:
            inner = _join(f"SELECT {query.select_list()}, {numbering}", query.body_sql())
        paged = dialect.quote_identifier("__paged")
        return _join(
            "SELECT * FROM (",
            inner,
            f") AS {paged}",
            f"WHERE {row_number} BETWEEN {offset + 1} AND {offset + limit}",
            f"ORDER BY {row_number}",
        )


class RownumPager(Pager):
    """Filters on the ``ROWNUM`` pseudo-column through two nested subqueries.

    ``ROWNUM`` is assigned before ``ORDER BY`` at the same level, so the
    ordered base query is wrapped first, numbered and capped at the page
    end, then the outer level drops the rows before the page start.
    """

    def render(
        self,
        query: SelectQuery,
        dialect: SqlDialect,
        offset: int,
        limit: int,
        ordering: tuple[OrderByItem, ...],
    ) -> str:
        row_number = dialect.quote_identifier(ROW_NUMBER_COLUMN)
        ordered = dialect.quote_identifier("__ordered")
        base = _join(_head(query), query.body_sql(), query.order_by_sql(ordering))
        return _join(
            "SELECT * FROM (",
            f"SELECT {ordered}.*, ROWNUM AS {row_number} FROM (",
            base,
            f") {ordered}",
            f"WHERE ROWNUM <= {offset + limit}",
            ")",
            f"WHERE {row_number} > {offset}",
        )
