"""Minimal base SELECT description consumed by the pagers.

``SelectQuery`` is not a statement builder: table and column entries are
SQL text supplied by the caller (quote them with
:meth:`~sqlfrag.dialect.base.SqlDialect.quote_identifier` when needed).  It
exists so that each :class:`~sqlfrag.dialect.paging.Pager` can rewrite the
same logical query for its backend.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from sqlfrag.condition.base import SqlCondition
from sqlfrag.condition.composite import check_same_command
from sqlfrag.errors import ConstructionError, PagingError
from sqlfrag.schema.parameter import Parameter, bind_values


@dataclass(frozen=True)
class OrderByItem:
    """A single ORDER BY expression.

    Attributes:
        expr: SQL expression to order by.
        descending: Sort direction.
    """

    expr: str
    descending: bool = False

    def reversed(self) -> OrderByItem:
        return replace(self, descending=not self.descending)

    def render(self) -> str:
        return f"{self.expr} {'DESC' if self.descending else 'ASC'}"


@dataclass(frozen=True)
class SelectQuery:
    """The parts of a SELECT that paging needs to preserve.

    Attributes:
        table: FROM source (table name, join expression or derived table).
        columns: Select-list entries; ``("*",)`` by default.
        where: Optional filter; an empty clause is omitted.
        group_by: GROUP BY expressions.
        having: Optional HAVING condition.
        order_by: Ordering used for paging.
        distinct: Emit ``SELECT DISTINCT``.
    """

    table: str
    columns: tuple[str, ...] = ("*",)
    where: SqlCondition | None = None
    group_by: tuple[str, ...] = ()
    having: SqlCondition | None = None
    order_by: tuple[OrderByItem, ...] = ()
    distinct: bool = False

    def __post_init__(self) -> None:
        if not self.table:
            raise ConstructionError("SELECT needs a FROM source.")
        object.__setattr__(self, "columns", tuple(self.columns) or ("*",))
        object.__setattr__(self, "group_by", tuple(self.group_by))
        object.__setattr__(
            self,
            "order_by",
            tuple(o if isinstance(o, OrderByItem) else OrderByItem(o) for o in self.order_by),
        )
        if self.where is not None and self.having is not None:
            check_same_command(self.where.command, (self.having,))

    # ------------------------------------------------------------------
    # Fragments
    # ------------------------------------------------------------------

    def select_list(self) -> str:
        return ", ".join(self.columns)

    def select_keyword(self) -> str:
        return "SELECT DISTINCT" if self.distinct else "SELECT"

    def body_sql(self) -> str:
        """``FROM ... [WHERE ...] [GROUP BY ...] [HAVING ...]``."""
        parts = [f"FROM {self.table}"]
        where = self.where.clause_text() if self.where is not None else ""
        if where:
            parts.append(f"WHERE {where}")
        if self.group_by:
            parts.append(f"GROUP BY {', '.join(self.group_by)}")
        having = self.having.clause_text() if self.having is not None else ""
        if having:
            parts.append(f"HAVING {having}")
        return "\n".join(parts)

    def ordering(self, reverse: bool = False) -> tuple[OrderByItem, ...]:
        """Return the ORDER BY items, flipped when ``reverse`` is set.

        Raises:
            PagingError: If ``reverse`` is requested without any ordering.
        """
        if not reverse:
            return self.order_by
        if not self.order_by:
            raise PagingError(
                "Cannot reverse the order of a query without ORDER BY.",
                details={"table": self.table},
            )
        return tuple(o.reversed() for o in self.order_by)

    @staticmethod
    def order_by_sql(items: tuple[OrderByItem, ...]) -> str:
        if not items:
            return ""
        return "ORDER BY " + ", ".join(o.render() for o in items)

    def to_sql(self, reverse: bool = False) -> str:
        """Render the complete, unpaged SELECT."""
        parts = [f"{self.select_keyword()} {self.select_list()}", self.body_sql()]
        order = self.order_by_sql(self.ordering(reverse))
        if order:
            parts.append(order)
        return "\n".join(parts)

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def parameters(self) -> tuple[Parameter, ...]:
        """Parameters of WHERE then HAVING, in render order."""
        params: list[Parameter] = []
        for cond in (self.where, self.having):
            if cond is not None and cond.clause_text():
                params.extend(cond.parameters() or ())
        return tuple(params)

    def params(self) -> dict[str, Any]:
        """Bind name → value for every placeholder in the query."""
        return bind_values(self.parameters())
