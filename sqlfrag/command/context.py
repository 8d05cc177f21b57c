"""Per-command parameter naming and parameter factory.

A :class:`CommandContext` stands in for one SQL command under construction.
Every parameter created through it receives a bind name that is unique
within the command (``p0``, ``p1``, ...), rendered in the dialect's
placeholder syntax.  Condition nodes keep a reference to the context that
built them; the context never owns the nodes.

Usage::

    from sqlfrag import CommandContext, DialectFactory, SqlOperator

    cmd = CommandContext(DialectFactory.get("sqlserver"))
    cond = cmd.compare("age", SqlOperator.GREATER_THAN, 18)
    cond.clause_text()      # '(age > @p0)'
    cmd.compile(cond).params  # {'p0': 18}
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlfrag.condition.base import SqlCondition
from sqlfrag.condition.comparison import ComparisonCondition
from sqlfrag.condition.membership import InCondition
from sqlfrag.dialect.base import CompiledSQL, SqlDialect
from sqlfrag.errors import ConstructionError
from sqlfrag.schema.data_types import DataType, infer_data_type
from sqlfrag.schema.operators import SqlOperator
from sqlfrag.schema.parameter import Parameter, bind_values


class CommandContext:
    """Names and creates the parameters of a single command.

    Args:
        dialect: Dialect supplying the placeholder syntax.
        parameter_prefix: Prefix of generated bind names.
    """

    def __init__(self, dialect: SqlDialect, parameter_prefix: str = "p") -> None:
        if dialect is None:
            raise ConstructionError("A command needs a dialect.")
        self._dialect = dialect
        self._prefix = parameter_prefix
        self._counter = 0

    @property
    def dialect(self) -> SqlDialect:
        return self._dialect

    def next_parameter_name(self) -> str:
        """Return a fresh bind name, unique within this command."""
        name = f"{self._prefix}{self._counter}"
        self._counter += 1
        return name

    # ------------------------------------------------------------------
    # Parameter factory
    # ------------------------------------------------------------------

    def create_parameter(
        self, column: str, value: Any, data_type: DataType | None = None
    ) -> Parameter:
        """Create a placeholder-rendered parameter.

        Args:
            column: Column the value is compared with.
            value: Value to bind (may be ``None``).
            data_type: Semantic type; inferred from ``value`` when omitted.
        """
        _require_column(column)
        name = self.next_parameter_name()
        return Parameter(
            column_name=column,
            data_type=data_type or infer_data_type(value),
            value=value,
            use_placeholder=True,
            name=name,
            placeholder=self._dialect.param_placeholder(name),
        )

    def create_literal(
        self, column: str, value: Any, data_type: DataType | None = None
    ) -> Parameter:
        """Create a parameter whose value is inlined into the clause text."""
        _require_column(column)
        return Parameter(
            column_name=column,
            data_type=data_type or infer_data_type(value),
            value=value,
            use_placeholder=False,
        )

    def create_custom_expression(self, column: str, expression: str) -> Parameter:
        """Create an inlined parameter whose value is SQL text.

        Used to compare a column with another column or an arbitrary
        expression, e.g. ``orders.customer_id``.
        """
        _require_column(column)
        if not isinstance(expression, str) or not expression.strip():
            raise ConstructionError("Custom expression must be non-empty SQL text.", column=column)
        return Parameter(
            column_name=column,
            data_type=DataType.STRING,
            value=expression,
            use_placeholder=False,
        )

    # ------------------------------------------------------------------
    # Condition shortcuts
    # ------------------------------------------------------------------

    def compare(
        self,
        column: str,
        op: str | SqlOperator,
        *values: Any,
        data_type: DataType | None = None,
    ) -> ComparisonCondition:
        """Shortcut for :meth:`ComparisonCondition.create`."""
        return ComparisonCondition.create(self, column, op, *values, data_type=data_type)

    def compare_column(
        self,
        column: str,
        op: str | SqlOperator,
        other_column: str,
        other_table: str | None = None,
    ) -> ComparisonCondition:
        """Shortcut for :meth:`ComparisonCondition.create_column`."""
        return ComparisonCondition.create_column(self, column, op, other_column, other_table)

    def in_values(
        self,
        column: str,
        values: Iterable[Any] | None,
        data_type: DataType | None = None,
        not_in: bool = False,
    ) -> InCondition:
        """Shortcut for :meth:`InCondition.from_values`."""
        return InCondition.from_values(self, column, values, data_type, not_in)

    def in_delimited(
        self,
        column: str,
        text: str | None,
        data_type: DataType = DataType.STRING,
        separator: str = ",",
        not_in: bool = False,
    ) -> InCondition:
        """Shortcut for :meth:`InCondition.from_delimited`."""
        return InCondition.from_delimited(self, column, text, data_type, separator, not_in)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def compile(self, condition: SqlCondition) -> CompiledSQL:
        """Render ``condition`` with the values for its placeholders."""
        return CompiledSQL(
            sql=condition.clause_text(),
            params=bind_values(condition.parameters()),
            dialect=self._dialect.dialect_name,
        )


def _require_column(column: str) -> None:
    if not isinstance(column, str) or not column.strip():
        raise ConstructionError("Column name must be a non-empty string.", column=column or None)
