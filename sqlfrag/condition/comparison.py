"""Comparison condition: ``column <op> value[s]``.

Covers every operator in :class:`~sqlfrag.schema.operators.OperatorRegistry`:
unary (``col IS NULL``), binary (``col = @p0``) and ternary
(``col BETWEEN @p0 AND @p1``) forms.  The column name travels on the first
parameter; for unary operators that parameter carries no value and is never
bound.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from sqlfrag.condition.base import ConditionKind, SqlCondition
from sqlfrag.errors import ArityError, ConstructionError
from sqlfrag.schema.data_types import DataType
from sqlfrag.schema.operators import OperatorRegistry, OperatorSpec, SqlOperator
from sqlfrag.schema.parameter import Parameter

if TYPE_CHECKING:
    from sqlfrag.command.context import CommandContext


@dataclass(frozen=True)
class ComparisonCondition(SqlCondition):
    """A column compared with zero, one or two parameters.

    Build instances through :meth:`create`, :meth:`create_column` or
    :meth:`create_expression`; they check the operator's arity before the
    node exists.

    Attributes:
        command: Owning command (not part of equality).
        operator: Registered operator key.
        first: Column-carrying parameter; holds the first value for
            operators of arity 1 and 2.
        second: Second value for operators of arity 2, otherwise ``None``.
    """

    kind: ClassVar[ConditionKind] = ConditionKind.COMPARISON

    command: CommandContext = field(compare=False, repr=False)
    operator: str
    first: Parameter
    second: Parameter | None = None

    def __post_init__(self) -> None:
        spec = OperatorRegistry.spec(self.operator)
        object.__setattr__(self, "operator", spec.name)
        # For arity 0 ``first`` carries only the column, never a value.
        value_count = (1 if spec.arity else 0) + (1 if self.second is not None else 0)
        if value_count != spec.arity:
            raise ArityError(self.first.column_name, spec.name, spec.arity, value_count)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        command: CommandContext,
        column: str,
        op: str | SqlOperator,
        *values: Any,
        data_type: DataType | None = None,
    ) -> ComparisonCondition:
        """Build a comparison binding each of ``values`` as a placeholder.

        Args:
            command: Command that names the parameters.
            column: Column to compare.
            op: Operator key.
            *values: Exactly ``arity`` values.
            data_type: Type for every value; inferred per value when omitted.

        Raises:
            ArityError: If ``len(values)`` differs from the operator's arity.
        """
        spec = OperatorRegistry.spec(op)
        if len(values) != spec.arity:
            raise ArityError(column, spec.name, spec.arity, len(values))
        if spec.arity == 0:
            return cls(command, spec.name, command.create_literal(column, None, data_type))
        params = [command.create_parameter(column, v, data_type) for v in values]
        return cls(command, spec.name, *params)

    @classmethod
    def create_column(
        cls,
        command: CommandContext,
        column: str,
        op: str | SqlOperator,
        other_column: str,
        other_table: str | None = None,
    ) -> ComparisonCondition:
        """Compare ``column`` with another column, e.g. ``a.id = b.a_id``."""
        if not other_column:
            raise ConstructionError("Second column name is required.", column=column)
        other = f"{other_table}.{other_column}" if other_table else other_column
        return cls.create_expression(command, column, op, other)

    @classmethod
    def create_expression(
        cls,
        command: CommandContext,
        column: str,
        op: str | SqlOperator,
        expression: str,
    ) -> ComparisonCondition:
        """Compare ``column`` with a SQL expression rendered verbatim."""
        spec = _single_value_spec(column, op)
        return cls(command, spec.name, command.create_custom_expression(column, expression))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def column_name(self) -> str:
        return self.first.column_name

    @property
    def arity(self) -> int:
        return OperatorRegistry.arity(self.operator)

    def _value_parameters(self) -> tuple[Parameter, ...]:
        arity = self.arity
        if arity == 0:
            return ()
        if arity == 1:
            return (self.first,)
        return (self.first, self.second)  # type: ignore[return-value]

    def clause_text(self) -> str:
        spec = OperatorRegistry.spec(self.operator)
        values = [p.render() for p in self._value_parameters()]
        return f"({spec.render(self.column_name, *values)})"

    def parameters(self) -> tuple[Parameter, ...] | None:
        if self.arity == 0:
            return None
        return self._value_parameters()


def _single_value_spec(column: str, op: str | SqlOperator) -> OperatorSpec:
    spec = OperatorRegistry.spec(op)
    if spec.arity != 1:
        raise ArityError(column, spec.name, spec.arity, 1)
    return spec
