"""Set-membership condition: ``column [NOT] IN (p1,p2,...)``.

Construction paths
------------------
``from_parameters``    already-built parameters sharing one column
``from_values``        any iterable of values; type inferred from the
                       first non-null element unless given
``from_delimited``     separator-delimited text converted to a data type;
                       tokens are trimmed and blank tokens skipped

An empty membership list renders no SQL at all, so callers drop the
predicate instead of emitting the invalid ``col IN ()``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from sqlfrag.condition.base import ConditionKind, SqlCondition
from sqlfrag.errors import ConstructionError
from sqlfrag.schema.data_types import DataType, infer_data_type
from sqlfrag.schema.parameter import Parameter

if TYPE_CHECKING:
    from sqlfrag.command.context import CommandContext


@dataclass(frozen=True)
class InCondition(SqlCondition):
    """A column tested against an ordered list of parameters.

    Attributes:
        command: Owning command (not part of equality).
        column_name: The tested column.
        items: Parameters in render order.
        not_in: Render ``NOT IN`` instead of ``IN``.
    """

    kind: ClassVar[ConditionKind] = ConditionKind.MEMBERSHIP

    command: CommandContext = field(compare=False, repr=False)
    column_name: str
    items: tuple[Parameter, ...] = ()
    not_in: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        for param in self.items:
            if param.column_name != self.column_name:
                raise ConstructionError(
                    f"IN list for column '{self.column_name}' contains a parameter "
                    f"for column '{param.column_name}'.",
                    column=self.column_name,
                )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_parameters(
        cls,
        command: CommandContext,
        parameters: Iterable[Parameter],
        not_in: bool = False,
        column: str | None = None,
    ) -> InCondition:
        """Build from existing parameters.

        Args:
            command: Owning command.
            parameters: Parameters that all target the same column.
            not_in: Render ``NOT IN``.
            column: Column name; required only when ``parameters`` is empty.

        Raises:
            ConstructionError: If ``parameters`` is ``None`` or mixes columns.
        """
        if parameters is None:
            raise ConstructionError("IN parameters must not be None.", column=column)
        items = tuple(parameters)
        if column is None:
            column = items[0].column_name if items else ""
        return cls(command, column, items, not_in)

    @classmethod
    def from_values(
        cls,
        command: CommandContext,
        column: str,
        values: Iterable[Any] | None,
        data_type: DataType | None = None,
        not_in: bool = False,
    ) -> InCondition:
        """Bind every element of ``values`` as a placeholder, in order.

        ``None`` is treated as an empty list.

        Raises:
            ConstructionError: If ``values`` is a plain string
                (use :meth:`from_delimited` for delimited text).
        """
        if isinstance(values, (str, bytes)):
            raise ConstructionError(
                "IN values must be a collection; use from_delimited() for delimited text.",
                column=column,
            )
        values = [] if values is None else list(values)
        if data_type is None:
            first = next((v for v in values if v is not None), None)
            data_type = infer_data_type(first)
        items = tuple(command.create_parameter(column, v, data_type) for v in values)
        return cls(command, column, items, not_in)

    @classmethod
    def from_delimited(
        cls,
        command: CommandContext,
        column: str,
        text: str | None,
        data_type: DataType = DataType.STRING,
        separator: str = ",",
        not_in: bool = False,
    ) -> InCondition:
        """Split ``text`` on ``separator`` and bind each converted token.

        ``None`` or empty ``text`` yields an empty condition.

        Raises:
            ConversionError: If any non-blank token is not a valid
                ``data_type`` literal; no condition is built.
        """
        if not separator:
            raise ConstructionError("Separator must not be empty.", column=column)
        values: list[Any] = []
        for raw in (text or "").split(separator):
            token = raw.strip()
            if not token:
                continue
            values.append(data_type.coerce(token, column))
        return cls.from_values(command, column, values, data_type, not_in)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def clause_text(self) -> str:
        if not self.items:
            return ""
        keyword = "NOT IN" if self.not_in else "IN"
        rendered = ",".join(p.render() for p in self.items)
        return f"({self.column_name} {keyword} ({rendered}))"

    def parameters(self) -> tuple[Parameter, ...] | None:
        return self.items
