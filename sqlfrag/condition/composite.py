"""Composite conditions: AND / OR groups and NOT.

Children that render no SQL are skipped, so optional filters can be
grouped without checking each one first.  A group whose children are all
empty is itself empty.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from sqlfrag.condition.base import ConditionKind, SqlCondition
from sqlfrag.errors import ConstructionError
from sqlfrag.schema.parameter import Parameter

if TYPE_CHECKING:
    from sqlfrag.command.context import CommandContext


class LogicalOp(str, Enum):
    """Logical connectives for :class:`ConditionGroup`."""

    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class ConditionGroup(SqlCondition):
    """Conditions joined by ``AND`` or ``OR``.

    Attributes:
        command: Owning command shared by every child.
        op: The connective.
        conditions: Child conditions in render order.
    """

    kind: ClassVar[ConditionKind] = ConditionKind.GROUP

    command: CommandContext = field(compare=False, repr=False)
    op: LogicalOp
    conditions: tuple[SqlCondition, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", LogicalOp(self.op))
        object.__setattr__(self, "conditions", tuple(self.conditions))
        check_same_command(self.command, self.conditions)

    @classmethod
    def all_of(
        cls, *conditions: SqlCondition, command: CommandContext | None = None
    ) -> ConditionGroup:
        """``(a AND b AND ...)``."""
        return cls(_resolve_command(command, conditions), LogicalOp.AND, conditions)

    @classmethod
    def any_of(
        cls, *conditions: SqlCondition, command: CommandContext | None = None
    ) -> ConditionGroup:
        """``(a OR b OR ...)``."""
        return cls(_resolve_command(command, conditions), LogicalOp.OR, conditions)

    def _rendered(self) -> list[tuple[SqlCondition, str]]:
        pairs = [(c, c.clause_text()) for c in self.conditions]
        return [(c, text) for c, text in pairs if text]

    def clause_text(self) -> str:
        texts = [text for _, text in self._rendered()]
        if not texts:
            return ""
        if len(texts) == 1:
            return texts[0]
        return "(" + f" {self.op.value} ".join(texts) + ")"

    def parameters(self) -> tuple[Parameter, ...] | None:
        params: list[Parameter] = []
        for child, _ in self._rendered():
            params.extend(child.parameters() or ())
        return tuple(params)


@dataclass(frozen=True)
class NotCondition(SqlCondition):
    """Negation of a single condition: ``(NOT <child>)``."""

    kind: ClassVar[ConditionKind] = ConditionKind.NOT

    command: CommandContext = field(compare=False, repr=False)
    condition: SqlCondition

    def __post_init__(self) -> None:
        check_same_command(self.command, (self.condition,))

    @classmethod
    def negate(cls, condition: SqlCondition) -> NotCondition:
        if condition is None:
            raise ConstructionError("Cannot negate a missing condition.")
        return cls(condition.command, condition)

    def clause_text(self) -> str:
        inner = self.condition.clause_text()
        if not inner:
            return ""
        return f"(NOT {inner})"

    def parameters(self) -> tuple[Parameter, ...] | None:
        if not self.condition.clause_text():
            return ()
        return self.condition.parameters()


def _resolve_command(
    command: CommandContext | None, conditions: tuple[SqlCondition, ...]
) -> CommandContext:
    if command is not None:
        return command
    if not conditions:
        raise ConstructionError("An empty condition group needs an explicit command.")
    return conditions[0].command


def check_same_command(
    command: CommandContext, conditions: tuple[SqlCondition, ...]
) -> None:
    # Placeholder names are only unique within one command.
    for child in conditions:
        if child.command is not command:
            raise ConstructionError(
                "All grouped conditions must belong to the same command.",
                details={"kind": child.kind.value},
            )
