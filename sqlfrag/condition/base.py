"""Condition node contract shared by every predicate kind."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

from sqlfrag.schema.parameter import Parameter

if TYPE_CHECKING:
    from sqlfrag.command.context import CommandContext


class ConditionKind(str, Enum):
    """Discriminant for the closed set of condition node kinds."""

    COMPARISON = "comparison"
    MEMBERSHIP = "membership"
    GROUP = "group"
    NOT = "not"


class SqlCondition(ABC):
    """A renderable boolean SQL fragment.

    ``clause_text()`` returns a self-contained, parenthesized expression, or
    an empty string when the node has nothing to render; callers must omit
    the predicate in that case.  ``parameters()`` returns the parameters
    referenced by that text, or ``None`` when the node binds nothing through
    the standard parameter mechanism.

    Concrete nodes are frozen dataclasses: equality and hashing are
    structural, limited to nodes of the same class, and ignore the owning
    command.
    """

    kind: ConditionKind
    command: CommandContext

    @abstractmethod
    def clause_text(self) -> str:
        """Render the node to a parenthesized SQL fragment (or ``""``)."""

    @abstractmethod
    def parameters(self) -> tuple[Parameter, ...] | None:
        """Return the parameters that must be bound with this clause."""

    @property
    def is_empty(self) -> bool:
        """True when the node renders no SQL."""
        return not self.clause_text()

    def __str__(self) -> str:
        return self.clause_text()
