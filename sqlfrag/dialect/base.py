"""Dialect abstractions: CompiledSQL, DatePart and the SqlDialect ABC.

The Strategy pattern is used:
- ``SqlDialect`` declares every backend-specific hook (bind syntax, quoting,
  scalar functions, date parts, identity lookup, pagination).
- One subclass per backend overrides those hooks; nothing outside this
  package branches on the backend.

Dialect instances hold no mutable state and are shared by every command
targeting the backend (see :class:`~sqlfrag.dialect.registry.DialectFactory`).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, ClassVar

from sqlfrag.errors import UnsupportedOperationError

if TYPE_CHECKING:
    from sqlfrag.command.select import SelectQuery
    from sqlfrag.dialect.paging import Pager


@dataclass(frozen=True)
class CompiledSQL:
    """SQL text together with the values for its placeholders.

    Attributes:
        sql: The SQL text with dialect-specific named placeholders.
        params: Bind name → value for every placeholder in ``sql``.
        dialect: The canonical dialect name.
    """

    sql: str
    params: dict[str, Any] = field(default_factory=dict)
    dialect: str = ""

    def merge_runtime_params(self, runtime: dict[str, Any]) -> dict[str, Any]:
        """Return a merged param dict ready for query execution.

        Args:
            runtime: Extra values supplied by the caller at execution time.

        Returns:
            A single dict combining compiled params and runtime params.
        """
        return {**self.params, **runtime}


class DatePart(IntEnum):
    """Date components addressable through :meth:`SqlDialect.date_part_function`.

    The integer value indexes each dialect's ``DATE_PARTS`` table.
    """

    YEAR = 0
    QUARTER = 1
    MONTH = 2
    WEEK = 3
    DAY_OF_YEAR = 4
    DAY = 5
    WEEKDAY = 6
    HOUR = 7
    MINUTE = 8
    SECOND = 9


class SqlDialect(ABC):
    """Abstract base for backend-specific SQL syntax.

    Subclasses set ``name``, ``DATE_PARTS`` (one keyword per
    :class:`DatePart`, in order) and ``pager``, and implement the abstract
    hooks.
    """

    name: ClassVar[str]
    DATE_PARTS: ClassVar[tuple[str, ...]]
    pager: ClassVar[Pager]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        parts = cls.__dict__.get("DATE_PARTS")
        if parts is not None and len(parts) != len(DatePart):
            raise TypeError(
                f"{cls.__name__}.DATE_PARTS must have {len(DatePart)} entries, got {len(parts)}."
            )

    @property
    def dialect_name(self) -> str:
        """Return the canonical dialect name (e.g. ``'oracle'``)."""
        return self.name

    # ------------------------------------------------------------------
    # Names and quoting
    # ------------------------------------------------------------------

    @abstractmethod
    def param_placeholder(self, name: str) -> str:
        """Return the bind-variable syntax for a logical parameter name.

        Args:
            name: Parameter name (e.g. ``'p0'``).

        Returns:
            Dialect-specific placeholder string.
        """

    @abstractmethod
    def quote_identifier(self, name: str) -> str:
        """Return a properly-quoted SQL identifier."""

    # ------------------------------------------------------------------
    # Scalar functions
    # ------------------------------------------------------------------

    @abstractmethod
    def null_coalesce(self, expr: str, fallback: str) -> str:
        """Return the backend's "first non-null of ``expr``, ``fallback``"."""

    @abstractmethod
    def length_function(self, expr: str) -> str:
        """Return the backend's character-length expression."""

    @abstractmethod
    def substring_function(self, expr: str, start: str, length: str) -> str:
        """Return the backend's substring expression (``start`` is 1-based)."""

    @abstractmethod
    def now_function(self) -> str:
        """Return the backend's current-timestamp expression."""

    def date_part_keyword(self, part: DatePart | int) -> str:
        """Return the backend keyword for ``part``."""
        return self.DATE_PARTS[DatePart(part)]

    @abstractmethod
    def date_part_function(self, expr: str, part: DatePart | int) -> str:
        """Return the backend expression extracting ``part`` from ``expr``."""

    # ------------------------------------------------------------------
    # Identity and pagination
    # ------------------------------------------------------------------

    def identity_expression(self) -> str:
        """Return the expression selecting the last generated identity value.

        Raises:
            UnsupportedOperationError: When the backend has no identity
                mechanism.
        """
        raise UnsupportedOperationError(self.name, "identity lookup")

    def paginate(
        self,
        query: SelectQuery,
        page_index: int,
        page_size: int,
        reverse: bool = False,
    ) -> CompiledSQL:
        """Rewrite ``query`` so it returns one zero-based page of rows.

        Args:
            query: The base SELECT.
            page_index: Zero-based page number.
            page_size: Rows per page.
            reverse: Flip every ORDER BY direction before paging.

        Returns:
            :class:`CompiledSQL` for the page query.
        """
        return self.pager.paginate(query, self, page_index, page_size, reverse)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
