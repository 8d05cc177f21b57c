"""Comparison operators and their SQL templates.

Each operator maps to an :class:`OperatorSpec` holding a ``str.format``
template and the number of value slots it takes.  Slot ``{0}`` is always
the column; ``{1}`` and ``{2}`` are the rendered values.

``OperatorRegistry``
    Class-level table of operator specs.  New operators can be registered
    without touching :class:`~sqlfrag.condition.comparison.ComparisonCondition`;
    registration checks the template's slot count against the declared arity.

Usage::

    from sqlfrag.schema.operators import OperatorRegistry

    OperatorRegistry.register("REGEXP", "{0} REGEXP {1}", arity=1)
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

import structlog

from sqlfrag.errors import ConstructionError, OperatorDefinitionError

logger = structlog.get_logger(__name__)


class SqlOperator(str, Enum):
    """Built-in comparison operators."""

    # no value
    IS_NULL = "IS_NULL"
    IS_NOT_NULL = "IS_NOT_NULL"

    # one value
    EQUAL = "EQUAL"
    NOT_EQUAL = "NOT_EQUAL"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    LESS_THAN = "LESS_THAN"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"
    LIKE = "LIKE"
    NOT_LIKE = "NOT_LIKE"

    # two values
    BETWEEN = "BETWEEN"
    NOT_BETWEEN = "NOT_BETWEEN"


def template_slots(template: str) -> list[str]:
    """Return the distinct positional field names used by ``template``."""
    seen: list[str] = []
    for _, field_name, _, _ in string.Formatter().parse(template):
        if field_name is not None and field_name not in seen:
            seen.append(field_name)
    return seen


@dataclass(frozen=True)
class OperatorSpec:
    """SQL template plus the number of values it binds.

    Attributes:
        name: Operator key.
        template: ``str.format`` template; ``{0}`` is the column.
        arity: Number of value slots (0, 1 or 2).
    """

    name: str
    template: str
    arity: int

    def __post_init__(self) -> None:
        slots = template_slots(self.template)
        if "0" not in slots:
            raise OperatorDefinitionError(
                f"Operator '{self.name}' template {self.template!r} has no column slot {{0}}.",
                details={"operator": self.name, "template": self.template},
            )
        expected = sorted(str(i) for i in range(1, self.arity + 1))
        values = sorted(s for s in slots if s != "0")
        if values != expected:
            raise OperatorDefinitionError(
                f"Operator '{self.name}' declares arity {self.arity} but template "
                f"{self.template!r} has value slots {values}.",
                details={
                    "operator": self.name,
                    "template": self.template,
                    "arity": self.arity,
                    "slots": values,
                },
            )

    def render(self, column: str, *values: str) -> str:
        """Fill the template with a column and ``arity`` rendered values."""
        return self.template.format(column, *values)


class OperatorRegistry:
    """Registry mapping operator names to :class:`OperatorSpec` entries.

    Example::

        OperatorRegistry.register("ILIKE", "{0} ILIKE {1}", arity=1)
        spec = OperatorRegistry.spec("ILIKE")
    """

    _operators: ClassVar[dict[str, OperatorSpec]] = {}

    @classmethod
    def register(cls, name: str | SqlOperator, template: str, arity: int) -> OperatorSpec:
        """Validate and register an operator template.

        Args:
            name: Operator key.
            template: SQL template with ``{0}`` for the column.
            arity: Number of value slots in ``template``.

        Returns:
            The registered :class:`OperatorSpec`.

        Raises:
            OperatorDefinitionError: If ``template`` does not match ``arity``.
        """
        key = _key(name)
        spec = OperatorSpec(name=key, template=template, arity=arity)
        cls._operators[key] = spec
        logger.debug("operator_registered", operator=key, arity=arity)
        return spec

    @classmethod
    def spec(cls, name: str | SqlOperator) -> OperatorSpec:
        """Return the spec registered for ``name``.

        Raises:
            ConstructionError: If no operator is registered under ``name``.
        """
        key = _key(name)
        spec = cls._operators.get(key)
        if spec is None:
            raise ConstructionError(
                f"Unknown operator '{key}'. Registered operators: {cls.registered_operators()}.",
                operator=key,
            )
        return spec

    @classmethod
    def arity(cls, name: str | SqlOperator) -> int:
        """Return the number of values ``name`` binds."""
        return cls.spec(name).arity

    @classmethod
    def registered_operators(cls) -> list[str]:
        """Return the sorted list of registered operator names."""
        return sorted(cls._operators)

    @classmethod
    def all_specs(cls) -> list[OperatorSpec]:
        """Return every registered spec, sorted by name."""
        return [cls._operators[k] for k in sorted(cls._operators)]


def _key(name: str | SqlOperator) -> str:
    return name.value if isinstance(name, SqlOperator) else name


_BUILTINS: tuple[tuple[SqlOperator, str, int], ...] = (
    (SqlOperator.IS_NULL, "{0} IS NULL", 0),
    (SqlOperator.IS_NOT_NULL, "{0} IS NOT NULL", 0),
    (SqlOperator.EQUAL, "{0} = {1}", 1),
    (SqlOperator.NOT_EQUAL, "{0} <> {1}", 1),
    (SqlOperator.GREATER_THAN, "{0} > {1}", 1),
    (SqlOperator.GREATER_THAN_OR_EQUAL, "{0} >= {1}", 1),
    (SqlOperator.LESS_THAN, "{0} < {1}", 1),
    (SqlOperator.LESS_THAN_OR_EQUAL, "{0} <= {1}", 1),
    (SqlOperator.LIKE, "{0} LIKE {1}", 1),
    (SqlOperator.NOT_LIKE, "{0} NOT LIKE {1}", 1),
    (SqlOperator.BETWEEN, "{0} BETWEEN {1} AND {2}", 2),
    (SqlOperator.NOT_BETWEEN, "{0} NOT BETWEEN {1} AND {2}", 2),
)

for _op, _template, _arity in _BUILTINS:
    OperatorRegistry.register(_op, _template, _arity)
