"""Bound parameter value object.

A :class:`Parameter` couples a column with a value and decides how that
value reaches the SQL text: as a named placeholder resolved by the driver,
or inlined verbatim (literals and custom expressions such as
``other_table.other_column``).

Parameters are created through
:class:`~sqlfrag.command.context.CommandContext`, which owns name
generation; they are never shared between condition nodes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from sqlfrag.schema.data_types import DataType


@dataclass(frozen=True)
class Parameter:
    """An immutable column/type/value triple.

    Two parameters are equal when column name, data type, value and render
    policy match.  The generated ``name`` and ``placeholder`` take no part in
    equality so that conditions built by different commands compare equal.

    Attributes:
        column_name: Column (or qualified column) the value is compared with.
        data_type: Semantic type of ``value``.
        value: The bound value, or SQL text when inlined.
        use_placeholder: Render as ``placeholder`` (True) or inline (False).
        name: Generated bind name, unique within one command (e.g. ``p0``).
        placeholder: Dialect-specific bind syntax (e.g. ``@p0``, ``:p0``).
    """

    column_name: str
    data_type: DataType
    value: Any
    use_placeholder: bool = True
    name: str = field(default="", compare=False)
    placeholder: str = field(default="", compare=False)

    def __hash__(self) -> int:
        # Values may be unhashable; equal parameters still hash identically.
        return hash((self.column_name, self.data_type, self.use_placeholder))

    def render(self) -> str:
        """Return the text this parameter contributes to a clause."""
        if self.use_placeholder:
            return self.placeholder
        if self.value is None:
            return "NULL"
        return str(self.value)

    @property
    def is_bindable(self) -> bool:
        """True when the value must be supplied to the driver at execution."""
        return self.use_placeholder


def bind_values(parameters: Iterable[Parameter] | None) -> dict[str, Any]:
    """Map bind names to values for every placeholder-rendered parameter."""
    if parameters is None:
        return {}
    return {p.name: p.value for p in parameters if p.use_placeholder}
