"""Semantic data types for bound parameters.

A :class:`DataType` travels with every :class:`~sqlfrag.schema.parameter.Parameter`
so the execution layer can pick the right driver-level binding.  Values
arriving as text (delimited ``IN`` lists) are converted with pydantic's lax
validation, one cached :class:`~pydantic.TypeAdapter` per data type.
"""

from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal
from enum import Enum
from typing import Any

import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from sqlfrag.errors import ConversionError

logger = structlog.get_logger(__name__)


class DataType(str, Enum):
    """The semantic type of a bound value."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    DECIMAL = "decimal"
    FLOAT = "float"
    STRING = "string"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    GUID = "guid"
    BINARY = "binary"
    OBJECT = "object"

    @property
    def python_type(self) -> type:
        """The Python type values of this data type are converted to."""
        return _PYTHON_TYPES[self]

    def coerce(self, token: str, column: str | None = None) -> Any:
        """Convert a text token to this data type.

        Args:
            token: Raw text, already trimmed by the caller.
            column: Column the value is destined for (error context only).

        Returns:
            The converted value.

        Raises:
            ConversionError: If ``token`` is not a valid literal of this type.
        """
        try:
            return _ADAPTERS[self].validate_python(token)
        except PydanticValidationError as exc:
            logger.warning(
                "token_conversion_failed",
                column=column,
                token=token,
                data_type=self.value,
            )
            raise ConversionError(column, token, self.value) from exc


_PYTHON_TYPES: dict[DataType, type] = {
    DataType.BOOLEAN: bool,
    DataType.INTEGER: int,
    DataType.DECIMAL: Decimal,
    DataType.FLOAT: float,
    DataType.STRING: str,
    DataType.DATE: dt.date,
    DataType.DATETIME: dt.datetime,
    DataType.TIME: dt.time,
    DataType.GUID: uuid.UUID,
    DataType.BINARY: bytes,
    DataType.OBJECT: object,
}

_ADAPTERS: dict[DataType, TypeAdapter[Any]] = {
    data_type: TypeAdapter(Any if python_type is object else python_type)
    for data_type, python_type in _PYTHON_TYPES.items()
}

# Order matters: bool is an int subclass, datetime is a date subclass.
_INFERENCE_ORDER: tuple[tuple[type, DataType], ...] = (
    (bool, DataType.BOOLEAN),
    (int, DataType.INTEGER),
    (Decimal, DataType.DECIMAL),
    (float, DataType.FLOAT),
    (str, DataType.STRING),
    (dt.datetime, DataType.DATETIME),
    (dt.date, DataType.DATE),
    (dt.time, DataType.TIME),
    (uuid.UUID, DataType.GUID),
    (bytes, DataType.BINARY),
    (bytearray, DataType.BINARY),
)


def infer_data_type(value: Any) -> DataType:
    """Return the :class:`DataType` matching a Python value.

    ``None`` and unrecognised types map to :attr:`DataType.OBJECT`.
    """
    if value is None:
        return DataType.OBJECT
    for python_type, data_type in _INFERENCE_ORDER:
        if isinstance(value, python_type):
            return data_type
    return DataType.OBJECT
