"""Custom exception hierarchy for sqlfrag.

All public errors inherit from SqlFragError so callers can catch the base
class for any sqlfrag-specific failure.
"""
from __future__ import annotations

from typing import Any


class SqlFragError(Exception):
    """Base exception for all sqlfrag errors.

    Args:
        message: Human-readable description.
        details: Extra context for diagnosing the failure.
    """

    code = "SQLFRAG_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response suitable for logging or APIs."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class ConstructionError(SqlFragError):
    """Raised when a parameter or condition is built with invalid arguments.

    Args:
        message: Human-readable description.
        column: Column the failing construction was bound to.
        operator: Operator name, when one was involved.
        details: Extra context.
    """

    code = "CONSTRUCTION_ERROR"

    def __init__(
        self,
        message: str,
        column: str | None = None,
        operator: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = dict(details or {})
        if column is not None:
            merged.setdefault("column", column)
        if operator is not None:
            merged.setdefault("operator", operator)
        super().__init__(message, details=merged)
        self.column = column
        self.operator = operator


class ArityError(ConstructionError):
    """Raised when an operator receives the wrong number of values."""

    code = "ARITY_MISMATCH"

    def __init__(self, column: str, operator: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Operator '{operator}' on column '{column}' takes {expected} "
            f"value(s), got {actual}.",
            column=column,
            operator=operator,
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class ConversionError(ConstructionError):
    """Raised when a text token cannot be converted to the requested type."""

    code = "CONVERSION_ERROR"

    def __init__(self, column: str | None, token: str, data_type: str) -> None:
        target = f" for column '{column}'" if column else ""
        super().__init__(
            f"Cannot convert '{token}' to {data_type}{target}.",
            column=column,
            details={"token": token, "data_type": data_type},
        )
        self.token = token
        self.data_type = data_type


class PagingError(ConstructionError):
    """Raised when a page request cannot be rendered."""

    code = "PAGING_ERROR"


class OperatorDefinitionError(SqlFragError):
    """Raised when an operator template does not match its declared arity."""

    code = "OPERATOR_DEFINITION"


class UnsupportedOperationError(SqlFragError):
    """Raised when a dialect hook has no equivalent on the target backend.

    Args:
        dialect: Canonical dialect name.
        operation: Name of the unsupported hook.
        message: Optional override for the default message.
    """

    code = "UNSUPPORTED_OPERATION"

    def __init__(self, dialect: str, operation: str, message: str | None = None) -> None:
        super().__init__(
            message or f"The '{dialect}' dialect does not support {operation}.",
            details={"dialect": dialect, "operation": operation},
        )
        self.dialect = dialect
        self.operation = operation


class UnknownDialectError(SqlFragError):
    """Raised when no dialect is registered under the requested name."""

    code = "UNKNOWN_DIALECT"

    def __init__(self, name: str, registered: list[str]) -> None:
        super().__init__(
            f"Unsupported dialect target: '{name}'. Registered targets: {registered}.",
            details={"name": name, "registered": registered},
        )
        self.name = name


class ConfigError(SqlFragError):
    """Raised when an SqlFragConfig is misconfigured.

    Args:
        message: Human-readable description.
        field: The offending configuration field, when known.
    """

    code = "CONFIG_ERROR"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, details={"field": field} if field else None)
        self.field = field
