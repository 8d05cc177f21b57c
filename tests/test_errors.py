"""Unit tests for the sqlfrag error hierarchy."""

from __future__ import annotations

import pytest

from sqlfrag import (
    ArityError,
    ConfigError,
    ConstructionError,
    ConversionError,
    OperatorDefinitionError,
    PagingError,
    SqlFragError,
    UnknownDialectError,
    UnsupportedOperationError,
)


@pytest.mark.parametrize(
    "err",
    [
        ConstructionError("bad"),
        ArityError("c", "EQUAL", 1, 0),
        ConversionError("c", "x", "integer"),
        PagingError("bad page"),
        OperatorDefinitionError("bad template"),
        UnsupportedOperationError("oracle", "identity lookup"),
        UnknownDialectError("db2", ["sqlite"]),
        ConfigError("bad config"),
    ],
)
def test_all_errors_share_base(err):
    assert isinstance(err, SqlFragError)
    response = err.to_error_response()
    assert set(response) == {"error", "message", "details"}
    assert response["error"] == err.code
    assert response["message"] == str(err)


@pytest.mark.parametrize("cls", [ArityError, ConversionError, PagingError])
def test_construction_subclasses(cls):
    assert issubclass(cls, ConstructionError)


def test_construction_error_details():
    err = ConstructionError("bad", column="age", operator="EQUAL", details={"x": 1})
    assert err.details == {"x": 1, "column": "age", "operator": "EQUAL"}


def test_arity_error_message():
    err = ArityError("price", "BETWEEN", 2, 1)
    assert str(err) == "Operator 'BETWEEN' on column 'price' takes 2 value(s), got 1."
    assert err.details == {"expected": 2, "actual": 1, "column": "price", "operator": "BETWEEN"}


def test_conversion_error_message():
    assert str(ConversionError(None, "x", "date")) == "Cannot convert 'x' to date."
    assert str(ConversionError("d", "x", "date")) == "Cannot convert 'x' to date for column 'd'."


def test_unsupported_default_message():
    err = UnsupportedOperationError("oracle", "identity lookup")
    assert str(err) == "The 'oracle' dialect does not support identity lookup."
