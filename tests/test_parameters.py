"""Unit tests for Parameter, DataType and the CommandContext parameter factory."""

from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal

import pytest

from sqlfrag import (
    CommandContext,
    ConstructionError,
    ConversionError,
    DataType,
    DialectFactory,
    Parameter,
    bind_values,
    infer_data_type,
)


# ---------------------------------------------------------------------------
# DataType
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, DataType.BOOLEAN),
        (3, DataType.INTEGER),
        (Decimal("1.5"), DataType.DECIMAL),
        (1.5, DataType.FLOAT),
        ("x", DataType.STRING),
        (dt.datetime(2024, 1, 1, 12, 0), DataType.DATETIME),
        (dt.date(2024, 1, 1), DataType.DATE),
        (dt.time(12, 30), DataType.TIME),
        (uuid.UUID(int=1), DataType.GUID),
        (b"\x00", DataType.BINARY),
        (None, DataType.OBJECT),
        (object(), DataType.OBJECT),
    ],
)
def test_infer_data_type(value, expected):
    assert infer_data_type(value) is expected


@pytest.mark.parametrize(
    "data_type,token,expected",
    [
        (DataType.INTEGER, "42", 42),
        (DataType.BOOLEAN, "true", True),
        (DataType.DECIMAL, "10.25", Decimal("10.25")),
        (DataType.FLOAT, "2.5", 2.5),
        (DataType.STRING, "abc", "abc"),
        (DataType.DATE, "2024-03-01", dt.date(2024, 3, 1)),
        (
            DataType.GUID,
            "12345678-1234-5678-1234-567812345678",
            uuid.UUID("12345678-1234-5678-1234-567812345678"),
        ),
    ],
)
def test_coerce_token(data_type, token, expected):
    assert data_type.coerce(token) == expected


def test_coerce_failure_raises_conversion_error():
    with pytest.raises(ConversionError) as exc_info:
        DataType.INTEGER.coerce("twelve", column="qty")
    err = exc_info.value
    assert err.column == "qty"
    assert err.token == "twelve"
    assert err.details["data_type"] == "integer"


# ---------------------------------------------------------------------------
# Parameter value object
# ---------------------------------------------------------------------------


def test_placeholder_rendering(cmd: CommandContext):
    param = cmd.create_parameter("age", 18)
    assert param.name == "p0"
    assert param.placeholder == "@p0"
    assert param.render() == "@p0"
    assert param.data_type is DataType.INTEGER
    assert param.is_bindable


def test_literal_rendering(cmd: CommandContext):
    assert cmd.create_literal("age", 18).render() == "18"
    assert cmd.create_literal("age", None).render() == "NULL"
    assert not cmd.create_literal("age", 18).is_bindable


def test_literals_do_not_consume_bind_names(cmd: CommandContext):
    cmd.create_literal("a", 1)
    cmd.create_custom_expression("a", "b.id")
    assert cmd.create_parameter("a", 2).name == "p0"


def test_bind_names_are_unique_within_a_command(cmd: CommandContext):
    names = [cmd.create_parameter("c", i).name for i in range(5)]
    assert names == ["p0", "p1", "p2", "p3", "p4"]


def test_bind_names_restart_per_command(sqlserver):
    first = CommandContext(sqlserver).create_parameter("c", 1)
    second = CommandContext(sqlserver).create_parameter("c", 1)
    assert first.name == second.name == "p0"


def test_custom_prefix(sqlserver):
    param = CommandContext(sqlserver, parameter_prefix="arg").create_parameter("c", 1)
    assert param.placeholder == "@arg0"


def test_custom_expression_is_inlined(cmd: CommandContext):
    param = cmd.create_custom_expression("orders.customer_id", "customers.id")
    assert param.render() == "customers.id"
    assert param.data_type is DataType.STRING
    assert not param.use_placeholder


@pytest.mark.parametrize("expression", ["", "   ", None])
def test_custom_expression_requires_text(cmd: CommandContext, expression):
    with pytest.raises(ConstructionError):
        cmd.create_custom_expression("c", expression)


@pytest.mark.parametrize("column", ["", "  ", None])
def test_column_name_required(cmd: CommandContext, column):
    with pytest.raises(ConstructionError):
        cmd.create_parameter(column, 1)


def test_command_requires_dialect():
    with pytest.raises(ConstructionError):
        CommandContext(None)


def test_equality_ignores_generated_names(cmd: CommandContext):
    a = cmd.create_parameter("c", 5)
    b = cmd.create_parameter("c", 5)
    assert a.name != b.name
    assert a == b
    assert hash(a) == hash(b)


def test_equality_covers_value_type_and_policy(cmd: CommandContext):
    base = cmd.create_parameter("c", 5)
    assert base != cmd.create_parameter("c", 6)
    assert base != cmd.create_parameter("d", 5)
    assert base != cmd.create_parameter("c", 5, DataType.DECIMAL)
    assert base != cmd.create_literal("c", 5)


def test_unhashable_value_is_still_hashable():
    param = Parameter("tags", DataType.OBJECT, ["a", "b"])
    assert hash(param) == hash(Parameter("tags", DataType.OBJECT, ["a", "b"]))


def test_placeholder_syntax_follows_dialect():
    expected = {
        "sqlserver": "@p0",
        "sqlserverce": "@p0",
        "oracle": ":p0",
        "sqlite": ":p0",
        "mysql": "%(p0)s",
        "postgres": "%(p0)s",
    }
    for target, placeholder in expected.items():
        param = CommandContext(DialectFactory.get(target)).create_parameter("c", 1)
        assert param.render() == placeholder


def test_bind_values_skips_inlined(cmd: CommandContext):
    params = [
        cmd.create_parameter("a", 1),
        cmd.create_literal("b", 2),
        cmd.create_parameter("c", None),
    ]
    assert bind_values(params) == {"p0": 1, "p1": None}
    assert bind_values(None) == {}
