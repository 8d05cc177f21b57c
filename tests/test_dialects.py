"""Unit tests for the built-in dialects and DialectFactory."""

from __future__ import annotations

import pytest

from sqlfrag import (
    DatePart,
    DialectFactory,
    MySQLDialect,
    OracleDialect,
    PostgresDialect,
    SqlDialect,
    SQLiteDialect,
    SqlServerCeDialect,
    SqlServerDialect,
    UnknownDialectError,
    UnsupportedOperationError,
)
from sqlfrag.dialect.paging import LimitOffsetPager
from tests.fixtures import ALL_TARGETS

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def test_builtin_targets_registered():
    assert set(ALL_TARGETS) <= set(DialectFactory.registered_targets())


@pytest.mark.parametrize(
    "target,cls",
    [
        ("sqlserver", SqlServerDialect),
        ("sqlserverce", SqlServerCeDialect),
        ("oracle", OracleDialect),
        ("mysql", MySQLDialect),
        ("sqlite", SQLiteDialect),
        ("postgres", PostgresDialect),
    ],
)
def test_get_returns_shared_instance(target, cls):
    dialect = DialectFactory.get(target)
    assert type(dialect) is cls
    assert dialect.dialect_name == target
    assert DialectFactory.get(target) is dialect


def test_create_returns_new_instance():
    assert DialectFactory.create("sqlite") is not DialectFactory.get("sqlite")


def test_unknown_target():
    with pytest.raises(UnknownDialectError, match="Unsupported dialect target: 'db2'") as exc_info:
        DialectFactory.get("db2")
    assert "sqlite" in exc_info.value.details["registered"]


def test_register_custom_dialect(isolated_registries):
    @DialectFactory.register("custom")
    class CustomDialect(SQLiteDialect):
        name = "custom"

        def param_placeholder(self, name: str) -> str:
            return f"${name}"

    dialect = DialectFactory.get("custom")
    assert isinstance(dialect, CustomDialect)
    assert dialect.param_placeholder("p0") == "$p0"


def test_reregistering_drops_cached_instance(isolated_registries):
    before = DialectFactory.get("sqlite")
    DialectFactory.register_class("sqlite", SQLiteDialect)
    assert DialectFactory.get("sqlite") is not before


def test_date_parts_table_must_be_complete():
    with pytest.raises(TypeError, match="DATE_PARTS"):

        class Broken(SqlDialect):  # noqa: F841
            name = "broken"
            DATE_PARTS = ("year",)
            pager = LimitOffsetPager()


@pytest.mark.parametrize("target", ALL_TARGETS)
def test_date_parts_cover_every_part(target):
    dialect = DialectFactory.get(target)
    assert len(dialect.DATE_PARTS) == len(DatePart)
    for part in DatePart:
        assert dialect.date_part_keyword(part)


# ---------------------------------------------------------------------------
# Hooks
# ---------------------------------------------------------------------------


def test_quote_identifier():
    assert DialectFactory.get("sqlserver").quote_identifier("a]b") == "[a]]b]"
    assert DialectFactory.get("oracle").quote_identifier('a"b') == '"a""b"'
    assert DialectFactory.get("mysql").quote_identifier("a`b") == "`a``b`"
    assert DialectFactory.get("postgres").quote_identifier("order") == '"order"'


@pytest.mark.parametrize(
    "target,coalesce,length,substring,now",
    [
        ("sqlserver", "ISNULL(a, 0)", "LEN(a)", "SUBSTRING(a, 1, 3)", "GETDATE()"),
        ("sqlserverce", "COALESCE(a, 0)", "LEN(a)", "SUBSTRING(a, 1, 3)", "GETDATE()"),
        ("oracle", "NVL(a, 0)", "LENGTH(a)", "SUBSTR(a, 1, 3)", "SYSDATE"),
        ("mysql", "IFNULL(a, 0)", "CHAR_LENGTH(a)", "SUBSTRING(a, 1, 3)", "NOW()"),
        ("sqlite", "IFNULL(a, 0)", "LENGTH(a)", "SUBSTR(a, 1, 3)", "CURRENT_TIMESTAMP"),
        ("postgres", "COALESCE(a, 0)", "CHAR_LENGTH(a)", "SUBSTRING(a FROM 1 FOR 3)", "NOW()"),
    ],
)
def test_scalar_functions(target, coalesce, length, substring, now):
    dialect = DialectFactory.get(target)
    assert dialect.null_coalesce("a", "0") == coalesce
    assert dialect.length_function("a") == length
    assert dialect.substring_function("a", "1", "3") == substring
    assert dialect.now_function() == now


@pytest.mark.parametrize(
    "target,part,expected",
    [
        ("sqlserver", DatePart.DAY_OF_YEAR, "DATEPART(dayofyear, d)"),
        ("sqlserverce", DatePart.WEEKDAY, "DATEPART(weekday, d)"),
        ("oracle", DatePart.HOUR, "TO_CHAR(d, 'hh24')"),
        ("mysql", DatePart.WEEKDAY, "DAYOFWEEK(d)"),
        ("sqlite", DatePart.YEAR, "CAST(strftime('%Y', d) AS INTEGER)"),
        ("sqlite", DatePart.QUARTER, "((CAST(strftime('%m', d) AS INTEGER) + 2) / 3)"),
        ("postgres", DatePart.DAY_OF_YEAR, "DATE_PART('doy', d::TIMESTAMP)"),
    ],
)
def test_date_part_function(target, part, expected):
    assert DialectFactory.get(target).date_part_function("d", part) == expected


def test_date_part_accepts_int():
    assert DialectFactory.get("sqlserver").date_part_function("d", 0) == "DATEPART(year, d)"


@pytest.mark.parametrize(
    "target,expected",
    [
        ("sqlserver", "SCOPE_IDENTITY()"),
        ("sqlserverce", "@@IDENTITY"),
        ("mysql", "LAST_INSERT_ID()"),
        ("sqlite", "last_insert_rowid()"),
        ("postgres", "LASTVAL()"),
    ],
)
def test_identity_expression(target, expected):
    assert DialectFactory.get(target).identity_expression() == expected


def test_oracle_identity_unsupported(oracle):
    with pytest.raises(UnsupportedOperationError, match="does not support identity") as exc_info:
        oracle.identity_expression()
    assert exc_info.value.to_error_response()["error"] == "UNSUPPORTED_OPERATION"
    assert exc_info.value.dialect == "oracle"


def test_repr():
    assert repr(DialectFactory.get("mysql")) == "MySQLDialect()"
