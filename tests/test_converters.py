"""Unit tests for sqlfrag.converters.dialect_from_sqlalchemy."""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url

from sqlfrag import DialectFactory, UnknownDialectError
from sqlfrag.converters import dialect_from_sqlalchemy


@pytest.mark.parametrize(
    "url,target",
    [
        ("mssql+pyodbc://user:pw@dsn", "sqlserver"),
        ("oracle+oracledb://user:pw@host/svc", "oracle"),
        ("mysql+pymysql://user:pw@host/db", "mysql"),
        ("mariadb+pymysql://user:pw@host/db", "mysql"),
        ("sqlite:///:memory:", "sqlite"),
        ("postgresql+psycopg://user:pw@host/db", "postgres"),
        ("postgresql://user:pw@host/db", "postgres"),
    ],
)
def test_url_string(url, target):
    assert dialect_from_sqlalchemy(url) is DialectFactory.get(target)


def test_url_object():
    url = make_url("sqlite:///orders.db")
    assert dialect_from_sqlalchemy(url).dialect_name == "sqlite"


def test_engine():
    engine = create_engine("sqlite:///:memory:")
    try:
        assert dialect_from_sqlalchemy(engine).dialect_name == "sqlite"
    finally:
        engine.dispose()


def test_unknown_backend():
    with pytest.raises(UnknownDialectError, match="firebird"):
        dialect_from_sqlalchemy("firebird://user:pw@host/db")
