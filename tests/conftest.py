"""Shared pytest fixtures for sqlfrag unit and integration tests."""
from __future__ import annotations

import pytest

from sqlfrag import CommandContext, DialectFactory, OperatorRegistry, SqlDialect


@pytest.fixture(scope="session")
def sqlserver() -> SqlDialect:
    return DialectFactory.get("sqlserver")


@pytest.fixture(scope="session")
def oracle() -> SqlDialect:
    return DialectFactory.get("oracle")


@pytest.fixture(scope="session")
def sqlite() -> SqlDialect:
    return DialectFactory.get("sqlite")


@pytest.fixture()
def cmd(sqlserver: SqlDialect) -> CommandContext:
    """A fresh SQL Server command; bind names start at ``p0``."""
    return CommandContext(sqlserver)


@pytest.fixture()
def isolated_registries(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let a test register operators and dialects without leaking them."""
    monkeypatch.setattr(OperatorRegistry, "_operators", dict(OperatorRegistry._operators))
    monkeypatch.setattr(DialectFactory, "_dialects", dict(DialectFactory._dialects))
    monkeypatch.setattr(DialectFactory, "_instances", dict(DialectFactory._instances))
