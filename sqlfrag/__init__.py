"""sqlfrag – Parameterized SQL condition fragments for many backends.

Compose WHERE clauses. Page any SELECT.

Public API
----------
``SqlFragConfig``
    Select the target backend and obtain commands for it.

``CommandContext``
    Create uniquely named parameters and the conditions that use them.

``ComparisonCondition``, ``InCondition``, ``ConditionGroup``, ``NotCondition``
    Renderable predicates; ``clause_text()`` gives the SQL and
    ``parameters()`` the values to bind.

``SelectQuery`` and ``SqlDialect.paginate``
    Rewrite a base SELECT into one page of rows for the target backend.

Re-exported types
-----------------
``DataType``, ``SqlOperator``, ``OperatorRegistry``, ``Parameter``,
``CompiledSQL``, ``DatePart``, every built-in dialect, and all error classes.

Extensibility
-------------
New backends can be registered via::

    from sqlfrag.dialect.registry import DialectFactory

    @DialectFactory.register("db2")
    class Db2Dialect(SqlDialect):
        ...

After registration, ``SqlFragConfig(target="db2")`` picks it up.  New
operators are added with ``OperatorRegistry.register(name, template, arity)``.
"""

from __future__ import annotations

from sqlfrag.command.context import CommandContext
from sqlfrag.command.select import OrderByItem, SelectQuery
from sqlfrag.condition.base import ConditionKind, SqlCondition
from sqlfrag.condition.comparison import ComparisonCondition
from sqlfrag.condition.composite import ConditionGroup, LogicalOp, NotCondition
from sqlfrag.condition.membership import InCondition
from sqlfrag.config import SqlFragConfig
from sqlfrag.dialect.base import CompiledSQL, DatePart, SqlDialect
from sqlfrag.dialect.mysql import MySQLDialect
from sqlfrag.dialect.oracle import OracleDialect
from sqlfrag.dialect.postgres import PostgresDialect
from sqlfrag.dialect.registry import DialectFactory
from sqlfrag.dialect.sqlite import SQLiteDialect
from sqlfrag.dialect.sqlserver import SqlServerDialect
from sqlfrag.dialect.sqlserverce import SqlServerCeDialect
from sqlfrag.errors import (
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
from sqlfrag.schema.data_types import DataType, infer_data_type
from sqlfrag.schema.operators import OperatorRegistry, OperatorSpec, SqlOperator
from sqlfrag.schema.parameter import Parameter, bind_values

# ---------------------------------------------------------------------------
# Register built-in dialects with DialectFactory
# ---------------------------------------------------------------------------

DialectFactory.register_class("sqlserver", SqlServerDialect)
DialectFactory.register_class("sqlserverce", SqlServerCeDialect)
DialectFactory.register_class("oracle", OracleDialect)
DialectFactory.register_class("mysql", MySQLDialect)
DialectFactory.register_class("sqlite", SQLiteDialect)
DialectFactory.register_class("postgres", PostgresDialect)

__all__ = [
    # Configuration
    "SqlFragConfig",
    # Commands
    "CommandContext",
    "SelectQuery",
    "OrderByItem",
    # Conditions
    "SqlCondition",
    "ConditionKind",
    "ComparisonCondition",
    "InCondition",
    "ConditionGroup",
    "NotCondition",
    "LogicalOp",
    # Schema types
    "DataType",
    "infer_data_type",
    "SqlOperator",
    "OperatorSpec",
    "OperatorRegistry",
    "Parameter",
    "bind_values",
    # Dialects
    "CompiledSQL",
    "DatePart",
    "SqlDialect",
    "DialectFactory",
    "MySQLDialect",
    "OracleDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "SqlServerDialect",
    "SqlServerCeDialect",
    # Errors
    "SqlFragError",
    "ConstructionError",
    "ArityError",
    "ConversionError",
    "PagingError",
    "OperatorDefinitionError",
    "UnsupportedOperationError",
    "UnknownDialectError",
    "ConfigError",
]
