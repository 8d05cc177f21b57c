"""sqlfrag condition layer: renderable WHERE / HAVING predicates."""
from sqlfrag.condition.base import ConditionKind, SqlCondition
from sqlfrag.condition.comparison import ComparisonCondition
from sqlfrag.condition.composite import ConditionGroup, LogicalOp, NotCondition
from sqlfrag.condition.membership import InCondition

__all__ = [
    "ConditionKind",
    "SqlCondition",
    "ComparisonCondition",
    "InCondition",
    "ConditionGroup",
    "NotCondition",
    "LogicalOp",
]
