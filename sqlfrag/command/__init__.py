"""sqlfrag command layer: parameter naming and the base SELECT used for paging."""
from sqlfrag.command.context import CommandContext
from sqlfrag.command.select import OrderByItem, SelectQuery

__all__ = [
    "CommandContext",
    "OrderByItem",
    "SelectQuery",
]
