"""Configuration model selecting the target dialect.

``SqlFragConfig`` is the single place an application names its backend;
everything downstream receives a dialect or a command built from it::

    from sqlfrag import SqlFragConfig, SqlOperator

    config = SqlFragConfig(target="oracle")
    cmd = config.new_command()
    cond = cmd.compare("status", SqlOperator.EQUAL, "open")
    cond.clause_text()   # '(status = :p0)'

Settings loaded from a file or environment go through
:meth:`SqlFragConfig.from_mapping`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sqlfrag.command.context import CommandContext
from sqlfrag.dialect.base import SqlDialect
from sqlfrag.dialect.registry import DialectFactory
from sqlfrag.errors import ConfigError


class SqlFragConfig(BaseModel):
    """Backend selection and parameter naming.

    Attributes:
        target: Registered dialect name (see
            :meth:`DialectFactory.registered_targets`).
        parameter_prefix: Prefix of generated bind names; must be a valid
            identifier so every placeholder style accepts it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str
    parameter_prefix: str = Field(default="p")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise _config_error(exc) from exc

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SqlFragConfig:
        """Build a config from loaded settings.

        Raises:
            ConfigError: If ``data`` is not a mapping or fails validation.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}.")
        return cls(**dict(data))

    @field_validator("target")
    @classmethod
    def _known_target(cls, value: str) -> str:
        registered = DialectFactory.registered_targets()
        if value not in registered:
            raise ValueError(f"unknown dialect target '{value}'; registered: {registered}")
        return value

    @field_validator("parameter_prefix")
    @classmethod
    def _identifier_prefix(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"'{value}' is not a valid identifier")
        return value

    def dialect(self) -> SqlDialect:
        """Return the shared dialect for :attr:`target`."""
        return DialectFactory.get(self.target)

    def new_command(self) -> CommandContext:
        """Return a fresh command whose parameters are named from ``p0``."""
        return CommandContext(self.dialect(), parameter_prefix=self.parameter_prefix)


def _config_error(exc: ValidationError) -> ConfigError:
    first = exc.errors()[0]
    field = ".".join(str(loc) for loc in first["loc"]) or None
    return ConfigError(f"Invalid sqlfrag configuration: {first['msg']}", field=field)
