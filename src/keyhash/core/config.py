"""Environment driven settings for the password service.

Values are read from ``KEYHASH_*`` environment variables. The validation key
is kept as :class:`pydantic.SecretStr` so it never shows up in ``repr`` or
serialised settings.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError
from ..security.digest import DEFAULT_ALGORITHM, ensure_algorithm
from ..security.passwords import DEFAULT_ENCODING

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class KeyHashConfig(BaseSettings):
    """Pydantic settings container for :class:`PasswordService`."""

    model_config = SettingsConfigDict(env_prefix="KEYHASH_")

    validation_key: SecretStr | None = Field(
        default=None,
        description="Hex encoded secret used as the HMAC key.",
    )
    algorithm: str = Field(
        default=DEFAULT_ALGORITHM,
        description="hashlib algorithm used for the keyed digest.",
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING,
        description="Text encoding applied to password and salt.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging.",
    )

    @field_validator("algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        try:
            return ensure_algorithm(value)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value!r}")
        return level


def load_config(**overrides: Any) -> KeyHashConfig:
    """Build :class:`KeyHashConfig` from the environment plus ``overrides``."""

    try:
        return KeyHashConfig(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid keyhash settings: {exc}") from exc


__all__ = ["DEFAULT_ENCODING", "KeyHashConfig", "load_config"]
