"""Service settings: CLI flags, env vars and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs     — CLI flags passed by Click
  2. Env vars        — ``APP_*`` prefix
  3. Platform var    — bare ``PORT`` as set by container platforms
  4. Code defaults
"""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class PlatformEnvSource(PydanticBaseSettingsSource):
    """Read the unprefixed ``PORT`` variable.

    A bare ``HOST`` is often the machine hostname, not a bind address,
    so only ``APP_HOST`` sets the host.
    """

    names = {"port": "PORT"}

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        self._data = {
            field: os.environ[var] for field, var in self.names.items() if var in os.environ
        }

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._data


class AppSettings(BaseSettings):
    """Frozen settings for the HTTP responder.

    Attributes:
        host: Bind address for the listener.
        port: TCP port for the listener. ``0`` lets the OS pick one.
        request_timeout: Per-connection socket timeout in seconds.
        log_json: Render log events as JSON lines.
        log_level: Minimum level for ``fargate_hello`` and access logs.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "APP_",
    }

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=0, le=65535)
    request_timeout: float = Field(default=30.0, gt=0)
    log_json: bool = False
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the platform source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            PlatformEnvSource(settings_cls),
        )

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> AppSettings:
        """Build settings from CLI flags, ignoring flags left unset."""
        return cls(**{name: value for name, value in cli_flags.items() if value is not None})
