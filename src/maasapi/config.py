"""Client settings, overridable through ``MAASAPI_*`` environment variables."""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maasapi.version import Version


class MAASSettings(BaseSettings):
    """Settings for readers and logging.

    ``api_version`` is the server API version responses are read at when
    the caller does not negotiate one explicitly.
    """

    model_config = SettingsConfigDict(
        env_prefix="MAASAPI_",
        extra="ignore",
    )

    api_version: str = "2.0"
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    @field_validator("api_version")
    @classmethod
    def _dotted_version(cls, value: str) -> str:
        Version.parse(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def version(self) -> Version:
        return Version.parse(self.api_version)
