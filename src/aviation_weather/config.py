"""Typed settings loader for the aviation-weather command line."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError
from .transport import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from .weather.models import DEFAULT_API_ROOT_URL, DEFAULT_METAR_CACHE_URL, DEFAULT_TAF_CACHE_URL


class Settings(BaseSettings):
    """CLI settings loaded from environment variables and `.env`.

    The provider classes never read these directly; the CLI passes them in.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    awc_metar_cache_url: str = Field(
        default=DEFAULT_METAR_CACHE_URL,
        alias="AWC_METAR_CACHE_URL",
    )
    awc_taf_cache_url: str = Field(default=DEFAULT_TAF_CACHE_URL, alias="AWC_TAF_CACHE_URL")
    awc_api_root_url: str = Field(default=DEFAULT_API_ROOT_URL, alias="AWC_API_ROOT_URL")
    awc_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        alias="AWC_TIMEOUT_SECONDS",
    )
    awc_user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="AWC_USER_AGENT")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )
    weather_max_print: int = Field(default=10, alias="WEATHER_MAX_PRINT")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        """Accept lower-case level names from the environment."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_values(self) -> Settings:
        for name in ("awc_metar_cache_url", "awc_taf_cache_url", "awc_api_root_url"):
            value = getattr(self, name)
            if not value.startswith(("http://", "https://")):
                raise ValueError(f"{name.upper()} must be an http(s) URL, got {value!r}.")
        if self.awc_timeout_seconds <= 0:
            raise ValueError("AWC_TIMEOUT_SECONDS must be > 0.")
        if not self.awc_user_agent.strip():
            raise ValueError("AWC_USER_AGENT must not be empty.")
        if self.weather_max_print <= 0:
            raise ValueError("WEATHER_MAX_PRINT must be > 0.")
        return self

    @property
    def logging_level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary for startup logging."""
        return {
            "metar_cache_url": self.awc_metar_cache_url,
            "taf_cache_url": self.awc_taf_cache_url,
            "api_root_url": self.awc_api_root_url,
            "timeout_seconds": self.awc_timeout_seconds,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
