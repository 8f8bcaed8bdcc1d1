"""Logging setup for command-line execution."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from .exceptions import HTTPStatusError, WeatherProviderError


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per line.

    Provider failures logged with ``exc_info`` also carry the failing
    ``stage``/``dataset`` (and ``status_code`` for HTTP errors) as keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            event.update(_provider_error_fields(record.exc_info[1]))
            event["exception"] = self.formatException(record.exc_info)
        return json.dumps(event, default=str)


def _provider_error_fields(exc: BaseException | None) -> dict[str, Any]:
    if not isinstance(exc, WeatherProviderError):
        return {}
    fields: dict[str, Any] = {"error_type": type(exc).__name__}
    if exc.stage is not None:
        fields["stage"] = exc.stage
    if exc.dataset is not None:
        fields["dataset"] = exc.dataset
    if isinstance(exc, HTTPStatusError) and exc.status_code is not None:
        fields["status_code"] = exc.status_code
    return fields


def setup_logger(name: str = "aviation_weather", level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger; library modules log under its children."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonConsoleFormatter())
    logger.addHandler(handler)
    return logger
