"""Application exception classes."""

from __future__ import annotations

import copy


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class WeatherProviderError(Exception):
    """Raised when weather retrieval or normalization fails.

    ``stage`` and ``dataset`` identify where a bulk update failed
    (e.g. ``stage="decompress"``, ``dataset="tafs"``).
    """

    def __init__(
        self,
        message: str,
        *,
        stage: str | None = None,
        dataset: str | None = None,
    ) -> None:
        super().__init__(message)
        self.stage = stage
        self.dataset = dataset

    def with_context(
        self,
        context: str,
        *,
        stage: str | None = None,
        dataset: str | None = None,
    ) -> WeatherProviderError:
        """Return a copy of this error, same class, with the message prefixed."""
        wrapped = copy.copy(self)
        wrapped.args = (f"{context}: {self}",)
        if stage is not None:
            wrapped.stage = stage
        if dataset is not None:
            wrapped.dataset = dataset
        return wrapped


class TransportError(WeatherProviderError):
    """Raised on DNS, connection, timeout or other transport failures."""


class HTTPStatusError(WeatherProviderError):
    """Raised when the server answers with a status other than 200."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        stage: str | None = None,
        dataset: str | None = None,
    ) -> None:
        super().__init__(message, stage=stage, dataset=dataset)
        self.status_code = status_code
        self.reason = reason


class DecompressionError(WeatherProviderError):
    """Raised when a snapshot is not a valid gzip stream."""


class ParseError(WeatherProviderError):
    """Raised on malformed XML/JSON or an unexpected payload shape."""


class EmptyResultError(WeatherProviderError):
    """Raised when a well-formed result array holds no records."""


class URLBuildError(WeatherProviderError):
    """Raised when a station query URL cannot be composed."""
