"""Blocking HTTP GET transport for snapshot and data API downloads."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .exceptions import HTTPStatusError, TransportError

DEFAULT_TIMEOUT_SECONDS = 120.0
DEFAULT_USER_AGENT = "aviation-weather/0.1"


class HttpFetcher:
    """Single-attempt GET fetcher returning raw response bodies."""

    def __init__(
        self,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("aviation_weather.transport")
        self._client = client or httpx.Client(
            timeout=timeout_seconds,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
        )

    def __enter__(self) -> HttpFetcher:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch(self, url: str) -> bytes:
        """GET ``url`` and return the full body; only HTTP 200 is a success."""
        try:
            # Non-streaming get reads the whole body and releases the connection.
            response = self._client.get(url)
        except httpx.InvalidURL as exc:
            raise TransportError(f"invalid url {url!r}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"request to {url} failed ({type(exc).__name__}): {exc}"
            ) from exc

        self.logger.debug(
            "GET %s -> %d (%d bytes)", url, response.status_code, len(response.content)
        )
        if response.status_code != httpx.codes.OK:
            raise HTTPStatusError(
                f"failed to download file: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
        return response.content


def fetch(url: str, *, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> bytes:
    """One-shot fetch with a throwaway client."""
    with HttpFetcher(timeout_seconds=timeout_seconds) as fetcher:
        return fetcher.fetch(url)
