"""Aviation Weather Center (aviationweather.gov) METAR/TAF provider."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import httpx

from ..codec import decompress
from ..exceptions import WeatherProviderError
from ..transport import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT, HttpFetcher
from .base import WeatherProvider
from .models import (
    DEFAULT_API_ROOT_URL,
    DEFAULT_METAR_CACHE_URL,
    DEFAULT_TAF_CACHE_URL,
    ProviderEndpoints,
    SnapshotResponse,
)
from .parsing import normalize_records, parse_snapshot, parse_station_metar, parse_station_taf
from .urls import StationEndpoint, build_station_url

if TYPE_CHECKING:
    from ..config import Settings


class AviationWeatherProvider(WeatherProvider):
    """Fetches METARs and TAFs from the AWC cache files and data API.

    ``update`` downloads the gzip XML snapshots covering every station;
    ``get_metar``/``get_taf`` query the JSON API for a single station.
    Nothing is cached or retried between calls.
    """

    provider_name = "awc"

    def __init__(
        self,
        metar_cache_url: str = DEFAULT_METAR_CACHE_URL,
        taf_cache_url: str = DEFAULT_TAF_CACHE_URL,
        api_root_url: str = DEFAULT_API_ROOT_URL,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.logger = logger or logging.getLogger("aviation_weather.weather.awc")
        self._endpoints = ProviderEndpoints(
            metar_cache_url=metar_cache_url,
            taf_cache_url=taf_cache_url,
            api_root_url=api_root_url,
        )
        self._fetcher = HttpFetcher(
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
            client=client,
            logger=self.logger,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, logger: logging.Logger | None = None
    ) -> AviationWeatherProvider:
        return cls(
            metar_cache_url=settings.awc_metar_cache_url,
            taf_cache_url=settings.awc_taf_cache_url,
            api_root_url=settings.awc_api_root_url,
            timeout_seconds=settings.awc_timeout_seconds,
            user_agent=settings.awc_user_agent,
            logger=logger,
        )

    @property
    def endpoints(self) -> ProviderEndpoints:
        return self._endpoints

    def __enter__(self) -> AviationWeatherProvider:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._fetcher.close()

    def update(self) -> tuple[dict[str, str], dict[str, str]]:
        """Download both snapshots; any failure aborts without a partial result."""
        try:
            metars = normalize_records(
                self._load_snapshot(self._endpoints.metar_cache_url, dataset="metars").metars
            )
        except WeatherProviderError as exc:
            self.logger.warning("%s METAR snapshot update failed: %s", self.provider_name, exc)
            raise exc.with_context("failed to process metars", dataset="metars") from exc

        try:
            tafs = normalize_records(
                self._load_snapshot(self._endpoints.taf_cache_url, dataset="tafs").tafs
            )
        except WeatherProviderError as exc:
            self.logger.warning("%s TAF snapshot update failed: %s", self.provider_name, exc)
            raise exc.with_context("failed to process tafs", dataset="tafs") from exc

        self.logger.info(
            "%s snapshot update complete: %d metars, %d tafs",
            self.provider_name,
            len(metars),
            len(tafs),
        )
        return metars, tafs

    def get_metar(self, station_id: str) -> str:
        return self._fetch_station("metar", station_id, parse_station_metar)

    def get_taf(self, station_id: str) -> str:
        return self._fetch_station("taf", station_id, parse_station_taf)

    def _load_snapshot(self, url: str, dataset: str) -> SnapshotResponse:
        try:
            payload = self._fetcher.fetch(url)
        except WeatherProviderError as exc:
            raise exc.with_context(f"failed to download {dataset}", stage="download") from exc

        try:
            payload = decompress(payload)
        except WeatherProviderError as exc:
            raise exc.with_context(f"failed to ungzip {dataset}", stage="decompress") from exc

        try:
            snapshot = parse_snapshot(payload)
        except WeatherProviderError as exc:
            raise exc.with_context(f"failed to parse {dataset}", stage="parse") from exc

        self.logger.debug(
            "Parsed %s snapshot from %s: %d metar / %d taf records",
            dataset,
            url,
            len(snapshot.metars),
            len(snapshot.tafs),
        )
        return snapshot

    def _fetch_station(
        self,
        endpoint: StationEndpoint,
        station_id: str,
        parse: Callable[[bytes], str],
    ) -> str:
        kind = endpoint.upper()
        try:
            url = build_station_url(self._endpoints.api_root_url, endpoint, station_id)
        except WeatherProviderError as exc:
            raise exc.with_context(
                f"failed to get {endpoint} url", stage="url", dataset=endpoint
            ) from exc

        try:
            data = self._fetcher.fetch(url)
        except WeatherProviderError as exc:
            raise exc.with_context(
                f"failed to download {kind}", stage="download", dataset=endpoint
            ) from exc

        try:
            return parse(data)
        except WeatherProviderError as exc:
            raise exc.with_context(
                f"failed to read {kind} for {station_id}", stage="parse", dataset=endpoint
            ) from exc
