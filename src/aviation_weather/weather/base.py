"""Provider-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WeatherProvider(ABC):
    """Base contract for METAR/TAF sources used by ``WeatherService``."""

    @abstractmethod
    def update(self) -> tuple[dict[str, str], dict[str, str]]:
        """Fetch all current METARs and TAFs as station-to-raw-text maps."""

    @abstractmethod
    def get_metar(self, station_id: str) -> str:
        """Fetch the latest raw METAR for one station."""

    @abstractmethod
    def get_taf(self, station_id: str) -> str:
        """Fetch the latest raw TAF for one station."""
