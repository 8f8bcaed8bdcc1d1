"""Provider-independent facade over a ``WeatherProvider``."""

from __future__ import annotations

from .base import WeatherProvider
from .models import StationWeather


class WeatherService:
    """Pass-through to any object offering ``update``/``get_metar``/``get_taf``.

    Callers depend on the service rather than a concrete provider so another
    weather source can be swapped in without touching call sites.
    """

    def __init__(self, provider: WeatherProvider) -> None:
        self.provider = provider

    def update(self) -> tuple[dict[str, str], dict[str, str]]:
        return self.provider.update()

    def get_metar(self, station_id: str) -> str:
        return self.provider.get_metar(station_id)

    def get_taf(self, station_id: str) -> str:
        return self.provider.get_taf(station_id)

    def get_station_weather(self, station_id: str) -> StationWeather:
        """Fetch the current METAR and TAF of one station."""
        return StationWeather(
            station_id=station_id,
            metar=self.get_metar(station_id),
            taf=self.get_taf(station_id),
        )
