"""METAR/TAF provider integrations."""

from .awc import AviationWeatherProvider
from .base import WeatherProvider
from .models import (
    ObservationRecord,
    ProviderEndpoints,
    SnapshotResponse,
    StationMETAR,
    StationTAF,
    StationWeather,
)
from .service import WeatherService

__all__ = [
    "AviationWeatherProvider",
    "ObservationRecord",
    "ProviderEndpoints",
    "SnapshotResponse",
    "StationMETAR",
    "StationTAF",
    "StationWeather",
    "WeatherProvider",
    "WeatherService",
]
