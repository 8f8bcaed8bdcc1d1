"""Typed models for METAR/TAF records and provider configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_METAR_CACHE_URL = "https://aviationweather.gov/data/cache/metars.cache.xml.gz"
DEFAULT_TAF_CACHE_URL = "https://aviationweather.gov/data/cache/tafs.cache.xml.gz"
DEFAULT_API_ROOT_URL = "https://aviationweather.gov/api/data"


class ObservationRecord(BaseModel):
    """One METAR or TAF as found in a bulk snapshot."""

    station_id: str = ""
    raw_text: str = ""


class SnapshotResponse(BaseModel):
    """Records of one snapshot document, in document order."""

    metars: list[ObservationRecord] = Field(default_factory=list)
    tafs: list[ObservationRecord] = Field(default_factory=list)


class StationMETAR(BaseModel):
    """Element of the data API ``/metar`` JSON array; only ``rawOb`` is read."""

    model_config = ConfigDict(extra="ignore")

    observation: str = Field(alias="rawOb")


class StationTAF(BaseModel):
    """Element of the data API ``/taf`` JSON array; only ``rawTAF`` is read."""

    model_config = ConfigDict(extra="ignore")

    forecast: str = Field(alias="rawTAF")


class ProviderEndpoints(BaseModel):
    """Snapshot and API URLs a provider was built with."""

    model_config = ConfigDict(frozen=True)

    metar_cache_url: str = DEFAULT_METAR_CACHE_URL
    taf_cache_url: str = DEFAULT_TAF_CACHE_URL
    api_root_url: str = DEFAULT_API_ROOT_URL


class StationWeather(BaseModel):
    """Current METAR and TAF for one station."""

    station_id: str
    metar: str
    taf: str
