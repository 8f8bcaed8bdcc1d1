"""Station query URL construction."""

from __future__ import annotations

import httpx
import pytest

from aviation_weather.exceptions import URLBuildError
from aviation_weather.weather.urls import build_station_url


def test_build_station_url_sorts_query_keys() -> None:
    url = build_station_url("https://x/y", "metar", "PAFA")
    assert url == "https://x/y/metar?format=json&ids=PAFA"


def test_build_station_url_taf_endpoint() -> None:
    url = build_station_url("https://aviationweather.gov/api/data", "taf", "KSEA")
    assert url == "https://aviationweather.gov/api/data/taf?format=json&ids=KSEA"


def test_build_station_url_does_not_double_trailing_slash() -> None:
    assert build_station_url("https://x/y/", "taf", "PAFA") == (
        "https://x/y/taf?format=json&ids=PAFA"
    )
    assert build_station_url("https://x", "metar", "PAFA") == (
        "https://x/metar?format=json&ids=PAFA"
    )


def test_build_station_url_percent_encodes_station_id() -> None:
    url = build_station_url("https://x/y", "metar", "K/ 1&ids=EVIL")
    parsed = httpx.URL(url)

    assert parsed.path == "/y/metar"
    assert parsed.params.get_list("ids") == ["K/ 1&ids=EVIL"]
    assert "K/ 1" not in url


def test_build_station_url_keeps_existing_root_query() -> None:
    url = build_station_url("https://x/y?token=abc&format=xml", "metar", "PAFA")
    assert url == "https://x/y/metar?format=json&ids=PAFA&token=abc"


@pytest.mark.parametrize(
    "api_root",
    ["not a url", "/api/data", "ftp://x/y", "https://", ""],
)
def test_build_station_url_rejects_invalid_root(api_root: str) -> None:
    with pytest.raises(URLBuildError, match="failed to parse url"):
        build_station_url(api_root, "metar", "PAFA")


def test_build_station_url_rejects_unknown_endpoint() -> None:
    with pytest.raises(URLBuildError, match="unknown endpoint"):
        build_station_url("https://x/y", "pirep", "PAFA")  # type: ignore[arg-type]
