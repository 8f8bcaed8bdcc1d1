"""Shared fixtures: a fake aviationweather.gov served through httpx.MockTransport."""

from __future__ import annotations

import gzip
import json
from collections.abc import Callable, Iterator

import httpx
import pytest

from aviation_weather.weather.awc import AviationWeatherProvider

BASE_URL = "https://awc.test"

PAFA_METAR = (
    "PAFA 061453Z 06003KT 10SM FEW070 SCT120 BKN140 M06/M09 A2962 RMK AO2 SLP038 T10611089 58008"
)
PAFA_TAF = "PAFA 061120Z 0612/0718 04004KT P6SM FEW070 FM071300 05002KT P6SM VCSH OVC045"

Route = tuple[int, bytes]


def snapshot_xml(tag: str, records: list[tuple[str, str]]) -> bytes:
    """Render an AWC cache document holding ``records`` as ``tag`` elements."""
    items = "".join(
        f"    <{tag}>\n"
        f"      <raw_text>{raw_text}</raw_text>\n"
        f"      <station_id>{station_id}</station_id>\n"
        f"      <observation_time>2024-03-06T14:53:00Z</observation_time>\n"
        f"      <flight_category>VFR</flight_category>\n"
        f"    </{tag}>\n"
        for station_id, raw_text in records
    )
    document = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<response xmlns:xsd="http://www.w3.org/2001/XMLSchema" '
        'xmlns:xsi="http://www.w3.org/2001/XML-Schema-instance" version="1.2" '
        'xsi:noNamespaceSchemaLocation="http://aviationweather.gov/adds/schema/metar1_2.xsd">\n'
        "  <request_index>1234567</request_index>\n"
        f'  <data_source name="{tag.lower()}s" />\n'
        '  <request type="retrieve" />\n'
        "  <errors />\n"
        "  <warnings />\n"
        "  <time_taken_ms>12</time_taken_ms>\n"
        f'  <data num_results="{len(records)}">\n'
        f"{items}"
        "  </data>\n"
        "</response>\n"
    )
    return document.encode("utf-8")


def gzip_snapshot(tag: str, records: list[tuple[str, str]]) -> bytes:
    return gzip.compress(snapshot_xml(tag, records))


def default_routes() -> dict[str, Route]:
    return {
        "/metar.xml.gz": (200, gzip_snapshot("METAR", [("PAFA", PAFA_METAR)])),
        "/taf.xml.gz": (200, gzip_snapshot("TAF", [("PAFA", PAFA_TAF)])),
        "/metar": (
            200,
            json.dumps(
                [{"icaoId": "PAFA", "rawOb": PAFA_METAR, "fltCat": "VFR", "temp": -6.1}]
            ).encode(),
        ),
        "/taf": (
            200,
            json.dumps([{"icaoId": "PAFA", "rawTAF": PAFA_TAF, "issueTime": 1709723400}]).encode(),
        ),
        "/bad": (400, b"bad request\n"),
        "/ok": (200, b"ok"),
    }


@pytest.fixture
def routes() -> dict[str, Route]:
    """Path -> (status, body); tests mutate this before issuing requests."""
    return default_routes()


@pytest.fixture
def seen_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def mock_client(
    routes: dict[str, Route], seen_requests: list[httpx.Request]
) -> Iterator[httpx.Client]:
    def _handler(request: httpx.Request) -> httpx.Response:
        seen_requests.append(request)
        status, body = routes.get(request.url.path, (404, b"not found\n"))
        return httpx.Response(status, content=body)

    client = httpx.Client(transport=httpx.MockTransport(_handler))
    yield client
    client.close()


@pytest.fixture
def make_provider(
    mock_client: httpx.Client,
) -> Callable[..., AviationWeatherProvider]:
    def _make(**overrides: str) -> AviationWeatherProvider:
        urls = {
            "metar_cache_url": f"{BASE_URL}/metar.xml.gz",
            "taf_cache_url": f"{BASE_URL}/taf.xml.gz",
            "api_root_url": BASE_URL,
        }
        urls.update(overrides)
        return AviationWeatherProvider(**urls, client=mock_client)

    return _make


@pytest.fixture
def provider(
    make_provider: Callable[..., AviationWeatherProvider],
) -> AviationWeatherProvider:
    return make_provider()
