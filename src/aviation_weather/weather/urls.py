"""Query URL construction for the aviationweather.gov data API."""

from __future__ import annotations

from typing import Literal
from urllib.parse import quote

import httpx

from ..exceptions import URLBuildError

StationEndpoint = Literal["metar", "taf"]
STATION_ENDPOINTS: frozenset[str] = frozenset({"metar", "taf"})


def build_station_url(api_root: str, endpoint: StationEndpoint, station_id: str) -> str:
    """Compose ``{api_root}/{endpoint}?format=json&ids={station_id}``.

    Query keys are emitted in sorted order so the result is deterministic.
    """
    if endpoint not in STATION_ENDPOINTS:
        raise URLBuildError(
            f"unknown endpoint {endpoint!r}; expected one of {sorted(STATION_ENDPOINTS)}"
        )

    try:
        root = httpx.URL(api_root)
    except (httpx.InvalidURL, TypeError) as exc:
        raise URLBuildError(f"failed to parse url {api_root!r}: {exc}") from exc
    if root.scheme not in {"http", "https"} or not root.host:
        raise URLBuildError(f"failed to parse url {api_root!r}: not an absolute http(s) URL")

    # Query parameters already on the root survive; ids/format are replaced.
    params = [
        (key, value)
        for key, value in root.params.multi_items()
        if key not in {"format", "ids"}
    ]
    params.extend([("format", "json"), ("ids", station_id)])
    params.sort(key=lambda item: item[0])

    url = root.copy_with(
        path=f"{root.path.rstrip('/')}/{quote(endpoint, safe='')}",
        params=params,
    )
    return str(url)
