"""Parsers for bulk XML snapshots and single-station JSON payloads."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from ..exceptions import EmptyResultError, ParseError
from .models import ObservationRecord, SnapshotResponse, StationMETAR, StationTAF


def parse_snapshot(data: bytes) -> SnapshotResponse:
    """Extract every ``data/METAR`` and ``data/TAF`` record from a snapshot document."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ParseError(f"failed to unmarshal response: {exc}") from exc

    if root.find("data") is None:
        raise ParseError(f"snapshot root <{root.tag}> has no <data> element")

    return SnapshotResponse(
        metars=[_record_from_element(elem) for elem in root.iterfind("data/METAR")],
        tafs=[_record_from_element(elem) for elem in root.iterfind("data/TAF")],
    )


def normalize_records(records: Iterable[ObservationRecord]) -> dict[str, str]:
    """Map station ID to raw text; a repeated station keeps its later record."""
    normalized: dict[str, str] = {}
    for record in records:
        normalized[record.station_id] = record.raw_text
    return normalized


def parse_station_metar(data: bytes) -> str:
    """Return the observation text of the first record in a ``/metar`` response."""
    first = _first_element(data, kind="METAR")
    try:
        record = StationMETAR.model_validate(first)
    except ValidationError as exc:
        raise ParseError(f"unexpected METAR record shape: {exc}") from exc
    return record.observation


def parse_station_taf(data: bytes) -> str:
    """Return the forecast text of the first record in a ``/taf`` response."""
    first = _first_element(data, kind="TAF")
    try:
        record = StationTAF.model_validate(first)
    except ValidationError as exc:
        raise ParseError(f"unexpected TAF record shape: {exc}") from exc
    return record.forecast


def _record_from_element(elem: ET.Element) -> ObservationRecord:
    return ObservationRecord(
        station_id=_child_text(elem, "station_id"),
        raw_text=_child_text(elem, "raw_text"),
    )


def _child_text(elem: ET.Element, tag: str) -> str:
    child = elem.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text


def _first_element(data: bytes, kind: str) -> dict[str, Any]:
    try:
        payload = json.loads(data)
    except ValueError as exc:
        raise ParseError(f"failed to unmarshal {kind}: {exc}") from exc

    if not isinstance(payload, list):
        raise ParseError(
            f"failed to unmarshal {kind}: expected a JSON array, got {type(payload).__name__}"
        )
    if len(payload) == 0:
        raise EmptyResultError(f"no {kind} records returned")

    first = payload[0]
    if not isinstance(first, dict):
        raise ParseError(
            f"failed to unmarshal {kind}: expected an object, got {type(first).__name__}"
        )
    return first
