"""
Typed views over the JSON returned by the Voidly API.

Upstream payloads omit blocks freely (a country without recent OONI data has
no ``ooni`` key), so every optional block is an explicit ``Optional`` field.
Parsing is lenient: malformed values fall back to neutral defaults instead of
raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional


def _to_float(value: Any, *, default: float = 0.0) -> float:
    if isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _to_int(value: Any, *, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _to_str(value: Any, *, default: str = "") -> str:
    if value is None:
        return default
    return str(value)


def _to_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


@dataclass(slots=True, frozen=True)
class MeasurementMetrics:
    anomaly_rate: float
    confirmed_rate: float
    measurement_count: int
    affected_services: List[str] = field(default_factory=list)
    last_updated: str = ""
    status: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["MeasurementMetrics"]:
        if not isinstance(raw, dict):
            return None
        status = raw.get("status")
        return cls(
            anomaly_rate=_to_float(raw.get("anomalyRate")),
            confirmed_rate=_to_float(raw.get("confirmedRate")),
            measurement_count=_to_int(raw.get("measurementCount")),
            affected_services=_to_str_list(raw.get("affectedServices")),
            last_updated=_to_str(raw.get("lastUpdated")),
            status=str(status) if status is not None else None,
        )


@dataclass(slots=True, frozen=True)
class IncidentSummary:
    title: str
    severity: str

    @classmethod
    def from_dict(cls, raw: Any) -> "IncidentSummary":
        data = _as_dict(raw)
        return cls(
            title=_to_str(data.get("title")),
            severity=_to_str(data.get("severity"), default="unknown"),
        )


@dataclass(slots=True, frozen=True)
class IncidentDetail:
    id: str
    country: str
    country_name: str
    title: str
    description: str
    severity: str
    status: str
    start_time: str
    affected_services: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> "IncidentDetail":
        data = _as_dict(raw)
        country = _to_str(data.get("country"))
        return cls(
            id=_to_str(data.get("id")),
            country=country,
            country_name=_to_str(data.get("countryName"), default=country),
            title=_to_str(data.get("title")),
            description=_to_str(data.get("description")),
            severity=_to_str(data.get("severity"), default="unknown"),
            status=_to_str(data.get("status")),
            start_time=_to_str(data.get("startTime")),
            affected_services=_to_str_list(data.get("affectedServices")),
        )


@dataclass(slots=True, frozen=True)
class CountryRecord:
    code: str
    name: str
    status: str = "unknown"
    metrics: Optional[MeasurementMetrics] = None
    incidents: List[IncidentSummary] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> "CountryRecord":
        data = _as_dict(raw)
        code = _to_str(data.get("country") or data.get("code"))
        incidents = data.get("activeIncidents")
        return cls(
            code=code,
            name=_to_str(data.get("name"), default=code),
            status=_to_str(data.get("status"), default="unknown"),
            metrics=MeasurementMetrics.from_dict(data.get("ooni")),
            incidents=[IncidentSummary.from_dict(item) for item in incidents]
            if isinstance(incidents, list)
            else [],
        )


@dataclass(slots=True, frozen=True)
class StatusSummary:
    full_outage: int = 0
    partial_outage: int = 0
    degraded: int = 0
    normal: int = 0
    unknown: int = 0

    @classmethod
    def from_dict(cls, raw: Any) -> "StatusSummary":
        data = _as_dict(raw)
        return cls(
            full_outage=_to_int(data.get("fullOutage")),
            partial_outage=_to_int(data.get("partialOutage")),
            degraded=_to_int(data.get("degraded")),
            normal=_to_int(data.get("normal")),
            unknown=_to_int(data.get("unknown")),
        )


@dataclass(slots=True, frozen=True)
class IndexSnapshot:
    timestamp: str
    summary: StatusSummary
    countries: List[CountryRecord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> "IndexSnapshot":
        data = _as_dict(raw)
        countries = data.get("countries")
        return cls(
            timestamp=_to_str(data.get("timestamp")),
            summary=StatusSummary.from_dict(data.get("summary")),
            countries=[CountryRecord.from_dict(item) for item in countries]
            if isinstance(countries, list)
            else [],
        )


@dataclass(slots=True, frozen=True)
class IncidentFeed:
    count: int
    incidents: List[IncidentDetail] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> "IncidentFeed":
        data = _as_dict(raw)
        raw_incidents = data.get("incidents")
        incidents = (
            [IncidentDetail.from_dict(item) for item in raw_incidents]
            if isinstance(raw_incidents, list)
            else []
        )
        return cls(count=_to_int(data.get("count"), default=len(incidents)), incidents=incidents)
