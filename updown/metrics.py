from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .constants import METRIC_GROUPS
from .net_http import HttpClient
from .serde import from_dict


@dataclass(slots=True)
class ResponseTimes:
    under125: int = 0
    under250: int = 0
    under500: int = 0
    under1000: int = 0
    under2000: int = 0
    under4000: int = 0


@dataclass(slots=True)
class Requests:
    samples: int = 0
    failures: int = 0
    satisfied: int = 0
    tolerated: int = 0
    by_response_time: ResponseTimes = field(default_factory=ResponseTimes)


@dataclass(slots=True)
class Timings:
    redirect: int = 0
    namelookup: int = 0
    connection: int = 0
    handshake: int = 0
    response: int = 0
    total: int = 0


@dataclass(slots=True)
class Host:
    ip: str = ""
    city: str = ""
    country: str = ""
    country_code: str = ""


@dataclass(slots=True)
class Metric:
    apdex: float = 0.0
    requests: Requests = field(default_factory=Requests)
    timings: Timings = field(default_factory=Timings)
    host: Host | None = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Metric":
        data = data or {}
        req = data.get("requests") or {}
        return cls(
            apdex=float(data.get("apdex") or 0.0),
            requests=Requests(
                samples=int(req.get("samples") or 0),
                failures=int(req.get("failures") or 0),
                satisfied=int(req.get("satisfied") or 0),
                tolerated=int(req.get("tolerated") or 0),
                by_response_time=from_dict(ResponseTimes, req.get("by_response_time")),
            ),
            timings=from_dict(Timings, data.get("timings")),
            host=from_dict(Host, data["host"]) if data.get("host") else None,
        )


class MetricService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(
        self, token: str, group: str = "", from_: str = "", to: str = ""
    ) -> Dict[str, Metric] | Metric:
        """
        Metrics of one check keyed by time bucket (group="time") or by
        node name (group="host"). Without a group the API aggregates the
        whole period into a single Metric. ``from_``/``to`` are passed
        through as-is; empty values let the API pick its defaults.
        """
        if group and group not in METRIC_GROUPS:
            raise ValueError(f"group must be one of {sorted(METRIC_GROUPS)}, got {group!r}")
        params = {"group": group, "from": from_, "to": to}
        doc = self._http.get_json(f"checks/{token}/metrics", params=params) or {}
        if not group:
            return Metric.from_api(doc)
        return {key: Metric.from_api(item) for key, item in doc.items()}
