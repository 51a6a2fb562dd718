from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from .alias_cache import AliasCache
from .metrics import Metric
from .net_http import HttpClient
from .serde import from_dict, to_payload


@dataclass(slots=True)
class SSL:
    tested_at: str | None = None
    expires_at: str | None = None
    valid: bool = False
    error: str | None = None


@dataclass(slots=True)
class Check:
    token: str = ""
    url: str = ""
    alias: str = ""
    type: str = "http"
    last_status: int | None = None
    uptime: float | None = None
    down: bool = False
    down_since: str | None = None
    up_since: str | None = None
    error: str | None = None
    period: int | None = None
    apdex_t: float | None = None
    string_match: str = ""
    enabled: bool = True
    published: bool = False
    disabled_locations: List[str] = field(default_factory=list)
    recipients: List[str] = field(default_factory=list)
    last_check_at: str | None = None
    next_check_at: str | None = None
    created_at: str | None = None
    mute_until: str | None = None
    favicon_url: str | None = None
    custom_headers: Dict[str, str] = field(default_factory=dict)
    http_verb: str | None = None
    http_body: str | None = None
    ssl: SSL | None = None
    metrics: Metric | None = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Check":
        check = from_dict(cls, data)
        # the API sends null for unset strings/collections
        check.alias = check.alias or ""
        check.string_match = check.string_match or ""
        check.disabled_locations = check.disabled_locations or []
        check.recipients = check.recipients or []
        check.custom_headers = check.custom_headers or {}
        if isinstance(check.ssl, dict):
            check.ssl = from_dict(SSL, check.ssl)
        if isinstance(check.metrics, dict):
            check.metrics = Metric.from_api(check.metrics)
        return check


@dataclass(slots=True)
class CheckItem:
    """Fields accepted when creating or updating a check; None means "leave unset"."""

    url: str | None = None
    type: str | None = None
    alias: str | None = None
    period: int | None = None
    apdex_t: float | None = None
    enabled: bool | None = None
    published: bool | None = None
    string_match: str | None = None
    mute_until: str | None = None
    http_verb: str | None = None
    http_body: str | None = None
    disabled_locations: List[str] | None = None
    recipients: List[str] | None = None
    custom_headers: Dict[str, str] | None = None


def path_for_token(token: str) -> str:
    return f"checks/{token}"


class CheckService:
    """Checks API, plus alias -> token resolution backed by an AliasCache."""

    def __init__(self, http: HttpClient, log_fn: Callable[[str], None] | None = None) -> None:
        self._http = http
        self._aliases = AliasCache(self.list, log_fn=log_fn)

    def token_for_alias(self, alias: str) -> str:
        """
        Token of the check named ``alias``.

        Served from the cache when possible; otherwise lists all checks once
        and raises TokenNotFoundError if the alias is still unknown.
        """
        return self._aliases.resolve(alias)

    def list(self) -> List[Check]:
        doc = self._http.get_json("checks") or []
        return [Check.from_api(item) for item in doc]

    def get(self, token: str, metrics: bool = False) -> Check:
        params = {"metrics": "true"} if metrics else None
        return Check.from_api(self._http.get_json(path_for_token(token), params=params) or {})

    def add(self, data: CheckItem) -> Check:
        return Check.from_api(self._http.post_json("checks", to_payload(data)) or {})

    def update(self, token: str, data: CheckItem) -> Check:
        return Check.from_api(self._http.put_json(path_for_token(token), to_payload(data)) or {})

    def remove(self, token: str) -> bool:
        doc = self._http.delete_json(path_for_token(token)) or {}
        return bool(doc.get("deleted", False))
