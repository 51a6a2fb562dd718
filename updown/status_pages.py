from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .net_http import HttpClient
from .serde import from_dict, to_payload


@dataclass(slots=True)
class StatusPage:
    token: str = ""
    url: str = ""
    name: str = ""
    description: str = ""
    visibility: str = ""
    access_key: str = ""
    checks: List[str] = field(default_factory=list)


@dataclass(slots=True)
class StatusPageItem:
    # check tokens shown on the page, order is respected
    checks: List[str] | None = None
    name: str | None = None
    # displayed below the name, supports newlines and links
    description: str | None = None
    # 'public', 'protected' or 'private'
    visibility: str | None = None
    # only used by protected pages
    access_key: str | None = None


def path_for_status_page(token: str) -> str:
    return f"status_pages/{token}"


def _page(doc: Dict[str, Any] | None) -> StatusPage:
    page = from_dict(StatusPage, doc)
    page.checks = page.checks or []
    return page


class StatusPageService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(self) -> List[StatusPage]:
        return [_page(item) for item in self._http.get_json("status_pages") or []]

    def get(self, token: str) -> StatusPage:
        return _page(self._http.get_json(path_for_status_page(token)))

    def add(self, data: StatusPageItem) -> StatusPage:
        return _page(self._http.post_json("status_pages", to_payload(data)))

    def update(self, token: str, data: StatusPageItem) -> StatusPage:
        return _page(self._http.put_json(path_for_status_page(token), to_payload(data)))

    def remove(self, token: str) -> bool:
        doc = self._http.delete_json(path_for_status_page(token)) or {}
        return bool(doc.get("deleted", False))
