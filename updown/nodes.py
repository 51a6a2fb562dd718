from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .net_http import HttpClient
from .serde import from_dict


@dataclass(slots=True)
class Node:
    ip: str = ""
    ip6: str = ""
    city: str = ""
    country: str = ""
    country_code: str = ""
    lat: float | None = None
    lng: float | None = None


class NodeService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(self) -> Dict[str, Node]:
        doc = self._http.get_json("nodes") or {}
        return {name: from_dict(Node, item) for name, item in doc.items()}

    def list_ipv4(self) -> List[str]:
        return list(self._http.get_json("nodes/ipv4") or [])

    def list_ipv6(self) -> List[str]:
        return list(self._http.get_json("nodes/ipv6") or [])
