from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .checks import path_for_token
from .net_http import HttpClient
from .serde import from_dict


@dataclass(slots=True)
class Downtime:
    id: str = ""
    error: str | None = None
    started_at: str | None = None
    ended_at: str | None = None
    duration: int | None = None
    partial: bool = False


class DowntimeService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(self, token: str, page: int = 1) -> List[Downtime]:
        """Downtimes of one check, newest first, 100 per page (pages start at 1)."""
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        doc = self._http.get_json(f"{path_for_token(token)}/downtimes", params={"page": page}) or []
        return [from_dict(Downtime, item) for item in doc]
