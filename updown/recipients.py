from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from .net_http import HttpClient
from .serde import from_dict, to_payload


class RecipientType(str, Enum):
    EMAIL = "email"
    SMS = "sms"
    TELEGRAM = "telegram"
    SLACK = "slack"
    WEBHOOK = "webhook"
    ZAPIER = "zapier"


@dataclass(slots=True)
class Recipient:
    id: str = ""
    type: RecipientType | str = ""
    value: str = ""
    name: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Recipient":
        rec = from_dict(cls, data)
        try:
            rec.type = RecipientType(rec.type)
        except ValueError:
            # newer channel types are kept as plain strings
            pass
        return rec


@dataclass(slots=True)
class RecipientItem:
    type: RecipientType | str | None = None
    value: str | None = None
    name: str | None = None


class RecipientService:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(self) -> List[Recipient]:
        doc = self._http.get_json("recipients") or []
        return [Recipient.from_api(item) for item in doc]

    def add(self, data: RecipientItem) -> Recipient:
        return Recipient.from_api(self._http.post_json("recipients", to_payload(data)) or {})

    def remove(self, recipient_id: str) -> bool:
        doc = self._http.delete_json(f"recipients/{recipient_id}") or {}
        return bool(doc.get("deleted", False))
