from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T")


def from_dict(cls: Type[T], data: Dict[str, Any] | None) -> T:
    """Build dataclass ``cls`` from an API object, ignoring unknown keys."""
    data = data or {}
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in known})


def to_payload(item: Any) -> Dict[str, Any]:
    """Request body for a dataclass item: unset (None) fields are omitted."""
    if not is_dataclass(item):
        raise TypeError(f"expected a dataclass instance, got {type(item).__name__}")
    out: Dict[str, Any] = {}
    for f in fields(item):
        value = getattr(item, f.name)
        if value is None:
            continue
        if isinstance(value, Enum):
            value = value.value
        out[f.name] = value
    return out
