from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import DEFAULT_BASE_URL, DEFAULT_USER_AGENT


def _as_float(val: str | None, default: float) -> float:
    if val is None or not str(val).strip():
        return default
    return float(val)


def _as_int(val: str | None, default: int) -> int:
    if val is None or not str(val).strip():
        return default
    return int(val)


@dataclass(slots=True)
class Config:
    # API
    api_key: str
    base_url: str

    # Transport
    timeout_s: float
    user_agent: str
    max_retries: int
    backoff_factor: float

    @staticmethod
    def load(env_path: str | None = None, override: bool = False) -> "Config":
        load_dotenv(dotenv_path=env_path, override=override)

        api_key = os.getenv("UPDOWN_API_KEY", "")
        base_url = os.getenv("UPDOWN_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL
        # relative paths are joined onto the base, so it must end with a slash
        if not base_url.endswith("/"):
            base_url += "/"

        timeout_s = max(0.1, _as_float(os.getenv("UPDOWN_TIMEOUT_S"), 20.0))
        user_agent = os.getenv("UPDOWN_USER_AGENT", DEFAULT_USER_AGENT)
        max_retries = max(0, _as_int(os.getenv("UPDOWN_MAX_RETRIES"), 2))
        backoff_factor = max(0.0, _as_float(os.getenv("UPDOWN_BACKOFF_FACTOR"), 0.4))

        return Config(
            api_key=api_key,
            base_url=base_url,
            timeout_s=timeout_s,
            user_agent=user_agent,
            max_retries=max_retries,
            backoff_factor=backoff_factor,
        )
