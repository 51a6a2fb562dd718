from __future__ import annotations

import email.utils
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Optional
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter, Retry

from .config import Config
from .constants import API_KEY_HEADER, IDEMPOTENT_METHODS, RETRY_STATUSES
from .errors import DecodeError, RateLimitError, TransportError, error_for_status


def _default_logger(msg: str) -> None:
    print(msg)


class HttpClient:
    """
    Authenticated JSON transport for the updown API:
    - one requests.Session per thread, API key sent on every request
    - 5xx retried by the adapter for idempotent verbs; 429 and other 4xx raised as typed errors
    """

    def __init__(
        self,
        cfg: Config,
        api_key: str | None = None,
        log_fn: Callable[[str], None] | None = None,
    ) -> None:
        self._cfg = cfg
        self._api_key = api_key if api_key is not None else cfg.api_key
        self._log = log_fn or _default_logger
        self._local = threading.local()

    def _build_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            "User-Agent": self._cfg.user_agent,
            "Accept": "application/json",
            API_KEY_HEADER: self._api_key or "",
        })
        adapter = HTTPAdapter(
            max_retries=Retry(
                total=self._cfg.max_retries,
                backoff_factor=self._cfg.backoff_factor,
                status_forcelist=sorted(RETRY_STATUSES),
                allowed_methods=IDEMPOTENT_METHODS,
                # hand the last 5xx back so it maps to ApiError
                raise_on_status=False,
            ),
        )
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        return session

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._build_session()
            self._local.session = session
        return session

    def url_for(self, path: str) -> str:
        return urljoin(self._cfg.base_url, path.lstrip("/"))

    def request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        payload: Any = None,
    ) -> Any:
        url = self.url_for(path)
        query = {k: v for k, v in (params or {}).items() if v is not None and v != ""}
        try:
            r = self._session().request(
                method,
                url,
                params=query or None,
                json=payload,
                timeout=self._cfg.timeout_s,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url}: {e}") from e

        status = r.status_code
        if status >= 400:
            raise self._error_from_response(method, url, r)

        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            raise DecodeError(f"{method} {url}: invalid JSON in {status} response") from e

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request_json("GET", path, params=params)

    def post_json(self, path: str, payload: Any = None) -> Any:
        return self.request_json("POST", path, payload=payload)

    def put_json(self, path: str, payload: Any = None) -> Any:
        return self.request_json("PUT", path, payload=payload)

    def delete_json(self, path: str) -> Any:
        return self.request_json("DELETE", path)

    def _error_from_response(self, method: str, url: str, r: requests.Response) -> Exception:
        status = r.status_code
        try:
            body: Any = r.json()
        except ValueError:
            body = r.text or None

        # Log short response body (helps debugging)
        snippet = (r.text or "")[:600]
        self._log(f"[updown] {method} {status} error: {snippet}")

        msg = r.reason or ""
        if isinstance(body, dict) and body.get("error"):
            msg = str(body["error"])
        elif isinstance(body, str) and body:
            msg = body
        message = f"{method} {url}: {status} {msg}".rstrip()

        cls = error_for_status(status)
        if cls is RateLimitError:
            retry_after_hdr = r.headers.get("Retry-After")
            retry_after = _parse_retry_after(retry_after_hdr) if retry_after_hdr else None
            return RateLimitError(
                message, retry_after=retry_after, status_code=status, body=body, method=method, url=url
            )
        return cls(message, status_code=status, body=body, method=method, url=url)


def _parse_retry_after(value: str) -> Optional[float]:
    # Either seconds or HTTP-date
    value = value.strip()
    try:
        sec = float(value)
        # simple seconds value
        return max(0.0, sec)
    except ValueError:
        pass
    try:
        dt = email.utils.parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    now = datetime.now(timezone.utc)
    delta = (dt - now).total_seconds()
    return max(0.0, delta)
