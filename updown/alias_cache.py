from __future__ import annotations

import threading
from typing import Callable, Dict, Iterable, Protocol

from .errors import TokenNotFoundError


class AliasRecord(Protocol):
    alias: str
    token: str


class AliasCache:
    """
    Alias -> token lookup filled from a full check listing.

    A miss triggers exactly one call to ``fetch``; the mapping is then replaced
    wholesale from the returned records (later duplicates win) and consulted
    again. Entries never expire. Fetch errors propagate untouched and leave the
    previous mapping in place.

    The whole check -> fetch -> rebuild -> re-check sequence runs under one lock,
    so a caller queued behind an in-flight fetch sees its result instead of
    issuing another one.
    """

    def __init__(
        self,
        fetch: Callable[[], Iterable[AliasRecord]],
        log_fn: Callable[[str], None] | None = None,
    ) -> None:
        self._fetch = fetch
        self._log = log_fn
        self._tokens: Dict[str, str] = {}
        self._populated = False
        self._lock = threading.Lock()

    @property
    def populated(self) -> bool:
        with self._lock:
            return self._populated

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    def __contains__(self, alias: object) -> bool:
        with self._lock:
            return alias in self._tokens

    def get(self, alias: str) -> str | None:
        """Cached token for ``alias`` without touching the network."""
        with self._lock:
            return self._tokens.get(alias)

    def resolve(self, alias: str) -> str:
        with self._lock:
            token = self._tokens.get(alias)
            if token is not None:
                return token

            records = self._fetch()
            rebuilt: Dict[str, str] = {}
            for rec in records:
                rebuilt[rec.alias] = rec.token
            self._tokens = rebuilt
            self._populated = True
            if self._log is not None:
                self._log(f"[alias-cache] rebuilt with {len(rebuilt)} aliases")

            token = self._tokens.get(alias)
        if token is None:
            raise TokenNotFoundError(alias)
        return token
