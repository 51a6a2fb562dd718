from __future__ import annotations

from updown.config import Config


def make_cfg(**overrides) -> Config:
    values = dict(
        api_key="test-key-1234",
        base_url="https://updown.example/api/",
        timeout_s=5.0,
        user_agent="updown-python/test",
        max_retries=0,
        backoff_factor=0.0,
    )
    values.update(overrides)
    return Config(**values)


class DummyHttp:
    """Stands in for HttpClient: canned JSON per (method, path), records every call."""

    def __init__(self, routes: dict | None = None):
        self.routes = dict(routes or {})
        self.calls: list[tuple] = []

    def _reply(self, method: str, path: str, **kwargs):
        self.calls.append((method, path, kwargs))
        reply = self.routes[(method, path)]
        if isinstance(reply, Exception):
            raise reply
        return reply

    def get_json(self, path, params=None):
        return self._reply("GET", path, params=params)

    def post_json(self, path, payload=None):
        return self._reply("POST", path, payload=payload)

    def put_json(self, path, payload=None):
        return self._reply("PUT", path, payload=payload)

    def delete_json(self, path):
        return self._reply("DELETE", path)
