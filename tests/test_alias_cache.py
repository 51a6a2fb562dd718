import threading
import time
from dataclasses import dataclass

import pytest

from updown.alias_cache import AliasCache
from updown.errors import TokenNotFoundError, TransportError


@dataclass
class Rec:
    alias: str
    token: str


class DummyFetch:
    """Returns the next queued result on each call; exceptions are raised."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        result = self.results[min(self.calls, len(self.results)) - 1]
        if isinstance(result, Exception):
            raise result
        return result


def test_cold_cache_absent_alias_fetches_once_then_not_found():
    fetch = DummyFetch([Rec("A", "t1")])
    cache = AliasCache(fetch)

    with pytest.raises(TokenNotFoundError) as exc:
        cache.resolve("Z")

    assert fetch.calls == 1
    assert exc.value.alias == "Z"
    # the refill still happened
    assert cache.populated
    assert cache.get("A") == "t1"


def test_cold_cache_present_alias():
    fetch = DummyFetch([Rec("A", "t1")])
    cache = AliasCache(fetch)

    assert not cache.populated
    assert cache.resolve("A") == "t1"
    assert fetch.calls == 1


def test_warm_cache_does_not_fetch_again():
    fetch = DummyFetch([Rec("A", "t1")])
    cache = AliasCache(fetch)

    cache.resolve("A")
    assert cache.resolve("A") == "t1"
    assert cache.resolve("A") == "t1"
    assert fetch.calls == 1


def test_not_found_after_refill_is_terminal_per_call():
    fetch = DummyFetch([Rec("A", "t1")])
    cache = AliasCache(fetch)

    for _ in range(3):
        with pytest.raises(TokenNotFoundError):
            cache.resolve("missing")
    # one fetch per resolve call, never two
    assert fetch.calls == 3


def test_rebuild_replaces_instead_of_merging():
    fetch = DummyFetch([Rec("A", "t1")], [Rec("B", "t2")], [Rec("A", "t3")])
    cache = AliasCache(fetch)

    assert cache.resolve("A") == "t1"
    assert cache.resolve("B") == "t2"
    assert fetch.calls == 2
    assert "A" not in cache
    assert len(cache) == 1

    # "A" is gone, so this is a miss that refetches
    assert cache.resolve("A") == "t3"
    assert fetch.calls == 3


def test_fetch_failure_propagates_and_keeps_cache():
    boom = TransportError("GET https://updown.example/api/checks: connection refused")
    fetch = DummyFetch([Rec("A", "t1")], boom)
    cache = AliasCache(fetch)
    cache.resolve("A")

    with pytest.raises(TransportError) as exc:
        cache.resolve("B")

    assert exc.value is boom
    assert not isinstance(exc.value, TokenNotFoundError)
    assert fetch.calls == 2
    assert cache.get("A") == "t1"
    assert len(cache) == 1


def test_fetch_failure_on_cold_cache_leaves_it_empty():
    fetch = DummyFetch(RuntimeError("decode failed"))
    cache = AliasCache(fetch)

    with pytest.raises(RuntimeError):
        cache.resolve("A")
    assert not cache.populated
    assert len(cache) == 0


def test_duplicate_alias_last_record_wins():
    fetch = DummyFetch([Rec("A", "t1"), Rec("A", "t2")])
    cache = AliasCache(fetch)

    assert cache.resolve("A") == "t2"


def test_aliases_are_case_sensitive_and_literal():
    fetch = DummyFetch([Rec("Api", "t1"), Rec("", "t0"), Rec(" ", "tsp")])
    cache = AliasCache(fetch)

    assert cache.resolve("") == "t0"
    assert cache.resolve(" ") == "tsp"
    with pytest.raises(TokenNotFoundError):
        cache.resolve("api")


def test_rebuild_is_logged():
    logs = []
    cache = AliasCache(DummyFetch([Rec("A", "t1"), Rec("B", "t2")]), log_fn=logs.append)
    cache.resolve("A")
    assert logs == ["[alias-cache] rebuilt with 2 aliases"]


def test_concurrent_misses_share_one_fetch():
    class SlowFetch(DummyFetch):
        def __call__(self):
            time.sleep(0.05)
            return super().__call__()

    fetch = SlowFetch([Rec("A", "t1")])
    cache = AliasCache(fetch)
    results = []

    def worker():
        results.append(cache.resolve("A"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == ["t1"] * 8
    assert fetch.calls == 1
