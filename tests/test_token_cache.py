import threading
import time

import pytest

from moodtunes.src.errors import ProviderUnavailable
from moodtunes.src.services.client_credentials import TokenCache


class Clock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def counting_fetch(tokens, expires_in=120):
    calls = []

    def fetch():
        calls.append(1)
        return tokens[len(calls) - 1], expires_in

    return fetch, calls


def test_token_is_reused_until_expiry_minus_skew():
    clock = Clock()
    fetch, calls = counting_fetch(["a", "b"])
    cache = TokenCache(fetch, skew_seconds=60, clock=clock)

    assert cache.token() == "a"
    clock.now += 59
    assert cache.token() == "a"
    assert cache.valid
    clock.now += 2
    assert not cache.valid
    assert cache.token() == "b"
    assert len(calls) == 2


def test_invalidate_forces_refresh():
    fetch, calls = counting_fetch(["a", "b"], expires_in=3600)
    cache = TokenCache(fetch, clock=Clock())
    cache.token()
    cache.invalidate()
    assert cache.token() == "b"
    assert len(calls) == 2


def test_fetch_errors_become_provider_unavailable():
    def fetch():
        raise ConnectionError("dns")

    cache = TokenCache(fetch)
    with pytest.raises(ProviderUnavailable):
        cache.token()
    assert not cache.valid


def test_empty_token_is_rejected():
    cache = TokenCache(lambda: (None, 3600))
    with pytest.raises(ProviderUnavailable):
        cache.token()


def test_concurrent_callers_share_one_refresh():
    calls = []

    def slow_fetch():
        calls.append(1)
        time.sleep(0.05)
        return "shared", 3600

    cache = TokenCache(slow_fetch)
    results = []
    threads = [threading.Thread(target=lambda: results.append(cache.token())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == ["shared"] * 8
    assert len(calls) == 1
