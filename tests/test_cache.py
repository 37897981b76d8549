"""Unit tests for data.cache."""

from crossvision.data.cache import ResponseCache, cache_key


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def test_cache_key():
    assert cache_key("AAPL", "1d", "2020-01-01") == "AAPL_1d_2020-01-01"


def test_hit_then_expire_hourly():
    clock = FakeClock()
    cache = ResponseCache(clock=clock)
    cache.set("AAPL", "1h", "2020-01-01", {"data": [1]})
    clock.now = 14 * 60
    assert cache.get("AAPL", "1h", "2020-01-01") == {"data": [1]}
    clock.now = 15 * 60
    assert cache.get("AAPL", "1h", "2020-01-01") is None
    assert len(cache) == 0


def test_weekly_lives_a_day():
    clock = FakeClock()
    cache = ResponseCache(clock=clock)
    cache.set("MSFT", "1wk", "2020-01-01", "payload")
    clock.now = 23 * 3600
    assert cache.get("MSFT", "1wk", "2020-01-01") == "payload"


def test_get_or_compute_calls_once():
    cache = ResponseCache(clock=FakeClock())
    calls = []

    def compute():
        calls.append(1)
        return "fresh"

    assert cache.get_or_compute("AAPL", "1d", "2020-01-01", compute) == "fresh"
    assert cache.get_or_compute("AAPL", "1d", "2020-01-01", compute) == "fresh"
    assert len(calls) == 1


def test_set_purges_expired_entries():
    clock = FakeClock()
    cache = ResponseCache(clock=clock)
    for i in range(100):
        cache.set(f"SYM{i}", "1h", "2020-01-01", i)
    cache.set("KEEP", "1wk", "2020-01-01", "weekly")
    assert len(cache) == 101
    clock.now = 16 * 60
    cache.set("AAPL", "1d", "2020-01-01", "fresh")
    assert len(cache) == 2
    assert cache.get("KEEP", "1wk", "2020-01-01") == "weekly"
    clock.now = 1e6
    cache.set("MSFT", "1d", "2020-01-01", "new")
    assert len(cache) == 1
