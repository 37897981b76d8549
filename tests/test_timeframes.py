"""Unit tests for utils.timeframes."""

import pytest
from crossvision.utils.timeframes import interval_minutes, is_scanner_interval, cache_ttl_seconds


def test_interval_minutes():
    assert interval_minutes("5m") == 5
    assert interval_minutes("1h") == 60
    assert interval_minutes("1d") == 1440
    assert interval_minutes("1wk") == 10080


def test_interval_invalid():
    with pytest.raises(ValueError):
        interval_minutes("1x")


def test_scanner_intervals():
    assert is_scanner_interval("1d")
    assert is_scanner_interval("1wk")
    assert not is_scanner_interval("1h")


def test_cache_ttl():
    assert cache_ttl_seconds("1h") == 15 * 60
    assert cache_ttl_seconds("1d") == 60 * 60
    assert cache_ttl_seconds("1wk") == 24 * 60 * 60
    assert cache_ttl_seconds("1mo") == 60 * 60
