"""
In-memory response cache keyed by (symbol, interval, start) with interval-dependent TTLs.
"""

from __future__ import annotations
import logging
import time
from typing import Any, Callable, Dict, Optional, Tuple

from crossvision.utils.timeframes import cache_ttl_seconds

logger = logging.getLogger("crossvision.data.cache")


def cache_key(symbol: str, interval: str, start: str) -> str:
    return f"{symbol}_{interval}_{start}"


class ResponseCache:
    """
    Stores (payload, stored_at, ttl) per key. clock defaults to time.time.
    Expired entries are dropped on lookup and on every set.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        self._clock = clock or time.time
        self._entries: Dict[str, Tuple[Any, float, int]] = {}

    def get(self, symbol: str, interval: str, start: str) -> Optional[Any]:
        key = cache_key(symbol, interval, start)
        entry = self._entries.get(key)
        if entry is None:
            return None
        payload, stored_at, ttl = entry
        if self._clock() - stored_at >= ttl:
            del self._entries[key]
            logger.debug("Cache expired for %s", key)
            return None
        logger.debug("Cache hit for %s", key)
        return payload

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, (_, stored_at, ttl) in self._entries.items() if now - stored_at >= ttl]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Purged %d expired cache entries", len(expired))

    def set(self, symbol: str, interval: str, start: str, payload: Any) -> None:
        now = self._clock()
        self._purge_expired(now)
        self._entries[cache_key(symbol, interval, start)] = (payload, now, cache_ttl_seconds(interval))

    def get_or_compute(self, symbol: str, interval: str, start: str, compute: Callable[[], Any]) -> Any:
        payload = self.get(symbol, interval, start)
        if payload is None:
            payload = compute()
            self.set(symbol, interval, start, payload)
        return payload

    def __len__(self) -> int:
        return len(self._entries)
