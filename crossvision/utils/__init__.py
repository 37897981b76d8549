"""Utils: interval helpers."""

from crossvision.utils.timeframes import interval_minutes, is_scanner_interval, cache_ttl_seconds

__all__ = ["interval_minutes", "is_scanner_interval", "cache_ttl_seconds"]
