"""Interval string helpers: minutes, scanner eligibility, cache TTLs."""

SCANNER_INTERVALS = ("1d", "1wk")

CACHE_TTL_SECONDS = {
    "1h": 15 * 60,
    "1d": 60 * 60,
    "1wk": 24 * 60 * 60,
}


def interval_minutes(interval: str) -> int:
    """Convert an interval (e.g. '5m', '1h', '1d', '1wk') to minutes."""
    tf = interval.strip().lower()
    if tf.endswith("wk"):
        return int(tf[:-2]) * 60 * 24 * 7
    if tf.endswith("m"):
        return int(tf[:-1])
    if tf.endswith("h"):
        return int(tf[:-1]) * 60
    if tf.endswith("d"):
        return int(tf[:-1]) * 60 * 24
    raise ValueError(f"Unsupported interval: {interval}")


def is_scanner_interval(interval: str) -> bool:
    """Golden-cross what-if only runs on daily and weekly bars."""
    return interval.strip().lower() in SCANNER_INTERVALS


def cache_ttl_seconds(interval: str) -> int:
    """Response cache TTL for an interval; unknown intervals use the daily TTL."""
    return CACHE_TTL_SECONDS.get(interval.strip().lower(), CACHE_TTL_SECONDS["1d"])
