"""Data: Yahoo chart client, CSV loader, upstream enrichment, response cache."""

from crossvision.data.yahoo import YahooFinanceClient
from crossvision.data.loader import load_csv
from crossvision.data.enrich import add_fundamentals, add_volume_flow
from crossvision.data.cache import ResponseCache, cache_key

__all__ = [
    "YahooFinanceClient",
    "load_csv",
    "add_fundamentals",
    "add_volume_flow",
    "ResponseCache",
    "cache_key",
]
