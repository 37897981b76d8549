"""
Yahoo Finance bars and fundamentals via yfinance, with retry on rate limits.
Returns OHLCV frames in the shape normalize_series expects.
"""

from __future__ import annotations
import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Optional

import pandas as pd
import yfinance as yf
from yfinance.exceptions import YFRateLimitError

logger = logging.getLogger("crossvision.data.yahoo")

# Yahoo serves hourly bars for roughly the last two years only.
HOURLY_LOOKBACK_DAYS = 720
OHLCV = ["open", "high", "low", "close", "volume"]


def retry_on_rate_limit(max_retries: int = 3, base_delay: float = 1.0):
    """Decorator: retry on Yahoo rate limiting with exponential backoff."""
    def decorator(f):
        def wrapped(*args, **kwargs):
            last_exc = None
            for attempt in range(max_retries):
                try:
                    return f(*args, **kwargs)
                except YFRateLimitError as e:
                    last_exc = e
                    if attempt < max_retries - 1:
                        delay = base_delay * (2 ** attempt)
                        logger.warning("Rate limited, retry in %.1fs (attempt %d)", delay, attempt + 1)
                        time.sleep(delay)
                    else:
                        raise
            raise last_exc
        return wrapped
    return decorator


def _history_to_frame(hist: pd.DataFrame) -> pd.DataFrame:
    """Ticker.history frame (Date/Datetime index, capitalised columns) -> time + OHLCV, naive UTC."""
    df = hist.reset_index()
    df.columns = [str(c).lower().replace(" ", "_") for c in df.columns]
    df = df.rename(columns={df.columns[0]: "time"})
    times = pd.to_datetime(df["time"], utc=True).dt.tz_localize(None)
    out = pd.DataFrame({"time": times})
    for col in OHLCV:
        out[col] = df[col].astype(float)
    return out[out["close"].notna()].reset_index(drop=True)


class YahooFinanceClient:
    """Fetches chart bars and best-effort fundamentals."""

    def __init__(self, timeout: float = 10.0):
        self.timeout = timeout

    @staticmethod
    def effective_start(interval: str, start: str, today: Optional[datetime] = None) -> str:
        """Hourly requests are clamped to the last HOURLY_LOOKBACK_DAYS days."""
        if interval != "1h":
            return start
        today = today or datetime.now(timezone.utc)
        return (today - timedelta(days=HOURLY_LOOKBACK_DAYS)).strftime("%Y-%m-%d")

    @retry_on_rate_limit(max_retries=3, base_delay=1.0)
    def get_chart(self, symbol: str, interval: str = "1d", start: str = "2020-01-01") -> pd.DataFrame:
        """OHLCV DataFrame with columns: time, open, high, low, close, volume. Bars without a close are dropped."""
        start = self.effective_start(interval, start)
        ticker = yf.Ticker(symbol)
        hist = ticker.history(start=start, interval=interval, auto_adjust=False, timeout=self.timeout)
        if hist is None or hist.empty:
            raise ValueError(f"No data found for {symbol}")
        df = _history_to_frame(hist)
        meta = getattr(ticker, "history_metadata", None) or {}
        df.attrs["symbol"] = meta.get("symbol", symbol)
        df.attrs["currency"] = meta.get("currency")
        logger.info("Fetched %d %s bars for %s since %s", len(df), interval, symbol, start)
        return df

    def get_fundamentals(self, symbol: str) -> dict:
        """EPS and book value per share from Ticker.info; None values when unavailable."""
        out = {"eps": None, "book_value": None}
        try:
            info = yf.Ticker(symbol).info or {}
        except Exception as e:
            logger.warning("Fundamentals fetch failed for %s: %s", symbol, e)
            return out
        out["eps"] = info.get("trailingEps") or info.get("epsTrailingTwelveMonths") or info.get("forwardEps") or None
        book = info.get("bookValue")
        price = info.get("currentPrice") or info.get("regularMarketPrice")
        if not book and info.get("priceToBook") and price:
            book = price / info["priceToBook"]
        out["book_value"] = book or None
        return out
