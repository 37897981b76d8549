"""Builders for OHLCV test frames."""

import numpy as np
import pandas as pd


def make_bars(closes, volumes=None, start="2024-01-01", freq="D", spread=1.0):
    """Daily frame: open=close, high/low = close -/+ spread."""
    closes = np.asarray(closes, dtype=float)
    n = len(closes)
    if volumes is None:
        volumes = np.full(n, 1000.0)
    return pd.DataFrame({
        "time": pd.date_range(start, periods=n, freq=freq),
        "open": closes,
        "high": closes + spread,
        "low": closes - spread,
        "close": closes,
        "volume": np.asarray(volumes, dtype=float),
        "is_synthetic": False,
    })
