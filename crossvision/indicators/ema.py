"""
Seeded exponential moving average, emitted from the first bar (no warm-up gap).
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from crossvision.core.errors import EmptySeriesError, require_points


def ema(values: np.ndarray, period: int) -> np.ndarray:
    """ema[0] = x[0]; ema[i] = (x[i] - ema[i-1]) * 2/(period+1) + ema[i-1]."""
    if period < 1:
        raise ValueError(f"EMA period must be >= 1, got {period}")
    x = np.asarray(values, dtype=float)
    if len(x) == 0:
        raise EmptySeriesError("ema")
    out = np.empty_like(x)
    k = 2.0 / (period + 1)
    prev = x[0]
    for i in range(len(x)):
        prev = (x[i] - prev) * k + prev
        out[i] = prev
    return out


def ema_column(period: int) -> str:
    return f"ema{period}"


def calculate_ema(df: pd.DataFrame, period: int, column: str = "close") -> pd.Series:
    """EMA of df[column], named ema<period>."""
    require_points(df, "calculate_ema")
    values = ema(df[column].to_numpy(dtype=float), period)
    return pd.Series(values, index=df.index, name=ema_column(period))
