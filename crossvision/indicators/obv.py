"""
On-balance volume and its smoothed baseline.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from crossvision.core.errors import require_points
from crossvision.core.types import ObvTrend
from crossvision.indicators.ema import ema

OBV_EMA_PERIOD = 10


def calculate_obv(df: pd.DataFrame) -> pd.Series:
    """obv[0] = volume[0]; then +volume on a higher close, -volume on a lower close, unchanged otherwise."""
    require_points(df, "calculate_obv")
    direction = np.sign(df["close"].diff()).fillna(0.0)
    flow = direction * df["volume"]
    flow.iloc[0] = df["volume"].iloc[0]
    return flow.cumsum().rename("obv")


def obv_trend(df: pd.DataFrame, period: int = OBV_EMA_PERIOD) -> ObvTrend:
    """OBV, EMA(OBV, period) seeded at obv[0], and obv - ema_obv."""
    obv = calculate_obv(df)
    ema_obv = pd.Series(ema(obv.to_numpy(), period), index=obv.index, name="ema_obv")
    slope = (obv - ema_obv).rename("obv_slope")
    return ObvTrend(obv=obv, ema_obv=ema_obv, obv_slope=slope)
