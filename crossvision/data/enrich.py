"""
Upstream per-bar enrichment: valuation ratios from current fundamentals and
relative-volume flow coloring. Applied before the indicator pipeline.
"""

from __future__ import annotations
from typing import Optional

import numpy as np
import pandas as pd

VOLUME_MA_WINDOW = 20
VOLUME_FLOW_COLORS = {
    "surge": "#064e3b",
    "active": "#059669",
    "normal": "#d1d5db",
    "dry": "#dc2626",
}


def add_fundamentals(df: pd.DataFrame, eps: Optional[float], book_value: Optional[float]) -> pd.DataFrame:
    """New frame with pe = close/eps and pb = close/book_value (None when unavailable)."""
    out = df.copy()
    out["pe"] = out["close"] / eps if eps else None
    out["pb"] = out["close"] / book_value if book_value else None
    return out


def add_volume_flow(df: pd.DataFrame) -> pd.DataFrame:
    """
    volume_ma20: mean of up to the last 20 volumes (0 on the first bar),
    volume_ratio: volume / volume_ma20 (1 when the average is 0),
    volume_flow_color: >1.5 surge, >1.2 active, <0.5 dry, else normal.
    """
    out = df.copy()
    ma = out["volume"].fillna(0).rolling(VOLUME_MA_WINDOW, min_periods=1).mean()
    ma.iloc[0] = 0.0
    volume = out["volume"].to_numpy(dtype=float)
    ma_values = ma.to_numpy(dtype=float)
    ratio = pd.Series(
        np.divide(volume, ma_values, out=np.ones(len(out)), where=ma_values > 0),
        index=out.index,
    )
    out["volume_ma20"] = ma
    out["volume_ratio"] = ratio
    out["volume_flow_color"] = np.select(
        [ratio > 1.5, ratio > 1.2, ratio < 0.5],
        [VOLUME_FLOW_COLORS["surge"], VOLUME_FLOW_COLORS["active"], VOLUME_FLOW_COLORS["dry"]],
        default=VOLUME_FLOW_COLORS["normal"],
    )
    return out
