"""
Cumulative VWAP. Runs over the whole series and never resets per session.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from crossvision.core.errors import require_points


def typical_price(df: pd.DataFrame) -> pd.Series:
    return (df["high"] + df["low"] + df["close"]) / 3.0


def calculate_vwap(df: pd.DataFrame) -> pd.Series:
    """
    VWAP[i] = sum(tp * volume)[0..i] / sum(volume)[0..i].
    NaN while cumulative volume is still exactly zero.
    """
    require_points(df, "calculate_vwap")
    pv = (typical_price(df) * df["volume"]).cumsum()
    cumv = df["volume"].cumsum()
    vwap = pv / cumv.replace(0, np.nan)
    return vwap.rename("vwap")
