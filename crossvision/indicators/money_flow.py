"""
Composite money-flow score: OBV deviation from its EMA blended with a 14-bar MFI,
mapped to 0..100 and banded into five colors.

The weights and band cutoffs are calibrated constants; changing them changes
what the displayed signal means.
"""

from __future__ import annotations
import logging
from typing import Optional

import numpy as np
import pandas as pd

from crossvision.core.errors import require_points
from crossvision.core.types import MoneyFlowBand, ObvTrend, VolumeColor
from crossvision.indicators.obv import OBV_EMA_PERIOD, obv_trend
from crossvision.indicators.vwap import typical_price

logger = logging.getLogger("crossvision.indicators.money_flow")

MFI_PERIOD = 14
MFI_NEUTRAL = 50.0
MFI_NO_NEGATIVE_FLOW_RATIO = 100.0
OBV_WEIGHT = 0.6
MFI_WEIGHT = 0.4

# Inclusive lower bounds, evaluated top-down.
BAND_THRESHOLDS = (
    (70.0, MoneyFlowBand.STRONG_INFLOW),
    (55.0, MoneyFlowBand.ACCUMULATION),
    (45.0, MoneyFlowBand.NEUTRAL),
    (30.0, MoneyFlowBand.DISTRIBUTION),
)


def classify_score(score: float) -> MoneyFlowBand:
    """Map a 0..100 score to its band; first matching lower bound wins."""
    for lower, band in BAND_THRESHOLDS:
        if score >= lower:
            return band
    return MoneyFlowBand.STRONG_OUTFLOW


def calculate_mfi(df: pd.DataFrame, period: int = MFI_PERIOD) -> pd.Series:
    """
    Money Flow Index. Flow is tp * volume, classified by typical price vs the prior bar.
    Positions before `period` are exactly 50; zero negative flow gives a money ratio of 100.
    """
    require_points(df, "calculate_mfi")
    n = len(df)
    mfi = np.full(n, MFI_NEUTRAL)
    if n > period:
        tp = typical_price(df).to_numpy(dtype=float)
        flow = tp * df["volume"].to_numpy(dtype=float)
        rising = np.zeros(n, dtype=bool)
        falling = np.zeros(n, dtype=bool)
        rising[1:] = tp[1:] > tp[:-1]
        falling[1:] = tp[1:] < tp[:-1]
        pos_flow = np.where(rising, flow, 0.0)
        neg_flow = np.where(falling, flow, 0.0)
        # Window for position i covers bars i-period+1..i.
        pos_sum = np.lib.stride_tricks.sliding_window_view(pos_flow, period).sum(axis=1)[1:]
        neg_sum = np.lib.stride_tricks.sliding_window_view(neg_flow, period).sum(axis=1)[1:]
        safe_neg = np.where(neg_sum == 0, 1.0, neg_sum)
        ratio = np.where(neg_sum == 0, MFI_NO_NEGATIVE_FLOW_RATIO, pos_sum / safe_neg)
        mfi[period:] = 100.0 - 100.0 / (1.0 + ratio)
    return pd.Series(mfi, index=df.index, name="mfi")


def normalize_slope(slope: pd.Series) -> pd.Series:
    """Scale by max |slope| into [-1, 1]; a zero maximum leaves values unscaled."""
    max_abs = float(np.max(np.abs(slope.to_numpy(dtype=float))))
    if max_abs == 0 or np.isnan(max_abs):
        max_abs = 1.0
    return slope / max_abs


def volume_colors(df: pd.DataFrame) -> pd.Series:
    """Bar tint by close direction; first bar and unchanged closes are neutral."""
    change = df["close"].diff()
    colors = np.select(
        [change > 0, change < 0],
        [VolumeColor.UP.value, VolumeColor.DOWN.value],
        default=VolumeColor.NEUTRAL.value,
    )
    return pd.Series(colors, index=df.index, name="volume_color")


def calculate_money_flow(
    df: pd.DataFrame,
    trend: Optional[ObvTrend] = None,
    obv_ema_period: int = OBV_EMA_PERIOD,
    mfi_period: int = MFI_PERIOD,
    obv_weight: float = OBV_WEIGHT,
    mfi_weight: float = MFI_WEIGHT,
) -> pd.DataFrame:
    """
    Per-bar composite score. Returns a new frame with columns:
    obv, mfi, money_flow_score, money_flow_color, volume_color.
    Pass `trend` to reuse an already computed ObvTrend.
    """
    require_points(df, "calculate_money_flow")
    if trend is None:
        trend = obv_trend(df, obv_ema_period)
    slope = normalize_slope(trend.obv_slope)
    mfi = calculate_mfi(df, mfi_period)
    mfi_score = (mfi - MFI_NEUTRAL) / MFI_NEUTRAL
    composite = slope * obv_weight + mfi_score * mfi_weight
    score = (composite + 1.0) / 2.0 * 100.0

    values = score.to_numpy(dtype=float)
    bands = np.select(
        [values >= lower for lower, _ in BAND_THRESHOLDS],
        [band.value for _, band in BAND_THRESHOLDS],
        default=MoneyFlowBand.STRONG_OUTFLOW.value,
    )
    logger.debug("Money flow over %d bars, last score %.2f", len(df), values[-1])
    return pd.DataFrame(
        {
            "obv": trend.obv,
            "mfi": mfi,
            "money_flow_score": score,
            "money_flow_color": bands,
            "volume_color": volume_colors(df),
        },
        index=df.index,
    )
