"""
Indicator pipeline: normalize, then VWAP, money flow (with OBV), and the EMA pair,
each computed over the same input and joined into a new enriched frame.
"""

from __future__ import annotations
import logging
import warnings
from typing import Any, Callable, List, Optional

import numpy as np
import pandas as pd

from crossvision.core.errors import InsufficientHistoryWarning
from crossvision.core.types import WhatIfResult
from crossvision.indicators.ema import calculate_ema
from crossvision.indicators.money_flow import MFI_PERIOD, OBV_WEIGHT, MFI_WEIGHT, calculate_money_flow
from crossvision.indicators.normalize import normalize_series
from crossvision.indicators.obv import OBV_EMA_PERIOD, obv_trend
from crossvision.indicators.vwap import calculate_vwap
from crossvision.analysis.cross_scanner import simulate_golden_cross

logger = logging.getLogger("crossvision.indicators.pipeline")

EMA_FAST = 50
EMA_SLOW = 135


class IndicatorPipeline:
    """
    Pure composition of the calculators. Holds parameters only, no cached state.
    `projection` (optional) is called with the normalized frame and must return it
    with synthetic bars appended; indicators then run over the extended series.
    """

    def __init__(
        self,
        ema_fast: int = EMA_FAST,
        ema_slow: int = EMA_SLOW,
        obv_ema_period: int = OBV_EMA_PERIOD,
        mfi_period: int = MFI_PERIOD,
        obv_weight: float = OBV_WEIGHT,
        mfi_weight: float = MFI_WEIGHT,
    ):
        self.ema_fast = ema_fast
        self.ema_slow = ema_slow
        self.obv_ema_period = obv_ema_period
        self.mfi_period = mfi_period
        self.obv_weight = obv_weight
        self.mfi_weight = mfi_weight

    def compute_indicators(
        self,
        raw: Any,
        projection: Optional[Callable[[pd.DataFrame], pd.DataFrame]] = None,
    ) -> pd.DataFrame:
        df = normalize_series(raw)
        if projection is not None:
            df = normalize_series(projection(df))
        if len(df) < self.ema_slow:
            warnings.warn(
                f"{len(df)} bars is shorter than the slow EMA period ({self.ema_slow})",
                InsufficientHistoryWarning,
                stacklevel=2,
            )
        trend = obv_trend(df, self.obv_ema_period)
        flow = calculate_money_flow(
            df,
            trend=trend,
            mfi_period=self.mfi_period,
            obv_weight=self.obv_weight,
            mfi_weight=self.mfi_weight,
        )
        out = df.copy()
        out["vwap"] = calculate_vwap(df)
        for col in flow.columns:
            out[col] = flow[col]
        fast = calculate_ema(df, self.ema_fast)
        slow = calculate_ema(df, self.ema_slow)
        out[fast.name] = fast
        out[slow.name] = slow
        logger.debug("Computed indicators for %d bars", len(out))
        return out

    def what_if(self, enriched: pd.DataFrame, interval: Optional[str] = None) -> WhatIfResult:
        return simulate_golden_cross(enriched, self.ema_fast, self.ema_slow, interval)


def to_records(df: pd.DataFrame) -> List[dict]:
    """Plain dict rows: ISO timestamps, None for NaN, Python scalars."""
    records = []
    for row in df.to_dict(orient="records"):
        clean = {}
        for key, value in row.items():
            if value is None or isinstance(value, str):
                clean[key] = value
            elif pd.api.types.is_scalar(value) and pd.isna(value):
                clean[key] = None
            elif isinstance(value, pd.Timestamp):
                clean[key] = value.isoformat()
            elif isinstance(value, np.generic):
                clean[key] = value.item()
            else:
                clean[key] = value
        records.append(clean)
    return records
