"""Indicators: normalizer, VWAP, OBV, EMA, money flow, and the pipeline that joins them."""

from crossvision.indicators.normalize import normalize_series
from crossvision.indicators.vwap import calculate_vwap, typical_price
from crossvision.indicators.obv import calculate_obv, obv_trend
from crossvision.indicators.ema import ema, calculate_ema
from crossvision.indicators.money_flow import calculate_mfi, calculate_money_flow, classify_score
from crossvision.indicators.pipeline import IndicatorPipeline, to_records

__all__ = [
    "normalize_series",
    "calculate_vwap",
    "typical_price",
    "calculate_obv",
    "obv_trend",
    "ema",
    "calculate_ema",
    "calculate_mfi",
    "calculate_money_flow",
    "classify_score",
    "IndicatorPipeline",
    "to_records",
]
