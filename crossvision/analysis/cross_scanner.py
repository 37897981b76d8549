"""
Golden-cross "what-if" scanner: finds the most recent fast/slow EMA golden cross
and evaluates two entry rules held until the latest bar.
Only daily and weekly series are eligible.
"""

from __future__ import annotations
import logging
import math
from typing import Optional

import pandas as pd

from crossvision.core.types import CrossEvent, CrossKind, ScenarioResult, WhatIfResult
from crossvision.utils.timeframes import is_scanner_interval

logger = logging.getLogger("crossvision.analysis.cross_scanner")

SECONDS_PER_DAY = 24 * 60 * 60


def _present(*values) -> bool:
    return all(v is not None and not pd.isna(v) for v in values)


def find_golden_cross(df: pd.DataFrame, fast: str, slow: str) -> Optional[int]:
    """Largest i with fast[i] > slow[i] and fast[i-1] <= slow[i-1]; None if no cross."""
    f = df[fast].to_numpy(dtype=float)
    s = df[slow].to_numpy(dtype=float)
    for i in range(len(df) - 1, 0, -1):
        if not _present(f[i], s[i], f[i - 1], s[i - 1]):
            continue
        if f[i] > s[i] and f[i - 1] <= s[i - 1]:
            return i
    return None


def find_death_cross(
    df: pd.DataFrame,
    fast: str,
    slow: str,
    synthetic_only: bool = True,
) -> Optional[CrossEvent]:
    """
    First i with fast[i] < slow[i] and fast[i-1] >= slow[i-1].
    With synthetic_only, only projected bars are candidates.
    """
    f = df[fast].to_numpy(dtype=float)
    s = df[slow].to_numpy(dtype=float)
    synthetic = df["is_synthetic"].to_numpy(dtype=bool) if "is_synthetic" in df.columns else None
    for i in range(1, len(df)):
        if synthetic_only and (synthetic is None or not synthetic[i]):
            continue
        if not _present(f[i], s[i], f[i - 1], s[i - 1]):
            continue
        if f[i] < s[i] and f[i - 1] >= s[i - 1]:
            return CrossEvent(index=i, time=df["time"].iloc[i], kind=CrossKind.DEATH)
    return None


def days_between(start, end) -> int:
    """Whole calendar days between two timestamps, rounded up."""
    delta = abs((pd.Timestamp(end) - pd.Timestamp(start)).total_seconds())
    return int(math.ceil(delta / SECONDS_PER_DAY))


def _scenario(df: pd.DataFrame, entry_index: int) -> ScenarioResult:
    entry = df.iloc[entry_index]
    latest = df.iloc[-1]
    entry_price = float(entry["close"])
    latest_price = float(latest["close"])
    return ScenarioResult(
        found=True,
        entry_index=entry_index,
        entry_date=entry["time"],
        entry_price=entry_price,
        latest_price=latest_price,
        profit_percent=(latest_price - entry_price) / entry_price * 100.0,
        days_held=days_between(entry["time"], latest["time"]),
    )


def price_confirmation_entry(df: pd.DataFrame, cross_index: int, fast: str, slow: str) -> Optional[int]:
    """First bar from the cross onward whose open and close are both above both EMAs."""
    for i in range(cross_index, len(df)):
        row = df.iloc[i]
        if not _present(row[fast], row[slow]):
            continue
        ceiling = max(row[fast], row[slow])
        if row["open"] > ceiling and row["close"] > ceiling:
            return i
    return None


def vwap_confirmation_entry(df: pd.DataFrame, cross_index: int, slow: str) -> Optional[int]:
    """Most recent bar after the cross where the slow EMA crosses above VWAP."""
    s = df[slow].to_numpy(dtype=float)
    v = df["vwap"].to_numpy(dtype=float)
    for i in range(len(df) - 1, cross_index, -1):
        if not _present(s[i], v[i], s[i - 1], v[i - 1]):
            continue
        if s[i] > v[i] and s[i - 1] <= v[i - 1]:
            return i
    return None


def simulate_golden_cross(
    df: pd.DataFrame,
    fast: int = 50,
    slow: int = 135,
    interval: Optional[str] = None,
) -> WhatIfResult:
    """
    Evaluate both entry scenarios against the latest golden cross of ema<fast>/ema<slow>.
    Requires time, open, close, vwap and both EMA columns. Absence of a signal is
    reported as found=False; ineligible intervals as applicable=False.
    """
    result = WhatIfResult()
    if interval is not None and not is_scanner_interval(interval):
        logger.debug("What-if skipped for interval %s", interval)
        result.applicable = False
        return result
    if df is None or len(df) < 2:
        return result

    fast_col, slow_col = f"ema{fast}", f"ema{slow}"
    cross_index = find_golden_cross(df, fast_col, slow_col)
    if cross_index is None:
        return result
    result.found = True
    result.cross = CrossEvent(index=cross_index, time=df["time"].iloc[cross_index], kind=CrossKind.GOLDEN)

    entry_a = price_confirmation_entry(df, cross_index, fast_col, slow_col)
    if entry_a is not None:
        result.scenario_a = _scenario(df, entry_a)
    entry_b = vwap_confirmation_entry(df, cross_index, slow_col)
    if entry_b is not None:
        result.scenario_b = _scenario(df, entry_b)
    logger.debug(
        "Golden cross at %d; scenario A %s, scenario B %s",
        cross_index, result.scenario_a.found, result.scenario_b.found,
    )
    return result
