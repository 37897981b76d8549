"""
Monte Carlo path projection: extend a series with volatility-weighted random-walk bars.
The random source is always passed in so seeded runs are reproducible.
"""

from __future__ import annotations
import logging
from typing import Optional

import numpy as np
import pandas as pd

from crossvision.core.errors import require_points
from crossvision.utils.timeframes import interval_minutes

logger = logging.getLogger("crossvision.simulation.path_projector")

PROJECTION_DAYS = 20
SHORT_VOL_WINDOW = 30
LONG_VOL_WINDOW = 90
SHORT_VOL_WEIGHT = 0.7
LONG_VOL_WEIGHT = 0.3
VOLUME_JITTER = 0.2
OPEN_OFFSET = 0.998
HIGH_OFFSET = 1.01
LOW_OFFSET = 0.99


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Seedable generator for project_path."""
    return np.random.default_rng(seed)


def _trailing_std(returns: np.ndarray, window: int) -> float:
    tail = returns[-window:]
    if len(tail) < 2:
        return 0.0
    return float(np.std(tail))


def blended_volatility(closes: np.ndarray) -> float:
    """0.7 * std of the last 30 bar returns + 0.3 * std of the last 90."""
    closes = np.asarray(closes, dtype=float)
    if len(closes) < 2:
        return 0.0
    returns = closes[1:] / closes[:-1] - 1.0
    return (
        SHORT_VOL_WEIGHT * _trailing_std(returns, SHORT_VOL_WINDOW)
        + LONG_VOL_WEIGHT * _trailing_std(returns, LONG_VOL_WINDOW)
    )


def box_muller(rng: np.random.Generator, mean: float, std: float) -> float:
    """One normal draw from two uniforms."""
    u1 = 1.0 - rng.random()  # (0, 1]
    u2 = rng.random()
    z = np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)
    return mean + std * z


def _bar_spacing(times: pd.Series, interval: Optional[str] = None) -> pd.Timedelta:
    """Last bar spacing; falls back to the interval length, then one day."""
    if len(times) >= 2:
        step = times.iloc[-1] - times.iloc[-2]
        if step > pd.Timedelta(0):
            return step
    if interval:
        return pd.Timedelta(minutes=interval_minutes(interval))
    return pd.Timedelta(days=1)


def project_path(
    df: pd.DataFrame,
    rng: np.random.Generator,
    days: int = PROJECTION_DAYS,
    target_drift_pct: float = 0.0,
    interval: Optional[str] = None,
) -> pd.DataFrame:
    """
    Return a new frame: the input rows followed by `days` synthetic bars.
    Daily return ~ N(target_drift_pct / 100, blended volatility); synthetic rows have is_synthetic=True.
    """
    require_points(df, "project_path")
    if days <= 0:
        return df.copy()
    vol = blended_volatility(df["close"].to_numpy(dtype=float))
    drift = target_drift_pct / 100.0
    step = _bar_spacing(df["time"], interval)
    base_volume = float(df["volume"].iloc[-1])
    price = float(df["close"].iloc[-1])
    time = df["time"].iloc[-1]

    rows = []
    for _ in range(days):
        price = price * (1.0 + box_muller(rng, drift, vol))
        time = time + step
        rows.append({
            "time": time,
            "open": price * OPEN_OFFSET,
            "high": price * HIGH_OFFSET,
            "low": price * LOW_OFFSET,
            "close": price,
            "volume": base_volume * (1.0 + rng.uniform(-VOLUME_JITTER, VOLUME_JITTER)),
            "is_synthetic": True,
        })
    logger.debug("Projected %d bars (vol=%.5f, drift=%.4f)", days, vol, drift)
    synthetic = pd.DataFrame(rows)
    out = pd.concat([df, synthetic], ignore_index=True)
    out["is_synthetic"] = out["is_synthetic"].fillna(False).astype(bool)
    return out
