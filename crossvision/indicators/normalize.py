"""
Series normalizer: shapes raw bars into the time-ordered frame every calculator expects.
Values are never changed; gaps are not filled and duplicates are not removed.
"""

from __future__ import annotations
import logging
from dataclasses import asdict, is_dataclass
from typing import Any, Iterable, Union

import pandas as pd

from crossvision.core.errors import EmptySeriesError

logger = logging.getLogger("crossvision.indicators.normalize")

OHLCV_COLUMNS = ["open", "high", "low", "close", "volume"]
SERIES_COLUMNS = ["time"] + OHLCV_COLUMNS + ["is_synthetic"]


def _to_frame(raw: Union[pd.DataFrame, Iterable[Any]]) -> pd.DataFrame:
    if isinstance(raw, pd.DataFrame):
        return raw.copy()
    rows = [asdict(r) if is_dataclass(r) else dict(r) for r in raw]
    return pd.DataFrame(rows)


def normalize_series(raw: Union[pd.DataFrame, Iterable[Any]]) -> pd.DataFrame:
    """
    Return a new frame sorted ascending by time with a positional 0..n-1 index.
    Accepts a DataFrame, Bar dataclasses, or mappings ("date" is accepted for "time").
    Raises EmptySeriesError on zero bars.
    """
    df = _to_frame(raw)
    if len(df) == 0:
        raise EmptySeriesError("normalize_series")
    if "time" not in df.columns and "date" in df.columns:
        df = df.rename(columns={"date": "time"})
    missing = [c for c in ["time"] + OHLCV_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(f"normalize_series: missing columns {missing}")

    df["time"] = pd.to_datetime(df["time"])
    df[OHLCV_COLUMNS] = df[OHLCV_COLUMNS].astype(float)
    if "is_synthetic" not in df.columns:
        df["is_synthetic"] = False
    df["is_synthetic"] = df["is_synthetic"].fillna(False).astype(bool)

    df = df.sort_values("time", kind="mergesort").reset_index(drop=True)
    extra = [c for c in df.columns if c not in SERIES_COLUMNS]
    logger.debug("Normalized %d bars (%d extra columns)", len(df), len(extra))
    return df[SERIES_COLUMNS + extra]
