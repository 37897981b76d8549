"""Load OHLCV bars from CSV into a normalized series."""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

import pandas as pd

from crossvision.indicators.normalize import normalize_series

logger = logging.getLogger("crossvision.data.loader")


def load_csv(path: Union[str, Path]) -> pd.DataFrame:
    """CSV with a time (or date) column plus open, high, low, close, volume."""
    path = Path(path)
    df = pd.read_csv(path)
    df.columns = [c.strip().lower() for c in df.columns]
    logger.info("Loaded %d rows from %s", len(df), path)
    return normalize_series(df)
