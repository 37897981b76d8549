"""Shared fixtures."""

import numpy as np
import pytest

from helpers import make_bars


@pytest.fixture
def random_bars():
    rng = np.random.default_rng(7)
    closes = 100 * np.cumprod(1 + rng.normal(0.0005, 0.02, 200))
    volumes = rng.integers(1_000, 50_000, 200).astype(float)
    df = make_bars(closes, volumes)
    df["open"] = closes * (1 + rng.normal(0, 0.005, 200))
    df["high"] = np.maximum(df["open"], df["close"]) * 1.01
    df["low"] = np.minimum(df["open"], df["close"]) * 0.99
    return df
