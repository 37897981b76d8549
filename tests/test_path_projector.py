"""Unit tests for simulation.path_projector."""

import numpy as np
import pandas as pd
import pytest

from crossvision.core.errors import EmptySeriesError
from crossvision.simulation.path_projector import (
    blended_volatility,
    box_muller,
    make_rng,
    project_path,
)
from helpers import make_bars


def test_appends_flagged_synthetic_bars(random_bars):
    out = project_path(random_bars, make_rng(1), days=20)
    assert len(out) == len(random_bars) + 20
    assert not out["is_synthetic"].iloc[: len(random_bars)].any()
    assert out["is_synthetic"].iloc[len(random_bars):].all()
    pd.testing.assert_frame_equal(out.iloc[: len(random_bars)], random_bars)


def test_input_not_mutated(random_bars):
    before = random_bars.copy()
    project_path(random_bars, make_rng(2))
    pd.testing.assert_frame_equal(random_bars, before)


def test_same_seed_same_path(random_bars):
    a = project_path(random_bars, make_rng(42), target_drift_pct=0.1)
    b = project_path(random_bars, make_rng(42), target_drift_pct=0.1)
    pd.testing.assert_frame_equal(a, b)


def test_synthetic_bar_shape(random_bars):
    out = project_path(random_bars, make_rng(3))
    tail = out[out["is_synthetic"]]
    assert (tail["low"] <= tail["open"]).all()
    assert (tail["open"] <= tail["high"]).all()
    assert (tail["low"] <= tail["close"]).all()
    assert (tail["close"] <= tail["high"]).all()
    last_volume = random_bars["volume"].iloc[-1]
    assert (tail["volume"] >= last_volume * 0.8).all()
    assert (tail["volume"] <= last_volume * 1.2).all()
    assert (tail["time"].diff().dropna() == pd.Timedelta(days=1)).all()
    assert tail["time"].iloc[0] == random_bars["time"].iloc[-1] + pd.Timedelta(days=1)


def test_zero_volatility_follows_drift():
    df = make_bars([100.0] * 40)
    out = project_path(df, make_rng(0), days=5, target_drift_pct=1.0)
    closes = out["close"].iloc[40:].to_numpy()
    assert closes == pytest.approx(100.0 * 1.01 ** np.arange(1, 6))


def test_blended_volatility_weights():
    rng = np.random.default_rng(11)
    closes = 100 * np.cumprod(1 + rng.normal(0, 0.01, 120))
    returns = closes[1:] / closes[:-1] - 1
    expected = 0.7 * np.std(returns[-30:]) + 0.3 * np.std(returns[-90:])
    assert blended_volatility(closes) == pytest.approx(expected)
    assert blended_volatility(np.array([100.0])) == 0.0


def test_box_muller_statistics():
    rng = make_rng(123)
    draws = np.array([box_muller(rng, 0.5, 2.0) for _ in range(20000)])
    assert draws.mean() == pytest.approx(0.5, abs=0.05)
    assert draws.std() == pytest.approx(2.0, rel=0.03)


def test_projected_returns_match_volatility():
    df = make_bars(100 * np.cumprod(1 + make_rng(5).normal(0, 0.02, 120)))
    vol = blended_volatility(df["close"].to_numpy())
    returns = []
    for seed in range(200):
        out = project_path(df, make_rng(seed), days=20)
        closes = out["close"].iloc[119:].to_numpy()
        returns.extend(closes[1:] / closes[:-1] - 1)
    assert np.mean(returns) == pytest.approx(0.0, abs=0.003)
    assert np.std(returns) == pytest.approx(vol, rel=0.1)


def test_zero_days_returns_copy(random_bars):
    out = project_path(random_bars, make_rng(0), days=0)
    pd.testing.assert_frame_equal(out, random_bars)
    assert out is not random_bars


def test_empty_raises():
    with pytest.raises(EmptySeriesError):
        project_path(make_bars([]), make_rng(0))


def test_single_bar_spacing_follows_interval():
    df = make_bars([100.0])
    hourly = project_path(df, make_rng(0), days=3, interval="1h")
    assert (hourly["time"].diff().iloc[1:] == pd.Timedelta(hours=1)).all()
    weekly = project_path(df, make_rng(0), days=2, interval="1wk")
    assert weekly["time"].iloc[1] == df["time"].iloc[0] + pd.Timedelta(weeks=1)
    default = project_path(df, make_rng(0), days=1)
    assert default["time"].iloc[1] == df["time"].iloc[0] + pd.Timedelta(days=1)


def test_bar_spacing_prefers_observed_step(random_bars):
    out = project_path(random_bars, make_rng(0), days=2, interval="1h")
    assert out["time"].iloc[-1] - out["time"].iloc[-2] == pd.Timedelta(days=1)
