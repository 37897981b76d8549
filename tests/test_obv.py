"""Unit tests for indicators.obv."""

import numpy as np
import pytest

from crossvision.core.errors import EmptySeriesError
from crossvision.indicators.obv import calculate_obv, obv_trend
from helpers import make_bars


def test_obv_sequence():
    df = make_bars([10, 11, 11, 9, 12], volumes=[100, 200, 300, 400, 500])
    assert calculate_obv(df).tolist() == [100, 300, 300, -100, 400]


def test_obv_sign_follows_close(random_bars):
    obv = calculate_obv(random_bars).to_numpy()
    close = random_bars["close"].to_numpy()
    assert np.array_equal(np.sign(np.diff(obv)), np.sign(np.diff(close)))


def test_obv_trend_slope():
    df = make_bars([10, 11, 12], volumes=[100, 100, 100])
    trend = obv_trend(df, period=10)
    k = 2 / 11
    assert trend.obv.tolist() == [100, 200, 300]
    assert trend.ema_obv.iloc[0] == 100
    assert trend.ema_obv.iloc[1] == pytest.approx(100 + 100 * k)
    assert np.allclose(trend.obv_slope, trend.obv - trend.ema_obv)


def test_obv_does_not_touch_input():
    df = make_bars([1, 2, 3])
    before = df.copy()
    calculate_obv(df)
    assert df.equals(before)


def test_obv_empty():
    with pytest.raises(EmptySeriesError):
        calculate_obv(make_bars([]))
