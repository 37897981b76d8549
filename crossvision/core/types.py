"""
Core data types for bars, money-flow bands, cross events, and what-if results.
"""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, Optional

import pandas as pd


class MoneyFlowBand(str, Enum):
    STRONG_INFLOW = "strong-inflow"
    ACCUMULATION = "accumulation"
    NEUTRAL = "neutral"
    DISTRIBUTION = "distribution"
    STRONG_OUTFLOW = "strong-outflow"

    @property
    def color(self) -> str:
        return BAND_COLORS[self]


BAND_COLORS = {
    MoneyFlowBand.STRONG_INFLOW: "#15803d",
    MoneyFlowBand.ACCUMULATION: "#4ade80",
    MoneyFlowBand.NEUTRAL: "#94a3b8",
    MoneyFlowBand.DISTRIBUTION: "#f97316",
    MoneyFlowBand.STRONG_OUTFLOW: "#ef4444",
}


class VolumeColor(str, Enum):
    UP = "rgba(5, 150, 105, 0.3)"
    DOWN = "rgba(225, 29, 72, 0.3)"
    NEUTRAL = "rgba(113, 113, 122, 0.3)"


class CrossKind(str, Enum):
    GOLDEN = "golden"
    DEATH = "death"


@dataclass
class Bar:
    """OHLCV candle. is_synthetic marks projected (non-market) bars."""
    time: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float
    is_synthetic: bool = False

    @property
    def typical_price(self) -> float:
        return (self.high + self.low + self.close) / 3.0


@dataclass
class ObvTrend:
    """Raw OBV, its EMA baseline, and the deviation between them."""
    obv: pd.Series
    ema_obv: pd.Series
    obv_slope: pd.Series


@dataclass
class CrossEvent:
    """Position where a fast EMA crossed a slow EMA."""
    index: int
    time: datetime
    kind: CrossKind = CrossKind.GOLDEN

    def to_dict(self) -> dict:
        return {"index": self.index, "time": _iso(self.time), "kind": self.kind.value}


@dataclass
class ScenarioResult:
    """Hypothetical entry held until the latest bar."""
    found: bool = False
    entry_index: Optional[int] = None
    entry_date: Optional[datetime] = None
    entry_price: float = 0.0
    latest_price: float = 0.0
    profit_percent: float = 0.0
    days_held: int = 0

    def to_dict(self) -> dict:
        d = asdict(self)
        d["entry_date"] = _iso(self.entry_date)
        return d


@dataclass
class WhatIfResult:
    """Golden-cross what-if report. applicable=False when the interval is not daily/weekly."""
    found: bool = False
    applicable: bool = True
    cross: Optional[CrossEvent] = None
    scenario_a: ScenarioResult = field(default_factory=ScenarioResult)
    scenario_b: ScenarioResult = field(default_factory=ScenarioResult)

    def to_dict(self) -> dict:
        return {
            "found": self.found,
            "applicable": self.applicable,
            "cross": self.cross.to_dict() if self.cross else None,
            "scenario_a": self.scenario_a.to_dict(),
            "scenario_b": self.scenario_b.to_dict(),
        }


def _iso(value: Any) -> Optional[str]:
    if value is None:
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)
