"""Core: config, types, errors, logging."""

from crossvision.core.config import load_config, Config
from crossvision.core.types import (
    Bar,
    MoneyFlowBand,
    VolumeColor,
    CrossKind,
    CrossEvent,
    ObvTrend,
    ScenarioResult,
    WhatIfResult,
)
from crossvision.core.errors import CrossVisionError, EmptySeriesError, InsufficientHistoryWarning
from crossvision.core.logger import setup_logging

__all__ = [
    "load_config",
    "Config",
    "Bar",
    "MoneyFlowBand",
    "VolumeColor",
    "CrossKind",
    "CrossEvent",
    "ObvTrend",
    "ScenarioResult",
    "WhatIfResult",
    "CrossVisionError",
    "EmptySeriesError",
    "InsufficientHistoryWarning",
    "setup_logging",
]
