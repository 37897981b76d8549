"""
Load configuration from config.yaml and .env. Env values override the file.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


def _env_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path(__file__).resolve().parents[2]
    return root / ".env"


def load_dotenv_if_exists(project_root: Optional[Path] = None) -> None:
    """Load .env from project root if present."""
    path = _env_path(project_root)
    if path.exists():
        load_dotenv(path)


def load_config(config_path: Optional[Path] = None, project_root: Optional[Path] = None) -> "Config":
    """Load config.yaml and overlay with env. Returns Config."""
    load_dotenv_if_exists(project_root)
    root = project_root or Path(__file__).resolve().parents[2]
    path = config_path or root / "config.yaml"
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

    def env(key: str, default: str = "") -> str:
        return os.getenv(key, default).strip()

    def env_int(key: str, default: int = 0) -> int:
        try:
            return int(os.getenv(key, str(default)))
        except ValueError:
            return default

    def env_float(key: str, default: float = 0.0) -> float:
        try:
            return float(os.getenv(key, str(default)))
        except ValueError:
            return default

    market = data.get("market", {})
    indicators = data.get("indicators", {})
    projection = data.get("projection", {})
    logging_cfg = data.get("logging", {})

    return Config(
        symbol=env("SYMBOL", market.get("symbol", "AAPL")).upper(),
        interval=env("INTERVAL", market.get("interval", "1d")),
        start_date=env("START_DATE", str(market.get("start_date", "2020-01-01"))),
        request_timeout=env_float("REQUEST_TIMEOUT", market.get("request_timeout", 10.0)),
        # Indicators
        ema_fast=env_int("EMA_FAST", indicators.get("ema_fast", 50)),
        ema_slow=env_int("EMA_SLOW", indicators.get("ema_slow", 135)),
        obv_ema_period=env_int("OBV_EMA_PERIOD", indicators.get("obv_ema_period", 10)),
        mfi_period=env_int("MFI_PERIOD", indicators.get("mfi_period", 14)),
        # Projection
        projection_days=env_int("PROJECTION_DAYS", projection.get("days", 20)),
        target_drift_pct=env_float("TARGET_DRIFT_PCT", projection.get("target_drift_pct", 0.0)),
        projection_seed=projection.get("seed"),
        # Logging
        log_level=env("LOG_LEVEL", logging_cfg.get("level", "INFO")),
        log_dir=Path(logging_cfg.get("log_dir", "logs")),
        log_file=logging_cfg.get("log_file", "crossvision.log"),
        log_levels=logging_cfg.get("levels") or {},
    )


class Config:
    """Unified configuration. Immutable after load."""

    __slots__ = (
        "symbol", "interval", "start_date", "request_timeout",
        "ema_fast", "ema_slow", "obv_ema_period", "mfi_period",
        "projection_days", "target_drift_pct", "projection_seed",
        "log_level", "log_dir", "log_file", "log_levels",
    )

    def __init__(
        self,
        symbol: str = "AAPL",
        interval: str = "1d",
        start_date: str = "2020-01-01",
        request_timeout: float = 10.0,
        ema_fast: int = 50,
        ema_slow: int = 135,
        obv_ema_period: int = 10,
        mfi_period: int = 14,
        projection_days: int = 20,
        target_drift_pct: float = 0.0,
        projection_seed: Optional[int] = None,
        log_level: str = "INFO",
        log_dir: Path = None,
        log_file: str = "crossvision.log",
        log_levels: Optional[dict] = None,
    ):
        self.symbol = symbol
        self.interval = interval
        self.start_date = start_date
        self.request_timeout = request_timeout
        self.ema_fast = ema_fast
        self.ema_slow = ema_slow
        self.obv_ema_period = obv_ema_period
        self.mfi_period = mfi_period
        self.projection_days = projection_days
        self.target_drift_pct = target_drift_pct
        self.projection_seed = projection_seed
        self.log_level = log_level
        self.log_dir = Path(log_dir) if log_dir else Path("logs")
        self.log_file = log_file
        self.log_levels = dict(log_levels or {})
