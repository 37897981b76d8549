"""
Logging setup for the crossvision logger hierarchy. Console plus optional file,
with per-area level overrides (e.g. quiet crossvision.indicators while debugging data fetches).
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Mapping, Optional

ROOT_LOGGER = "crossvision"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level(name: str) -> int:
    return getattr(logging, str(name).upper(), logging.INFO)


def apply_level_overrides(levels: Optional[Mapping[str, str]]) -> None:
    """Set levels on child loggers. Names without the crossvision prefix get it added."""
    for name, level in (levels or {}).items():
        if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
            name = f"{ROOT_LOGGER}.{name}"
        logging.getLogger(name).setLevel(_level(level))


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    log_file: Optional[str] = None,
    levels: Optional[Mapping[str, str]] = None,
) -> logging.Logger:
    """Configure the crossvision logger: console, optional file, per-area overrides."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(_level(level))
    root.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir and log_file:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / log_file, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)

    apply_level_overrides(levels)
    return root
