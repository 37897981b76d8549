"""Unit tests for core.logger."""

import logging

from crossvision.core.logger import setup_logging


def test_root_level_and_handlers(tmp_path):
    root = setup_logging("DEBUG", tmp_path, "run.log")
    assert root.name == "crossvision"
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert (tmp_path / "run.log").exists()
    root.handlers.clear()


def test_area_override_quiets_indicators():
    setup_logging("DEBUG", levels={"crossvision.indicators": "WARNING", "data": "ERROR"})
    indicators = logging.getLogger("crossvision.indicators.money_flow")
    assert not indicators.isEnabledFor(logging.DEBUG)
    assert indicators.isEnabledFor(logging.WARNING)
    assert logging.getLogger("crossvision.analysis.cross_scanner").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("crossvision.data").level == logging.ERROR
    for name in ("crossvision.indicators", "crossvision.data"):
        logging.getLogger(name).setLevel(logging.NOTSET)
    logging.getLogger("crossvision").handlers.clear()
