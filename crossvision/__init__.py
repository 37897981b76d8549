"""CrossVision: OHLCV indicator pipeline and golden-cross what-if analysis."""

__version__ = "0.1.0"
