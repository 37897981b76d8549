"""Exceptions and warnings raised by the indicator pipeline."""


class CrossVisionError(Exception):
    """Base class for pipeline errors."""


class EmptySeriesError(CrossVisionError, ValueError):
    """A calculator or the normalizer received zero bars."""

    def __init__(self, where: str = "series"):
        super().__init__(f"{where}: at least one bar is required")
        self.where = where


class InsufficientHistoryWarning(UserWarning):
    """Series is shorter than an indicator's look-back; seed/default values dominate."""


def require_points(df, where: str = "series") -> None:
    """Raise EmptySeriesError if df has no rows."""
    if df is None or len(df) == 0:
        raise EmptySeriesError(where)
