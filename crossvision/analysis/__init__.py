"""Analysis: golden-cross what-if scanner."""

from crossvision.analysis.cross_scanner import (
    simulate_golden_cross,
    find_golden_cross,
    find_death_cross,
)

__all__ = ["simulate_golden_cross", "find_golden_cross", "find_death_cross"]
