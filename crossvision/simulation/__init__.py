"""Simulation: Monte Carlo path projection."""

from crossvision.simulation.path_projector import project_path, make_rng, blended_volatility

__all__ = ["project_path", "make_rng", "blended_volatility"]
