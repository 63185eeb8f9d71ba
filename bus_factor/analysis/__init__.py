"""Contribution concentration analysis."""

from .aggregator import compute_bus_factor

__all__ = ["compute_bus_factor"]
