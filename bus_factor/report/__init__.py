"""Command-line bus-factor report."""

from .runner import main, run

__all__ = ["main", "run"]
