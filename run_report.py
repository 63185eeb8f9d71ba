"""Convenience shim to run the bus-factor report from a checkout."""

from __future__ import annotations

from bus_factor.report.runner import main


if __name__ == "__main__":
    main()
