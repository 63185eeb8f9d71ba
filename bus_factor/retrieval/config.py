"""Central configuration constants for the bus-factor retrieval workflow."""

from __future__ import annotations

import os

BASE_URL = os.getenv("BUS_FACTOR_BASE_URL", "https://api.github.com").rstrip("/")
USER_AGENT = os.getenv("BUS_FACTOR_USER_AGENT", "bus-factor/1.0")
ACCEPT_HEADER = "application/vnd.github.v3+json"
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "90"))
CONTRIBUTORS_LIMIT = int(os.getenv("BUS_FACTOR_CONTRIBUTORS_LIMIT", "25"))
BUS_FACTOR_THRESHOLD = float(os.getenv("BUS_FACTOR_THRESHOLD", "0.75"))

__all__ = [
    "BASE_URL",
    "USER_AGENT",
    "ACCEPT_HEADER",
    "REQUEST_TIMEOUT",
    "CONTRIBUTORS_LIMIT",
    "BUS_FACTOR_THRESHOLD",
]
