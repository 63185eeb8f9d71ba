"""Error taxonomy separating pipeline-fatal failures from per-repository ones."""

from __future__ import annotations

from typing import Optional


class BusFactorError(RuntimeError):
    """Base class for every error raised by the bus-factor workflow."""


class PipelineError(BusFactorError):
    """Failure that invalidates the whole report; no partial output is produced."""


class ConfigurationError(PipelineError):
    """Raised when no GitHub credential can be resolved."""


class SearchError(PipelineError):
    """Raised when the repository search cannot be completed."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.body = body


class ContributorFetchError(BusFactorError):
    """Raised when one repository's contributors cannot be fetched or decoded."""

    def __init__(self, message: str, repository: str) -> None:
        super().__init__(message)
        self.repository = repository


__all__ = [
    "BusFactorError",
    "PipelineError",
    "ConfigurationError",
    "SearchError",
    "ContributorFetchError",
]
