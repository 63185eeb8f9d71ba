"""Bus-factor report for the most-starred GitHub repositories of a language."""

from .analysis.aggregator import compute_bus_factor
from .errors import (
    BusFactorError,
    ConfigurationError,
    ContributorFetchError,
    PipelineError,
    SearchError,
)
from .retrieval.models import BusFactorResult, Contributor, RepositoryDescriptor, SearchPage

__all__ = [
    "compute_bus_factor",
    "BusFactorError",
    "ConfigurationError",
    "ContributorFetchError",
    "PipelineError",
    "SearchError",
    "BusFactorResult",
    "Contributor",
    "RepositoryDescriptor",
    "SearchPage",
]
