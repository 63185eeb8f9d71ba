"""Immutable records passed between search, contributor fetch, and aggregation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RepositoryDescriptor:
    """One search hit: the repository name and its contributors endpoint."""

    name: str
    contributors_url: str


@dataclass(frozen=True)
class Contributor:
    login: str
    contributions: int


@dataclass(frozen=True)
class SearchPage:
    """Decoded search response; only lives for one pagination step."""

    items: Tuple[RepositoryDescriptor, ...]
    next_link: Optional[str] = None


@dataclass(frozen=True)
class BusFactorResult:
    """A repository whose top contributor meets the concentration threshold."""

    repository_name: str
    top_contributor: Contributor
    concentration_ratio: float


__all__ = ["RepositoryDescriptor", "Contributor", "SearchPage", "BusFactorResult"]
