"""Bus-factor aggregation: concurrent contributor fetch, concentration, threshold filter."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Union

import requests

from ..errors import ContributorFetchError
from ..retrieval.collectors import get_contributors, search_top_repositories
from ..retrieval.config import BUS_FACTOR_THRESHOLD, CONTRIBUTORS_LIMIT
from ..retrieval.http_client import build_session
from ..retrieval.models import BusFactorResult, Contributor, RepositoryDescriptor
from ..secrets import resolve_github_token

ContributorOutcome = Union[List[Contributor], ContributorFetchError]


def _fetch_outcome(session: requests.Session,
                   repo: RepositoryDescriptor,
                   amount: int) -> ContributorOutcome:
    try:
        return get_contributors(session, repo, amount)
    except ContributorFetchError as exc:
        return exc


def fetch_contributors_concurrently(session: requests.Session,
                                    repos: Sequence[RepositoryDescriptor],
                                    amount: int = CONTRIBUTORS_LIMIT) -> List[ContributorOutcome]:
    """Fetch contributors for every repository at once and wait for all of them.

    The returned list is aligned with `repos`: slot i holds either the
    contributors of repos[i] or the ContributorFetchError it produced.
    """
    if not repos:
        return []

    with ThreadPoolExecutor(max_workers=len(repos)) as executor:
        futures = [executor.submit(_fetch_outcome, session, repo, amount) for repo in repos]
        return [future.result() for future in futures]


def concentration_ratio(contributors: Sequence[Contributor]) -> Optional[float]:
    """Share of all contributions held by contributors[0]; None when the total is zero."""
    total = sum(c.contributions for c in contributors)
    if total == 0:
        return None
    return contributors[0].contributions / total


def evaluate_repository(repo: RepositoryDescriptor,
                        contributors: Sequence[Contributor],
                        threshold: float = BUS_FACTOR_THRESHOLD) -> Optional[BusFactorResult]:
    ratio = concentration_ratio(contributors)
    if ratio is None or ratio < threshold:
        return None
    return BusFactorResult(
        repository_name=repo.name,
        top_contributor=contributors[0],
        concentration_ratio=ratio,
    )


def summarize_outcomes(repos: Sequence[RepositoryDescriptor],
                       outcomes: Sequence[ContributorOutcome],
                       threshold: float = BUS_FACTOR_THRESHOLD) -> List[BusFactorResult]:
    """Reduce per-repository outcomes to threshold hits, in repository order."""
    results: List[BusFactorResult] = []
    for repo, outcome in zip(repos, outcomes):
        if isinstance(outcome, ContributorFetchError):
            print(f"[warn] skipping {repo.name}: {outcome}")
            continue
        result = evaluate_repository(repo, outcome, threshold)
        if result is not None:
            results.append(result)
    return results


def compute_bus_factor(language: str,
                       project_count: int,
                       *,
                       session: Optional[requests.Session] = None,
                       token: Optional[str] = None,
                       contributors_limit: int = CONTRIBUTORS_LIMIT,
                       threshold: float = BUS_FACTOR_THRESHOLD) -> List[BusFactorResult]:
    """Return the most-starred `language` repositories whose bus factor is one.

    Search failures and a missing credential propagate as PipelineError
    subclasses. Contributor failures only drop the affected repository.
    A session built here is closed on return; an injected one is left open.
    """
    owns_session = session is None
    if session is None:
        session = build_session(token or resolve_github_token(), pool_maxsize=project_count)

    try:
        repos = search_top_repositories(session, language, project_count)
        print(f"[info] fetching top {contributors_limit} contributors for {len(repos)} repositories...")
        outcomes = fetch_contributors_concurrently(session, repos, contributors_limit)
        return summarize_outcomes(repos, outcomes, threshold)
    finally:
        if owns_session:
            session.close()


__all__ = [
    "ContributorOutcome",
    "fetch_contributors_concurrently",
    "concentration_ratio",
    "evaluate_repository",
    "summarize_outcomes",
    "compute_bus_factor",
]
