"""REST fetchers for star-sorted repository search and per-repository contributors."""

from __future__ import annotations

from typing import Any, List, Optional
from urllib.parse import quote_plus

import requests

from ..errors import ContributorFetchError, SearchError
from .config import BASE_URL, CONTRIBUTORS_LIMIT, REQUEST_TIMEOUT
from .http_client import extract_next_link, log_http_error, require_link_header, response_excerpt
from .models import Contributor, RepositoryDescriptor, SearchPage


def build_search_url(language: str) -> str:
    """Return the first search page URL for `language`, most-starred first."""
    return f"{BASE_URL}/search/repositories?q=language:{quote_plus(language)}&sort=stars&order=desc"


def parse_search_page(payload: Any, next_link: Optional[str] = None) -> SearchPage:
    """Decode a search response body; raises ValueError when items are malformed."""
    if not isinstance(payload, dict) or not isinstance(payload.get("items"), list):
        raise ValueError("search response has no 'items' array")

    items = []
    for item in payload["items"]:
        if not isinstance(item, dict):
            raise ValueError(f"unexpected search item: {item!r}")
        name = item.get("name")
        contributors_url = item.get("contributors_url")
        if not isinstance(name, str) or not isinstance(contributors_url, str):
            raise ValueError(f"search item missing name/contributors_url: {item!r}")
        items.append(RepositoryDescriptor(name=name, contributors_url=contributors_url))
    return SearchPage(items=tuple(items), next_link=next_link)


def _fetch_search_page(session: requests.Session, url: str) -> SearchPage:
    try:
        resp = session.get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        raise SearchError(f"Search request failed for {url}: {exc}", url) from exc

    if not 200 <= resp.status_code < 300:
        log_http_error(resp, url)
        body = response_excerpt(resp)
        raise SearchError(
            f"Invalid status code ({resp.status_code}) for {url}: {body}", url, resp.status_code, body
        )

    next_link = extract_next_link(require_link_header(resp, url))

    try:
        return parse_search_page(resp.json(), next_link)
    except ValueError as exc:
        raise SearchError(f"Malformed search response for {url}: {exc}", url, resp.status_code) from exc


def search_top_repositories(session: requests.Session,
                            language: str,
                            project_count: int) -> List[RepositoryDescriptor]:
    """Collect exactly `project_count` most-starred repositories, or fewer if results run out.

    Pages are followed through the Link header. The page that crosses the target
    is truncated to its leading items, relying on the provider's star ordering.
    Any search failure raises SearchError; there is no partial result.
    """
    if project_count < 0:
        raise ValueError("project_count must be non-negative")

    url = build_search_url(language)
    repos: List[RepositoryDescriptor] = []
    while len(repos) < project_count:
        page = _fetch_search_page(session, url)

        remaining = project_count - len(repos)
        if len(page.items) > remaining:
            repos.extend(page.items[:remaining])
            break
        repos.extend(page.items)

        if page.next_link is None:
            print(f"[info] no more \"next\" link after {len(repos)} repositories for language {language}")
            break
        url = page.next_link

    return repos


def parse_contributors(payload: Any) -> List[Contributor]:
    """Decode a contributors response body; raises ValueError when malformed."""
    if not isinstance(payload, list):
        raise ValueError("contributors response is not a list")

    contributors = []
    for entry in payload:
        if not isinstance(entry, dict):
            raise ValueError(f"unexpected contributor entry: {entry!r}")
        login = entry.get("login")
        count = entry.get("contributions")
        if not isinstance(login, str) or isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"contributor missing login/contributions: {entry!r}")
        contributors.append(Contributor(login=login, contributions=count))
    return contributors


def get_contributors(session: requests.Session,
                     repo: RepositoryDescriptor,
                     amount: int = CONTRIBUTORS_LIMIT) -> List[Contributor]:
    """Fetch the `amount` most active contributors of `repo`, most active first."""
    url = f"{repo.contributors_url}?per_page={amount}"
    try:
        resp = session.get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        raise ContributorFetchError(f"Contributors request failed for {repo.name}: {exc}", repo.name) from exc

    if not 200 <= resp.status_code < 300:
        raise ContributorFetchError(
            f"Invalid status code ({resp.status_code}) for {url}: {response_excerpt(resp)}", repo.name
        )

    try:
        return parse_contributors(resp.json())
    except ValueError as exc:
        raise ContributorFetchError(f"Malformed contributors response for {repo.name}: {exc}", repo.name) from exc


__all__ = [
    "build_search_url",
    "parse_search_page",
    "search_top_repositories",
    "parse_contributors",
    "get_contributors",
]
