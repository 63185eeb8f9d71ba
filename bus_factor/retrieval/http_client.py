"""HTTP session construction, error logging, and Link-header pagination helpers."""

from __future__ import annotations

from typing import Optional

import requests
from requests.adapters import DEFAULT_POOLSIZE, HTTPAdapter
from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from ..errors import SearchError
from .config import ACCEPT_HEADER, USER_AGENT

NEXT_REL_MARKER = 'rel="next"'


def build_session(token: str, pool_maxsize: int = DEFAULT_POOLSIZE) -> requests.Session:
    """Return a session carrying the fixed Accept, User-Agent and token headers.

    The session is shared read-only by every request of a run, including the
    concurrent contributor fetches, so `pool_maxsize` should match the fan-out.
    """
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=DEFAULT_POOLSIZE, pool_maxsize=max(1, pool_maxsize))
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update(
        {
            "Accept": ACCEPT_HEADER,
            "User-Agent": USER_AGENT,
            "Authorization": f"token {token}",
        }
    )
    return session


def response_excerpt(resp: requests.Response, limit: int = 300) -> str:
    """Return the API error message, or the leading text of the body."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        msg = body.get("message") or body.get("error")
        if msg:
            return str(msg)
    return (resp.text or "")[:limit]


def log_http_error(resp: requests.Response, url: str) -> None:
    """Print a short, human-readable message when GitHub returns an error."""
    print(f"[error] HTTP {resp.status_code} for {url}\n  -> {response_excerpt(resp)}")


def _is_absolute_url(candidate: str) -> bool:
    try:
        parsed = parse_url(candidate)
    except (LocationParseError, ValueError):
        return False
    if not parsed.scheme or not parsed.host:
        return False
    if any(ch.isspace() for ch in parsed.host):
        return False
    return parsed.port is None or 0 <= parsed.port <= 65535


def extract_next_link(header: Optional[str]) -> Optional[str]:
    """Return the rel="next" URL from a Link header value, or None.

    Entries are matched by substring so extra attributes are tolerated; only
    the first next-entry is considered. Malformed text yields None instead of
    raising, so pagination simply ends.
    """
    if not header:
        return None

    entry = next((part for part in header.split(",") if NEXT_REL_MARKER in part), None)
    if entry is None:
        return None

    start = entry.find("<")
    if start == -1:
        return None
    end = entry.find(">", start + 1)
    if end == -1:
        return None

    candidate = entry[start + 1:end].strip()
    if not candidate or not _is_absolute_url(candidate):
        return None
    return candidate


def require_link_header(resp: requests.Response, url: str) -> str:
    """Return the raw Link header; its absence breaks the pagination contract."""
    header = (resp.headers or {}).get("Link")
    if header is None:
        raise SearchError(f'No "Link" header in search response for {url}', url, resp.status_code)
    return header


__all__ = [
    "NEXT_REL_MARKER",
    "build_session",
    "response_excerpt",
    "log_http_error",
    "extract_next_link",
    "require_link_header",
]
