"""Credential loading from the environment or a local (gitignored) JSON file."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigurationError

DEFAULT_SECRETS_FILENAME = "local_secrets.json"
TOKEN_ENV_VARS = ("GITHUB_ACCESS_TOKEN", "GITHUB_TOKEN")


def _default_secrets_path() -> Path:
    root = Path(__file__).resolve().parents[1]
    return root / DEFAULT_SECRETS_FILENAME


def load_local_secrets(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Load secrets from a JSON file; return {} when missing or unreadable."""

    candidate = path or os.getenv("BUS_FACTOR_SECRETS_FILE") or _default_secrets_path()
    secrets_path = Path(candidate).expanduser()
    if not secrets_path.exists():
        return {}
    try:
        with secrets_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as exc:
        print(f"[warn] unable to read secrets file {secrets_path}: {exc}")
        return {}
    return data if isinstance(data, dict) else {}


def _token_from_secrets(secrets: Dict[str, Any]) -> Optional[str]:
    token = secrets.get("github_token")
    if isinstance(token, str) and token.strip():
        return token.strip()
    tokens = secrets.get("github_tokens") or []
    if isinstance(tokens, list):
        for candidate in tokens:
            if isinstance(candidate, str) and candidate.strip():
                return candidate.strip()
    return None


def resolve_github_token(path: Optional[str | Path] = None) -> str:
    """Return the GitHub token, checking env vars before the secrets file.

    Raises ConfigurationError when no source provides a non-empty token.
    """

    for name in TOKEN_ENV_VARS:
        value = (os.getenv(name) or "").strip()
        if value:
            return value

    token = _token_from_secrets(load_local_secrets(path))
    if token:
        return token

    sources = ", ".join(TOKEN_ENV_VARS)
    raise ConfigurationError(
        f"No GitHub token configured; set one of {sources} or add 'github_token' to {DEFAULT_SECRETS_FILENAME}"
    )


__all__ = [
    "DEFAULT_SECRETS_FILENAME",
    "TOKEN_ENV_VARS",
    "load_local_secrets",
    "resolve_github_token",
]
