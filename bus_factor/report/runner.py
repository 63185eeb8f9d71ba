"""Entry point wiring CLI settings, the aggregator, and console output."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional

from ..analysis.aggregator import compute_bus_factor
from ..errors import PipelineError
from ..retrieval.models import BusFactorResult
from .config import ReportSettings, parse_args, resolve_settings


def format_result(result: BusFactorResult) -> str:
    return (
        f"project: {result.repository_name:<30} "
        f"user: {result.top_contributor.login:<30} "
        f"percentage: {result.concentration_ratio:.2f}"
    )


def print_results(results: Iterable[BusFactorResult]) -> None:
    for result in results:
        print(format_result(result))


def run(settings: ReportSettings) -> List[BusFactorResult]:
    """Compute the report for resolved settings."""
    print(f"Programming language: {settings.language}, project count: {settings.project_count}")
    return compute_bus_factor(
        settings.language,
        settings.project_count,
        contributors_limit=settings.contributors_limit,
        threshold=settings.threshold,
    )


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point; exits non-zero on configuration or search failures."""

    settings = resolve_settings(parse_args(argv))
    try:
        results = run(settings)
    except PipelineError as exc:
        print(f"[error] {exc}")
        sys.exit(1)
    print_results(results)


__all__ = ["format_result", "print_results", "run", "main"]
