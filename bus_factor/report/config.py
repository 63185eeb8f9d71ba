"""Command-line configuration for the bus-factor report."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import List, Optional

from ..retrieval.config import BUS_FACTOR_THRESHOLD, CONTRIBUTORS_LIMIT


@dataclass(frozen=True)
class ReportSettings:
    """Resolved runtime settings for one report run."""

    language: str
    project_count: int
    contributors_limit: int
    threshold: float


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {raw}")
    return value


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw}")
    return value


def _ratio(raw: str) -> float:
    value = float(raw)
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError(f"expected a ratio between 0 and 1, got {raw}")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """Return the CLI parser used by the report entry point."""

    parser = argparse.ArgumentParser(
        description="Report most-starred GitHub repositories where one contributor dominates.",
    )
    parser.add_argument("--language", required=True,
                        help="programming language of the GitHub repositories")
    parser.add_argument("--project-count", "--project_count", dest="project_count",
                        type=_non_negative_int, required=True,
                        help="number of repositories to read from GitHub")
    parser.add_argument("--contributors-limit", type=_positive_int, default=str(CONTRIBUTORS_LIMIT))
    parser.add_argument("--threshold", type=_ratio, default=str(BUS_FACTOR_THRESHOLD))
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; accepts argv overrides for testing."""

    return build_arg_parser().parse_args(argv)


def resolve_settings(args: Optional[argparse.Namespace] = None) -> ReportSettings:
    args = args or parse_args()
    return ReportSettings(
        language=args.language,
        project_count=int(args.project_count),
        contributors_limit=int(args.contributors_limit),
        threshold=float(args.threshold),
    )


__all__ = ["ReportSettings", "build_arg_parser", "parse_args", "resolve_settings"]
