"""Main entry point for RecruitAI."""

import argparse
import json
import sys
from pathlib import Path

from recruitai import __version__
from recruitai.config.settings import Settings
from recruitai.utils.logging import configure_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="recruitai",
        description="RecruitAI: score how well a candidate matches a job listing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m recruitai match --candidate ana.yaml --job backend.json
  python -m recruitai model-info
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    match_parser = subparsers.add_parser(
        "match",
        help="Score a candidate against a job listing",
    )
    match_parser.add_argument(
        "--candidate",
        type=Path,
        required=True,
        help="Path to candidate record (YAML or JSON)",
    )
    match_parser.add_argument(
        "--job",
        type=Path,
        required=True,
        help="Path to job listing record (YAML or JSON)",
    )
    match_parser.add_argument(
        "--model",
        type=Path,
        default=None,
        help="Model file to load instead of the bundled resource",
    )
    match_parser.add_argument(
        "--include-job-fields",
        action="store_true",
        help="Include the job listing in the model input",
    )
    match_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full outcome as JSON",
    )

    info_parser = subparsers.add_parser(
        "model-info",
        help="Show which model file would be loaded",
    )
    info_parser.add_argument(
        "--model",
        type=Path,
        default=None,
        help="Model file to check instead of the bundled resource",
    )

    return parser


def _matching_config(parsed: argparse.Namespace):
    from recruitai.matching.config import MatchingConfig

    overrides: dict = {}
    if getattr(parsed, "model", None) is not None:
        overrides["model_path"] = parsed.model
    if getattr(parsed, "include_job_fields", False):
        overrides["include_job_fields"] = True
    return MatchingConfig(**overrides)


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.debug(f"RecruitAI v{__version__} running {parsed.mode}")

    if parsed.mode == "model-info":
        from recruitai.matching.classifier import resolve_model_path

        try:
            config = _matching_config(parsed)
        except Exception as e:
            print(f"Error loading settings: {e}", file=sys.stderr)
            return 1

        model_path = resolve_model_path(config)
        print(f"Model: {model_path}")
        print(f"Exists: {'yes' if model_path.is_file() else 'no'}")
        return 0

    if parsed.mode == "match":
        from pydantic import ValidationError

        from recruitai.matching.classifier import ModelInitializationError
        from recruitai.matching.records import RecordLoader
        from recruitai.matching.service import DEFAULT_SCORE, MatchScorer

        try:
            config = _matching_config(parsed)
        except Exception as e:
            print(f"Error loading settings: {e}", file=sys.stderr)
            return 1

        loader = RecordLoader()
        try:
            candidate = loader.load_candidate(parsed.candidate)
            job = loader.load_job(parsed.job)
        except (FileNotFoundError, ValueError, ValidationError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        try:
            scorer = MatchScorer(config=config)
        except ModelInitializationError as e:
            print(f"Fatal: {e}", file=sys.stderr)
            return 1

        if parsed.json:
            outcome = scorer.evaluate(candidate, job)
            payload = {
                "candidate_id": str(candidate.id),
                "job_id": str(job.id),
                "input_text": outcome.input_text,
                "label": outcome.label,
                "score": outcome.score if outcome.has_score else DEFAULT_SCORE,
                "confidence": outcome.confidence,
            }
            print(json.dumps(payload, indent=2))
        else:
            print(f"{scorer.match(candidate, job):.4f}")

        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
