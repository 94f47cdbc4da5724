"""Command line scoring of a heart rate sample file."""
import argparse
import asyncio
import json
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from hrscore.analysis.filters import filter_heart_rate_samples
from hrscore.config import ScoringConfig, settings
from hrscore.exceptions import HRScoreError
from hrscore.main import configure_logging
from hrscore.models.health import Gender, HealthProfile
from hrscore.models.workout import HeartRateSample
from hrscore.scoring import StatsCalculator, ZoneBasedScoring

_samples_adapter = TypeAdapter(list[HeartRateSample])


def load_samples(path: Path) -> list[HeartRateSample]:
    """Load samples from a JSON list of {"timestamp": ..., "heart_rate": ...} objects."""
    return _samples_adapter.validate_json(path.read_bytes())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Calculate time in heart rate zones and stamina/strength points from a JSON sample file."
    )
    parser.add_argument("samples", type=Path, help="Path to JSON file with heart rate samples.")
    parser.add_argument("--age", type=int, default=30, help="Age in years. Default 30.")
    parser.add_argument("--gender", default="other", help="male, female or other. Default other.")
    parser.add_argument("--resting-hr", type=int, default=60, help="Resting heart rate. Default 60.")
    parser.add_argument("--max-hr", type=int, help="Max heart rate. Estimated from age and gender if omitted.")
    parser.add_argument("--scoring-config", type=Path, help="Path to scoring YAML (point tables, multipliers).")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        samples = load_samples(args.samples)
    except (OSError, ValidationError) as e:
        print(f"Could not read samples from {args.samples}: {e}", file=sys.stderr)
        return 1

    scoring_config = (
        ScoringConfig.from_yaml(args.scoring_config) if args.scoring_config
        else settings.load_scoring_config()
    )
    profile = HealthProfile(
        age=args.age,
        gender=Gender.parse(args.gender),
        resting_heart_rate=args.resting_hr,
        max_heart_rate=args.max_hr,
    )

    filter_heart_rate_samples(samples)
    calculator = StatsCalculator(ZoneBasedScoring(scoring_config))
    try:
        stat_change = asyncio.run(calculator.calculate_stat_changes(profile, samples))
    except HRScoreError as e:
        print(f"Scoring failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(stat_change.model_dump(mode="json"), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
