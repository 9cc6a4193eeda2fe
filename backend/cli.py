"""
Workout Insights CLI - build an insights report from the command line.

Usage:
    python -m backend --input export.json            - Report from a JSON export
    python -m backend --user-id <id>                 - Report from Supabase
    python -m backend --input export.json --now 2024-01-15T12:00:00Z -o report.json

A JSON export is an object with ``exercises`` and ``sets`` arrays, in either
snake_case or the logging app's camelCase field names.
"""
import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from backend.core.insights_service import InsightsReport, InsightsService, build_insights_report
from backend.database import get_supabase_client
from backend.settings import get_settings
from backend.utils.dates import ensure_utc, utc_now
from domain.models import Exercise, WorkoutSet
from infrastructure.db import SupabaseExercisesRepository, SupabaseSetsRepository

logger = logging.getLogger(__name__)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp; a trailing Z and naive values mean UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid timestamp: {value}")
    return ensure_utc(parsed)


def load_export(data: Dict[str, Any]) -> Tuple[List[WorkoutSet], List[Exercise]]:
    """
    Validate a JSON export into domain models.

    Raises:
        ValueError: If the export is not an object with list fields
        ValidationError: If any record fails validation
    """
    if not isinstance(data, dict):
        raise ValueError("Export must be a JSON object with 'exercises' and 'sets'")

    raw_exercises = data.get("exercises", [])
    raw_sets = data.get("sets", [])
    if not isinstance(raw_exercises, list) or not isinstance(raw_sets, list):
        raise ValueError("'exercises' and 'sets' must be arrays")

    exercises = [Exercise.model_validate(row) for row in raw_exercises]
    sets = [WorkoutSet.model_validate(row) for row in raw_sets]
    return sets, exercises


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Derive training insights from logged workout sets"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-i", "--input", help="JSON export file path")
    source.add_argument("--user-id", help="Read the user's records from Supabase")
    parser.add_argument(
        "--now",
        type=parse_timestamp,
        help="Reference instant as ISO 8601 (default: current UTC time)",
    )
    parser.add_argument(
        "--exercise-count",
        type=int,
        help="Exercises in the progressive overload analysis",
    )
    parser.add_argument("--limit", type=int, help="Maximum focus suggestions")
    parser.add_argument("--unit", choices=["lbs", "kg"], help="Unit for today's stats")
    parser.add_argument("-o", "--output", help="Output JSON file path (default: stdout)")
    return parser


def _report_from_file(args: argparse.Namespace, now: datetime) -> InsightsReport:
    settings = get_settings()
    with open(args.input, "r") as f:
        data = json.load(f)

    sets, exercises = load_export(data)
    logger.info(f"Loaded {len(sets)} sets and {len(exercises)} exercises from {args.input}")
    return build_insights_report(
        sets,
        exercises,
        now,
        overload_exercise_count=args.exercise_count or settings.overload_exercise_count,
        suggestion_limit=args.limit or settings.focus_suggestion_limit,
        weight_unit=args.unit or settings.default_weight_unit,
    )


def _report_from_supabase(args: argparse.Namespace, now: datetime) -> InsightsReport:
    settings = get_settings()
    update: Dict[str, Any] = {}
    if args.exercise_count:
        update["overload_exercise_count"] = args.exercise_count
    if args.limit:
        update["focus_suggestion_limit"] = args.limit
    if args.unit:
        update["default_weight_unit"] = args.unit
    if update:
        settings = settings.model_copy(update=update)

    client = get_supabase_client(settings)
    if client is None:
        raise RuntimeError("Supabase is not configured; set SUPABASE_URL and a key")

    service = InsightsService(
        SupabaseSetsRepository(client),
        SupabaseExercisesRepository(client),
        settings,
    )
    return service.get_insights_report(args.user_id, now=now)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    for name in ("exercise_count", "limit"):
        value = getattr(args, name)
        if value is not None and value < 1:
            parser.error(f"--{name.replace('_', '-')} must be at least 1")

    now = args.now or utc_now()

    try:
        if args.input:
            report = _report_from_file(args, now)
        else:
            report = _report_from_supabase(args, now)

        output = json.dumps(report.to_dict(), indent=2)

        if args.output:
            with open(args.output, "w") as f:
                f.write(output)
        else:
            print(output)

    except FileNotFoundError:
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Error: Invalid record: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Insights CLI failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
