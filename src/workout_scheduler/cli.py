#!/usr/bin/env python3
"""
Workout Scheduler CLI.

Suggest workout slots from exported preferences and activity history.

Usage:
    workout-scheduler suggest --preferences prefs.json --activities log.json
    workout-scheduler suggest --preferences prefs.json --calendar mock --weekly
    workout-scheduler serve --port 8000
"""

import argparse
import asyncio
import json
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from .config import get_settings
from .integrations.calendar import CalendarProvider
from .models.activity import Activity
from .models.schedule import CalendarIntegration, CalendarProviderType, SchedulePreference
from .models.suggestions import WorkoutSuggestion
from .scheduling.engine import WEEKLY_PLAN_DAYS, SchedulingService
from .utils.log_sanitizer import configure_logging
from .utils.time_utils import parse_hhmm


# ANSI color codes
class Colors:
    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def format_score(score: float) -> str:
    """Format a suggestion score with color."""
    if score >= 0.8:
        color = Colors.GREEN
    elif score >= 0.6:
        color = Colors.YELLOW
    else:
        color = Colors.RED
    return f"{color}{score:.2f}{Colors.RESET}"


def load_preferences(path: Path) -> SchedulePreference:
    """Read a schedule preference from a JSON file."""
    return SchedulePreference.model_validate_json(path.read_text(encoding="utf-8"))


def load_activities(path: Optional[Path]) -> List[Activity]:
    """Read an activity list from a JSON file; no file means no history."""
    if path is None:
        return []
    return TypeAdapter(List[Activity]).validate_json(path.read_text(encoding="utf-8"))


def print_suggestions(suggestions: List[WorkoutSuggestion], title: str) -> None:
    print()
    print(f"{Colors.BOLD}{title}{Colors.RESET}")
    print("=" * 60)

    if not suggestions:
        print("  No open slots found. Try widening your preferred time windows.")
        print()
        return

    for s in suggestions:
        print(
            f"  {s.suggested_date.strftime('%a %Y-%m-%d')} "
            f"{Colors.CYAN}{s.suggested_time.strftime('%H:%M')}{Colors.RESET}  "
            f"{s.activity_type.label:<9} {s.duration:>3} min  "
            f"score {format_score(s.score)}"
        )
        print(f"      {s.reasoning}")
    print()


def cmd_suggest(args) -> int:
    """Generate suggestions from files."""
    settings = get_settings()
    try:
        preferences = load_preferences(args.preferences)
        activities = load_activities(args.activities)
    except (OSError, ValidationError) as e:
        print(f"{Colors.RED}Could not read input: {e}{Colors.RESET}", file=sys.stderr)
        return 1

    start = args.start or date.today()
    days = args.days or settings.default_days_ahead

    # Weekly plans always cover 7 days
    horizon = max(days, WEEKLY_PLAN_DAYS) if args.weekly else days
    integration = CalendarIntegration(provider=CalendarProviderType(args.calendar))
    events = asyncio.run(CalendarProvider().get_calendar_events(integration, horizon, start))

    scheduler = SchedulingService(
        working_hours_start=parse_hhmm(settings.working_hours_start),
        working_hours_end=parse_hhmm(settings.working_hours_end),
    )
    if args.weekly:
        suggestions = scheduler.optimize_weekly_schedule(activities, preferences, events, start)
        title = f"Weekly plan ({preferences.days_per_week} workouts)"
    else:
        suggestions = scheduler.generate_suggestions(
            activities, preferences, events, days, start
        )
        title = f"Workout suggestions for the next {days} days"

    if args.json:
        print(json.dumps([s.model_dump(mode="json") for s in suggestions], indent=2))
    else:
        print_suggestions(suggestions, title)
    return 0


def cmd_serve(args) -> int:
    """Run the HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "workout_scheduler.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        reload=settings.debug,
    )
    return 0


def _date_arg(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workout-scheduler",
        description="Ranked, explainable workout slot suggestions",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from settings)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    suggest = subparsers.add_parser("suggest", help="Suggest workout slots")
    suggest.add_argument("--preferences", type=Path, required=True, help="Schedule preference JSON")
    suggest.add_argument("--activities", type=Path, default=None, help="Activity history JSON")
    suggest.add_argument(
        "--calendar",
        choices=[CalendarProviderType.MANUAL.value, CalendarProviderType.MOCK.value],
        default=CalendarProviderType.MANUAL.value,
        help="Busy-block source",
    )
    suggest.add_argument("--days", type=int, default=None, help="Days ahead to scan")
    suggest.add_argument("--start", type=_date_arg, default=None, help="First day (YYYY-MM-DD)")
    suggest.add_argument("--weekly", action="store_true", help="One workout per day plan")
    suggest.add_argument("--json", action="store_true", help="Print JSON instead of text")
    suggest.set_defaults(func=cmd_suggest)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
