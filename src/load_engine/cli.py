"""Command-line report over an activity export.

Usage:
    load-engine report activities.json --tz Europe/Paris
    load-engine report activities.json --tz UTC --days 42 --max-hr 188 --scheme three_zone
    python -m load_engine.cli report activities.json --now 2024-03-01T07:00:00+01:00
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfoNotFoundError

from activity_import import ActivityImportError, load_activities, parse_datetime

from load_engine.config import EngineConfig
from load_engine.engine import DEFAULT_WINDOW_DAYS, LoadEngine
from load_engine.exceptions import LoadEngineError
from load_engine.math.aggregation import resolve_timezone
from load_engine.models.enums import ZoneScheme
from load_engine.serialization import to_json_string

logger = logging.getLogger(__name__)


def _parse_now(value: str | None, tz: tzinfo) -> datetime:
    if value is None:
        return datetime.now(tz)
    moment = parse_datetime(value)
    if moment is None:
        raise argparse.ArgumentTypeError(f"invalid ISO timestamp: {value}")
    return moment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="load-engine", description="Training load, zones and readiness report"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    report = sub.add_parser("report", help="Print a JSON report for an activity export")
    report.add_argument("path", help="JSON file with a list of activities")
    report.add_argument("--tz", default="UTC", help="Athlete IANA timezone (default: UTC)")
    report.add_argument(
        "--days", type=int, default=DEFAULT_WINDOW_DAYS, help="Load window length in days"
    )
    report.add_argument("--now", default=None, help="Reference instant, ISO 8601 (default: now)")
    report.add_argument("--max-hr", type=int, default=None, help="Manual max heart rate override")
    report.add_argument(
        "--scheme",
        choices=[s.value for s in ZoneScheme],
        default=ZoneScheme.FIVE_ZONE.value,
        help="Primary zone scheme",
    )
    report.add_argument(
        "--weekly-target", type=float, default=None, help="Personalised weekly stress target"
    )
    return parser


def run_report(args: argparse.Namespace) -> str:
    """Load activities, run the engine and return the JSON report."""
    tz = resolve_timezone(args.tz)
    now = _parse_now(args.now, tz)
    records = load_activities(args.path)

    engine = LoadEngine(EngineConfig.from_env())
    report = engine.report(
        records,
        now=now,
        tz=tz,
        days=args.days,
        weekly_target=args.weekly_target,
        max_hr_override=args.max_hr,
        scheme=ZoneScheme(args.scheme),
    )
    logger.info(
        "Report for %d activities: status %s, readiness %d",
        len(records),
        report.training_load.metrics.status.value,
        report.readiness.recovery_score,
    )
    return to_json_string(report)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = run_report(args)
    except (ActivityImportError, LoadEngineError) as exc:
        logger.error("%s", exc)
        return 1
    except ZoneInfoNotFoundError:
        logger.error("Unknown timezone: %s", args.tz)
        return 1
    except argparse.ArgumentTypeError as exc:
        logger.error("%s", exc)
        return 1
    except ValueError as exc:
        # Non-numeric LOAD_ENGINE_* environment values.
        logger.error("Invalid configuration: %s", exc)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
