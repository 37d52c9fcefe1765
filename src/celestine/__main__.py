"""Command-line entry point: python -m celestine."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from pydantic import TypeAdapter

from celestine.calculator import current_transits, daily_summary
from celestine.config import get_settings
from celestine.events import month_events
from celestine.formatting import (
    format_events,
    format_moon,
    format_reading,
    format_summary,
    format_transits,
)
from celestine.lunar import moon_phase
from celestine.reading import daily_reading
from celestine.schemas.ephemeris import PlanetPosition

logger = logging.getLogger("celestine")

_natal_adapter = TypeAdapter(list[PlanetPosition])


def _parse_instant(value: str | None) -> datetime:
    if not value:
        return datetime.now(UTC)
    try:
        instant = datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid instant '{value}'; expected ISO 8601") from None
    return instant if instant.tzinfo else instant.replace(tzinfo=UTC)


def _load_natal(path: str | None) -> list[PlanetPosition] | None:
    if not path:
        return None
    return _natal_adapter.validate_json(Path(path).read_text(encoding="utf-8"))


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="celestine", description="Astrological computation engine.")
    parser.add_argument("--text", action="store_true", help="Print formatted text instead of JSON.")
    sub = parser.add_subparsers(dest="command", required=True)

    transits = sub.add_parser("transits", help="Planet positions at an instant.")
    transits.add_argument("instant", nargs="?", type=_parse_instant, default=None)

    moon = sub.add_parser("moon", help="Lunar phase at an instant.")
    moon.add_argument("instant", nargs="?", type=_parse_instant, default=None)

    summary = sub.add_parser("summary", help="Daily cosmic weather.")
    summary.add_argument("instant", nargs="?", type=_parse_instant, default=None)
    summary.add_argument("--natal", help="JSON file with a list of natal planet positions.")

    month = sub.add_parser("month", help="Lunations, ingresses, and stations in a month.")
    month.add_argument("year", type=int)
    month.add_argument("month", type=int)

    reading = sub.add_parser("reading", help="Deterministic daily reading for a sign.")
    reading.add_argument("sign")
    reading.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD (default: today, UTC).")
    return parser


def _dump(result) -> str:
    if isinstance(result, list):
        return json.dumps([item.model_dump(mode="json") for item in result], indent=2, ensure_ascii=False)
    return json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    instant = getattr(args, "instant", None) or datetime.now(UTC)
    try:
        if args.command == "transits":
            result = current_transits(instant)
            text = format_transits(result)
        elif args.command == "moon":
            result = moon_phase(instant)
            text = format_moon(result)
        elif args.command == "summary":
            result = daily_summary(instant, _load_natal(args.natal))
            text = format_summary(result)
        elif args.command == "month":
            result = month_events(args.year, args.month)
            text = format_events(result)
        else:
            day = args.date or datetime.now(UTC).date().isoformat()
            result = daily_reading(args.sign, day)
            text = format_reading(result)
    except (ValueError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 2

    print(text if args.text else _dump(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
