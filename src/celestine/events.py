"""Monthly calendar of lunations, ingresses, and stations."""

from __future__ import annotations

import calendar
import logging
from datetime import UTC, datetime, timedelta

from celestine.bodies import (
    ALL_BODIES,
    DEFAULT_SYMBOL,
    OUTER_BODIES,
    PLANET_SYMBOLS,
    zodiac_sign_of,
)
from celestine.calculator import is_retrograde
from celestine.lunar import FULL_MOON_ANGLE
from celestine.provider import EphemerisProvider, get_default_provider
from celestine.schemas.ephemeris import MonthEvent

logger = logging.getLogger(__name__)

# Daily sample time
_SAMPLE_HOUR = 12


def _lunation_event(kind: str, day: datetime, provider: EphemerisProvider) -> MonthEvent:
    moon_sign = zodiac_sign_of(provider.longitude("Moon", day))
    if kind == "full_moon":
        return MonthEvent(
            date=day,
            type="full_moon",
            description=f"Full Moon in {moon_sign}",
            impact="significant",
            emoji="🌕",
        )
    return MonthEvent(
        date=day,
        type="new_moon",
        description=f"New Moon in {moon_sign}",
        impact="significant",
        emoji="🌑",
    )


def month_events(
    year: int,
    month: int,
    provider: EphemerisProvider | None = None,
) -> list[MonthEvent]:
    """Scan every day of a month for lunations, sign ingresses, and stations.

    Each day is sampled at noon UTC and compared to the previous day's
    sample. Moon ingresses are skipped. Events come back in date order.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month {month}; expected 1-12")

    provider = provider or get_default_provider()
    days_in_month = calendar.monthrange(year, month)[1]
    first_day = datetime(year, month, 1, _SAMPLE_HOUR, tzinfo=UTC)
    day_before = first_day - timedelta(days=1)

    # Moon ingresses are too frequent to report
    tracked = [body for body in ALL_BODIES if body != "Moon"]

    # Seed trackers from the day before the month starts
    previous_signs: dict[str, str] = {}
    previous_retro: dict[str, bool] = {}
    for body in tracked:
        previous_signs[body] = zodiac_sign_of(provider.longitude(body, day_before))
        previous_retro[body] = is_retrograde(body, day_before, provider)
    previous_angle = provider.moon_phase_angle(day_before)

    events: list[MonthEvent] = []
    for offset in range(days_in_month):
        day = first_day + timedelta(days=offset)

        angle = provider.moon_phase_angle(day)
        if previous_angle < FULL_MOON_ANGLE <= angle:
            events.append(_lunation_event("full_moon", day, provider))
        # The phase angle only grows, so a drop means it wrapped through 0/360
        if angle < previous_angle:
            events.append(_lunation_event("new_moon", day, provider))
        previous_angle = angle

        for body in tracked:
            sign = zodiac_sign_of(provider.longitude(body, day))
            retro = is_retrograde(body, day, provider)

            if sign != previous_signs[body]:
                events.append(MonthEvent(
                    date=day,
                    type="ingress",
                    description=f"{body} enters {sign}",
                    impact="significant" if body in OUTER_BODIES else "neutral",
                    emoji=PLANET_SYMBOLS.get(body, DEFAULT_SYMBOL),
                ))

            if retro != previous_retro[body]:
                direction = "retrograde" if retro else "direct"
                events.append(MonthEvent(
                    date=day,
                    type=direction,
                    description=f"{body} stations {direction} in {sign}",
                    impact="challenging",
                    emoji="⏪" if retro else "⏩",
                ))

            previous_signs[body] = sign
            previous_retro[body] = retro

    events.sort(key=lambda e: e.date)
    logger.debug("Found %d events for %04d-%02d", len(events), year, month)
    return events
