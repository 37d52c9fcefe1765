"""Lunar phase, moon sign, and next lunation calculations."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta

from celestine.bodies import longitude_to_sign, normalize_degrees, round_half_up
from celestine.config import get_settings
from celestine.provider import EphemerisProvider, as_utc, get_default_provider
from celestine.schemas.ephemeris import LunarPhaseInfo

logger = logging.getLogger(__name__)

# Named lunar phases by phase angle: (upper bound exclusive, name, emoji).
# Quarters are 22.5 degrees wide, the intermediate phases 67.5.
PHASE_BOUNDARIES: tuple[tuple[float, str, str], ...] = (
    (11.25, "New Moon", "🌑"),
    (78.75, "Waxing Crescent", "🌒"),
    (101.25, "First Quarter", "🌓"),
    (168.75, "Waxing Gibbous", "🌔"),
    (191.25, "Full Moon", "🌕"),
    (258.75, "Waning Gibbous", "🌖"),
    (281.25, "Last Quarter", "🌗"),
    (348.75, "Waning Crescent", "🌘"),
    (360.0, "New Moon", "🌑"),
)

FULL_MOON_ANGLE = 180.0
NEW_MOON_ANGLE = 0.0

# Substituted when no lunation turns up inside the search window
SEARCH_FALLBACK = timedelta(days=15)


def _phase_entry(phase_angle: float) -> tuple[float, str, str]:
    angle = normalize_degrees(phase_angle)
    for entry in PHASE_BOUNDARIES:
        if angle < entry[0]:
            return entry
    return PHASE_BOUNDARIES[-1]


def phase_name_for_angle(phase_angle: float) -> str:
    """Named phase bucket for a Sun-Moon phase angle."""
    return _phase_entry(phase_angle)[1]


def phase_emoji_for_angle(phase_angle: float) -> str:
    return _phase_entry(phase_angle)[2]


def next_lunation(
    target_angle: float,
    instant: datetime,
    provider: EphemerisProvider,
    limit_days: float | None = None,
) -> datetime:
    """Next time the phase angle reaches ``target_angle``, or ``instant + 15 days``."""
    instant = as_utc(instant)
    if limit_days is None:
        limit_days = get_settings().phase_search_days

    found = provider.search_moon_phase(target_angle, instant, limit_days)
    if found is None:
        logger.warning(
            "No %.0f° lunation within %s days of %s, using fallback",
            target_angle, limit_days, instant.isoformat(),
        )
        return instant + SEARCH_FALLBACK
    return as_utc(found)


def _days_between(start: datetime, end: datetime) -> float:
    return round_half_up((end - start).total_seconds() / 86400.0, 1)


def moon_phase(instant: datetime, provider: EphemerisProvider | None = None) -> LunarPhaseInfo:
    """Lunar phase details for an instant."""
    provider = provider or get_default_provider()
    instant = as_utc(instant)

    phase_angle = normalize_degrees(provider.moon_phase_angle(instant))
    illumination = min(1.0, max(0.0, provider.illumination(instant)))

    moon_longitude = normalize_degrees(provider.longitude("Moon", instant))
    moon_sign, moon_degree = longitude_to_sign(moon_longitude)
    _, phase_name, emoji = _phase_entry(phase_angle)

    next_full = next_lunation(FULL_MOON_ANGLE, instant, provider)
    next_new = next_lunation(NEW_MOON_ANGLE, instant, provider)

    return LunarPhaseInfo(
        phase_name=phase_name,
        emoji=emoji,
        illumination=illumination,
        phase_angle=phase_angle,
        moon_sign=moon_sign,
        moon_longitude=moon_longitude,
        moon_sign_degree=math.floor(moon_degree),
        days_until_full_moon=_days_between(instant, next_full),
        days_until_new_moon=_days_between(instant, next_new),
        next_full_moon_date=next_full,
        next_new_moon_date=next_new,
    )
