"""Deterministic daily reading generator.

A reading depends only on the zodiac sign and the calendar date. The seeded
stream is consumed in a fixed order (energy, guidance, transits, lucky
attributes, compatibility), so reordering any step changes every reading
after it. The briefing rotates by day of year and does not draw from the
stream.
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime

from celestine.bodies import SIGNS, compatible_signs, round_half_up
from celestine.config import get_settings
from celestine.lunar import moon_phase
from celestine.meanings import phase_guidance
from celestine.provider import EphemerisProvider
from celestine.rng import Mulberry32, create_rng, pick, pick_n, shuffled
from celestine.schemas.readings import (
    Compatibility,
    GeneratedDailyReading,
    ReadingMoonPhase,
    TransitHighlight,
)
from celestine.templates import (
    BRIEFING_TEMPLATES,
    DO_TEMPLATES,
    DONT_TEMPLATES,
    LUCKY_COLORS,
    LUCKY_TIMES,
    TRANSIT_TEMPLATES,
)

logger = logging.getLogger(__name__)


def _parse_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid date '{value}'; expected YYYY-MM-DD") from None


def _validate_sign(zodiac_sign: str) -> str:
    if zodiac_sign not in SIGNS:
        raise ValueError(f"Unknown zodiac sign '{zodiac_sign}'")
    return zodiac_sign


def _energy_score(rng: Mulberry32) -> int:
    base = int(rng() * 5) + 4
    element_bonus = 1 if rng() > 0.6 else 0
    cosmic_bonus = 1 if rng() > 0.8 else 0
    return max(1, min(10, base + element_bonus + cosmic_bonus))


def _briefing(zodiac_sign: str, day: date) -> str:
    templates = BRIEFING_TEMPLATES[zodiac_sign]
    return templates[day.timetuple().tm_yday % len(templates)]


def _transit_highlights(rng: Mulberry32) -> tuple[TransitHighlight, ...]:
    chosen = pick_n(TRANSIT_TEMPLATES, 3, rng)
    return tuple(
        TransitHighlight(label=t.label, symbol=t.symbol, description=pick(t.descriptions, rng))
        for t in chosen
    )


def _reading_moon_phase(day: date, provider: EphemerisProvider | None) -> ReadingMoonPhase:
    noon = datetime(day.year, day.month, day.day, 12, tzinfo=UTC)
    lunar = moon_phase(noon, provider)
    return ReadingMoonPhase(
        name=lunar.phase_name,
        emoji=lunar.emoji,
        illumination=int(round_half_up(lunar.illumination * 100)),
        guidance=phase_guidance(lunar.phase_name),
    )


def daily_reading(
    zodiac_sign: str,
    iso_date: str | date,
    provider: EphemerisProvider | None = None,
) -> GeneratedDailyReading:
    """Generate the reading for a sign on a date.

    Args:
        zodiac_sign: Sign name, capitalized (``"Scorpio"``)
        iso_date: Calendar date as ``YYYY-MM-DD`` or a ``date``
        provider: Ephemeris source for the moon phase, the Swiss Ephemeris by default

    Returns:
        GeneratedDailyReading; identical inputs always produce identical readings

    Raises:
        ValueError: If the sign is unknown or the date cannot be parsed
    """
    zodiac_sign = _validate_sign(zodiac_sign)
    day = _parse_date(iso_date)
    date_str = day.isoformat()

    rng = create_rng(zodiac_sign, date_str, get_settings().reading_salt)

    energy_score = _energy_score(rng)
    briefing = _briefing(zodiac_sign, day)

    dos = pick_n(DO_TEMPLATES, 2, rng)
    donts = pick_n(DONT_TEMPLATES, 2, rng)
    transits = _transit_highlights(rng)

    lucky_color = pick(LUCKY_COLORS, rng)
    lucky_number = int(rng() * 99) + 1
    lucky_time = pick(LUCKY_TIMES, rng)

    best, rising = shuffled(compatible_signs(zodiac_sign), rng)[:2]

    logger.debug("Generated reading for %s on %s (energy %d)", zodiac_sign, date_str, energy_score)

    return GeneratedDailyReading(
        date=date_str,
        zodiac_sign=zodiac_sign,
        energy_score=energy_score,
        briefing=briefing,
        dos=(dos[0], dos[1]),
        donts=(donts[0], donts[1]),
        transits=transits,
        lucky_color=lucky_color,
        lucky_number=lucky_number,
        lucky_time=lucky_time,
        compatibility=Compatibility(best=best, rising=rising),
        moon_phase=_reading_moon_phase(day, provider),
    )


def today_reading(
    zodiac_sign: str,
    provider: EphemerisProvider | None = None,
) -> GeneratedDailyReading:
    """Reading for the current UTC date."""
    return daily_reading(zodiac_sign, datetime.now(UTC).date(), provider)
