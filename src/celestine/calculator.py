"""Main ephemeris calculator - current_transits() and daily_summary() entry points."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from celestine.aspects import count_by_nature, find_transit_aspects, signed_delta
from celestine.bodies import (
    ALL_BODIES,
    CHALLENGING_ASPECTS,
    DEFAULT_SYMBOL,
    HARMONIOUS_ASPECTS,
    LUMINARIES,
    PLANET_SYMBOLS,
    decompose_longitude,
    normalize_degrees,
)
from celestine.config import get_settings
from celestine.lunar import moon_phase
from celestine.meanings import moon_sign_energy
from celestine.provider import EphemerisProvider, as_utc, get_default_provider
from celestine.schemas.ephemeris import DailyTransitSummary, PlanetPosition

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(hours=24)

BASE_ENERGY = 7
HIGH_RETROGRADE_ENERGY = 4
SOME_RETROGRADE_ENERGY = 6
HIGH_RETROGRADE_COUNT = 3


def _clamp_energy(value: int) -> int:
    return max(1, min(10, value))


def is_retrograde(body: str, instant: datetime, provider: EphemerisProvider) -> bool:
    """Whether ``body`` moves backward over the next 24 hours. Luminaries never do."""
    if body in LUMINARIES:
        return False
    now = provider.longitude(body, instant)
    later = provider.longitude(body, instant + _ONE_DAY)
    return signed_delta(now, later) < 0


def calculate_position(body: str, instant: datetime, provider: EphemerisProvider) -> PlanetPosition:
    longitude = normalize_degrees(provider.longitude(body, instant))
    sign, degree, minute = decompose_longitude(longitude)
    return PlanetPosition(
        name=body,
        longitude=longitude,
        sign=sign,
        sign_degree=degree,
        sign_minute=minute,
        retrograde=is_retrograde(body, instant, provider),
        symbol=PLANET_SYMBOLS.get(body, DEFAULT_SYMBOL),
    )


def current_transits(
    instant: datetime,
    provider: EphemerisProvider | None = None,
) -> list[PlanetPosition]:
    """Positions of the ten tracked bodies at ``instant``."""
    provider = provider or get_default_provider()
    instant = as_utc(instant)
    return [calculate_position(body, instant, provider) for body in ALL_BODIES]


def _retrograde_narrative(names: list[str]) -> str:
    if len(names) >= HIGH_RETROGRADE_COUNT:
        return (
            f"High retrograde energy ({', '.join(names)} Rx) — reflection and revision "
            "over action. Patience is your superpower today."
        )
    plural = len(names) > 1
    return (
        f"{' and '.join(names)} retrograde — review and reassess in "
        f"{'those' if plural else 'that'} area{'s' if plural else ''} of life."
    )


def daily_summary(
    instant: datetime,
    natal_positions: Sequence[PlanetPosition] | None = None,
    provider: EphemerisProvider | None = None,
) -> DailyTransitSummary:
    """Cosmic weather and energy level for an instant.

    Args:
        instant: Moment to summarize (naive values are taken as UTC)
        natal_positions: Optional natal chart; without it the summary has no aspects
        provider: Ephemeris source, the Swiss Ephemeris by default

    Returns:
        DailyTransitSummary with positions, moon phase, tightest aspects, and weather text
    """
    provider = provider or get_default_provider()
    instant = as_utc(instant)

    planets = current_transits(instant, provider)
    lunar = moon_phase(instant, provider)

    major_aspects = []
    if natal_positions:
        limit = get_settings().summary_aspect_limit
        major_aspects = find_transit_aspects(planets, natal_positions)[:limit]

    clauses: list[str] = []
    energy = BASE_ENERGY

    retrogrades = [p.name for p in planets if p.retrograde]
    if retrogrades:
        clauses.append(_retrograde_narrative(retrogrades))
        if len(retrogrades) >= HIGH_RETROGRADE_COUNT:
            energy = HIGH_RETROGRADE_ENERGY
        else:
            energy = SOME_RETROGRADE_ENERGY

    if lunar.phase_name == "Full Moon":
        clauses.append("Full Moon illumination — emotions and insights peak.")
        energy = min(10, energy + 2)
    elif lunar.phase_name == "New Moon":
        clauses.append("New Moon — ideal for setting intentions and planting seeds.")
        energy = max(1, energy - 1)

    challenges = count_by_nature(major_aspects, CHALLENGING_ASPECTS)
    harmonies = count_by_nature(major_aspects, HARMONIOUS_ASPECTS)
    if harmonies > challenges:
        clauses.append("Overall supportive energy — the cosmos is working with you.")
        energy = min(10, energy + 1)
    elif challenges > harmonies:
        clauses.append("Some tension in the air — navigate with awareness and compassion.")
        energy = max(1, energy - 1)

    if clauses:
        cosmic_weather = " ".join(clauses)
    else:
        cosmic_weather = (
            f"{lunar.phase_name} in {lunar.moon_sign} — {moon_sign_energy(lunar.moon_sign)}."
        )

    logger.debug(
        "Summary for %s: %d retrograde, %d aspects, energy %d",
        instant.isoformat(), len(retrogrades), len(major_aspects), energy,
    )

    return DailyTransitSummary(
        date=instant.date().isoformat(),
        planets=planets,
        moon_phase=lunar,
        major_aspects=major_aspects,
        cosmic_weather=cosmic_weather,
        energy_level=_clamp_energy(energy),
    )
