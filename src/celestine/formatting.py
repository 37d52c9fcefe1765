"""Plain-text rendering of engine output for prompts and the CLI."""

from __future__ import annotations

from collections.abc import Iterable

from celestine.schemas.ephemeris import (
    DailyTransitSummary,
    LunarPhaseInfo,
    MonthEvent,
    PlanetPosition,
)
from celestine.schemas.readings import GeneratedDailyReading


def format_transits(planets: Iterable[PlanetPosition]) -> str:
    lines = ["Current Planetary Positions:"]
    for p in planets:
        retro = " (Retrograde)" if p.retrograde else ""
        lines.append(f"  {p.symbol} {p.name}: {p.sign} {p.sign_degree}°{p.sign_minute:02d}'{retro}")
    return "\n".join(lines)


def format_moon(moon: LunarPhaseInfo) -> str:
    return "\n".join([
        f"Moon Phase: {moon.emoji} {moon.phase_name} ({round(moon.illumination * 100)}% illuminated)",
        f"Moon Sign: {moon.moon_sign} {moon.moon_sign_degree}°",
        f"Next Full Moon: {round(moon.days_until_full_moon)} days ({moon.next_full_moon_date:%Y-%m-%d})",
        f"Next New Moon: {round(moon.days_until_new_moon)} days ({moon.next_new_moon_date:%Y-%m-%d})",
    ])


def format_summary(summary: DailyTransitSummary) -> str:
    parts = [
        f"Cosmic weather for {summary.date}: {summary.cosmic_weather}",
        f"Energy: {summary.energy_level}/10",
        format_moon(summary.moon_phase),
        format_transits(summary.planets),
    ]
    if summary.major_aspects:
        parts.append("Aspects to natal chart:")
        for a in summary.major_aspects:
            state = "applying" if a.is_applying else "separating"
            parts.append(
                f"  {a.transit_planet} {a.aspect_symbol} {a.natal_planet} "
                f"(orb {a.orb:.1f}°, {state}): {a.interpretation}"
            )
    return "\n".join(parts)


def format_events(events: Iterable[MonthEvent]) -> str:
    return "\n".join(f"{e.date:%Y-%m-%d} {e.emoji} {e.description} [{e.impact}]" for e in events)


def format_reading(reading: GeneratedDailyReading) -> str:
    lines = [
        f"{reading.zodiac_sign} — {reading.date} (energy {reading.energy_score}/10)",
        "",
        reading.briefing,
        "",
        "Do:",
        *(f"  + {item}" for item in reading.dos),
        "Don't:",
        *(f"  - {item}" for item in reading.donts),
        "",
        "Transits:",
        *(f"  {t.symbol} {t.label}: {t.description}" for t in reading.transits),
        "",
        f"Lucky color: {reading.lucky_color}",
        f"Lucky number: {reading.lucky_number}",
        f"Lucky time: {reading.lucky_time}",
        f"Best match: {reading.compatibility.best}, rising connection: {reading.compatibility.rising}",
        (
            f"Moon: {reading.moon_phase.emoji} {reading.moon_phase.name} "
            f"({reading.moon_phase.illumination}%) — {reading.moon_phase.guidance}"
        ),
    ]
    return "\n".join(lines)
