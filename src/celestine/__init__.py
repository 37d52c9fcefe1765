"""Astrological computation engine: transits, lunar phase, aspects, and daily readings."""

from celestine.aspects import angular_distance, find_transit_aspects
from celestine.bodies import longitude_to_sign, normalize_degrees, zodiac_sign_of
from celestine.calculator import current_transits, daily_summary
from celestine.events import month_events
from celestine.lunar import moon_phase, phase_name_for_angle
from celestine.reading import daily_reading, today_reading

aspects = find_transit_aspects

__all__ = [
    "angular_distance",
    "aspects",
    "current_transits",
    "daily_reading",
    "daily_summary",
    "find_transit_aspects",
    "longitude_to_sign",
    "month_events",
    "moon_phase",
    "normalize_degrees",
    "phase_name_for_angle",
    "today_reading",
    "zodiac_sign_of",
]
