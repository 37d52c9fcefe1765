"""Planet definitions, aspect geometries, and sign data."""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import Literal, NamedTuple

ZodiacSign = Literal[
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
]

# Zodiac signs in order, 0° = Aries
SIGNS: tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)

SIGN_SYMBOLS: tuple[str, ...] = ("♈", "♉", "♊", "♋", "♌", "♍", "♎", "♏", "♐", "♑", "♒", "♓")

SIGN_ELEMENTS = MappingProxyType({
    "Aries": "fire",
    "Taurus": "earth",
    "Gemini": "air",
    "Cancer": "water",
    "Leo": "fire",
    "Virgo": "earth",
    "Libra": "air",
    "Scorpio": "water",
    "Sagittarius": "fire",
    "Capricorn": "earth",
    "Aquarius": "air",
    "Pisces": "water",
})

# Each element harmonizes with itself and its complement
ELEMENT_COMPATIBILITY = MappingProxyType({
    "fire": ("fire", "air"),
    "earth": ("earth", "water"),
    "air": ("air", "fire"),
    "water": ("water", "earth"),
})

# Tracked bodies in output order. IDs map to swisseph constants.
BODY_IDS = MappingProxyType({
    "Sun": 0,  # SE_SUN
    "Moon": 1,  # SE_MOON
    "Mercury": 2,  # SE_MERCURY
    "Venus": 3,  # SE_VENUS
    "Mars": 4,  # SE_MARS
    "Jupiter": 5,  # SE_JUPITER
    "Saturn": 6,  # SE_SATURN
    "Uranus": 7,  # SE_URANUS
    "Neptune": 8,  # SE_NEPTUNE
    "Pluto": 9,  # SE_PLUTO
})

ALL_BODIES: tuple[str, ...] = tuple(BODY_IDS)

LUMINARIES = frozenset({"Sun", "Moon"})

# Slow movers; their ingresses are rated significant
OUTER_BODIES = frozenset({"Jupiter", "Saturn", "Uranus", "Neptune", "Pluto"})

PLANET_SYMBOLS = MappingProxyType({
    "Sun": "☉",
    "Moon": "☽",
    "Mercury": "☿",
    "Venus": "♀",
    "Mars": "♂",
    "Jupiter": "♃",
    "Saturn": "♄",
    "Uranus": "♅",
    "Neptune": "♆",
    "Pluto": "♇",
})

DEFAULT_SYMBOL = "⭐"


class AspectGeometry(NamedTuple):
    name: str
    symbol: str
    angle: float
    orb: float
    nature: str


ASPECT_TYPES: tuple[AspectGeometry, ...] = (
    AspectGeometry("Conjunction", "☌", 0.0, 8.0, "neutral"),
    AspectGeometry("Sextile", "⚹", 60.0, 6.0, "positive"),
    AspectGeometry("Square", "□", 90.0, 7.0, "challenging"),
    AspectGeometry("Trine", "△", 120.0, 8.0, "positive"),
    AspectGeometry("Opposition", "☍", 180.0, 8.0, "challenging"),
)

HARMONIOUS_ASPECTS = frozenset({"Trine", "Sextile"})
CHALLENGING_ASPECTS = frozenset({"Square", "Opposition"})


def normalize_degrees(value: float) -> float:
    """Wrap an angle into [0, 360)."""
    result = ((value % 360.0) + 360.0) % 360.0
    # -1e-15 % 360 rounds up to 360.0 in floating point
    if result >= 360.0:
        result = 0.0
    return result


def _sign_index(longitude: float) -> int:
    return int(normalize_degrees(longitude) // 30.0) % 12


def longitude_to_sign(longitude: float) -> tuple[str, float]:
    """Convert ecliptic longitude to sign and degree within sign."""
    longitude = normalize_degrees(longitude)
    sign_index = _sign_index(longitude)
    degree = longitude - (sign_index * 30.0)
    return SIGNS[sign_index], degree


def zodiac_sign_of(longitude: float) -> str:
    return SIGNS[_sign_index(longitude)]


def zodiac_symbol_of(longitude: float) -> str:
    return SIGN_SYMBOLS[_sign_index(longitude)]


def decompose_longitude(longitude: float) -> tuple[str, int, int]:
    """Split a longitude into (sign, whole degree, arc-minute).

    The minute is rounded to the nearest whole arc-minute. A minute that rounds
    up to 60 carries into the degree, and a degree of 30 into the next sign.

    The sign here is the displayed sign, so within half an arc-minute of a cusp
    it can be one ahead of :func:`zodiac_sign_of`, which truncates. Ingress and
    moon-sign logic use the truncating lookup; ``PlanetPosition.sign`` and the
    aspect text built from it use this one.
    """
    longitude = normalize_degrees(longitude)
    sign_index = _sign_index(longitude)
    in_sign = longitude - sign_index * 30.0
    degree = math.floor(in_sign)
    minute = int(round_half_up((in_sign - degree) * 60.0))
    if minute >= 60:
        minute -= 60
        degree += 1
    if degree >= 30:
        degree -= 30
        sign_index = (sign_index + 1) % 12
    return SIGNS[sign_index], degree, minute


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves upward rather than to even."""
    scale = 10.0**digits
    return math.floor(value * scale + 0.5) / scale


def sign_index(sign: str) -> int:
    """Index of a sign name in the zodiac; raises ValueError when unknown."""
    try:
        return SIGNS.index(sign)
    except ValueError:
        raise ValueError(f"Unknown zodiac sign '{sign}'") from None


def compatible_signs(sign: str) -> list[str]:
    """Signs other than ``sign`` whose element harmonizes with it."""
    element = SIGN_ELEMENTS[SIGNS[sign_index(sign)]]
    elements = ELEMENT_COMPATIBILITY[element]
    return [s for s in SIGNS if s != sign and SIGN_ELEMENTS[s] in elements]
