"""Aspect interpretation lookup with compositional fallback."""

from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple

# Curated (aspect, transit body, natal body) readings
EXACT_INTERPRETATIONS = MappingProxyType({
    ("Conjunction", "Sun", "Sun"): "Solar return energy — vitality and self-expression are renewed",
    ("Conjunction", "Sun", "Moon"): "Will and feeling line up — trust your instincts today",
    ("Conjunction", "Sun", "Venus"): "Affection and creativity are lit from within — let your heart show",
    ("Conjunction", "Sun", "Mars"): "A surge of drive — act decisively on what matters",
    ("Conjunction", "Sun", "Jupiter"): "Optimism widens every doorway — a generous day for beginnings",
    ("Conjunction", "Sun", "Saturn"): "Purpose meets structure — a sober check-in that steadies you",
    ("Conjunction", "Moon", "Sun"): "Feelings and identity agree — emotional honesty comes easily",
    ("Conjunction", "Moon", "Moon"): "Deep emotional resonance — honor your inner world",
    ("Conjunction", "Moon", "Venus"): "Comfort and beauty call — tend to what soothes you",
    ("Conjunction", "Moon", "Mars"): "Feelings run hot — turn them into useful action",
    ("Conjunction", "Venus", "Sun"): "Grace colors how you are seen — radiate warmth",
    ("Conjunction", "Venus", "Moon"): "Tenderness in the air — relationships feel easy",
    ("Conjunction", "Venus", "Venus"): "Venus return — love, art, and pleasure are magnified",
    ("Conjunction", "Venus", "Mars"): "Attraction sharpens — desire and affection meet",
    ("Conjunction", "Mars", "Sun"): "Ambition intensifies — pursue goals without hesitation",
    ("Conjunction", "Mars", "Moon"): "Emotional courage — stand up for what you care about",
    ("Conjunction", "Mars", "Venus"): "Romantic and creative fire — follow what you want",
    ("Conjunction", "Mars", "Mars"): "Mars return — raw energy and determination peak",
    ("Conjunction", "Jupiter", "Sun"): "Expansion favors you — doors open more readily",
    ("Conjunction", "Jupiter", "Moon"): "Emotional generosity — joy comes from giving",
    ("Conjunction", "Jupiter", "Venus"): "Love grows — relationships deepen in good ways",
    ("Conjunction", "Saturn", "Sun"): "Discipline serves purpose — lay long foundations",
    ("Conjunction", "Saturn", "Moon"): "Emotional maturity — patience becomes wisdom",
    ("Conjunction", "Saturn", "Venus"): "Commitment is tested and strengthened",
})

# Per-aspect templates; Conjunction has none and falls through to the composed line
ASPECT_TEMPLATES = MappingProxyType({
    "Trine": (
        "Flowing harmony between {transit} in {sign} and your natal {natal} "
        "— natural ease and positive energy"
    ),
    "Sextile": (
        "Opportunities arise as {transit} in {sign} supports your natal {natal} "
        "— take the initiative"
    ),
    "Square": (
        "Creative tension between {transit} in {sign} and your natal {natal} "
        "— growth through challenge"
    ),
    "Opposition": (
        "Awareness and balance needed as {transit} in {sign} opposes your natal {natal} "
        "— see both sides"
    ),
})

MOON_SIGN_ENERGY = MappingProxyType({
    "Aries": "fiery motivation and bold action",
    "Taurus": "grounded comfort and sensory pleasure",
    "Gemini": "curiosity, conversation, and mental agility",
    "Cancer": "deep nurturing and emotional sensitivity",
    "Leo": "creative expression and warm confidence",
    "Virgo": "practical refinement and attention to detail",
    "Libra": "harmony, partnership, and aesthetic beauty",
    "Scorpio": "transformative depth and emotional intensity",
    "Sagittarius": "adventure, optimism, and philosophical expansion",
    "Capricorn": "disciplined focus and ambitious drive",
    "Aquarius": "innovative thinking and humanitarian vision",
    "Pisces": "intuitive flow and spiritual connection",
})

PHASE_GUIDANCE = MappingProxyType({
    "New Moon": "Set intentions in the dark — seeds planted now carry unusual potential.",
    "Waxing Crescent": "Early shoots of intention appear — nurture them with small, steady steps.",
    "First Quarter": "Resistance tests your commitment. Push through and decide.",
    "Waxing Gibbous": "Adjust and refine — culmination is close.",
    "Full Moon": "What was hidden is lit up. Celebrate what ripened and release what didn't.",
    "Waning Gibbous": "Share what you learned. Gratitude keeps the harvest moving.",
    "Last Quarter": "Release and forgive. Clear space for the next cycle.",
    "Waning Crescent": "Rest. Let the cycle close before the next one begins.",
})


class Interpretation(NamedTuple):
    source: str  # 'exact', 'aspect_template', 'composed'
    text: str


def resolve_interpretation(
    aspect_type: str,
    transit_planet: str,
    natal_planet: str,
    transit_sign: str,
) -> Interpretation:
    """Resolve an aspect reading with three-tier fallback.

    1. Curated entry for the exact (aspect, transit, natal) triple
    2. Per-aspect template filled with the bodies and the transit sign
    3. Composed line built from the names alone
    """
    exact = EXACT_INTERPRETATIONS.get((aspect_type, transit_planet, natal_planet))
    if exact is not None:
        return Interpretation("exact", exact)

    template = ASPECT_TEMPLATES.get(aspect_type)
    if template is not None:
        return Interpretation(
            "aspect_template",
            template.format(transit=transit_planet, sign=transit_sign, natal=natal_planet),
        )

    return Interpretation(
        "composed",
        f"{transit_planet} in {transit_sign} {aspect_type.lower()}s your natal {natal_planet}",
    )


def interpret_aspect(
    aspect_type: str,
    transit_planet: str,
    natal_planet: str,
    transit_sign: str,
) -> str:
    return resolve_interpretation(aspect_type, transit_planet, natal_planet, transit_sign).text


def moon_sign_energy(sign: str) -> str:
    return MOON_SIGN_ENERGY.get(sign, "cosmic attunement")


def phase_guidance(phase_name: str) -> str:
    return PHASE_GUIDANCE.get(phase_name, "Move with the rhythm of the sky today.")
