"""Pydantic schemas for generated readings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from celestine.bodies import ZodiacSign


class TransitHighlight(BaseModel):
    """Flavor line for a featured transit."""

    model_config = ConfigDict(frozen=True)

    label: str
    symbol: str
    description: str


class ReadingMoonPhase(BaseModel):
    """Moon phase as shown on a reading."""

    model_config = ConfigDict(frozen=True)

    name: str
    emoji: str
    illumination: int = Field(ge=0, le=100)
    guidance: str


class Compatibility(BaseModel):
    model_config = ConfigDict(frozen=True)

    best: ZodiacSign
    rising: ZodiacSign


class GeneratedDailyReading(BaseModel):
    """Daily reading fully determined by sign and date."""

    model_config = ConfigDict(frozen=True)

    date: str
    zodiac_sign: ZodiacSign
    energy_score: int = Field(ge=1, le=10)
    briefing: str
    dos: tuple[str, str]
    donts: tuple[str, str]
    transits: tuple[TransitHighlight, TransitHighlight, TransitHighlight]
    lucky_color: str
    lucky_number: int = Field(ge=1, le=99)
    lucky_time: str
    compatibility: Compatibility
    moon_phase: ReadingMoonPhase
