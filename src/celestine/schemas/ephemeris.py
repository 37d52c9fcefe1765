"""Pydantic schemas for ephemeris data."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PhaseName = Literal[
    "New Moon",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full Moon",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
]

AspectName = Literal["Conjunction", "Sextile", "Square", "Trine", "Opposition"]

EventType = Literal["full_moon", "new_moon", "ingress", "retrograde", "direct"]

Impact = Literal["positive", "challenging", "neutral", "significant"]


class PlanetPosition(BaseModel):
    """Position of a celestial body."""

    model_config = ConfigDict(frozen=True)

    name: str
    longitude: float = Field(ge=0.0, lt=360.0)
    sign: str
    sign_degree: int = Field(ge=0, lt=30)
    sign_minute: int = Field(ge=0, lt=60)
    retrograde: bool = False
    symbol: str = "⭐"


class LunarPhaseInfo(BaseModel):
    """Lunar phase, moon sign, and upcoming lunations."""

    model_config = ConfigDict(frozen=True)

    phase_name: PhaseName
    emoji: str
    illumination: float = Field(ge=0.0, le=1.0)
    phase_angle: float = Field(ge=0.0, lt=360.0)
    moon_sign: str
    moon_longitude: float
    moon_sign_degree: int
    days_until_full_moon: float
    days_until_new_moon: float
    next_full_moon_date: datetime
    next_new_moon_date: datetime


class TransitAspect(BaseModel):
    """An aspect between a transiting body and a natal body."""

    model_config = ConfigDict(frozen=True)

    transit_planet: str
    natal_planet: str
    aspect_type: AspectName
    aspect_symbol: str
    orb: float = Field(ge=0.0)
    is_applying: bool
    interpretation: str


class DailyTransitSummary(BaseModel):
    """Snapshot of the sky for one instant, optionally against a natal chart."""

    model_config = ConfigDict(frozen=True)

    date: str
    planets: list[PlanetPosition]
    moon_phase: LunarPhaseInfo
    major_aspects: list[TransitAspect] = Field(default_factory=list)
    cosmic_weather: str
    energy_level: int = Field(ge=1, le=10)


class MonthEvent(BaseModel):
    """A lunation, ingress, or station found while scanning a month."""

    model_config = ConfigDict(frozen=True)

    date: datetime
    type: EventType
    description: str
    impact: Impact
    emoji: str
