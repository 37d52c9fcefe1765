"""Ephemeris capability: body longitudes, lunar phase angle, and phase search.

The engine only consumes longitudes. :class:`SwissEphemeris` is the default
source and wraps pyswisseph; any object satisfying :class:`EphemerisProvider`
can be passed to the public functions instead.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Protocol, runtime_checkable

import swisseph as swe

from celestine.bodies import BODY_IDS, normalize_degrees
from celestine.config import get_settings

logger = logging.getLogger(__name__)

# Coarse step for phase searches; the Moon gains ~3 degrees on the Sun per step
_SEARCH_STEP = timedelta(hours=6)
_BISECT_ITERATIONS = 40


class EphemerisError(RuntimeError):
    """Raised when a body position cannot be computed."""


@runtime_checkable
class EphemerisProvider(Protocol):
    def longitude(self, body: str, instant: datetime) -> float:
        """Geocentric ecliptic longitude of ``body`` in [0, 360)."""
        ...

    def moon_phase_angle(self, instant: datetime) -> float:
        """Moon's elongation from the Sun in [0, 360); 0 = new, 180 = full."""
        ...

    def illumination(self, instant: datetime) -> float:
        """Illuminated fraction of the lunar disc in [0, 1]."""
        ...

    def search_moon_phase(
        self, target_angle: float, start: datetime, limit_days: float
    ) -> datetime | None:
        """First instant after ``start`` at which the phase angle reaches ``target_angle``."""
        ...


def as_utc(instant: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


def _datetime_to_jd(dt: datetime) -> float:
    """Convert datetime to Julian Day number (UT)."""
    utc = as_utc(dt)
    return swe.julday(
        utc.year,
        utc.month,
        utc.day,
        utc.hour + utc.minute / 60.0 + (utc.second + utc.microsecond / 1e6) / 3600.0,
    )


def _phase_offset(angle: float, target: float) -> float:
    """Signed distance of ``angle`` past ``target``, wrapped to (-180, 180]."""
    diff = normalize_degrees(angle - target)
    if diff > 180.0:
        diff -= 360.0
    return diff


class SwissEphemeris:
    """Ephemeris provider backed by the Swiss Ephemeris (Moshier when no data files)."""

    def __init__(self, ephe_path: str | None = None) -> None:
        path = ephe_path if ephe_path is not None else get_settings().ephe_path
        path = str(path or "").strip()
        swe.set_ephe_path(path if path else None)

    def longitude(self, body: str, instant: datetime) -> float:
        try:
            body_id = BODY_IDS[body]
        except KeyError:
            raise EphemerisError(f"Untracked body '{body}'") from None

        jd = _datetime_to_jd(instant)
        try:
            result, _ = swe.calc_ut(jd, body_id, swe.FLG_SWIEPH | swe.FLG_SPEED)
        except Exception:
            # Fallback to Moshier (no external files needed)
            logger.warning("Swiss data unavailable for %s, falling back to Moshier", body)
            try:
                result, _ = swe.calc_ut(jd, body_id, swe.FLG_MOSEPH | swe.FLG_SPEED)
            except Exception as exc:
                raise EphemerisError(f"{body} unavailable: {exc}") from exc
        return normalize_degrees(result[0])

    def moon_phase_angle(self, instant: datetime) -> float:
        sun = self.longitude("Sun", instant)
        moon = self.longitude("Moon", instant)
        return normalize_degrees(moon - sun)

    def illumination(self, instant: datetime) -> float:
        angle = self.moon_phase_angle(instant)
        return (1.0 - math.cos(math.radians(angle))) / 2.0

    def search_moon_phase(
        self, target_angle: float, start: datetime, limit_days: float
    ) -> datetime | None:
        start = as_utc(start)
        end = start + timedelta(days=limit_days)

        t_prev = start
        f_prev = _phase_offset(self.moon_phase_angle(t_prev), target_angle)
        while t_prev < end:
            t_next = min(t_prev + _SEARCH_STEP, end)
            f_next = _phase_offset(self.moon_phase_angle(t_next), target_angle)
            # The phase only increases; a jump across +/-180 is the far side, not a crossing
            if f_prev < 0.0 <= f_next and f_next - f_prev < 90.0:
                return self._bisect(target_angle, t_prev, t_next)
            t_prev, f_prev = t_next, f_next

        logger.debug("No %.1f° lunation within %.1f days of %s", target_angle, limit_days, start)
        return None

    def _bisect(self, target_angle: float, lo: datetime, hi: datetime) -> datetime:
        for _ in range(_BISECT_ITERATIONS):
            mid = lo + (hi - lo) / 2
            if _phase_offset(self.moon_phase_angle(mid), target_angle) < 0.0:
                lo = mid
            else:
                hi = mid
            if hi - lo < timedelta(seconds=1):
                break
        return hi


@lru_cache(maxsize=1)
def get_default_provider() -> SwissEphemeris:
    """Process-wide default provider."""
    return SwissEphemeris()
