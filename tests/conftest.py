"""Shared fixtures for engine tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from celestine.config import reset_settings_cache

EPOCH = datetime(2025, 6, 1, 12, tzinfo=UTC)


class FakeEphemeris:
    """Linear-motion ephemeris for exact scenarios.

    Each body starts at ``longitudes[body]`` at ``epoch`` and moves
    ``speeds[body]`` degrees per day. The phase angle is either fixed or a
    callable of days since ``epoch``.
    """

    def __init__(
        self,
        longitudes: dict[str, float] | None = None,
        speeds: dict[str, float] | None = None,
        phase: float | Callable[[float], float] = 90.0,
        lunation_in_days: float | None = 7.0,
        epoch: datetime = EPOCH,
    ) -> None:
        self.longitudes = dict(longitudes or {})
        self.speeds = dict(speeds or {})
        self.phase = phase
        self.lunation_in_days = lunation_in_days
        self.epoch = epoch
        self.searches: list[tuple[float, datetime, float]] = []

    def _days(self, instant: datetime) -> float:
        return (instant - self.epoch).total_seconds() / 86400.0

    def longitude(self, body: str, instant: datetime) -> float:
        start = self.longitudes.get(body, 0.0)
        speed = self.speeds.get(body, 0.0)
        return (start + speed * self._days(instant)) % 360.0

    def moon_phase_angle(self, instant: datetime) -> float:
        if callable(self.phase):
            return self.phase(self._days(instant)) % 360.0
        return self.phase

    def illumination(self, instant: datetime) -> float:
        return 0.5

    def search_moon_phase(self, target_angle, start, limit_days):
        self.searches.append((target_angle, start, limit_days))
        if self.lunation_in_days is None:
            return None
        return start + timedelta(days=self.lunation_in_days)


@pytest.fixture
def fake_ephemeris() -> type[FakeEphemeris]:
    return FakeEphemeris


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate every test from the caller's environment."""
    for name in (
        "CELESTINE_READING_SALT",
        "CELESTINE_SUMMARY_ASPECT_LIMIT",
        "CELESTINE_PHASE_SEARCH_DAYS",
        "CELESTINE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()
